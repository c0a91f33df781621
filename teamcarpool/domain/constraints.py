"""
Carpool domain constraints. Dataclasses only. No pydantic, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass


# Pesos del scoring greedy (motor de asignación)
@dataclass(frozen=True)
class ScoringConfig:
    base_score: int = 10
    always_bonus: int = 50
    prefer_bonus: int = 20

    def score(self, preference: str) -> int:
        """Score of a feasible bucket given the pair's preference."""
        score = self.base_score
        if preference == "always":
            score += self.always_bonus
        elif preference == "prefer":
            score += self.prefer_bonus
        return score


DEFAULT_SCORING_CONFIG = ScoringConfig()
