"""
Eligibility resolver. Pure lookup over the sparse (driver, player) rule table.
"""

import logging
from typing import Dict, Iterable, Tuple

from teamcarpool.domain.models import Eligibility, EligibilityRule

logger = logging.getLogger(__name__)

DEFAULT_ELIGIBILITY = Eligibility(allowed=True, preference="none")


def resolve_eligibility(
    driver_id: str,
    player_id: str,
    rules: Iterable[EligibilityRule],
) -> Eligibility:
    """
    Rule for (driver_id, player_id); first match in input order wins, duplicates are logged.
    No rule -> allowed, preference "none".
    """
    pair_rules = [r for r in rules if r.driver_id == driver_id and r.player_id == player_id]
    return EligibilityIndex(pair_rules).resolve(driver_id, player_id)


class EligibilityIndex:
    """Same semantics as resolve_eligibility, indexed once per engine run."""

    def __init__(self, rules: Iterable[EligibilityRule]):
        self._by_pair: Dict[Tuple[str, str], Eligibility] = {}
        for rule in rules:
            key = (rule.driver_id, rule.player_id)
            if key in self._by_pair:
                logger.warning(
                    "Duplicate eligibility rule for driver %s / player %s; keeping the first one",
                    rule.driver_id,
                    rule.player_id,
                )
                continue
            self._by_pair[key] = Eligibility(allowed=rule.allowed, preference=rule.preference)

    def __len__(self) -> int:
        return len(self._by_pair)

    def resolve(self, driver_id: str, player_id: str) -> Eligibility:
        return self._by_pair.get((driver_id, player_id), DEFAULT_ELIGIBILITY)
