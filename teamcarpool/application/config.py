"""
Configuración por defecto del motor de carpool (pesos de scoring y logging).
Un solo lugar para evitar duplicar valores entre casos de uso, tests y motor.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from teamcarpool.domain.constraints import ScoringConfig

DEFAULT_BASE_SCORE = 10
DEFAULT_ALWAYS_BONUS = 50
DEFAULT_PREFER_BONUS = 20
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CarpoolSettings(BaseSettings):
    """Overridable through TEAMCARPOOL_* environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix="TEAMCARPOOL_", env_file=".env", extra="ignore")

    base_score: int = DEFAULT_BASE_SCORE
    always_bonus: int = DEFAULT_ALWAYS_BONUS
    prefer_bonus: int = DEFAULT_PREFER_BONUS
    log_level: str = DEFAULT_LOG_LEVEL

    def scoring_config(self) -> ScoringConfig:
        return ScoringConfig(
            base_score=self.base_score,
            always_bonus=self.always_bonus,
            prefer_bonus=self.prefer_bonus,
        )


@lru_cache
def get_settings() -> CarpoolSettings:
    return CarpoolSettings()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Basic handler on the package logger. Idempotent."""
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("teamcarpool")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
