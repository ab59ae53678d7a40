"""
Application configuration using Pydantic settings.

Usage:
    from skillmatcher.config import get_settings
    settings = get_settings()
    weights = settings.score_weights

For constants, import from skillmatcher.constants:
    from skillmatcher.constants import MATCHABLE_PROJECT_STATUSES
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    AVAILABILITY_WEIGHT,
    DEFAULT_MATCH_LIMIT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_MIN_SCORE,
    LEVEL_FIT_WEIGHT,
    MUST_HAVE_WEIGHT,
    NICE_TO_HAVE_WEIGHT,
    PARALLEL_SCORING_THRESHOLD,
    SCORE_PRECISION,
)
from .matching.types import ScoreWeights


class Settings(BaseSettings):
    """
    Unified application settings loaded from environment variables and .env file.

    The four MATCH_WEIGHT_* values are the composite score calibration. They are
    validated together: non-negative, summing to 1.0, must-have the largest.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App settings
    app_name: str = "Skill Matcher"
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database
    database_url: str = Field(default="sqlite:///skill_matcher.db", validation_alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")

    # Composite score weights
    match_weight_must_have: float = Field(
        default=MUST_HAVE_WEIGHT, ge=0.0, le=1.0, validation_alias="MATCH_WEIGHT_MUST_HAVE"
    )
    match_weight_nice_to_have: float = Field(
        default=NICE_TO_HAVE_WEIGHT, ge=0.0, le=1.0, validation_alias="MATCH_WEIGHT_NICE_TO_HAVE"
    )
    match_weight_level_fit: float = Field(
        default=LEVEL_FIT_WEIGHT, ge=0.0, le=1.0, validation_alias="MATCH_WEIGHT_LEVEL_FIT"
    )
    match_weight_availability: float = Field(
        default=AVAILABILITY_WEIGHT, ge=0.0, le=1.0, validation_alias="MATCH_WEIGHT_AVAILABILITY"
    )

    # Result defaults
    match_default_limit: int = Field(
        default=DEFAULT_MATCH_LIMIT, ge=1, validation_alias="MATCH_DEFAULT_LIMIT"
    )
    match_default_min_score: float = Field(
        default=DEFAULT_MIN_SCORE, validation_alias="MATCH_DEFAULT_MIN_SCORE"
    )
    match_score_precision: int = Field(
        default=SCORE_PRECISION, ge=0, le=10, validation_alias="MATCH_SCORE_PRECISION"
    )

    # Scoring fan-out
    match_max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS, ge=1, validation_alias="MATCH_MAX_WORKERS"
    )
    match_parallel_threshold: int = Field(
        default=PARALLEL_SCORING_THRESHOLD, ge=1, validation_alias="MATCH_PARALLEL_THRESHOLD"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level (got '{v}')")
        return level

    @model_validator(mode="after")
    def validate_weights(self) -> "Settings":
        """Fail at startup rather than on the first scoring call."""
        _ = self.score_weights
        return self

    @property
    def score_weights(self) -> ScoreWeights:
        """Build the validated weight set used by the scorer."""
        return ScoreWeights(
            must_have=self.match_weight_must_have,
            nice_to_have=self.match_weight_nice_to_have,
            level_fit=self.match_weight_level_fit,
            availability=self.match_weight_availability,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
