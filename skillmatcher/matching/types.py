"""
Value types for the matching engine.

Plain, immutable Pydantic models. Validation happens at construction, so the
scorer only ever sees well-formed levels, date ranges and weights.
"""

from datetime import date
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillmatcher.constants import (
    AVAILABILITY_WEIGHT,
    LEVEL_FIT_WEIGHT,
    MAX_SKILL_LEVEL,
    MIN_SKILL_LEVEL,
    MUST_HAVE_WEIGHT,
    NICE_TO_HAVE_WEIGHT,
    WEIGHT_SUM_TOLERANCE,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# Enums
# =============================================================================


class SkillPriority(str, Enum):
    """Priority tier of a project skill requirement."""

    MUST_HAVE = "MUST_HAVE"
    NICE_TO_HAVE = "NICE_TO_HAVE"


class MembershipStatus(str, Enum):
    """Project membership status."""

    ACTIVE = "ACTIVE"
    LEFT = "LEFT"


# =============================================================================
# Inputs
# =============================================================================


class SkillRequirement(_Frozen):
    """A skill a project needs, with required level and priority."""

    skill_id: str
    skill_name: str
    required_level: int = Field(ge=MIN_SKILL_LEVEL, le=MAX_SKILL_LEVEL)
    priority: SkillPriority = SkillPriority.MUST_HAVE


class SkillProfileEntry(_Frozen):
    """A skill held by a candidate, with attained level."""

    skill_id: str
    skill_name: str
    level: int = Field(ge=MIN_SKILL_LEVEL, le=MAX_SKILL_LEVEL)


class AvailabilityWindow(_Frozen):
    """A date window during which a user declares availability."""

    from_date: date
    to_date: date

    @model_validator(mode="after")
    def check_order(self) -> "AvailabilityWindow":
        if self.from_date > self.to_date:
            raise ValueError("from_date must not be after to_date")
        return self


class DateRange(_Frozen):
    """Target period of a scoring call, usually a project's start and end dates."""

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self

    @property
    def days(self) -> int:
        return (self.end - self.start).days


class ScoreWeights(_Frozen):
    """
    Composite score calibration.

    Weights are non-negative, sum to 1.0 and must-have is strictly the
    largest, so must-have coverage dominates ranking.
    """

    must_have: float = Field(default=MUST_HAVE_WEIGHT, ge=0.0, le=1.0)
    nice_to_have: float = Field(default=NICE_TO_HAVE_WEIGHT, ge=0.0, le=1.0)
    level_fit: float = Field(default=LEVEL_FIT_WEIGHT, ge=0.0, le=1.0)
    availability: float = Field(default=AVAILABILITY_WEIGHT, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_calibration(self) -> "ScoreWeights":
        total = self.must_have + self.nice_to_have + self.level_fit + self.availability
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"score weights must sum to 1.0 (got {total:.6f})")
        if self.must_have <= max(self.nice_to_have, self.level_fit, self.availability):
            raise ValueError("must_have weight must be the largest weight")
        return self


# =============================================================================
# Subjects
# =============================================================================


class UserInfo(_Frozen):
    """Display data of a candidate user."""

    id: str
    name: str
    email: str = ""


class CandidateProfile(_Frozen):
    """One candidate of the matchable pool: the user and the skills they hold."""

    user: UserInfo
    skills: List[SkillProfileEntry] = Field(default_factory=list)


class ProjectInfo(_Frozen):
    """Display data and date range of a project."""

    id: str
    name: str
    description: str = ""
    status: str = ""
    start_date: date
    end_date: date
    owner_name: str = ""

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)


# =============================================================================
# Results
# =============================================================================


class MatchedSkill(_Frozen):
    """A requirement the profile holds, whether or not the level is met."""

    skill_id: str
    skill_name: str
    user_level: int
    required_level: int
    priority: SkillPriority


class MissingSkill(_Frozen):
    """A requirement absent from the profile."""

    skill_id: str
    skill_name: str
    required_level: int
    priority: SkillPriority


class ScoreBreakdown(_Frozen):
    """Individual score components, each in [0, 1]."""

    must_have_coverage: float = Field(ge=0.0, le=1.0)
    nice_to_have_coverage: float = Field(ge=0.0, le=1.0)
    level_fit_score: float = Field(ge=0.0, le=1.0)
    availability_score: float = Field(ge=0.0, le=1.0)


class MatchResult(_Frozen):
    """
    Scored match of one subject (user or project).

    `context` holds display-only metadata supplied by the facade
    (email for users; description, status and owner for projects).
    """

    subject_id: str
    subject_name: str = ""
    score: float
    breakdown: ScoreBreakdown
    matched_skills: List[MatchedSkill] = Field(default_factory=list)
    missing_skills: List[MissingSkill] = Field(default_factory=list)
    context: Dict[str, str] = Field(default_factory=dict)


__all__ = [
    "SkillPriority",
    "MembershipStatus",
    "SkillRequirement",
    "SkillProfileEntry",
    "AvailabilityWindow",
    "DateRange",
    "ScoreWeights",
    "UserInfo",
    "CandidateProfile",
    "ProjectInfo",
    "MatchedSkill",
    "MissingSkill",
    "ScoreBreakdown",
    "MatchResult",
]
