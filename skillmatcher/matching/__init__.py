"""Matching engine: value types, scorer, ranker, query ports and pool retrieval."""

from .availability import availability_score, covered_days, merge_windows
from .ports import AvailabilityQueries, ProfileQueries, ProjectQueries
from .ranker import rank, validate_limit
from .retriever import CandidateEntry, CandidateRetriever, ProjectEntry, ProjectRetriever
from .scorer import calculate_level_fit, score
from .types import (
    AvailabilityWindow,
    CandidateProfile,
    DateRange,
    MatchedSkill,
    MatchResult,
    MembershipStatus,
    MissingSkill,
    ProjectInfo,
    ScoreBreakdown,
    ScoreWeights,
    SkillPriority,
    SkillProfileEntry,
    SkillRequirement,
    UserInfo,
)

__all__ = [
    # Engine
    "score",
    "rank",
    "validate_limit",
    "calculate_level_fit",
    "availability_score",
    "covered_days",
    "merge_windows",
    # Pool retrieval
    "CandidateRetriever",
    "ProjectRetriever",
    "CandidateEntry",
    "ProjectEntry",
    # Ports
    "ProjectQueries",
    "ProfileQueries",
    "AvailabilityQueries",
    # Types
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
