"""
Application constants for Skill Matcher.

Contains skill level bounds, default scoring weights and the statuses used
by the matchable-pool queries.
"""

# =============================================================================
# Skill Levels
# =============================================================================

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5

# =============================================================================
# Scoring Weights (must sum to 1.0, must-have weight is the largest)
# =============================================================================

MUST_HAVE_WEIGHT = 0.5
NICE_TO_HAVE_WEIGHT = 0.2
LEVEL_FIT_WEIGHT = 0.2
AVAILABILITY_WEIGHT = 0.1

WEIGHT_SUM_TOLERANCE = 1e-6

# Credit for a single matched skill is capped here (no reward for overqualification)
LEVEL_FIT_CAP = 1.0

# Decimal places kept on the composite score and each breakdown component
SCORE_PRECISION = 2

# =============================================================================
# Result Defaults
# =============================================================================

DEFAULT_MATCH_LIMIT = 20
DEFAULT_MIN_SCORE = 0.0

# Pools at least this large are scored on a thread pool
PARALLEL_SCORING_THRESHOLD = 200
DEFAULT_MAX_WORKERS = 4

# =============================================================================
# Matchable Pool
# =============================================================================

# Project statuses that accept new members
MATCHABLE_PROJECT_STATUSES = ("PLANNED", "ACTIVE")
