"""Threshold filtering, deterministic ordering and truncation of scored results."""

from collections.abc import Iterable

from skillmatcher.exceptions import InvalidArgument

from .types import MatchResult


def validate_limit(limit: int) -> None:
    """Reject non-positive limits; a caller passing one has a bug."""
    if limit <= 0:
        raise InvalidArgument(f"limit must be a positive integer (got {limit})")


def rank(results: Iterable[MatchResult], min_score: float, limit: int) -> list[MatchResult]:
    """
    Rank scored results.

    Keeps results with score >= min_score, orders them by score descending
    with subject id ascending as tie-breaker, and returns at most `limit`.
    min_score is not range-checked: <= 0 keeps everything, > 1 keeps nothing.

    Raises:
        InvalidArgument: if limit <= 0.
    """
    validate_limit(limit)
    kept = [r for r in results if r.score >= min_score]
    kept.sort(key=lambda r: (-r.score, r.subject_id))
    return kept[:limit]


__all__ = ["rank", "validate_limit"]
