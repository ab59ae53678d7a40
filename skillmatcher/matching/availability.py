"""
Availability credit for a target date range.

Days are counted half-open, [from, to): a window from the 1st to the 11th
covers ten days. Overlapping or touching windows are merged before counting,
so a day covered by several windows is credited once.
"""

from collections.abc import Iterable
from datetime import date

from .types import AvailabilityWindow, DateRange


def _clip(window: AvailabilityWindow, target: DateRange) -> tuple[date, date] | None:
    """Intersect a window with the target range; None when they do not overlap."""
    start = max(window.from_date, target.start)
    end = min(window.to_date, target.end)
    if end <= start:
        return None
    return start, end


def merge_windows(
    windows: Iterable[AvailabilityWindow], target: DateRange
) -> list[tuple[date, date]]:
    """
    Clip windows to the target range and merge them into disjoint intervals.

    Returns:
        Sorted list of non-overlapping (start, end) intervals inside the target.
    """
    clipped = sorted(c for c in (_clip(w, target) for w in windows) if c is not None)

    merged: list[tuple[date, date]] = []
    for start, end in clipped:
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def covered_days(windows: Iterable[AvailabilityWindow], target: DateRange) -> int:
    """Number of target days covered by at least one window."""
    return sum((end - start).days for start, end in merge_windows(windows, target))


def availability_score(windows: list[AvailabilityWindow], target: DateRange) -> float:
    """
    Fraction of the target range covered by the union of availability windows.

    Args:
        windows: Declared availability; an empty list means "always available".
        target: Period to cover.

    Returns:
        Score from 0 to 1. 1.0 when no windows are declared or the target
        range has no length.
    """
    if not windows:
        return 1.0

    total_days = target.days
    if total_days <= 0:
        return 1.0

    return min(max(covered_days(windows, target) / total_days, 0.0), 1.0)


__all__ = ["merge_windows", "covered_days", "availability_score"]
