"""
Tests for availability coverage.
"""

from datetime import date

import pytest

from skillmatcher.matching import AvailabilityWindow, DateRange, availability_score, covered_days, merge_windows

JANUARY = DateRange(start=date(2025, 1, 1), end=date(2025, 1, 31))


def _window(start_day, end_day, month=1):
    return AvailabilityWindow(from_date=date(2025, month, start_day), to_date=date(2025, month, end_day))


class TestAvailabilityScore:
    """Tests for the availability score."""

    def test_target_length(self):
        """Test the target range is counted half-open."""
        assert JANUARY.days == 30

    def test_no_windows_means_always_available(self):
        """Test an empty window list scores 1.0."""
        assert availability_score([], JANUARY) == 1.0

    def test_half_covered(self):
        """Test a window over the first half of the range."""
        assert availability_score([_window(1, 16)], JANUARY) == 0.5

    def test_fully_covered(self):
        """Test a window larger than the range is clipped to it."""
        window = AvailabilityWindow(from_date=date(2024, 12, 1), to_date=date(2025, 3, 1))
        assert availability_score([window], JANUARY) == 1.0

    def test_window_outside_range(self):
        """Test a window entirely outside the range contributes nothing."""
        assert availability_score([_window(1, 20, month=3)], JANUARY) == 0.0

    def test_overlapping_windows_not_double_counted(self):
        """Test overlapping windows count each covered day once."""
        windows = [_window(1, 16), _window(6, 16), _window(1, 11)]
        assert availability_score(windows, JANUARY) == 0.5

    def test_zero_length_target(self):
        """Test a target range without length scores 1.0."""
        target = DateRange(start=date(2025, 1, 1), end=date(2025, 1, 1))
        assert availability_score([_window(5, 10)], target) == 1.0

    def test_score_bounded(self):
        """Test the score always lies in [0, 1]."""
        windows = [_window(1, 31), _window(1, 31), _window(10, 20)]
        assert 0.0 <= availability_score(windows, JANUARY) <= 1.0


class TestMergeWindows:
    """Tests for window clipping and merging."""

    def test_adjacent_windows_merge(self):
        """Test touching windows merge into one interval."""
        merged = merge_windows([_window(11, 21), _window(1, 11)], JANUARY)

        assert merged == [(date(2025, 1, 1), date(2025, 1, 21))]
        assert covered_days([_window(1, 11), _window(11, 21)], JANUARY) == 20

    def test_disjoint_windows_stay_separate(self):
        """Test windows with a gap stay two sorted intervals."""
        merged = merge_windows([_window(20, 25), _window(1, 5)], JANUARY)

        assert merged == [(date(2025, 1, 1), date(2025, 1, 5)), (date(2025, 1, 20), date(2025, 1, 25))]

    def test_single_day_window_is_empty(self):
        """Test a window starting and ending on the same day covers nothing."""
        assert merge_windows([_window(5, 5)], JANUARY) == []

    @pytest.mark.parametrize(
        "windows,expected",
        [
            ([(1, 31)], 30),
            ([(1, 10), (20, 31)], 20),
            ([(1, 10), (5, 15), (14, 20)], 19),
        ],
    )
    def test_covered_days(self, windows, expected):
        """Test covered day counts for several window sets."""
        assert covered_days([_window(a, b) for a, b in windows], JANUARY) == expected
