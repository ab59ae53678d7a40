"""Availability repository: the SQL implementation of the AvailabilityQueries port."""

from collections import defaultdict
from collections.abc import Collection

from skillmatcher.matching.types import AvailabilityWindow
from skillmatcher.models import UserAvailability

from .base import BaseRepository


def to_window(row: UserAvailability) -> AvailabilityWindow:
    return AvailabilityWindow(from_date=row.available_from, to_date=row.available_to)


class AvailabilityRepository(BaseRepository[UserAvailability]):
    """Repository for user availability windows."""

    model = UserAvailability

    def get_availability_windows(self, user_id: str) -> list[AvailabilityWindow]:
        """Availability windows of one user, ordered by start date."""
        rows = (
            self.session.query(UserAvailability)
            .filter(UserAvailability.user_id == user_id)
            .order_by(UserAvailability.available_from, UserAvailability.available_to)
            .all()
        )
        return [to_window(row) for row in rows]

    def get_availability_windows_batch(
        self, user_ids: Collection[str]
    ) -> dict[str, list[AvailabilityWindow]]:
        """
        Availability windows of several users in a single query.

        Users without windows are absent from the returned mapping.
        """
        if not user_ids:
            return {}

        rows = (
            self.session.query(UserAvailability)
            .filter(UserAvailability.user_id.in_(user_ids))
            .order_by(UserAvailability.available_from, UserAvailability.available_to)
            .all()
        )

        grouped: dict[str, list[AvailabilityWindow]] = defaultdict(list)
        for row in rows:
            grouped[row.user_id].append(to_window(row))
        return dict(grouped)
