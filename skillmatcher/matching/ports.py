"""
Read-only query contracts the matching engine depends on.

The engine never filters by membership itself: implementations must already
exclude users who are active members of the project (and projects the user
is an active member of). The SQLAlchemy repositories in
skillmatcher.repositories implement these protocols.
"""

from collections.abc import Collection
from typing import Protocol, runtime_checkable

from .types import (
    AvailabilityWindow,
    CandidateProfile,
    MembershipStatus,
    ProjectInfo,
    SkillProfileEntry,
    SkillRequirement,
    UserInfo,
)


@runtime_checkable
class ProjectQueries(Protocol):
    """Project lookups."""

    def get_project_by_id(self, project_id: str) -> ProjectInfo | None: ...

    def get_skill_requirements(self, project_id: str) -> list[SkillRequirement]: ...

    def get_skill_requirements_batch(
        self, project_ids: Collection[str]
    ) -> dict[str, list[SkillRequirement]]: ...

    def get_matchable_projects(
        self,
        user_id: str,
        held_skill_ids: Collection[str],
        exclude_status: MembershipStatus = MembershipStatus.ACTIVE,
    ) -> list[ProjectInfo]: ...


@runtime_checkable
class ProfileQueries(Protocol):
    """User and skill profile lookups."""

    def get_user_by_id(self, user_id: str) -> UserInfo | None: ...

    def get_skill_profile(self, user_id: str) -> list[SkillProfileEntry]: ...

    def get_matchable_profiles(
        self,
        required_skill_ids: Collection[str],
        project_id: str,
        exclude_status: MembershipStatus = MembershipStatus.ACTIVE,
    ) -> list[CandidateProfile]: ...


@runtime_checkable
class AvailabilityQueries(Protocol):
    """Availability window lookups."""

    def get_availability_windows(self, user_id: str) -> list[AvailabilityWindow]: ...

    def get_availability_windows_batch(
        self, user_ids: Collection[str]
    ) -> dict[str, list[AvailabilityWindow]]: ...


__all__ = ["ProjectQueries", "ProfileQueries", "AvailabilityQueries"]
