"""
Matchable pool retrieval.

Thin adapters over the query ports that return everything the scorer needs
for a pool in as few queries as possible. Membership exclusion is the
ports' job; nothing here re-checks it.
"""

from collections.abc import Collection
from typing import NamedTuple

from .ports import AvailabilityQueries, ProfileQueries, ProjectQueries
from .types import (
    AvailabilityWindow,
    CandidateProfile,
    MembershipStatus,
    ProjectInfo,
    SkillRequirement,
)


class CandidateEntry(NamedTuple):
    candidate: CandidateProfile
    availability: list[AvailabilityWindow]


class ProjectEntry(NamedTuple):
    project: ProjectInfo
    requirements: list[SkillRequirement]


class CandidateRetriever:
    """Builds the candidate pool for a project."""

    def __init__(self, profiles: ProfileQueries, availability: AvailabilityQueries):
        self.profiles = profiles
        self.availability = availability

    def retrieve(self, project_id: str, required_skill_ids: Collection[str]) -> list[CandidateEntry]:
        """
        Candidates holding at least one required skill, with their availability.

        Args:
            project_id: Project whose active members are excluded.
            required_skill_ids: Skill ids of the project's requirements.

        Returns:
            One entry per candidate; empty when no skill ids are given.
        """
        if not required_skill_ids:
            return []

        candidates = self.profiles.get_matchable_profiles(
            required_skill_ids, project_id, exclude_status=MembershipStatus.ACTIVE
        )
        if not candidates:
            return []

        windows = self.availability.get_availability_windows_batch(
            [c.user.id for c in candidates]
        )
        return [CandidateEntry(c, windows.get(c.user.id, [])) for c in candidates]


class ProjectRetriever:
    """Builds the project pool for a user."""

    def __init__(self, projects: ProjectQueries):
        self.projects = projects

    def retrieve(self, user_id: str, held_skill_ids: Collection[str]) -> list[ProjectEntry]:
        """
        Projects sharing at least one skill with the user, with their requirements.

        Projects without requirements are skipped rather than scored as zero.
        """
        if not held_skill_ids:
            return []

        projects = self.projects.get_matchable_projects(
            user_id, held_skill_ids, exclude_status=MembershipStatus.ACTIVE
        )
        if not projects:
            return []

        requirements = self.projects.get_skill_requirements_batch([p.id for p in projects])
        return [
            ProjectEntry(p, requirements[p.id]) for p in projects if requirements.get(p.id)
        ]


__all__ = ["CandidateEntry", "ProjectEntry", "CandidateRetriever", "ProjectRetriever"]
