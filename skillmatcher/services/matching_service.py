"""
Matching facade.

Wires pool retrieval, scoring and ranking for the two public searches:
- candidates for a project
- projects for a user

All data is read through the query ports; the SQL-backed instance is built
with MatchingService.from_session(session).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from sqlalchemy.orm import Session

from skillmatcher.config import get_settings
from skillmatcher.exceptions import ProjectNotFound, UserNotFound
from skillmatcher.logging import LogContext, log_timing, matching_logger
from skillmatcher.matching import (
    AvailabilityQueries,
    CandidateEntry,
    CandidateRetriever,
    MatchResult,
    ProfileQueries,
    ProjectEntry,
    ProjectQueries,
    ProjectRetriever,
    ScoreWeights,
    rank,
    score,
    validate_limit,
)

T = TypeVar("T")


class MatchingService:
    """
    Skill-based matching between users and projects.

    Usage:
        with db.session() as session:
            service = MatchingService.from_session(session)
            candidates = service.find_candidates_for_project(project_id, min_score=0.5)
            projects = service.find_projects_for_user(user_id, limit=10)
    """

    def __init__(
        self,
        projects: ProjectQueries,
        profiles: ProfileQueries,
        availability: AvailabilityQueries,
        weights: ScoreWeights | None = None,
        max_workers: int | None = None,
        parallel_threshold: int | None = None,
        precision: int | None = None,
    ):
        settings = get_settings()

        self.projects = projects
        self.profiles = profiles
        self.availability = availability
        self.weights = weights or settings.score_weights
        self.max_workers = max_workers or settings.match_max_workers
        self.parallel_threshold = parallel_threshold or settings.match_parallel_threshold
        self.precision = settings.match_score_precision if precision is None else precision

        self.candidate_retriever = CandidateRetriever(profiles, availability)
        self.project_retriever = ProjectRetriever(projects)

    @classmethod
    def from_session(cls, session: Session, **kwargs) -> MatchingService:
        """Build a service backed by the SQL repositories on `session`."""
        from skillmatcher.repositories import (
            AvailabilityRepository,
            ProfileRepository,
            ProjectRepository,
        )

        return cls(
            projects=ProjectRepository(session),
            profiles=ProfileRepository(session),
            availability=AvailabilityRepository(session),
            **kwargs,
        )

    # =========================================================================
    # Public searches
    # =========================================================================

    @log_timing("find_candidates_for_project", logger=matching_logger)
    def find_candidates_for_project(
        self,
        project_id: str,
        min_score: float | None = None,
        limit: int | None = None,
    ) -> list[MatchResult]:
        """
        Rank users that fit a project's required skills.

        Active members of the project are never returned.

        Args:
            project_id: Project to staff.
            min_score: Minimum composite score (default from settings).
            limit: Maximum number of results (default from settings).

        Returns:
            Results ordered by score descending, subject_id = user id.

        Raises:
            InvalidArgument: if limit <= 0.
            ProjectNotFound: if the project does not exist.
        """
        min_score, limit = self._resolve_bounds(min_score, limit)

        with LogContext(project_id=project_id):
            project = self.projects.get_project_by_id(project_id)
            if project is None:
                raise ProjectNotFound(project_id)

            requirements = self.projects.get_skill_requirements(project_id)
            if not requirements:
                matching_logger.info("project_has_no_requirements")
                return []

            pool = self.candidate_retriever.retrieve(
                project_id, [r.skill_id for r in requirements]
            )
            target_range = project.date_range

            def score_candidate(entry: CandidateEntry) -> MatchResult:
                user = entry.candidate.user
                result = score(
                    requirements,
                    entry.candidate.skills,
                    entry.availability,
                    target_range,
                    subject_id=user.id,
                    subject_name=user.name,
                    weights=self.weights,
                    precision=self.precision,
                )
                return result.model_copy(update={"context": {"email": user.email}})

            ranked = rank(self._score_pool(pool, score_candidate), min_score, limit)
            matching_logger.info(
                "candidate_search_complete",
                requirements=len(requirements),
                pool_size=len(pool),
                results=len(ranked),
            )
            return ranked

    @log_timing("find_projects_for_user", logger=matching_logger)
    def find_projects_for_user(
        self,
        user_id: str,
        min_score: float | None = None,
        limit: int | None = None,
    ) -> list[MatchResult]:
        """
        Rank open projects that fit a user's skills.

        Projects the user is already an active member of are never returned,
        and projects without skill requirements are skipped.

        Args:
            user_id: User looking for projects.
            min_score: Minimum composite score (default from settings).
            limit: Maximum number of results (default from settings).

        Returns:
            Results ordered by score descending, subject_id = project id.

        Raises:
            InvalidArgument: if limit <= 0.
            UserNotFound: if the user does not exist.
        """
        min_score, limit = self._resolve_bounds(min_score, limit)

        with LogContext(user_id=user_id):
            user = self.profiles.get_user_by_id(user_id)
            if user is None:
                raise UserNotFound(user_id)

            profile = self.profiles.get_skill_profile(user_id)
            if not profile:
                matching_logger.info("user_has_no_skills")
                return []

            pool = self.project_retriever.retrieve(user_id, [s.skill_id for s in profile])
            if not pool:
                return []

            windows = self.availability.get_availability_windows(user_id)

            def score_project(entry: ProjectEntry) -> MatchResult:
                project = entry.project
                result = score(
                    entry.requirements,
                    profile,
                    windows,
                    project.date_range,
                    subject_id=project.id,
                    subject_name=project.name,
                    weights=self.weights,
                    precision=self.precision,
                )
                return result.model_copy(
                    update={
                        "context": {
                            "description": project.description,
                            "status": project.status,
                            "owner_name": project.owner_name,
                        }
                    }
                )

            ranked = rank(self._score_pool(pool, score_project), min_score, limit)
            matching_logger.info(
                "project_search_complete",
                skills=len(profile),
                pool_size=len(pool),
                results=len(ranked),
            )
            return ranked

    # =========================================================================
    # Helpers
    # =========================================================================

    def _resolve_bounds(self, min_score: float | None, limit: int | None) -> tuple[float, int]:
        """Apply defaults and reject a bad limit before any query runs."""
        settings = get_settings()
        if min_score is None:
            min_score = settings.match_default_min_score
        if limit is None:
            limit = settings.match_default_limit
        validate_limit(limit)
        return min_score, limit

    def _score_pool(self, pool: Sequence[T], scorer: Callable[[T], MatchResult]) -> list[MatchResult]:
        """
        Score every pool entry, on a thread pool for large pools.

        Scoring one subject is independent of every other, and the executor's
        map preserves input order, so both paths return the same list.
        """
        if self.max_workers > 1 and len(pool) >= self.parallel_threshold:
            matching_logger.debug("scoring_pool_parallel", pool_size=len(pool), workers=self.max_workers)
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(scorer, pool))
        return [scorer(entry) for entry in pool]


__all__ = ["MatchingService"]
