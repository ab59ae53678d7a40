"""
Project repository: the SQL implementation of the ProjectQueries port.
"""

from collections import defaultdict
from collections.abc import Collection

from sqlalchemy import and_, exists
from sqlalchemy.orm import selectinload

from skillmatcher.constants import MATCHABLE_PROJECT_STATUSES
from skillmatcher.matching.types import MembershipStatus, ProjectInfo, SkillRequirement
from skillmatcher.models import Project, ProjectMember, ProjectSkill, ProjectStatus, Skill

from .base import BaseRepository


def to_project_info(project: Project) -> ProjectInfo:
    """Convert a Project row to the engine's value type."""
    return ProjectInfo(
        id=project.id,
        name=project.name,
        description=project.description or "",
        status=project.status.value,
        start_date=project.start_date,
        end_date=project.end_date,
        owner_name=project.owner.display_name if project.owner else "",
    )


def to_requirement(project_skill: ProjectSkill) -> SkillRequirement:
    return SkillRequirement(
        skill_id=project_skill.skill_id,
        skill_name=project_skill.skill.name,
        required_level=project_skill.level,
        priority=project_skill.priority,
    )


class ProjectRepository(BaseRepository[Project]):
    """
    Repository for Project queries used by matching.

    Key features:
    - get_skill_requirements_batch: one query for a whole project pool (not N+1)
    - get_matchable_projects: membership exclusion done in SQL (NOT EXISTS)
    """

    model = Project

    def get_project_by_id(self, project_id: str) -> ProjectInfo | None:
        """Resolve a project, or None if it does not exist."""
        project = self.get_by_id(project_id)
        return to_project_info(project) if project else None

    def _requirements_query(self):
        return (
            self.session.query(ProjectSkill)
            .join(ProjectSkill.skill)
            .options(selectinload(ProjectSkill.skill))
            .order_by(Skill.name, ProjectSkill.skill_id)
        )

    def get_skill_requirements(self, project_id: str) -> list[SkillRequirement]:
        """Skill requirements of one project, ordered by skill name."""
        rows = self._requirements_query().filter(ProjectSkill.project_id == project_id).all()
        return [to_requirement(row) for row in rows]

    def get_skill_requirements_batch(
        self, project_ids: Collection[str]
    ) -> dict[str, list[SkillRequirement]]:
        """
        Skill requirements of several projects in a single query.

        Projects without requirements are absent from the returned mapping.
        """
        if not project_ids:
            return {}

        rows = self._requirements_query().filter(ProjectSkill.project_id.in_(project_ids)).all()

        grouped: dict[str, list[SkillRequirement]] = defaultdict(list)
        for row in rows:
            grouped[row.project_id].append(to_requirement(row))
        return dict(grouped)

    def get_matchable_projects(
        self,
        user_id: str,
        held_skill_ids: Collection[str],
        exclude_status: MembershipStatus = MembershipStatus.ACTIVE,
    ) -> list[ProjectInfo]:
        """
        Open projects sharing at least one skill with the user.

        Excludes projects the user is a member of with `exclude_status`, and
        projects not in a matchable status (PLANNED or ACTIVE).
        """
        if not held_skill_ids:
            return []

        shares_skill = exists().where(
            and_(
                ProjectSkill.project_id == Project.id,
                ProjectSkill.skill_id.in_(held_skill_ids),
            )
        )
        is_member = exists().where(
            and_(
                ProjectMember.project_id == Project.id,
                ProjectMember.user_id == user_id,
                ProjectMember.status == exclude_status,
            )
        )
        statuses = [ProjectStatus(s) for s in MATCHABLE_PROJECT_STATUSES]

        projects = (
            self.session.query(Project)
            .options(selectinload(Project.owner))
            .filter(Project.status.in_(statuses), shares_skill, ~is_member)
            .order_by(Project.id)
            .all()
        )
        return [to_project_info(p) for p in projects]
