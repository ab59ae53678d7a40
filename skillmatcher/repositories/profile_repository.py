"""
Skill profile repository: the SQL implementation of the ProfileQueries port.
"""

from collections.abc import Collection

from sqlalchemy import and_, exists
from sqlalchemy.orm import selectinload

from skillmatcher.matching.types import (
    CandidateProfile,
    MembershipStatus,
    SkillProfileEntry,
    UserInfo,
)
from skillmatcher.models import ProjectMember, Skill, User, UserSkill

from .base import BaseRepository


def to_user_info(user: User) -> UserInfo:
    return UserInfo(id=user.id, name=user.display_name, email=user.email)


def to_profile_entry(user_skill: UserSkill) -> SkillProfileEntry:
    return SkillProfileEntry(
        skill_id=user_skill.skill_id,
        skill_name=user_skill.skill.name,
        level=user_skill.level,
    )


class ProfileRepository(BaseRepository[UserSkill]):
    """Repository for user skill profiles."""

    model = UserSkill

    def get_user_by_id(self, user_id: str) -> UserInfo | None:
        """Resolve a user, or None if it does not exist."""
        user = self.session.get(User, user_id)
        return to_user_info(user) if user else None

    def get_skill_profile(self, user_id: str) -> list[SkillProfileEntry]:
        """All skills held by a user, ordered by skill name."""
        rows = (
            self.session.query(UserSkill)
            .join(UserSkill.skill)
            .options(selectinload(UserSkill.skill))
            .filter(UserSkill.user_id == user_id)
            .order_by(Skill.name, UserSkill.skill_id)
            .all()
        )
        return [to_profile_entry(row) for row in rows]

    def get_matchable_profiles(
        self,
        required_skill_ids: Collection[str],
        project_id: str,
        exclude_status: MembershipStatus = MembershipStatus.ACTIVE,
    ) -> list[CandidateProfile]:
        """
        Enabled users holding at least one of the required skills.

        Users that are members of the project with `exclude_status` are
        excluded in SQL. Only the overlapping skills are loaded per user;
        the rest of a profile cannot affect the score.

        Returns:
            One CandidateProfile per user, ordered by user id.
        """
        if not required_skill_ids:
            return []

        is_member = exists().where(
            and_(
                ProjectMember.project_id == project_id,
                ProjectMember.user_id == UserSkill.user_id,
                ProjectMember.status == exclude_status,
            )
        )

        rows = (
            self.session.query(UserSkill)
            .join(UserSkill.user)
            .join(UserSkill.skill)
            .options(selectinload(UserSkill.user), selectinload(UserSkill.skill))
            .filter(
                UserSkill.skill_id.in_(required_skill_ids),
                User.is_enabled.is_(True),
                ~is_member,
            )
            .order_by(UserSkill.user_id, Skill.name)
            .all()
        )

        # Group rows per user (rows are sorted by user id)
        profiles: dict[str, tuple[User, list[SkillProfileEntry]]] = {}
        for row in rows:
            user, entries = profiles.setdefault(row.user_id, (row.user, []))
            entries.append(to_profile_entry(row))

        return [
            CandidateProfile(user=to_user_info(user), skills=entries)
            for user, entries in profiles.values()
        ]
