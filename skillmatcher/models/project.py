"""
Project-related SQLAlchemy models.
"""

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, List

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillmatcher.matching.types import MembershipStatus, SkillPriority

from .base import AuditMixin, Base, utcnow

if TYPE_CHECKING:
    from .skill import Skill
    from .user import User


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"


class Project(AuditMixin, Base):
    """
    Project staffed through skill matching.

    start_date / end_date bound the period candidates are scored against
    for availability.
    """

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[ProjectStatus] = mapped_column(
        SAEnum(ProjectStatus, native_enum=False, length=16), default=ProjectStatus.PLANNED
    )
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    max_members: Mapped[int] = mapped_column(Integer, default=1)
    owner_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)

    # Relationships
    owner: Mapped["User"] = relationship("User")
    skills: Mapped[List["ProjectSkill"]] = relationship(
        "ProjectSkill", back_populates="project", cascade="all, delete-orphan"
    )
    members: Mapped[List["ProjectMember"]] = relationship(
        "ProjectMember", back_populates="project", cascade="all, delete-orphan"
    )


class ProjectSkill(AuditMixin, Base):
    """A skill requirement of a project."""

    __tablename__ = "project_skills"
    __table_args__ = (
        UniqueConstraint("project_id", "skill_id", name="uq_project_skills_project_skill"),
    )

    project_id: Mapped[str] = mapped_column(ForeignKey("projects.id"), index=True)
    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id"), index=True)
    level: Mapped[int] = mapped_column(Integer)
    priority: Mapped[SkillPriority] = mapped_column(
        SAEnum(SkillPriority, native_enum=False, length=16), default=SkillPriority.MUST_HAVE
    )

    project: Mapped["Project"] = relationship("Project", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill")


class ProjectMember(AuditMixin, Base):
    """Membership of a user in a project. LEFT members may be matched again."""

    __tablename__ = "project_members"
    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
    )

    project_id: Mapped[str] = mapped_column(ForeignKey("projects.id"), index=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    status: Mapped[MembershipStatus] = mapped_column(
        SAEnum(MembershipStatus, native_enum=False, length=16), default=MembershipStatus.ACTIVE
    )
    joined_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    project: Mapped["Project"] = relationship("Project", back_populates="members")
    user: Mapped["User"] = relationship("User", back_populates="memberships")
