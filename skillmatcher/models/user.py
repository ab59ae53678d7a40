"""
User-related SQLAlchemy models.
"""

from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import AuditMixin, Base

if TYPE_CHECKING:
    from .project import ProjectMember
    from .skill import Skill


class User(AuditMixin, Base):
    """
    User model.

    Attributes:
        email: Unique login email
        first_name / last_name: Display name parts (optional until onboarding completes)
        is_enabled: Disabled users are never offered as candidates
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    is_enabled: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    skills: Mapped[List["UserSkill"]] = relationship(
        "UserSkill", back_populates="user", cascade="all, delete-orphan"
    )
    availability: Mapped[List["UserAvailability"]] = relationship(
        "UserAvailability", back_populates="user", cascade="all, delete-orphan"
    )
    memberships: Mapped[List["ProjectMember"]] = relationship(
        "ProjectMember", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def display_name(self) -> str:
        """First and last name, falling back to the email address."""
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email


class UserSkill(AuditMixin, Base):
    """A skill held by a user at a level from 1 to 5."""

    __tablename__ = "user_skills"
    __table_args__ = (UniqueConstraint("user_id", "skill_id", name="uq_user_skills_user_skill"),)

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id"), index=True)
    level: Mapped[int] = mapped_column(Integer)

    user: Mapped["User"] = relationship("User", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill")


class UserAvailability(AuditMixin, Base):
    """A date window during which a user is available for project work."""

    __tablename__ = "user_availability"
    __table_args__ = (Index("idx_user_availability_user_id", "user_id"),)

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    available_from: Mapped[date] = mapped_column(Date)
    available_to: Mapped[date] = mapped_column(Date)

    user: Mapped["User"] = relationship("User", back_populates="availability")
