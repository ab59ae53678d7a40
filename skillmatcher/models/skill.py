"""
Skill catalogue model.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import AuditMixin, Base


class Skill(AuditMixin, Base):
    """A named skill (e.g. "kotlin", "docker")."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), unique=True)
