"""
SQLAlchemy models backing the matching query ports.

Usage:
    from skillmatcher.models import User, Project, ProjectSkill
"""

from .base import Base
from .project import Project, ProjectMember, ProjectSkill, ProjectStatus
from .skill import Skill
from .user import User, UserAvailability, UserSkill

__all__ = [
    # Base
    "Base",
    # User
    "User",
    "UserSkill",
    "UserAvailability",
    # Skill
    "Skill",
    # Project
    "Project",
    "ProjectSkill",
    "ProjectMember",
    "ProjectStatus",
]
