"""
Repository pattern implementations for data access.

Each repository implements one of the matching query ports
(skillmatcher.matching.ports) over the SQLAlchemy models.

Usage:
    from skillmatcher.repositories import ProjectRepository
    from skillmatcher.db import db

    with db.session() as session:
        repo = ProjectRepository(session)
        requirements = repo.get_skill_requirements(project_id)
"""

from .availability_repository import AvailabilityRepository
from .base import BaseRepository
from .profile_repository import ProfileRepository
from .project_repository import ProjectRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "ProfileRepository",
    "AvailabilityRepository",
]
