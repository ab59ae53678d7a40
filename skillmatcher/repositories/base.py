"""Base repository class with common operations."""

from typing import Generic, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from skillmatcher.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository providing common operations.

    Usage:
        class ProjectRepository(BaseRepository[Project]):
            model = Project

        repo = ProjectRepository(session)
        project = repo.get_by_id(project_id)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: str) -> T | None:
        """Get a single record by ID."""
        return self.session.get(self.model, id)

    def create(self, **kwargs) -> T:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        self.session.flush()
        return instance

    def count(self, **filters) -> int:
        """Get count of records, optionally filtered."""
        query = self.session.query(func.count(self.model.id))  # type: ignore[attr-defined]
        for key, value in filters.items():
            if not hasattr(self.model, key):
                raise ValueError(f"Unknown filter key: {key}")
            query = query.filter(getattr(self.model, key) == value)
        return query.scalar() or 0
