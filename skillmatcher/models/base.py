"""
Base model class for SQLAlchemy ORM.

Re-exports the Base class from the database module and adds the audit
columns shared by every table.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from skillmatcher.db import Base


def new_id() -> str:
    """Generate a primary key."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """UUID primary key plus created/updated timestamps."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )


__all__ = ["Base", "AuditMixin", "new_id", "utcnow"]
