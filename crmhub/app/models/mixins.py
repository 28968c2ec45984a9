"""
CRMHub shared model columns
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, DateTime, Boolean, ForeignKey, false
from sqlalchemy.orm import declared_attr
from sqlalchemy.sql import func


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Shift an offset-carrying datetime to UTC; naive values are taken as UTC already"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


class RecordMixin:
    """Columns shared by every module table

    is_deleted/deleted_at implement soft deletion: a deleted row is hidden
    from default listings but stays in storage and can be restored.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false())
    deleted_at = Column(DateTime(timezone=True))

    @declared_attr
    def owner_id(cls):
        return Column(Integer, ForeignKey("users.id"))

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, status='{getattr(self, 'status', None)}')>"
