"""
CRMHub Comment and Follow-up Models
"""

from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey
from sqlalchemy.sql import func

from ..core.database import Base
from .mixins import utcnow


class Comment(Base):
    """Immutable comment on a record; parent_id links replies into a thread"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String, index=True)
    entity_id = Column(Integer, index=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    content = Column(Text)
    parent_id = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    def __repr__(self):
        return f"<Comment(entity_type='{self.entity_type}', entity_id={self.entity_id}, parent_id={self.parent_id})>"


class FollowUp(Base):
    """Immutable follow-up log entry (call, visit, email) on a record"""
    __tablename__ = "follow_ups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String, index=True)
    entity_id = Column(Integer, index=True)
    method = Column(String)
    result = Column(String)
    content = Column(Text)
    next_step_time = Column(DateTime(timezone=True))
    user_id = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
