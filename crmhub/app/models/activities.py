"""
CRMHub Marketing Activity Models
"""

from sqlalchemy import Column, String, Float, DateTime, Text
from enum import Enum

from ..core.database import Base
from .mixins import RecordMixin


class ActivityStatus(str, Enum):
    """Activity status enumeration"""
    PLANNING = "策划中"
    RUNNING = "进行中"
    FINISHED = "已结束"
    CANCELLED = "已取消"


class Activity(RecordMixin, Base):
    """Marketing activity (event, campaign, webinar)"""
    __tablename__ = "activities"

    name = Column(String)
    type = Column(String)
    channel = Column(String)
    start_time = Column(DateTime(timezone=True))
    end_time = Column(DateTime(timezone=True))
    location = Column(String)
    details = Column(Text)
    budget = Column(Float)
    status = Column(String, default=ActivityStatus.PLANNING.value, server_default=ActivityStatus.PLANNING.value)
