"""
CRMHub Lead Models
"""

from sqlalchemy import Column, String
from enum import Enum

from ..core.database import Base
from .mixins import RecordMixin


class LeadStatus(str, Enum):
    """Lead status enumeration"""
    NEW = "未跟进"
    FOLLOWING = "跟进中"
    CONVERTED = "已转化"
    INVALID = "无效"


class Lead(RecordMixin, Base):
    """Lead model for capturing potential customers"""
    __tablename__ = "leads"

    name = Column(String)
    contact_person = Column(String)
    phone = Column(String)
    email = Column(String)
    source = Column(String)
    level = Column(String)
    status = Column(String, default=LeadStatus.NEW.value, server_default=LeadStatus.NEW.value)
