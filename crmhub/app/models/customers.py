"""
CRMHub Customer Models
"""

from sqlalchemy import Column, String
from enum import Enum

from ..core.database import Base
from .mixins import RecordMixin


class CustomerStatus(str, Enum):
    """Customer status enumeration"""
    ACTIVE = "合作中"
    PAUSED = "暂停合作"
    CHURNED = "已流失"


class Customer(RecordMixin, Base):
    __tablename__ = "customers"

    name = Column(String)
    type = Column(String)
    industry = Column(String)
    contact_person = Column(String)
    phone = Column(String)
    address = Column(String)
    level = Column(String)
    status = Column(String, default=CustomerStatus.ACTIVE.value, server_default=CustomerStatus.ACTIVE.value)
