"""
CRMHub Opportunity Models
"""

from sqlalchemy import Column, String, Integer, Float, Date, Text, ForeignKey
from enum import Enum

from ..core.database import Base
from .mixins import RecordMixin


class OpportunityStage(str, Enum):
    """Opportunity stage enumeration"""
    INITIAL_CONTACT = "初步沟通"
    NEEDS_ANALYSIS = "需求分析"
    PROPOSAL = "方案报价"
    NEGOTIATION = "商务谈判"
    WON = "赢单"
    LOST = "输单"


class OpportunityStatus(str, Enum):
    OPEN = "进行中"
    CLOSED = "已关闭"


class Opportunity(RecordMixin, Base):
    """Sales opportunity; stage drives the pipeline summary"""
    __tablename__ = "opportunities"

    name = Column(String)
    customer_id = Column(Integer, ForeignKey("customers.id"))
    stage = Column(String)
    probability = Column(Integer)
    amount = Column(Float)
    expected_date = Column(Date)
    description = Column(Text)
    status = Column(String, default=OpportunityStatus.OPEN.value, server_default=OpportunityStatus.OPEN.value)
