"""
CRMHub Contract Models
"""

from sqlalchemy import Column, String, Integer, Float, Date, ForeignKey
from enum import Enum

from ..core.database import Base
from .mixins import RecordMixin


class ContractStatus(str, Enum):
    """Contract status enumeration"""
    DRAFT = "草稿"
    PENDING_APPROVAL = "审批中"
    ACTIVE = "执行中"
    EXPIRED = "已到期"
    TERMINATED = "已终止"


class Contract(RecordMixin, Base):
    __tablename__ = "contracts"

    contract_no = Column(String, unique=True)
    name = Column(String)
    customer_id = Column(Integer, ForeignKey("customers.id"))
    opportunity_id = Column(Integer, ForeignKey("opportunities.id"))
    type = Column(String)
    amount = Column(Float)
    payment_method = Column(String)
    sign_date = Column(Date)
    expiry_date = Column(Date)
    status = Column(String, default=ContractStatus.DRAFT.value, server_default=ContractStatus.DRAFT.value)
