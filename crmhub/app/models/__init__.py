"""
CRMHub Core Models
"""

from typing import Dict, Type

from ..core.database import Base
from .users import Role, User
from .leads import Lead, LeadStatus
from .customers import Customer, CustomerStatus
from .opportunities import Opportunity, OpportunityStage, OpportunityStatus
from .contracts import Contract, ContractStatus
from .activities import Activity, ActivityStatus
from .comments import Comment, FollowUp

# Modules addressable through the generic record API
RECORD_MODULES: Dict[str, Type[Base]] = {
    "leads": Lead,
    "customers": Customer,
    "opportunities": Opportunity,
    "contracts": Contract,
    "activities": Activity,
}

__all__ = [
    "RECORD_MODULES",
    "Role",
    "User",
    "Lead",
    "LeadStatus",
    "Customer",
    "CustomerStatus",
    "Opportunity",
    "OpportunityStage",
    "OpportunityStatus",
    "Contract",
    "ContractStatus",
    "Activity",
    "ActivityStatus",
    "Comment",
    "FollowUp",
]
