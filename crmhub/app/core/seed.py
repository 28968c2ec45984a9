"""
CRMHub baseline data

Roles, the administrator account and a few sample records are inserted once,
on a database whose roles table is empty.
"""

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from .config import settings
from ..models import Customer, CustomerStatus, Lead, LeadStatus, Opportunity, OpportunityStage, Role, User

logger = structlog.get_logger()

DEFAULT_ROLES = [
    ("超级管理员", 1, {"all": True}),
    ("部门管理员", 2, {"dept": True}),
    ("普通员工", 3, {"self": True}),
    ("只读用户", 4, {"read": True}),
]


async def seed_if_empty(session: AsyncSession) -> bool:
    """Insert baseline rows unless roles already exist; returns True if seeded

    The count-then-insert is not guarded against two processes starting on the
    same empty database at once.
    """
    role_count = await session.scalar(select(func.count()).select_from(Role))
    if role_count:
        logger.info("Seed skipped, roles already present", roles=role_count)
        return False

    roles = [Role(name=name, level=level, permissions=permissions) for name, level, permissions in DEFAULT_ROLES]
    session.add_all(roles)
    await session.flush()

    admin = User(
        username=settings.seed_admin_username,
        password=settings.seed_admin_password,
        role_id=roles[0].id,
        department=settings.seed_admin_department,
    )
    session.add(admin)
    await session.flush()

    if settings.seed_sample_data:
        customer = Customer(
            name="Global Logistics", type="企业", industry="物流", contact_person="Charlie Davis",
            phone="555-0199", address="123 Main St", level="VIP", status=CustomerStatus.ACTIVE.value, owner_id=admin.id,
        )
        session.add_all([
            Lead(
                name="Tech Solutions Inc", contact_person="Alice Smith", phone="123-456-7890",
                email="alice@tech.com", source="官网", level="A", status=LeadStatus.FOLLOWING.value, owner_id=admin.id,
            ),
            Lead(
                name="Green Energy Co", contact_person="Bob Brown", phone="098-765-4321",
                email="bob@green.com", source="推荐", level="B", status=LeadStatus.NEW.value, owner_id=admin.id,
            ),
            customer,
        ])
        await session.flush()

        session.add(Opportunity(
            name="Q1 Software Upgrade", customer_id=customer.id, stage=OpportunityStage.INITIAL_CONTACT.value, probability=20,
            amount=50000, expected_date=date(2026, 6, 1), owner_id=admin.id,
        ))

    await session.commit()
    logger.info("Database seeded", admin=admin.username, sample_data=settings.seed_sample_data)
    return True
