"""
CRMHub Follow-up Service
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..core.database import storage_guard
from ..models import FollowUp, User
from ..models.mixins import as_utc
from .record_service import resolve_table

logger = structlog.get_logger()


class FollowUpService:
    """Service for the follow-up log kept on each record"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for(self, entity_type: str, entity_id: int) -> List[Dict[str, Any]]:
        resolve_table(entity_type)
        follow_ups = FollowUp.__table__
        users = User.__table__

        query = (
            select(follow_ups, users.c.username)
            .select_from(follow_ups.outerjoin(users, follow_ups.c.user_id == users.c.id))
            .where(follow_ups.c.entity_type == entity_type, follow_ups.c.entity_id == entity_id)
            .order_by(follow_ups.c.created_at.desc(), follow_ups.c.id.desc())
        )

        async with storage_guard(self.db, "list follow-ups"):
            result = await self.db.execute(query)
            rows = result.mappings().all()

        return [dict(row) for row in rows]

    async def record(
        self,
        entity_type: str,
        entity_id: int,
        user_id: int,
        method: Optional[str] = None,
        result: Optional[str] = None,
        content: Optional[str] = None,
        next_step_time: Optional[datetime] = None,
    ) -> int:
        """Log one follow-up against a record"""
        resolve_table(entity_type)

        stmt = insert(FollowUp.__table__).values(
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            method=method,
            result=result,
            content=content,
            next_step_time=as_utc(next_step_time) if next_step_time else None,
        )

        async with storage_guard(self.db, "record follow-up"):
            outcome = await self.db.execute(stmt)
            await self.db.commit()

        follow_up_id = outcome.inserted_primary_key[0]
        logger.info(
            "Follow-up recorded",
            follow_up_id=follow_up_id,
            entity_type=entity_type,
            entity_id=entity_id,
            method=method
        )
        return follow_up_id
