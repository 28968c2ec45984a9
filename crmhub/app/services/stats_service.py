"""
CRMHub Stats Service
Aggregations over record modules
"""

from typing import Any, Dict, List

from sqlalchemy import false, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import storage_guard
from ..models import Opportunity


class StatsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def opportunity_stage_summary(self) -> List[Dict[str, Any]]:
        """Count and total amount of live opportunities per stage

        Stages are returned in order of first appearance (lowest opportunity id).
        """
        opportunities = Opportunity.__table__

        query = (
            select(
                opportunities.c.stage,
                func.count(opportunities.c.id).label("count"),
                func.coalesce(func.sum(opportunities.c.amount), 0).label("total_amount"),
            )
            .where(opportunities.c.is_deleted == false())
            .group_by(opportunities.c.stage)
            .order_by(func.min(opportunities.c.id))
        )

        async with storage_guard(self.db, "opportunity stage summary"):
            result = await self.db.execute(query)
            rows = result.mappings().all()

        return [
            {
                "stage": row["stage"],
                "count": row["count"],
                "total_amount": float(row["total_amount"]),
            }
            for row in rows
        ]
