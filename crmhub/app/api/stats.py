"""
CRMHub Core API Stats Endpoints
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel
import structlog

from ..core.database import get_db
from ..core.exceptions import CRMError
from ..services.stats_service import StatsService

logger = structlog.get_logger()
router = APIRouter(prefix="/stats", tags=["stats"])


class StageSummaryResponse(BaseModel):
    """Opportunity count and amount for one stage"""
    stage: Optional[str]
    count: int
    total_amount: float


@router.get("/opportunities", response_model=List[StageSummaryResponse])
async def opportunity_stage_summary(db: AsyncSession = Depends(get_db)):
    """Live opportunities grouped by stage"""
    try:
        stats_service = StatsService(db)
        summary = await stats_service.opportunity_stage_summary()
        return [StageSummaryResponse(**row) for row in summary]

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to build opportunity summary", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve opportunity stats"
        )
