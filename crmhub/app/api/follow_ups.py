"""
CRMHub Core API Follow-up Endpoints
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel, Field
import structlog

from ..core.database import get_db
from ..core.exceptions import CRMError
from ..services.follow_up_service import FollowUpService

logger = structlog.get_logger()
router = APIRouter(prefix="/follow-ups", tags=["follow-ups"])


class RecordFollowUpRequest(BaseModel):
    """Request model for logging a follow-up"""
    entity_type: str
    entity_id: int
    user_id: int
    method: Optional[str] = Field(None, description="Phone, visit, email, ...")
    result: Optional[str] = None
    content: Optional[str] = None
    next_step_time: Optional[datetime] = None


class FollowUpResponse(BaseModel):
    id: int
    entity_type: str
    entity_id: int
    user_id: Optional[int]
    username: Optional[str]
    method: Optional[str]
    result: Optional[str]
    content: Optional[str]
    next_step_time: Optional[datetime]
    created_at: Optional[datetime]


class FollowUpIdResponse(BaseModel):
    id: int


@router.get("/{entity_type}/{entity_id}", response_model=List[FollowUpResponse])
async def list_follow_ups(
    entity_type: str,
    entity_id: int,
    db: AsyncSession = Depends(get_db)
):
    """List follow-ups on a record, newest first"""
    try:
        follow_up_service = FollowUpService(db)
        follow_ups = await follow_up_service.list_for(entity_type, entity_id)
        return [FollowUpResponse(**follow_up) for follow_up in follow_ups]

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to list follow-ups", entity_type=entity_type, entity_id=entity_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve follow-ups"
        )


@router.post("", response_model=FollowUpIdResponse)
async def record_follow_up(
    request: RecordFollowUpRequest,
    db: AsyncSession = Depends(get_db)
):
    """Log a follow-up against a record"""
    try:
        follow_up_service = FollowUpService(db)
        follow_up_id = await follow_up_service.record(**request.model_dump())
        return FollowUpIdResponse(id=follow_up_id)

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to record follow-up", entity_type=request.entity_type, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to record follow-up"
        )
