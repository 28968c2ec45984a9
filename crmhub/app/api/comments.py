"""
CRMHub Core API Comment Endpoints
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel, Field
import structlog

from ..core.database import get_db
from ..core.exceptions import CRMError
from ..services.comment_service import CommentService

logger = structlog.get_logger()
router = APIRouter(prefix="/comments", tags=["comments"])


class PostCommentRequest(BaseModel):
    """Request model for posting a comment"""
    entity_type: str = Field(
        ..., description="Module of the commented record, by its plural route name: leads, customers, opportunities, contracts or activities"
    )
    entity_id: int
    user_id: int
    content: str = Field(..., min_length=1)
    parent_id: Optional[int] = Field(None, description="Comment being replied to")


class CommentResponse(BaseModel):
    """Response model for comment data"""
    id: int
    entity_type: str
    entity_id: int
    user_id: Optional[int]
    username: Optional[str]
    content: Optional[str]
    parent_id: Optional[int]
    created_at: Optional[datetime]


class CommentIdResponse(BaseModel):
    id: int


@router.get("/{entity_type}/{entity_id}", response_model=List[CommentResponse])
async def list_comments(
    entity_type: str,
    entity_id: int,
    db: AsyncSession = Depends(get_db)
):
    """List comments on a record, newest first"""
    try:
        comment_service = CommentService(db)
        comments = await comment_service.list_for(entity_type, entity_id)
        return [CommentResponse(**comment) for comment in comments]

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to list comments", entity_type=entity_type, entity_id=entity_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve comments"
        )


@router.post("", response_model=CommentIdResponse)
async def post_comment(
    request: PostCommentRequest,
    db: AsyncSession = Depends(get_db)
):
    """Post a comment or a reply"""
    try:
        comment_service = CommentService(db)
        comment_id = await comment_service.post(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            user_id=request.user_id,
            content=request.content,
            parent_id=request.parent_id
        )
        return CommentIdResponse(id=comment_id)

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to post comment", entity_type=request.entity_type, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to post comment"
        )
