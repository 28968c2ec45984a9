"""
CRMHub Core API Identity Endpoint
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel
import structlog

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import CRMError
from ..services.user_service import UserService

logger = structlog.get_logger()
router = APIRouter(tags=["users"])


class CurrentUserResponse(BaseModel):
    """Current account joined with its role"""
    id: int
    username: str
    role_id: Optional[int]
    department: Optional[str]
    role_name: Optional[str]
    role_level: Optional[int]
    permissions: Optional[Dict[str, Any]]


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(db: AsyncSession = Depends(get_db)):
    """Return the configured account; authentication is handled upstream"""
    try:
        user_service = UserService(db)
        user = await user_service.get_user_with_role(settings.current_username)
        return CurrentUserResponse(**user)

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to load current user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load current user"
        )
