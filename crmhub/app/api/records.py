"""
CRMHub Core API Record Endpoints
One set of routes serves every module in the allow-list
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel
import structlog

from ..core.database import get_db
from ..core.exceptions import CRMError
from ..services.record_service import INTEGER_MAX, RecordService

logger = structlog.get_logger()
router = APIRouter(tags=["records"])


class RecordIdResponse(BaseModel):
    """Response model for record creation"""
    id: int


class SuccessResponse(BaseModel):
    success: bool = True


@router.get("/{module}", response_model=List[Dict[str, Any]])
async def list_records(
    module: str = Path(..., description="Module name, e.g. leads"),
    q: Optional[str] = Query(None, description="Search name or contact person"),
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    owner_id: Optional[int] = Query(None, description="Filter by owner"),
    is_deleted: bool = Query(False, description="List deleted records instead of live ones"),
    db: AsyncSession = Depends(get_db)
):
    """List records of a module, newest first"""
    try:
        record_service = RecordService(db)
        return await record_service.list_records(
            module,
            q=q,
            status=status_filter,
            owner_id=owner_id,
            is_deleted=is_deleted
        )

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to list records", module=module, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve records"
        )


@router.post("/{module}", response_model=RecordIdResponse)
async def create_record(
    module: str,
    fields: Dict[str, Any] = Body(..., description="Column name to value mapping"),
    db: AsyncSession = Depends(get_db)
):
    """Create a record"""
    try:
        record_service = RecordService(db)
        record_id = await record_service.create_record(module, fields)
        return RecordIdResponse(id=record_id)

    except CRMError:
        raise
    except Exception as e:
        logger.error("Record creation failed", module=module, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create record"
        )


@router.get("/{module}/{record_id}", response_model=Dict[str, Any])
async def get_record(
    module: str,
    record_id: int = Path(..., le=INTEGER_MAX, description="Record ID"),
    db: AsyncSession = Depends(get_db)
):
    """Get a specific record by ID"""
    try:
        record_service = RecordService(db)
        return await record_service.get_record(module, record_id)

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to get record", module=module, record_id=record_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve record"
        )


@router.put("/{module}/{record_id}", response_model=SuccessResponse)
async def update_record(
    module: str,
    record_id: int = Path(..., le=INTEGER_MAX, description="Record ID"),
    fields: Dict[str, Any] = Body(..., description="Fields to change"),
    db: AsyncSession = Depends(get_db)
):
    """Update the supplied fields of a record"""
    try:
        record_service = RecordService(db)
        await record_service.update_record(module, record_id, fields)
        return SuccessResponse()

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to update record", module=module, record_id=record_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update record"
        )


@router.delete("/{module}/{record_id}", response_model=SuccessResponse)
async def delete_record(
    module: str,
    record_id: int = Path(..., le=INTEGER_MAX, description="Record ID"),
    db: AsyncSession = Depends(get_db)
):
    """Soft-delete a record"""
    try:
        record_service = RecordService(db)
        await record_service.soft_delete_record(module, record_id)
        return SuccessResponse()

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to delete record", module=module, record_id=record_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete record"
        )


@router.post("/{module}/{record_id}/restore", response_model=SuccessResponse)
async def restore_record(
    module: str,
    record_id: int = Path(..., le=INTEGER_MAX, description="Record ID"),
    db: AsyncSession = Depends(get_db)
):
    """Restore a soft-deleted record"""
    try:
        record_service = RecordService(db)
        await record_service.restore_record(module, record_id)
        return SuccessResponse()

    except CRMError:
        raise
    except Exception as e:
        logger.error("Failed to restore record", module=module, record_id=record_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to restore record"
        )
