"""
CRMHub Core API Health Endpoints
"""

import time
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select, text
import structlog

from ..core.config import settings
from ..core.database import get_db
from ..models import RECORD_MODULES, Role

logger = structlog.get_logger()
router = APIRouter(prefix="/health", tags=["health"])

# Track service start time
start_time = time.time()


@router.get("/")
async def health_check():
    """Basic health check"""
    uptime = time.time() - start_time
    return {
        "status": "healthy",
        "service": "crmhub-core",
        "version": settings.version,
        "uptime_seconds": uptime,
        "timestamp": time.time()
    }


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Readiness check with database validation"""
    uptime = time.time() - start_time
    services = {}

    try:
        await db.execute(text("SELECT 1"))
        services["database"] = "healthy"
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        services["database"] = "unhealthy"

    # Schema is ready once the baseline roles have been seeded
    if services["database"] == "healthy":
        try:
            role_count = await db.scalar(select(func.count()).select_from(Role))
            services["schema"] = "healthy" if role_count else "not_seeded"
        except Exception as e:
            logger.warning("Schema health check failed", error=str(e))
            services["schema"] = "unhealthy"

    all_healthy = all(status == "healthy" for status in services.values())

    return {
        "status": "ready" if all_healthy else "not_ready",
        "service": "crmhub-core",
        "version": settings.version,
        "uptime_seconds": uptime,
        "services": services,
        "modules": sorted(RECORD_MODULES),
        "timestamp": time.time()
    }


@router.get("/live")
async def liveness_check():
    """Liveness check - basic service responsiveness"""
    return {
        "status": "alive",
        "service": "crmhub-core",
        "uptime_seconds": time.time() - start_time,
        "timestamp": time.time()
    }
