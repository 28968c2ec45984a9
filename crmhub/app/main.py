"""
CRMHub Core API Main Application
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from .core.config import settings
from .core.database import AsyncSessionLocal, init_db, close_db
from .core.exceptions import CRMError, ErrorResponse
from .core.seed import seed_if_empty
from .api import health, users, stats, comments, follow_ups, records

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Prometheus metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info("Starting CRMHub Core API", version=settings.version)

    # Ensure schema and baseline data
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_if_empty(session)

    yield

    logger.info("Shutting down CRMHub Core API")

    await close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="CRMHub Core API - generic record management for leads, customers, opportunities, contracts and activities",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Collect Prometheus metrics for all requests"""
    start_time = time.time()
    method = request.method

    response = await call_next(request)

    # Label by route template so record ids do not explode cardinality
    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)

    duration = time.time() - start_time
    status_code = str(response.status_code)

    REQUEST_COUNT.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
    REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)

    response.headers["X-Response-Time"] = f"{duration:.3f}s"

    return response


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all requests"""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(duration * 1000, 2)
    )

    return response


@app.exception_handler(CRMError)
async def crm_error_handler(request: Request, exc: CRMError):
    """Render client-visible errors as a structured body"""
    logger.info(
        "Request rejected",
        path=request.url.path,
        error_code=exc.error_code,
        message=exc.message
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed path, query or body parameters"""
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            message="Request validation failed",
            error_code="VALIDATION_ERROR",
            error_details={"errors": jsonable_encoder(exc.errors())}
        ).model_dump()
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors, including unmatched routes, in the same body shape"""
    if exc.status_code >= 500:
        error_code = "INTERNAL_ERROR"
    elif exc.status_code == 404:
        error_code = "NOT_FOUND"
    else:
        error_code = "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail), error_code=error_code).model_dump(),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    """Catch-all for unexpected errors; details stay in the log"""
    logger.error("Internal server error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message="Internal server error", error_code="INTERNAL_ERROR").model_dump()
    )


# Include routers; fixed paths first so they are not taken as module names
app.include_router(health.router)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(stats.router, prefix=settings.api_prefix)
app.include_router(comments.router, prefix=settings.api_prefix)
app.include_router(follow_ups.router, prefix=settings.api_prefix)
app.include_router(records.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.app_name,
        "version": settings.version,
        "status": "operational",
        "docs": "/docs" if settings.debug else "disabled",
        "environment": settings.environment
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    if not settings.prometheus_enabled:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(message="Metrics not enabled", error_code="NOT_FOUND").model_dump()
        )

    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "crmhub.app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
