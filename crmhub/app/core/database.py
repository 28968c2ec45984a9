"""
CRMHub Database Configuration
SQLAlchemy async setup (SQLite by default)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
import structlog

from .config import settings
from .exceptions import ConstraintViolation, StorageUnavailable

logger = structlog.get_logger()


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

# Create session maker
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception as e:
            logger.error("Database session error", error=str(e))
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def storage_guard(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Translate driver errors raised by a statement into CRM errors"""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.warning("Constraint violation", operation=operation, error=str(e.orig))
        raise ConstraintViolation(str(e.orig), operation=operation) from e
    except (OperationalError, InterfaceError) as e:
        await session.rollback()
        logger.error("Storage unavailable", operation=operation, error=str(e.orig))
        raise StorageUnavailable(operation=operation) from e


async def init_db():
    """Create tables that do not exist yet"""
    async with engine.begin() as conn:
        # Import all models to register them
        from .. import models  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")


async def close_db():
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
