"""
Test configuration and fixtures for CRMHub
"""

import os
import tempfile

# Point the application at a throwaway database before it is imported
TEST_DB_PATH = os.path.join(tempfile.mkdtemp(prefix="crmhub-tests-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from crmhub.app import models  # noqa: F401
from crmhub.app.core.database import Base
from crmhub.app.main import app


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def client():
    """Test client on a freshly created and seeded database file."""
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_lead_data():
    """Sample lead data for testing."""
    return {
        "name": "Acme",
        "contact_person": "Dana Scully",
        "phone": "+1-555-0100",
        "email": "dana@acme.example",
        "source": "官网",
        "level": "A",
        "owner_id": 1
    }


@pytest.fixture
def sample_opportunity_data():
    """Sample opportunity data for testing."""
    return {
        "name": "Warehouse Rollout",
        "customer_id": 1,
        "stage": "初步沟通",
        "probability": 30,
        "amount": 20000,
        "expected_date": "2026-09-30",
        "owner_id": 1
    }
