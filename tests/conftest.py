# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared test setup: gives every test a fresh, empty in-memory database with all
# marketplace tables, plus a few ready-made ids so tests can focus on behaviour.
# 🧪 Purpose (Technical Summary):
# Pins test settings (ENVIRONMENT=test, cheap bcrypt) before the package is imported,
# builds an aiosqlite engine per test, creates DatabaseBase.metadata and yields an
# AsyncSession from the same factory the application uses.
# 🔗 Dependencies:
# - pytest, pytest-asyncio (asyncio_mode=auto)
# - SQLAlchemy async engine, aiosqlite
# 🔄 Connected Modules / Calls From:
# - Every tests/test_*.py module

import os
import uuid

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.modules import load_all_models
from marketplace.shared.infrastructure.database.base import DatabaseBase
from marketplace.shared.infrastructure.database.session import create_session_factory

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """In-memory database with every marketplace table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    load_all_models()
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def seller_id() -> uuid.UUID:
    return uuid.uuid4()
