# 📄 File: tests/test_database.py
# 🧭 Purpose (Layman Explanation):
# Checks the database plumbing: the connection pool starts, reports its health and
# shuts down, and a unit of work saves everything or nothing.
# 🧪 Purpose (Technical Summary):
# Tests DatabaseConnectionManager lifecycle/health check against aiosqlite and the
# DatabaseSessionManager commit/rollback and error translation rules.
# 🔗 Dependencies:
# - pytest, aiosqlite
# 🔄 Connected Modules / Calls From:
# - marketplace.shared.infrastructure.database

import pytest
from sqlalchemy import text

from marketplace.modules.identity.domain.models import User
from marketplace.modules.identity.infrastructure.database.identity_repository_impl import UserRepositoryImpl
from marketplace.shared.core.exceptions import DatabaseError, NotFoundError, TransactionError
from marketplace.shared.infrastructure.database.connection import (
    DatabaseConnectionManager,
    get_database_engine,
)
from marketplace.shared.infrastructure.database.session import DatabaseSessionManager


def make_user(email: str) -> User:
    return User.create(name="Ravi", email=email, password="secret123")


@pytest.fixture
def session_manager(engine) -> DatabaseSessionManager:
    manager = DatabaseSessionManager()
    manager.initialize(engine)
    return manager


# ============================================================================
# CONNECTION MANAGER
# ============================================================================

async def test_connection_lifecycle():
    manager = DatabaseConnectionManager("sqlite+aiosqlite:///:memory:")
    assert manager.get_connection_info() == {"status": "not_initialized"}

    await manager.initialize()
    try:
        assert manager.is_initialized
        assert (await manager.health_check())["status"] == "healthy"
        assert manager.get_connection_info()["dialect"] == "sqlite"

        async with manager.get_connection() as conn:
            assert (await conn.execute(text("SELECT 1"))).scalar() == 1
    finally:
        await manager.close()

    status = await manager.health_check()
    assert status["status"] == "unhealthy"
    assert status["error"] == "Database engine not initialized"


async def test_global_engine_requires_initialization():
    with pytest.raises(RuntimeError):
        get_database_engine()


def test_session_manager_without_engine():
    manager = DatabaseSessionManager()
    with pytest.raises(DatabaseError):
        manager.initialize()
    assert not manager.is_initialized


# ============================================================================
# SESSION MANAGER
# ============================================================================

async def test_uninitialized_session_manager_refuses_sessions():
    with pytest.raises(DatabaseError):
        async with DatabaseSessionManager().get_session():
            pass


async def test_unit_of_work_commits(session_manager):
    async with session_manager.get_session() as db:
        user = await UserRepositoryImpl(db).add(make_user("ravi@example.com"))

    async with session_manager.get_session() as db:
        assert (await UserRepositoryImpl(db).get_by_id(user.id)).email == "ravi@example.com"


async def test_domain_error_rolls_back_and_propagates(session_manager):
    with pytest.raises(NotFoundError):
        async with session_manager.get_session() as db:
            await UserRepositoryImpl(db).add(make_user("ghost@example.com"))
            raise NotFoundError("Wallet not found", resource_type="Wallet")

    async with session_manager.get_session() as db:
        assert await UserRepositoryImpl(db).get_by_email("ghost@example.com") is None


async def test_unexpected_error_becomes_transaction_error(session_manager):
    with pytest.raises(TransactionError):
        async with session_manager.get_session():
            raise KeyError("boom")


async def test_execute_in_transaction(session_manager):
    async def register(db, email):
        return await UserRepositoryImpl(db).add(make_user(email))

    user = await session_manager.execute_in_transaction(register, "meera@example.com")

    async with session_manager.get_session() as db:
        assert await UserRepositoryImpl(db).count() == 1
        assert (await UserRepositoryImpl(db).get_by_email("meera@example.com")).id == user.id
