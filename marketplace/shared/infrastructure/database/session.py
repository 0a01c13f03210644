# 📄 File: marketplace/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (conversations with the database) so each unit of work either
# saves everything it changed or nothing at all.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session factory and unit-of-work context manager: commit on success,
# rollback on failure, SQLAlchemy failures wrapped as DatabaseError and unexpected errors
# as TransactionError. Domain errors pass through unchanged after rollback.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - marketplace/shared/infrastructure/database/connection.py (database engine)
# - marketplace/shared/core/exceptions.py
#
# 🔄 Connected Modules / Calls From:
# - Embedding application request handlers and workers
# - Domain services operating across several repositories

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Awaitable, Callable, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from marketplace.shared.core.exceptions import DatabaseError, MarketplaceException, TransactionError
from marketplace.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory used by the manager and by tests."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=True,
    )


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Bind the session factory to an engine (the global one by default)."""
        try:
            self._session_factory = create_session_factory(engine or get_database_engine())
            logger.info("Database session factory initialized successfully")
        except RuntimeError as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}") from e

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseError: If the session is not initialized or SQLAlchemy fails
            TransactionError: If an unexpected error aborts the unit of work
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session
            await session.commit()
            logger.debug("Database transaction committed successfully")

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except MarketplaceException:
            await session.rollback()
            logger.info("Domain error raised, transaction rolled back")
            raise

        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error occurred, transaction rolled back: {e}")
            raise TransactionError(f"Transaction failed: {e}") from e

        finally:
            await session.close()
            logger.debug("Database session closed")

    async def execute_in_transaction(
        self,
        operation: Callable[..., Awaitable[Any]],
        *args,
        **kwargs
    ) -> Any:
        """
        Execute an operation within a managed transaction.

        Args:
            operation: Coroutine function taking the session as first argument
        """
        async with self.get_session() as session:
            return await operation(session, *args, **kwargs)

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency-style generator yielding a managed session.

    Usage:
        async def handler(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with session_manager.get_session() as session:
        yield session


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for manual database session management.

    Example:
        async with database_session() as db:
            wallet = await WalletRepositoryImpl(db).get_by_user(user_id)
    """
    async with session_manager.get_session() as session:
        yield session
