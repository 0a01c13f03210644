# 📄 File: marketplace/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the marketplace database, making sure we can talk to it and
# sharing a limited number of connections efficiently.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle: engine creation from settings (pool sizing only for
# server databases), connection event logging, health checks with exponential retry,
# pool statistics and shutdown.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - marketplace/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL async driver), aiosqlite (tests)
#
# 🔄 Connected Modules / Calls From:
# - marketplace/shared/infrastructure/database/session.py (session management)
# - Embedding application startup/shutdown hooks

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from marketplace.shared.config.settings import get_settings
from marketplace.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self, database_url: Optional[str] = None):
        self._engine: Optional[AsyncEngine] = None
        self._database_url = database_url
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters from settings."""
        settings = get_settings()
        url = self._database_url or settings.database_url
        params: Dict[str, Any] = {
            "url": url,
            "echo": settings.DB_ECHO,
        }

        # SQLite (tests, local tooling) uses its own pool; skip sizing arguments
        if make_url(url).get_backend_name() != "sqlite":
            params.update({
                "pool_pre_ping": True,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
            })
        return params

    async def initialize(self) -> None:
        """Create the engine and verify connectivity."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**self._build_connection_params())
            self._register_connection_events()

            status = await self.health_check()
            if status["status"] != "healthy":
                raise ConnectionError(status.get("error", "Database health check failed"))

            logger.info(f"Database engine initialized for {self._engine.url.render_as_string(hide_password=True)}")

        except Exception as e:
            logger.error(f"Failed to initialize database connection: {e}")
            if self._engine is not None:
                await self._engine.dispose()
                self._engine = None
            raise

    def _register_connection_events(self) -> None:
        """Register SQLAlchemy pool event listeners."""
        if self._engine is None:
            return

        @event.listens_for(self._engine.sync_engine, "checkout")
        def receive_checkout(dbapi_connection, connection_record, connection_proxy):
            logger.debug("Connection checked out from pool")

        @event.listens_for(self._engine.sync_engine, "checkin")
        def receive_checkin(dbapi_connection, connection_record):
            logger.debug("Connection checked in to pool")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": utc_now().isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": utc_now().isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": utc_now().isoformat()
        }

    def get_connection_info(self) -> Dict[str, Any]:
        """
        Get current connection pool information for monitoring.

        Returns:
            Dict containing pool status
        """
        if self._engine is None:
            return {"status": "not_initialized"}

        return {
            "status": "initialized",
            "dialect": self._engine.dialect.name,
            "pool": self._engine.pool.status(),
        }

    @asynccontextmanager
    async def get_connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """
        Get a database connection inside a transaction that commits on exit.

        Yields:
            AsyncConnection: Database connection
        """
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            yield conn

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    await db_manager.initialize()


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
