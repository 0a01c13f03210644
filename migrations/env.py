# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Configuration file that tells Alembic how to connect to the marketplace database and
# apply schema changes, either directly or as a SQL script for review.
# 🧪 Purpose (Technical Summary):
# Alembic environment: loads every marketplace ORM model onto DatabaseBase.metadata,
# resolves the async database URL from Settings and runs migrations over an
# asyncpg connection (online) or emits SQL (offline).
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy async engine
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)
# - migrations/versions

import asyncio
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from marketplace.modules import load_all_models
from marketplace.shared.config.settings import get_settings
from marketplace.shared.infrastructure.database.base import DatabaseBase

# Load environment variables
load_dotenv()

# Register every module's tables for autogenerate
load_all_models()

# This is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Set the target metadata for 'autogenerate' support
target_metadata = DatabaseBase.metadata

exclude_tables = [name for name in config.get_main_option("exclude_tables", "").split(",") if name]


def get_database_url() -> str:
    """
    Get the database URL.

    An explicit sqlalchemy.url in alembic.ini wins; otherwise Settings
    (DATABASE_URL or the DB_* components) supplies it.
    """
    return config.get_main_option("sqlalchemy.url") or get_settings().database_url


def include_object(object, name, type_, reflected, compare_to):
    """
    Filter objects to include in migrations.

    Tables listed in the exclude_tables option are skipped.
    """
    if type_ == "table" and name in exclude_tables:
        return False
    return True


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Configures the context with just a URL and emits the SQL to the
    script output instead of executing it.
    """
    context.configure(
        url=get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        include_object=include_object,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    """
    Run migrations with the given connection.

    Args:
        connection: Synchronous connection proxied from the async engine
    """
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        include_object=include_object,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations over an async engine."""
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
