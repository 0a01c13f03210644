# 📄 File: marketplace/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to store marketplace records in the database.
# 🧪 Purpose (Technical Summary):
# Database infrastructure exports: declarative base and mixins, portable column types,
# engine and session management and the generic SQLAlchemy repository.
# 🔗 Dependencies:
# base.py, types.py, connection.py, session.py, repository.py
# 🔄 Connected Modules / Calls From:
# Module infrastructure layers, migrations/env.py, tests

from .base import DatabaseBase, RatingMixin, SoftDeleteMixin, TimestampMixin
from .connection import DatabaseConnectionManager, db_manager
from .repository import SQLAlchemyRepository
from .session import DatabaseSessionManager, database_session, get_db_session, session_manager

__all__ = [
    "DatabaseBase",
    "DatabaseConnectionManager",
    "DatabaseSessionManager",
    "RatingMixin",
    "SQLAlchemyRepository",
    "SoftDeleteMixin",
    "TimestampMixin",
    "database_session",
    "db_manager",
    "get_db_session",
    "session_manager",
]
