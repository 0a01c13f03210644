# 📄 File: marketplace/shared/infrastructure/database/base.py
# 🧭 Purpose (Layman Explanation):
# The common foundation for every database table: how constraints are named and the
# columns every table shares (id, timestamps, deleted flag, rating).
# 🧪 Purpose (Technical Summary):
# SQLAlchemy 2.x declarative base with a deterministic constraint naming convention
# (used by Alembic) plus column mixins mirroring the domain base classes.
# 🔗 Dependencies:
# sqlalchemy, types.py
# 🔄 Connected Modules / Calls From:
# Every module's infrastructure/database/models.py, migrations/env.py, tests/conftest.py

from sqlalchemy import Boolean, Column, Float, Integer, MetaData
from sqlalchemy.orm import DeclarativeBase, declared_attr

from marketplace.shared.infrastructure.database.types import UTCDateTime, UUIDType, foreign_key, new_uuid
from marketplace.shared.utils.helpers import utc_now

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata so Alembic autogenerate and
    metadata.create_all see every marketplace table.
    """
    metadata = metadata


# =============================================================================
# COLUMN MIXINS
# =============================================================================

class TimestampMixin:
    """UUID primary key and UTC creation/modification timestamps."""

    id = Column(UUIDType, primary_key=True, default=new_uuid, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
    updated_at = Column(UTCDateTime, nullable=False, default=utc_now)


class SoftDeleteMixin:
    """Deletion flag excluded from default repository reads."""

    is_deleted = Column(Boolean, nullable=False, default=False, index=True)


class RatingMixin:
    """Cached review aggregate."""

    rating = Column(Float, nullable=False, default=0)
    rating_count = Column(Integer, nullable=False, default=0)


class ListingMixin(RatingMixin):
    """Moderation and visibility columns of public listings."""

    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_approved = Column(Boolean, nullable=False, default=False, index=True)
    approved_at = Column(UTCDateTime, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)

    @declared_attr
    def approved_by(cls):
        return foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
