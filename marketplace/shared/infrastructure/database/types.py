# 📄 File: marketplace/shared/infrastructure/database/types.py
# 🧭 Purpose (Layman Explanation):
# Describes how special kinds of values (ids, dates with time zones, money, lists and nested
# details, fixed choices) are written to the database so they come back exactly the same.
# 🧪 Purpose (Technical Summary):
# Portable SQLAlchemy column types and column factories: UUID, JSON/JSONB, timezone-aware
# UTC datetimes, 2-decimal money, enum strings guarded by CHECK constraints and UUID
# foreign keys with explicit ON DELETE behaviour.
# 🔗 Dependencies:
# sqlalchemy, marketplace.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# base.py mixins, every module's infrastructure/database/models.py

import uuid
from enum import Enum
from typing import Any, Optional, Type

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, ForeignKey, Numeric, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator

from marketplace.shared.utils.helpers import ensure_utc

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")

# Amounts are rounded to paise before persisting
Money = Numeric(12, 2, asdecimal=False)

UUIDType = Uuid(as_uuid=True)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime stored in UTC.

    Naive values coming back from backends without timezone support
    are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Any:
        return ensure_utc(value)

    def process_result_value(self, value: Any, dialect) -> Any:
        return ensure_utc(value)


def enum_values(enum_cls: Type[Enum]) -> list:
    return [member.value for member in enum_cls]


def enum_column(enum_cls: Type[Enum], default: Optional[Enum] = None, nullable: bool = False, **kwargs) -> Column:
    """
    String column sized for an enum's values.

    Pair with enum_check() in __table_args__ to guard the allowed values.
    """
    length = max(len(value) for value in enum_values(enum_cls))
    return Column(
        String(max(length, 16)),
        nullable=nullable,
        default=default.value if default is not None else None,
        **kwargs
    )


def enum_check(column_name: str, enum_cls: Type[Enum]) -> CheckConstraint:
    """CHECK constraint restricting a string column to an enum's values."""
    allowed = ", ".join(f"'{value}'" for value in enum_values(enum_cls))
    return CheckConstraint(f"{column_name} IN ({allowed})", name=f"{column_name}_valid")


def foreign_key(
    target: str,
    ondelete: str = "CASCADE",
    nullable: bool = False,
    index: bool = True,
    use_alter: bool = False,
    **kwargs
) -> Column:
    """
    UUID foreign key column.

    Args:
        target: "table.column" reference
        ondelete: CASCADE for owned rows, SET NULL for optional links,
            RESTRICT for financial history
        nullable: Whether the reference is optional
        index: Create an index on the column
        use_alter: Create the constraint after both tables exist; needed
            for references that form a cycle (orders <-> shipments)
    """
    return Column(
        UUIDType,
        ForeignKey(target, ondelete=ondelete, use_alter=use_alter),
        nullable=nullable,
        index=index,
        **kwargs
    )


def new_uuid() -> uuid.UUID:
    return uuid.uuid4()
