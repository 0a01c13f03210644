# 📄 File: marketplace/shared/infrastructure/database/repository.py
# 🧭 Purpose (Layman Explanation):
# One shared storage helper that knows how to save, find, update, hide and list any kind of
# marketplace record, so each module only writes the special searches it needs.
# 🧪 Purpose (Technical Summary):
# Generic async SQLAlchemy repository mapping pydantic domain entities to ORM rows by
# attribute name (JSON columns receive JSON-mode dumps), with soft-delete aware reads and
# translation of IntegrityError/SQLAlchemyError into the domain exception hierarchy.
# 🔗 Dependencies:
# sqlalchemy (async session, select, inspect), marketplace.shared.core.exceptions,
# marketplace.shared.domain.repository
# 🔄 Connected Modules / Calls From:
# Every module's *_repository_impl.py

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import JSON, Select, delete, func, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.shared.core.exceptions import (
    DuplicateResourceError,
    NotFoundError,
    RepositoryError,
)
from marketplace.shared.domain.repository import BaseRepository, EntityT
from marketplace.shared.infrastructure.database.base import DatabaseBase

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=DatabaseBase)

_UNIQUE_MARKERS = ("unique", "duplicate")


class SQLAlchemyRepository(BaseRepository[EntityT], Generic[EntityT, ModelT]):
    """
    SQLAlchemy implementation of the shared repository operations.

    Subclasses set:
    - entity_class: pydantic domain entity
    - model_class: SQLAlchemy model with attributes named like the entity fields
    - resource_name: name used in errors and logs

    Writes flush inside the caller's session; committing is left to the
    session owner (see session.py).
    """

    entity_class: Type[EntityT]
    model_class: Type[ModelT]
    resource_name: str = "resource"

    def __init__(self, session: AsyncSession):
        """
        Initialize the repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    # =========================================================================
    # MAPPING
    # =========================================================================

    def _to_domain(self, model: ModelT) -> EntityT:
        return self.entity_class.model_validate(model, from_attributes=True)

    def _to_model(self, entity: EntityT) -> ModelT:
        model = self.model_class()
        self._apply(entity, model)
        return model

    def _apply(self, entity: EntityT, model: ModelT) -> None:
        """Copy entity state onto the ORM row, column by column."""
        data = entity.model_dump()
        json_data = entity.model_dump(mode="json")
        for column_attr in inspect(self.model_class).column_attrs:
            key = column_attr.key
            if key not in data:
                continue
            column_type = column_attr.columns[0].type
            value = json_data[key] if isinstance(column_type, JSON) else data[key]
            setattr(model, key, value)

    @property
    def _soft_deletable(self) -> bool:
        return hasattr(self.model_class, "is_deleted")

    def _select(self, include_deleted: bool = False) -> Select:
        stmt = select(self.model_class)
        if self._soft_deletable and not include_deleted:
            stmt = stmt.where(self.model_class.is_deleted.is_(False))
        return stmt

    def _apply_filters(self, stmt: Select, filters: Optional[Dict[str, Any]]) -> Select:
        for key, value in (filters or {}).items():
            column = getattr(self.model_class, key, None)
            if column is None:
                raise RepositoryError(
                    f"Unknown filter '{key}' for {self.resource_name}",
                    operation="list",
                    entity=self.resource_name
                )
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        return stmt

    async def _first(self, stmt: Select) -> Optional[EntityT]:
        async with self._handle_errors("query"):
            result = await self._session.execute(stmt.limit(1))
            model = result.scalars().first()
        return self._to_domain(model) if model is not None else None

    async def _all(self, stmt: Select) -> List[EntityT]:
        async with self._handle_errors("query"):
            result = await self._session.execute(stmt)
            models: Sequence[ModelT] = result.scalars().all()
        return [self._to_domain(model) for model in models]

    # =========================================================================
    # ERROR TRANSLATION
    # =========================================================================

    @asynccontextmanager
    async def _handle_errors(self, operation: str) -> AsyncGenerator[None, None]:
        """Roll back, log and translate SQLAlchemy failures."""
        try:
            yield
        except IntegrityError as e:
            await self._session.rollback()
            reason = str(e.orig)
            if any(marker in reason.lower() for marker in _UNIQUE_MARKERS):
                logger.warning(f"{self.resource_name} {operation} failed - duplicate: {reason}")
                raise DuplicateResourceError(
                    f"{self.resource_name} already exists",
                    resource_type=self.resource_name,
                    details={"reason": reason}
                ) from e
            logger.error(f"{self.resource_name} {operation} violated a constraint: {reason}")
            raise RepositoryError(
                f"Failed to {operation} {self.resource_name}: constraint violated",
                operation=operation,
                entity=self.resource_name,
                constraint=reason
            ) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during {self.resource_name} {operation}: {str(e)}")
            raise RepositoryError(
                f"Failed to {operation} {self.resource_name}: {str(e)}",
                operation=operation,
                entity=self.resource_name
            ) from e

    # =========================================================================
    # CRUD OPERATIONS
    # =========================================================================

    async def add(self, entity: EntityT) -> EntityT:
        model = self._to_model(entity)
        async with self._handle_errors("create"):
            self._session.add(model)
            await self._session.flush()
        logger.info(f"Created {self.resource_name} with ID: {entity.id}")
        return self._to_domain(model)

    async def get_by_id(self, entity_id: uuid.UUID, include_deleted: bool = False) -> Optional[EntityT]:
        stmt = self._select(include_deleted).where(self.model_class.id == entity_id)
        entity = await self._first(stmt)
        if entity is None:
            logger.debug(f"{self.resource_name} not found: {entity_id}")
        return entity

    async def get_or_raise(self, entity_id: uuid.UUID) -> EntityT:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(
                f"{self.resource_name} not found",
                resource_type=self.resource_name,
                resource_id=str(entity_id)
            )
        return entity

    async def save(self, entity: EntityT) -> EntityT:
        async with self._handle_errors("update"):
            model = await self._session.get(self.model_class, entity.id)
            if model is None:
                raise NotFoundError(
                    f"{self.resource_name} not found",
                    resource_type=self.resource_name,
                    resource_id=str(entity.id)
                )
            self._apply(entity, model)
            await self._session.flush()
        logger.debug(f"Saved {self.resource_name}: {entity.id}")
        return self._to_domain(model)

    async def soft_delete(self, entity_id: uuid.UUID) -> bool:
        if not self._soft_deletable:
            raise RepositoryError(
                f"{self.resource_name} does not support soft delete",
                operation="soft_delete",
                entity=self.resource_name
            )
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        entity.soft_delete()
        await self.save(entity)
        logger.info(f"Soft deleted {self.resource_name}: {entity_id}")
        return True

    async def delete(self, entity_id: uuid.UUID) -> bool:
        """Remove the row permanently."""
        async with self._handle_errors("delete"):
            result = await self._session.execute(
                delete(self.model_class).where(self.model_class.id == entity_id)
            )
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted {self.resource_name}: {entity_id}")
        return deleted

    async def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        limit: int = 100,
        offset: int = 0,
        include_deleted: bool = False,
        order_by: str = "-created_at"
    ) -> List[EntityT]:
        """
        List entities matching equality filters.

        Args:
            filters: Mapping of attribute name to required value
            limit: Maximum rows returned
            offset: Rows skipped
            include_deleted: Include soft deleted rows
            order_by: Attribute name, prefixed with '-' for descending
        """
        stmt = self._apply_filters(self._select(include_deleted), filters)
        column = getattr(self.model_class, order_by.lstrip("-"))
        stmt = stmt.order_by(column.desc() if order_by.startswith("-") else column.asc())
        return await self._all(stmt.offset(offset).limit(limit))

    async def count(self, filters: Optional[Dict[str, Any]] = None, include_deleted: bool = False) -> int:
        stmt = self._apply_filters(self._select(include_deleted), filters)
        async with self._handle_errors("count"):
            result = await self._session.execute(
                select(func.count()).select_from(stmt.subquery())
            )
        return int(result.scalar_one())

    async def exists(self, **filters: Any) -> bool:
        return await self.count(filters) > 0
