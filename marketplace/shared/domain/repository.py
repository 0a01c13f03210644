# 📄 File: marketplace/shared/domain/repository.py
# 🧭 Purpose (Layman Explanation):
# The basic promise every storage class makes: it can add a record, find it by id, save
# changes, hide it (soft delete) and list records.
# 🧪 Purpose (Technical Summary):
# Generic repository interface (ABC) parameterised by the domain entity type, extended by
# each module's repository interfaces and implemented by the SQLAlchemy base repository.
# 🔗 Dependencies:
# abc, typing, uuid
# 🔄 Connected Modules / Calls From:
# modules/*/domain/repositories, shared/infrastructure/database/repository.py

import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from marketplace.shared.domain.base import DomainModel

EntityT = TypeVar("EntityT", bound=DomainModel)


class BaseRepository(ABC, Generic[EntityT]):
    """
    Repository interface shared by all entities.

    Implementation Notes:
    - Methods return domain entities, not database models
    - All operations are async for non-blocking I/O
    - Writes flush but never commit; the session owner commits
    """

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """
        Persist a new entity.

        Raises:
            DuplicateResourceError: If a unique constraint is violated
            RepositoryError: If the database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID, include_deleted: bool = False) -> Optional[EntityT]:
        """Get entity by ID, or None when missing (or soft deleted)."""
        pass

    @abstractmethod
    async def get_or_raise(self, entity_id: uuid.UUID) -> EntityT:
        """
        Get entity by ID.

        Raises:
            NotFoundError: If the entity does not exist
        """
        pass

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """Write the entity's current state over the stored row."""
        pass

    @abstractmethod
    async def soft_delete(self, entity_id: uuid.UUID) -> bool:
        """Flag the entity as deleted. Returns False when it does not exist."""
        pass

    @abstractmethod
    async def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        limit: int = 100,
        offset: int = 0,
        include_deleted: bool = False
    ) -> List[EntityT]:
        """List entities matching equality filters."""
        pass

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None, include_deleted: bool = False) -> int:
        pass
