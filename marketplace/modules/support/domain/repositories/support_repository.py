# 📄 File: marketplace/modules/support/domain/repositories/support_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how audit entries, notifications, help-desk tickets, documents and settings
# are looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for support entities on top of the shared BaseRepository,
# including the settings key/value accessors.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, support domain models
# 🔄 Connected Modules / Calls From:
# support infrastructure implementations

import uuid
from abc import abstractmethod
from typing import Any, List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import AdminActivityLog, AuditLog, Document, Notification, Setting, SupportTicket


class AuditLogRepository(BaseRepository[AuditLog]):

    @abstractmethod
    async def list_for_entity(self, entity_type: str, entity_id: uuid.UUID) -> List[AuditLog]:
        pass

    @abstractmethod
    async def list_by_actor(self, actor_id: uuid.UUID, limit: int = 50) -> List[AuditLog]:
        pass


class AdminActivityLogRepository(BaseRepository[AdminActivityLog]):

    @abstractmethod
    async def list_by_admin(self, admin_id: uuid.UUID, limit: int = 50) -> List[AdminActivityLog]:
        pass

    @abstractmethod
    async def list_for_entity(self, entity_type: str, entity_id: uuid.UUID) -> List[AdminActivityLog]:
        pass


class NotificationRepository(BaseRepository[Notification]):

    @abstractmethod
    async def list_for_user(self, user_id: uuid.UUID, unread_only: bool = False, limit: int = 50) -> List[Notification]:
        pass

    @abstractmethod
    async def count_unread(self, user_id: uuid.UUID) -> int:
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: uuid.UUID) -> int:
        """Mark every unread notification of a user as read; returns how many changed."""
        pass


class SupportTicketRepository(BaseRepository[SupportTicket]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID) -> List[SupportTicket]:
        pass

    @abstractmethod
    async def list_assigned(self, staff_id: uuid.UUID, status: Optional[str] = None) -> List[SupportTicket]:
        pass


class DocumentRepository(BaseRepository[Document]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, type: Optional[str] = None) -> List[Document]:
        pass

    @abstractmethod
    async def list_pending_verification(self, limit: int = 100) -> List[Document]:
        pass


class SettingRepository(BaseRepository[Setting]):

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[Setting]:
        pass

    @abstractmethod
    async def get_value(self, key: str, default: Any = None) -> Any:
        """Value of an active, non-deleted setting, or default."""
        pass

    @abstractmethod
    async def set_value(
        self,
        key: str,
        value: Any,
        value_type: Optional[str] = None,
        module: Optional[str] = None,
        scope: str = "global",
        environment: str = "prod",
        updated_by: Optional[uuid.UUID] = None,
        description: Optional[str] = None,
        is_sensitive: bool = False
    ) -> Setting:
        """Create or replace the setting stored under key and mark it active."""
        pass

    @abstractmethod
    async def list_for_module(self, module: str) -> List[Setting]:
        pass
