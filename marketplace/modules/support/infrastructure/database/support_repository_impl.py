# 📄 File: marketplace/modules/support/infrastructure/database/support_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for the support records: audit trails, unread notification
# counts, help-desk queues, documents waiting for checks and runtime settings.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the support repository interfaces. Audit repositories
# refuse updates and deletes; SettingRepositoryImpl provides key lookup and upsert.
#
# 🔗 Dependencies:
# - support domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services (admin tooling, help desk, notification delivery)

import logging
import uuid
from typing import Any, List, Optional

from sqlalchemy import func, select, update

from marketplace.modules.support.domain.models import (
    AdminActivityLog,
    AuditLog,
    Document,
    Notification,
    Setting,
    SupportTicket,
)
from marketplace.modules.support.domain.repositories import (
    AdminActivityLogRepository,
    AuditLogRepository,
    DocumentRepository,
    NotificationRepository,
    SettingRepository,
    SupportTicketRepository,
)
from marketplace.modules.support.infrastructure.database.models import (
    AdminActivityLogModel,
    AuditLogModel,
    DocumentModel,
    NotificationModel,
    SettingModel,
    SupportTicketModel,
)
from marketplace.shared.core.exceptions import RepositoryError
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository
from marketplace.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class _AppendOnlyMixin:
    """Refuses updates and deletes for log tables."""

    resource_name: str

    async def save(self, entity):
        raise RepositoryError(
            f"{self.resource_name} entries are immutable",
            operation="update",
            entity=self.resource_name
        )

    async def delete(self, entity_id: uuid.UUID) -> bool:
        raise RepositoryError(
            f"{self.resource_name} entries cannot be deleted",
            operation="delete",
            entity=self.resource_name
        )


class AuditLogRepositoryImpl(_AppendOnlyMixin, SQLAlchemyRepository[AuditLog, AuditLogModel], AuditLogRepository):

    entity_class = AuditLog
    model_class = AuditLogModel
    resource_name = "AuditLog"

    async def list_for_entity(self, entity_type: str, entity_id: uuid.UUID) -> List[AuditLog]:
        stmt = (
            self._select()
            .where(AuditLogModel.entity_type == entity_type, AuditLogModel.entity_id == entity_id)
            .order_by(AuditLogModel.occurred_at.desc())
        )
        return await self._all(stmt)

    async def list_by_actor(self, actor_id: uuid.UUID, limit: int = 50) -> List[AuditLog]:
        stmt = (
            self._select()
            .where(AuditLogModel.actor_id == actor_id)
            .order_by(AuditLogModel.occurred_at.desc())
            .limit(limit)
        )
        return await self._all(stmt)


class AdminActivityLogRepositoryImpl(
    _AppendOnlyMixin,
    SQLAlchemyRepository[AdminActivityLog, AdminActivityLogModel],
    AdminActivityLogRepository
):

    entity_class = AdminActivityLog
    model_class = AdminActivityLogModel
    resource_name = "AdminActivityLog"

    async def list_by_admin(self, admin_id: uuid.UUID, limit: int = 50) -> List[AdminActivityLog]:
        stmt = (
            self._select()
            .where(AdminActivityLogModel.admin_id == admin_id)
            .order_by(AdminActivityLogModel.created_at.desc())
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_entity(self, entity_type: str, entity_id: uuid.UUID) -> List[AdminActivityLog]:
        stmt = (
            self._select()
            .where(
                AdminActivityLogModel.entity_type == entity_type,
                AdminActivityLogModel.entity_id == entity_id,
            )
            .order_by(AdminActivityLogModel.created_at.desc())
        )
        return await self._all(stmt)


class NotificationRepositoryImpl(SQLAlchemyRepository[Notification, NotificationModel], NotificationRepository):

    entity_class = Notification
    model_class = NotificationModel
    resource_name = "Notification"

    async def list_for_user(self, user_id: uuid.UUID, unread_only: bool = False, limit: int = 50) -> List[Notification]:
        stmt = self._select().where(NotificationModel.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read.is_(False))
        return await self._all(stmt.order_by(NotificationModel.created_at.desc()).limit(limit))

    async def count_unread(self, user_id: uuid.UUID) -> int:
        stmt = (
            select(func.count(NotificationModel.id))
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
                NotificationModel.is_deleted.is_(False),
            )
        )
        async with self._handle_errors("count"):
            result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def mark_all_read(self, user_id: uuid.UUID) -> int:
        now = utc_now()
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
                NotificationModel.is_deleted.is_(False),
            )
            .values(is_read=True, read_at=now, updated_at=now)
        )
        async with self._handle_errors("update"):
            result = await self._session.execute(stmt)
        logger.info(f"Marked {result.rowcount} notifications read for user {user_id}")
        return result.rowcount


class SupportTicketRepositoryImpl(SQLAlchemyRepository[SupportTicket, SupportTicketModel], SupportTicketRepository):

    entity_class = SupportTicket
    model_class = SupportTicketModel
    resource_name = "SupportTicket"

    async def list_by_user(self, user_id: uuid.UUID) -> List[SupportTicket]:
        stmt = self._select().where(SupportTicketModel.user_id == user_id).order_by(SupportTicketModel.created_at.desc())
        return await self._all(stmt)

    async def list_assigned(self, staff_id: uuid.UUID, status: Optional[str] = None) -> List[SupportTicket]:
        stmt = self._select().where(SupportTicketModel.assigned_to == staff_id)
        if status:
            stmt = stmt.where(SupportTicketModel.status == status)
        return await self._all(stmt.order_by(SupportTicketModel.created_at))


class DocumentRepositoryImpl(SQLAlchemyRepository[Document, DocumentModel], DocumentRepository):

    entity_class = Document
    model_class = DocumentModel
    resource_name = "Document"

    async def list_by_user(self, user_id: uuid.UUID, type: Optional[str] = None) -> List[Document]:
        stmt = self._select().where(DocumentModel.user_id == user_id)
        if type:
            stmt = stmt.where(DocumentModel.type == type)
        return await self._all(stmt.order_by(DocumentModel.created_at.desc()))

    async def list_pending_verification(self, limit: int = 100) -> List[Document]:
        # verification lives in JSON; filtered after loading active documents
        stmt = self._select().where(DocumentModel.is_active.is_(True)).order_by(DocumentModel.created_at)
        documents = await self._all(stmt)
        pending = [
            document for document in documents
            if not document.verification.is_verified and not document.verification.rejected_reason
        ]
        return pending[:limit]


class SettingRepositoryImpl(SQLAlchemyRepository[Setting, SettingModel], SettingRepository):

    entity_class = Setting
    model_class = SettingModel
    resource_name = "Setting"

    async def get_by_key(self, key: str) -> Optional[Setting]:
        return await self._first(self._select().where(SettingModel.key == key.strip()))

    async def get_value(self, key: str, default: Any = None) -> Any:
        stmt = self._select().where(SettingModel.key == key.strip(), SettingModel.is_active.is_(True))
        setting = await self._first(stmt)
        return setting.value if setting is not None else default

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
        """
        Upsert by key.

        A soft deleted setting with the same key is revived, since keys are
        unique across deleted rows too.
        """
        key = key.strip()
        fields = {
            "value": value,
            "value_type": value_type,
            "module": module,
            "scope": scope,
            "environment": environment,
            "updated_by": updated_by,
            "updated_at_by_admin": utc_now(),
            "description": description,
            "is_sensitive": is_sensitive,
            "is_active": True,
        }

        existing = await self._first(self._select(include_deleted=True).where(SettingModel.key == key))
        if existing is None:
            logger.info(f"Creating setting: {key}")
            return await self.add(Setting(key=key, **fields))

        payload = existing.model_dump()
        payload.update(fields, is_deleted=False)
        updated = Setting.model_validate(payload)
        updated.touch()
        logger.info(f"Updating setting: {key}")
        return await self.save(updated)

    async def list_for_module(self, module: str) -> List[Setting]:
        stmt = (
            self._select()
            .where(SettingModel.module == module, SettingModel.is_active.is_(True))
            .order_by(SettingModel.key)
        )
        return await self._all(stmt)
