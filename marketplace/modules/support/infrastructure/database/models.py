# 📄 File: marketplace/modules/support/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how audit entries, admin actions, notifications, help-desk tickets, uploaded
# documents and runtime settings are stored as tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the support module. Audit tables are append-only (no soft
# delete); setting keys are unique; JSON columns hold message threads, storage info,
# verification and setting values.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - support_repository_impl.py
# - migrations

from sqlalchemy import BigInteger, Boolean, Column, Index, Integer, String, Text

from marketplace.modules.identity.domain.models import UserRole
from marketplace.modules.support.domain.models import (
    ActorRole,
    AdminActionType,
    AdminSeverity,
    AuditActionType,
    AuditSeverity,
    DocumentType,
    NotificationPriority,
    NotificationType,
    SettingEnvironment,
    SettingScope,
    SettingValueType,
    SupportTicketPriority,
    SupportTicketStatus,
    TicketCategory,
)
from marketplace.shared.infrastructure.database.base import DatabaseBase, SoftDeleteMixin, TimestampMixin
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    UTCDateTime,
    UUIDType,
    enum_check,
    enum_column,
    foreign_key,
)


class AuditLogModel(TimestampMixin, DatabaseBase):
    __tablename__ = "audit_logs"
    __table_args__ = (
        enum_check("actor_role", ActorRole),
        enum_check("action_type", AuditActionType),
        enum_check("severity", AuditSeverity),
        Index("ix_audit_logs_actor_id_occurred_at", "actor_id", "occurred_at"),
        Index("ix_audit_logs_entity_type_entity_id", "entity_type", "entity_id"),
        Index("ix_audit_logs_module_action_type", "module", "action_type"),
        Index("ix_audit_logs_severity_occurred_at", "severity", "occurred_at"),
    )

    actor_id = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    actor_role = enum_column(ActorRole, default=ActorRole.SYSTEM)
    action = Column(String(100), nullable=False, index=True)
    action_type = enum_column(AuditActionType, default=AuditActionType.OTHER)
    entity_type = Column(String(60), nullable=True)
    entity_id = Column(UUIDType, nullable=True)
    details = Column(JSONType, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    request_id = Column(String(64), nullable=True)
    severity = enum_column(AuditSeverity, default=AuditSeverity.INFO)
    module = Column(String(40), nullable=True)
    occurred_at = Column(UTCDateTime, nullable=False)


class AdminActivityLogModel(TimestampMixin, DatabaseBase):
    __tablename__ = "admin_activity_logs"
    __table_args__ = (
        enum_check("action_type", AdminActionType),
        enum_check("severity", AdminSeverity),
        Index("ix_admin_activity_logs_admin_id_created_at", "admin_id", "created_at"),
        Index("ix_admin_activity_logs_entity_type_entity_id", "entity_type", "entity_id"),
        Index("ix_admin_activity_logs_module_action_type", "module", "action_type"),
        Index("ix_admin_activity_logs_severity_created_at", "severity", "created_at"),
    )

    admin_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    action = Column(String(100), nullable=False, index=True)
    action_type = enum_column(AdminActionType, default=AdminActionType.OTHER)
    entity_type = Column(String(60), nullable=False)
    entity_id = Column(UUIDType, nullable=True)
    changes = Column(JSONType, nullable=False, default=dict, comment="{before, after}")
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    request_id = Column(String(64), nullable=True)
    reason = Column(Text, nullable=True)
    module = Column(String(40), nullable=True)
    severity = enum_column(AdminSeverity, default=AdminSeverity.LOW)


class NotificationModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "notifications"
    __table_args__ = (
        enum_check("role", UserRole),
        enum_check("type", NotificationType),
        enum_check("priority", NotificationPriority),
        Index("ix_notifications_user_id_is_read_created_at", "user_id", "is_read", "created_at"),
        Index("ix_notifications_role_type", "role", "type"),
        Index("ix_notifications_scheduled_at", "scheduled_at"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    role = enum_column(UserRole, nullable=True)
    type = enum_column(NotificationType, default=NotificationType.SYSTEM)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    action = Column(JSONType, nullable=True, comment="{url, data}")
    channels = Column(JSONType, nullable=False, default=dict, comment="{in_app, push, email, sms}")
    is_read = Column(Boolean, nullable=False, default=False)
    read_at = Column(UTCDateTime, nullable=True)
    is_sent = Column(Boolean, nullable=False, default=True)
    sent_at = Column(UTCDateTime, nullable=True)
    scheduled_at = Column(UTCDateTime, nullable=True)
    priority = enum_column(NotificationPriority, default=NotificationPriority.NORMAL)


class SupportTicketModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "support_tickets"
    __table_args__ = (
        enum_check("role", UserRole),
        enum_check("category", TicketCategory),
        enum_check("status", SupportTicketStatus),
        enum_check("priority", SupportTicketPriority),
        Index("ix_support_tickets_status_priority", "status", "priority"),
        Index("ix_support_tickets_role_created_at", "role", "created_at"),
        Index("ix_support_tickets_assigned_to_status", "assigned_to", "status"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE")
    assigned_to = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    role = enum_column(UserRole)
    category = enum_column(TicketCategory, default=TicketCategory.GENERAL)
    order_id = foreign_key("orders.id", ondelete="SET NULL", nullable=True)
    booking_id = foreign_key("bookings.id", ondelete="SET NULL", nullable=True)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True)
    subject = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    attachments = Column(JSONType, nullable=False, default=list, comment="[document_id]")
    messages = Column(JSONType, nullable=False, default=list,
                      comment="[{sender_id, message, attachments, created_at}]")
    status = enum_column(SupportTicketStatus, default=SupportTicketStatus.OPEN)
    priority = enum_column(SupportTicketPriority, default=SupportTicketPriority.MEDIUM)
    first_response_at = Column(UTCDateTime, nullable=True)
    resolved_at = Column(UTCDateTime, nullable=True)
    closed_at = Column(UTCDateTime, nullable=True)
    rating = Column(Integer, nullable=True)
    feedback = Column(Text, nullable=True)


class DocumentModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "documents"
    __table_args__ = (
        enum_check("role", UserRole),
        enum_check("type", DocumentType),
        Index("ix_documents_user_id_type", "user_id", "type"),
        Index("ix_documents_type_created_at", "type", "created_at"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    role = enum_column(UserRole, nullable=True)
    type = enum_column(DocumentType, default=DocumentType.OTHER)
    file_name = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=True)
    mime_type = Column(String(100), nullable=False, index=True)
    size = Column(BigInteger, nullable=False)
    storage = Column(JSONType, nullable=False, comment="{provider, url, public_id, bucket, key}")
    order_id = foreign_key("orders.id", ondelete="SET NULL", nullable=True, index=False)
    booking_id = foreign_key("bookings.id", ondelete="SET NULL", nullable=True, index=False)
    support_ticket_id = foreign_key("support_tickets.id", ondelete="SET NULL", nullable=True, index=False)
    product_id = foreign_key("products.id", ondelete="SET NULL", nullable=True, index=False)
    verification = Column(JSONType, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True, index=True)


class SettingModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "settings"
    __table_args__ = (
        enum_check("value_type", SettingValueType),
        enum_check("scope", SettingScope),
        enum_check("environment", SettingEnvironment),
        Index("ix_settings_module_is_active", "module", "is_active"),
        Index("ix_settings_scope_environment", "scope", "environment"),
    )

    key = Column(String(150), nullable=False, unique=True, index=True)
    value = Column(JSONType, nullable=False)
    value_type = enum_column(SettingValueType)
    module = Column(String(40), nullable=True)
    scope = enum_column(SettingScope, default=SettingScope.GLOBAL)
    environment = enum_column(SettingEnvironment, default=SettingEnvironment.PROD)
    is_active = Column(Boolean, nullable=False, default=True)
    is_sensitive = Column(Boolean, nullable=False, default=False)
    updated_by = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    updated_at_by_admin = Column(UTCDateTime, nullable=True)
    description = Column(Text, nullable=True)
