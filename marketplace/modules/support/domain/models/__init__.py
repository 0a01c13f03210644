# 📄 File: marketplace/modules/support/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import the support, audit, notification, document and settings records.
# 🧪 Purpose (Technical Summary):
# Re-exports support domain entities, value objects and enums.
# 🔗 Dependencies:
# activity.py, notification.py, support_ticket.py, document.py, setting.py
# 🔄 Connected Modules / Calls From:
# support repositories and infrastructure

from .activity import (
    ActorRole,
    AdminActionType,
    AdminActivityLog,
    AdminSeverity,
    AuditActionType,
    AuditLog,
    AuditSeverity,
    ChangeSet,
)
from .document import Document, DocumentStorage, DocumentType, StorageProvider
from .notification import (
    Notification,
    NotificationAction,
    NotificationChannels,
    NotificationPriority,
    NotificationType,
)
from .setting import MASKED_VALUE, Setting, SettingEnvironment, SettingScope, SettingValueType
from .support_ticket import (
    SupportTicket,
    SupportTicketPriority,
    SupportTicketStatus,
    TicketCategory,
    TicketMessage,
)

__all__ = [
    "MASKED_VALUE",
    "ActorRole",
    "AdminActionType",
    "AdminActivityLog",
    "AdminSeverity",
    "AuditActionType",
    "AuditLog",
    "AuditSeverity",
    "ChangeSet",
    "Document",
    "DocumentStorage",
    "DocumentType",
    "Notification",
    "NotificationAction",
    "NotificationChannels",
    "NotificationPriority",
    "NotificationType",
    "Setting",
    "SettingEnvironment",
    "SettingScope",
    "SettingValueType",
    "StorageProvider",
    "SupportTicket",
    "SupportTicketPriority",
    "SupportTicketStatus",
    "TicketCategory",
    "TicketMessage",
]
