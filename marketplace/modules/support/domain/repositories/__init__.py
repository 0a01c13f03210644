# 📄 File: marketplace/modules/support/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for support and platform records.
# 🧪 Purpose (Technical Summary):
# Exports support repository interfaces.
# 🔗 Dependencies:
# support_repository.py
# 🔄 Connected Modules / Calls From:
# support infrastructure

from .support_repository import (
    AdminActivityLogRepository,
    AuditLogRepository,
    DocumentRepository,
    NotificationRepository,
    SettingRepository,
    SupportTicketRepository,
)

__all__ = [
    "AdminActivityLogRepository",
    "AuditLogRepository",
    "DocumentRepository",
    "NotificationRepository",
    "SettingRepository",
    "SupportTicketRepository",
]
