# 📄 File: marketplace/modules/support/domain/models/activity.py
# 🧭 Purpose (Layman Explanation):
# The platform's diary: who did what to which record and when, kept separately for
# everyone (audit log) and for admins (admin activity log, with before/after changes).
# 🧪 Purpose (Technical Summary):
# Append-only AuditLog and AdminActivityLog entities with record() factories. Entries are
# frozen and stamped with the request id from the current logging context.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# every module that needs an audit trail, admin tooling

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, field_validator

from marketplace.shared.domain.base import DomainModel, ValueObject
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.logging import request_id_var


def _current_request_id() -> Optional[str]:
    return request_id_var.get("") or None


class ActorRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SYSTEM = "system"


class AuditActionType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LOGIN = "login"
    LOGOUT = "logout"
    PAYMENT = "payment"
    SYSTEM = "system"
    OTHER = "other"


class AuditSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditLog(DomainModel):
    """
    Audit trail entry; never edited.

    actor_id is None for system jobs and webhooks.
    """

    model_config = ConfigDict(frozen=True)

    actor_id: Optional[uuid.UUID] = None
    actor_role: ActorRole = ActorRole.SYSTEM
    action: str = Field(min_length=1, max_length=100)
    action_type: AuditActionType = AuditActionType.OTHER
    entity_type: Optional[str] = Field(None, max_length=60)
    entity_id: Optional[uuid.UUID] = None
    details: Optional[Dict[str, Any]] = None
    ip_address: Optional[str] = Field(None, max_length=45)
    user_agent: Optional[str] = Field(None, max_length=500)
    request_id: Optional[str] = None
    severity: AuditSeverity = AuditSeverity.INFO
    module: Optional[str] = Field(None, max_length=40)
    occurred_at: datetime = Field(default_factory=utc_now)

    @field_validator("action")
    @classmethod
    def normalize_action(cls, v: str) -> str:
        # USER_LOGIN, PAYMENT_SUCCESS, BOOKING_CANCELLED
        return v.strip().upper().replace(" ", "_")

    @classmethod
    def record(
        cls,
        action: str,
        actor_id: Optional[uuid.UUID] = None,
        actor_role: Optional[ActorRole] = None,
        action_type: AuditActionType = AuditActionType.OTHER,
        entity_type: Optional[str] = None,
        entity_id: Optional[uuid.UUID] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: AuditSeverity = AuditSeverity.INFO,
        module: Optional[str] = None,
        **kwargs
    ) -> "AuditLog":
        if actor_role is None:
            actor_role = ActorRole.USER if actor_id else ActorRole.SYSTEM
        return cls(
            actor_id=actor_id,
            actor_role=actor_role,
            action=action,
            action_type=action_type,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
            severity=severity,
            module=module,
            request_id=kwargs.pop("request_id", None) or _current_request_id(),
            **kwargs
        )


# =============================================================================
# ADMIN ACTIVITY
# =============================================================================

class AdminActionType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    APPROVE = "approve"
    REJECT = "reject"
    BLOCK = "block"
    UNBLOCK = "unblock"
    REFUND = "refund"
    OTHER = "other"


class AdminSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ChangeSet(ValueObject):
    before: Optional[Dict[str, Any]] = None
    after: Optional[Dict[str, Any]] = None

    def changed_fields(self) -> list:
        before = self.before or {}
        after = self.after or {}
        return sorted(key for key in set(before) | set(after) if before.get(key) != after.get(key))


class AdminActivityLog(DomainModel):
    model_config = ConfigDict(frozen=True)

    admin_id: uuid.UUID
    action: str = Field(min_length=1, max_length=100)
    action_type: AdminActionType = AdminActionType.OTHER
    entity_type: str = Field(min_length=1, max_length=60)
    entity_id: Optional[uuid.UUID] = None
    changes: ChangeSet = Field(default_factory=ChangeSet)
    ip_address: Optional[str] = Field(None, max_length=45)
    user_agent: Optional[str] = Field(None, max_length=500)
    request_id: Optional[str] = None
    reason: Optional[str] = None
    module: Optional[str] = Field(None, max_length=40)
    severity: AdminSeverity = AdminSeverity.LOW

    @field_validator("action")
    @classmethod
    def normalize_action(cls, v: str) -> str:
        return v.strip().upper().replace(" ", "_")

    @classmethod
    def record(
        cls,
        admin_id: uuid.UUID,
        action: str,
        entity_type: str,
        entity_id: Optional[uuid.UUID] = None,
        action_type: AdminActionType = AdminActionType.OTHER,
        before: Optional[Dict[str, Any]] = None,
        after: Optional[Dict[str, Any]] = None,
        reason: Optional[str] = None,
        severity: AdminSeverity = AdminSeverity.LOW,
        **kwargs
    ) -> "AdminActivityLog":
        return cls(
            admin_id=admin_id,
            action=action,
            action_type=action_type,
            entity_type=entity_type,
            entity_id=entity_id,
            changes=ChangeSet(before=before, after=after),
            reason=reason,
            severity=severity,
            request_id=kwargs.pop("request_id", None) or _current_request_id(),
            **kwargs
        )
