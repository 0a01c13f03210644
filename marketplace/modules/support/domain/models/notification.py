# 📄 File: marketplace/modules/support/domain/models/notification.py
# 🧭 Purpose (Layman Explanation):
# Messages shown to a user inside the app (and optionally sent by push, email or SMS).
# 🧪 Purpose (Technical Summary):
# Notification entity: recipient, type, deep-link action, delivery channels, priority
# and read state.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, identity UserRole
# 🔄 Connected Modules / Calls From:
# order, booking, payment and support flows

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from marketplace.modules.identity.domain.models import UserRole
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.utils.helpers import utc_now


class NotificationType(str, Enum):
    SYSTEM = "system"
    ORDER = "order"
    BOOKING = "booking"
    PAYMENT = "payment"
    WALLET = "wallet"
    COMMISSION = "commission"
    REVIEW = "review"
    SUPPORT = "support"
    PROMOTION = "promotion"


class NotificationPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class NotificationAction(ValueObject):
    """Frontend route or deep link plus any ids it needs"""
    url: Optional[str] = Field(None, max_length=500)
    data: Optional[Dict[str, Any]] = None


class NotificationChannels(ValueObject):
    in_app: bool = True
    push: bool = False
    email: bool = False
    sms: bool = False


class Notification(SoftDeletableModel):
    user_id: uuid.UUID
    role: Optional[UserRole] = None
    type: NotificationType = NotificationType.SYSTEM
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=2000)
    action: Optional[NotificationAction] = None
    channels: NotificationChannels = Field(default_factory=NotificationChannels)
    is_read: bool = False
    read_at: Optional[datetime] = None
    is_sent: bool = True
    sent_at: Optional[datetime] = Field(default_factory=utc_now)
    scheduled_at: Optional[datetime] = None
    priority: NotificationPriority = NotificationPriority.NORMAL

    @classmethod
    def schedule(cls, user_id: uuid.UUID, title: str, message: str, at: datetime, **kwargs) -> "Notification":
        """Notification held back until `at`."""
        return cls(
            user_id=user_id,
            title=title,
            message=message,
            scheduled_at=at,
            is_sent=False,
            sent_at=None,
            **kwargs
        )

    def mark_as_read(self) -> None:
        self.is_read = True
        self.read_at = utc_now()
        self.touch()

    def mark_sent(self) -> None:
        self.is_sent = True
        self.sent_at = utc_now()
        self.touch()
