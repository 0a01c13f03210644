# 📄 File: marketplace/modules/support/domain/models/support_ticket.py
# 🧭 Purpose (Layman Explanation):
# Help-desk conversations: a user raises an issue, staff reply, and the ticket moves
# from open to resolved and closed.
# 🧪 Purpose (Technical Summary):
# SupportTicket entity with an embedded message thread, assignment, status stamps and
# optional satisfaction rating.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, identity UserRole
# 🔄 Connected Modules / Calls From:
# customer/provider help flows, admin support tooling

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from marketplace.modules.identity.domain.models import UserRole
from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.utils.helpers import utc_now


class TicketCategory(str, Enum):
    GENERAL = "general"
    ORDER = "order"
    BOOKING = "booking"
    PAYMENT = "payment"
    WALLET = "wallet"
    SUBSCRIPTION = "subscription"
    TECHNICAL = "technical"
    OTHER = "other"


class SupportTicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    WAITING = "waiting"
    RESOLVED = "resolved"
    CLOSED = "closed"


class SupportTicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TicketMessage(ValueObject):
    sender_id: uuid.UUID
    message: str = Field(min_length=1, max_length=5000)
    attachments: List[uuid.UUID] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)


class SupportTicket(SoftDeletableModel):
    user_id: uuid.UUID
    assigned_to: Optional[uuid.UUID] = None
    role: UserRole
    category: TicketCategory = TicketCategory.GENERAL
    order_id: Optional[uuid.UUID] = None
    booking_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    subject: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    attachments: List[uuid.UUID] = Field(default_factory=list)
    messages: List[TicketMessage] = Field(default_factory=list)
    status: SupportTicketStatus = SupportTicketStatus.OPEN
    priority: SupportTicketPriority = SupportTicketPriority.MEDIUM
    first_response_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    feedback: Optional[str] = None

    def add_message(
        self,
        sender_id: uuid.UUID,
        message: str,
        attachments: Optional[List[uuid.UUID]] = None
    ) -> TicketMessage:
        """
        Append a message to the thread.

        The first message on the ticket stamps first_response_at.

        Raises:
            BusinessRuleViolationError: If the ticket is closed
        """
        if self.status == SupportTicketStatus.CLOSED.value:
            raise BusinessRuleViolationError(
                "Cannot add messages to a closed ticket",
                rule="ticket_closed",
                context={"ticket_id": str(self.id)}
            )
        entry = TicketMessage(sender_id=sender_id, message=message, attachments=attachments or [])
        self.messages = [*self.messages, entry]
        if self.first_response_at is None:
            self.first_response_at = entry.created_at
        self.touch()
        return entry

    def assign(self, staff_id: uuid.UUID) -> None:
        self.assigned_to = staff_id
        if self.status == SupportTicketStatus.OPEN.value:
            self.status = SupportTicketStatus.IN_PROGRESS
        self.touch()

    def mark_waiting(self) -> None:
        self.status = SupportTicketStatus.WAITING
        self.touch()

    def resolve(self) -> None:
        self.status = SupportTicketStatus.RESOLVED
        self.resolved_at = utc_now()
        self.touch()

    def close(self, rating: Optional[int] = None, feedback: Optional[str] = None) -> None:
        self.status = SupportTicketStatus.CLOSED
        self.closed_at = utc_now()
        if rating is not None:
            self.rating = rating
        if feedback is not None:
            self.feedback = feedback
        self.touch()

    def reopen(self) -> None:
        self.status = SupportTicketStatus.OPEN
        self.resolved_at = None
        self.closed_at = None
        self.touch()
