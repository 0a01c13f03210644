# 📄 File: marketplace/modules/services/domain/models/booking_status_log.py
# 🧭 Purpose (Layman Explanation):
# A permanent history line written each time a home-service booking changes status:
# from what, to what, who did it and why.
# 🧪 Purpose (Technical Summary):
# Immutable BookingStatusLog entry with previous/new BookingStatus, the acting party
# and request metadata. Entries are append-only.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# BookingStatusService, services repositories

import uuid
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from marketplace.shared.domain.base import DomainModel, ValueObject

from .booking import BookingActor, BookingStatus


class ChangeSource(str, Enum):
    WEB = "web"
    ANDROID = "android"
    IOS = "ios"
    API = "api"


class ChangeMeta(ValueObject):
    ip_address: Optional[str] = Field(None, max_length=45)
    user_agent: Optional[str] = Field(None, max_length=500)
    source: ChangeSource = ChangeSource.API


class BookingStatusLog(DomainModel):
    """Status change of a booking. Entries are never edited or deleted."""

    model_config = ConfigDict(frozen=True)

    booking_id: uuid.UUID
    previous_status: Optional[BookingStatus] = None
    new_status: BookingStatus
    changed_by: BookingActor
    user_id: Optional[uuid.UUID] = None
    reason: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = Field(None, max_length=1000)
    meta: ChangeMeta = Field(default_factory=ChangeMeta)
