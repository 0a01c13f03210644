# 📄 File: marketplace/modules/reviews/domain/models/review.py
# 🧭 Purpose (Layman Explanation):
# Star ratings and comments customers leave on products, services, hotels, restaurants,
# movies and professionals, plus the provider's reply and moderation state.
# 🧪 Purpose (Technical Summary):
# Review entity targeting any rated entity through (target_type, target_id), with
# optional order/booking references, moderation status, reply and report flags.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# reviews repository (rating aggregation), reviews RatingService

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.utils.helpers import utc_now

MAX_COMMENT_LENGTH = 1000


class ReviewTargetType(str, Enum):
    """Rated entities a review can point at"""
    PRODUCT = "product"
    BULK_PRODUCT = "bulk-product"
    SERVICE = "service"
    HOTEL = "hotel"
    RESTAURANT = "restaurant"
    MENU_ITEM = "menu-item"
    CINEMA = "cinema"
    MOVIE = "movie"
    PROFILE = "profile"
    PROVIDER = "provider"


class ReviewServiceType(str, Enum):
    B2C = "b2c"
    B2B = "b2b"
    SERVICE = "service"
    RESTAURANT = "restaurant"
    HOTEL = "hotel"
    DOCTOR = "doctor"
    ADVOCATE = "advocate"
    DRIVER = "driver"
    BIKE = "bike"
    CINEMA = "cinema"
    PROPERTY = "property"


class ReviewStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ReviewReply(ValueObject):
    message: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    replied_by: Optional[uuid.UUID] = None
    replied_at: datetime = Field(default_factory=utc_now)


class Review(SoftDeletableModel):
    """
    Customer review.

    Only approved, non-deleted reviews count towards the target's rating.
    """

    user_id: uuid.UUID
    target_type: ReviewTargetType
    target_id: uuid.UUID
    target_user_id: Optional[uuid.UUID] = None
    order_id: Optional[uuid.UUID] = None
    booking_id: Optional[uuid.UUID] = None
    service_type: ReviewServiceType
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=MAX_COMMENT_LENGTH)
    likes: int = Field(0, ge=0)
    dislikes: int = Field(0, ge=0)
    reply: Optional[ReviewReply] = None
    status: ReviewStatus = ReviewStatus.APPROVED
    rejected_reason: Optional[str] = None
    is_reported: bool = False
    reported_reason: Optional[str] = None

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None

    @property
    def counts_towards_rating(self) -> bool:
        return self.status == ReviewStatus.APPROVED.value and not self.is_deleted

    def approve(self) -> None:
        self.status = ReviewStatus.APPROVED
        self.rejected_reason = None
        self.touch()

    def reject(self, reason: str) -> None:
        self.status = ReviewStatus.REJECTED
        self.rejected_reason = reason
        self.touch()

    def add_reply(self, message: str, replied_by: Optional[uuid.UUID] = None) -> None:
        """
        Attach the provider's public reply; a second call replaces the first.

        Raises:
            BusinessRuleViolationError: If the review was rejected
        """
        if self.status == ReviewStatus.REJECTED.value:
            raise BusinessRuleViolationError(
                "Cannot reply to a rejected review",
                rule="review_reply_not_rejected",
                context={"review_id": str(self.id)}
            )
        self.reply = ReviewReply(message=message.strip(), replied_by=replied_by)
        self.touch()

    def report(self, reason: str) -> None:
        self.is_reported = True
        self.reported_reason = reason
        self.touch()

    def like(self) -> None:
        self.likes += 1
        self.touch()

    def dislike(self) -> None:
        self.dislikes += 1
        self.touch()
