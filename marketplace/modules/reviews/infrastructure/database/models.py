# 📄 File: marketplace/modules/reviews/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how reviews are stored as a table.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for reviews: polymorphic (target_type, target_id) reference
# without a foreign key, rating guarded to 1-5, indexes for per-target aggregation.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - review_repository_impl.py
# - migrations

from sqlalchemy import Boolean, CheckConstraint, Column, Index, Integer, String

from marketplace.modules.reviews.domain.models import ReviewServiceType, ReviewStatus, ReviewTargetType
from marketplace.shared.infrastructure.database.base import DatabaseBase, SoftDeleteMixin, TimestampMixin
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    UUIDType,
    enum_check,
    enum_column,
    foreign_key,
)


class ReviewModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "reviews"
    __table_args__ = (
        enum_check("target_type", ReviewTargetType),
        enum_check("service_type", ReviewServiceType),
        enum_check("status", ReviewStatus),
        CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
        Index("ix_reviews_target_type_target_id_status", "target_type", "target_id", "status"),
        Index("ix_reviews_target_user_id_rating", "target_user_id", "rating"),
        Index("ix_reviews_service_type_created_at", "service_type", "created_at"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE")
    target_type = enum_column(ReviewTargetType)
    target_id = Column(UUIDType, nullable=False)
    target_user_id = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    order_id = foreign_key("orders.id", ondelete="SET NULL", nullable=True)
    booking_id = foreign_key("bookings.id", ondelete="SET NULL", nullable=True)
    service_type = enum_column(ReviewServiceType)
    rating = Column(Integer, nullable=False)
    comment = Column(String(1000), nullable=True)
    likes = Column(Integer, nullable=False, default=0)
    dislikes = Column(Integer, nullable=False, default=0)
    reply = Column(JSONType, nullable=True, comment="{message, replied_by, replied_at}")
    status = enum_column(ReviewStatus, default=ReviewStatus.APPROVED, index=True)
    rejected_reason = Column(String(500), nullable=True)
    is_reported = Column(Boolean, nullable=False, default=False, index=True)
    reported_reason = Column(String(500), nullable=True)
