# 📄 File: marketplace/modules/reviews/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import review records from.
# 🧪 Purpose (Technical Summary):
# Re-exports the review entity and its enums.
# 🔗 Dependencies:
# review.py
# 🔄 Connected Modules / Calls From:
# reviews repositories, services and infrastructure

from .review import (
    MAX_COMMENT_LENGTH,
    Review,
    ReviewReply,
    ReviewServiceType,
    ReviewStatus,
    ReviewTargetType,
)

__all__ = [
    "MAX_COMMENT_LENGTH",
    "Review",
    "ReviewReply",
    "ReviewServiceType",
    "ReviewStatus",
    "ReviewTargetType",
]
