# 📄 File: marketplace/modules/reviews/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contract for reviews.
# 🧪 Purpose (Technical Summary):
# Exports the review repository interface.
# 🔗 Dependencies:
# review_repository.py
# 🔄 Connected Modules / Calls From:
# reviews services and infrastructure

from .review_repository import ReviewRepository

__all__ = ["ReviewRepository"]
