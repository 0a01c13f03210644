# 📄 File: marketplace/modules/reviews/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rule that keeps star averages up to date.
# 🧪 Purpose (Technical Summary):
# Exports the rating aggregation service.
# 🔗 Dependencies:
# rating_service.py
# 🔄 Connected Modules / Calls From:
# embedding application services, tests

from .rating_service import RatingService

__all__ = ["RatingService"]
