# 📄 File: marketplace/modules/reviews/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for reviews and ratings.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the reviews module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - reviews.infrastructure.database

"""
Reviews Domain Layer
"""
