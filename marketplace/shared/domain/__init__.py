# 📄 File: marketplace/shared/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The common shape every marketplace record shares: an id, creation and update times,
# and the basic save/load contract.
# 🧪 Purpose (Technical Summary):
# Shared domain kernel exporting base entity classes, value objects and the generic repository ABC.
# 🔗 Dependencies:
# base.py, value_objects.py, repository.py
# 🔄 Connected Modules / Calls From:
# Every module's domain models and repository interfaces

from .base import (
    DomainModel,
    ListingModel,
    RatedModel,
    SoftDeletableModel,
    ValueObject,
    ensure_positive,
)
from .repository import BaseRepository

__all__ = [
    "BaseRepository",
    "DomainModel",
    "ListingModel",
    "RatedModel",
    "SoftDeletableModel",
    "ValueObject",
    "ensure_positive",
]
