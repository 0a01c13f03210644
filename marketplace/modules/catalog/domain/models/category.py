# 📄 File: marketplace/modules/catalog/domain/models/category.py
# 🧭 Purpose (Layman Explanation):
# The folders that products and services are sorted into, like "Electronics > Phones".
# 🧪 Purpose (Technical Summary):
# Category domain model: typed category tree (parent link) with generated slug.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# products, services, bulk products, catalog repositories

import uuid
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from marketplace.shared.domain.base import SoftDeletableModel
from marketplace.shared.utils.helpers import generate_slug


class CategoryType(str, Enum):
    B2C = "b2c"
    B2B = "b2b"
    HOME_SERVICE = "home-service"
    SERVICE = "service"
    RESTAURANT_MENU = "restaurant-menu"


class Category(SoftDeletableModel):
    """Node of a category tree; roots have no parent."""

    name: str = Field(min_length=1, max_length=120)
    slug: str = Field(min_length=1, max_length=140)
    type: CategoryType
    parent_id: Optional[uuid.UUID] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True

    @classmethod
    def create(cls, name: str, type: CategoryType, parent_id: Optional[uuid.UUID] = None, **kwargs: Any) -> "Category":
        return cls(name=name, slug=kwargs.pop("slug", None) or generate_slug(name), type=type, parent_id=parent_id, **kwargs)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def move_under(self, parent_id: Optional[uuid.UUID]) -> None:
        if parent_id == self.id:
            raise ValueError("A category cannot be its own parent")
        self.parent_id = parent_id
        self.touch()
