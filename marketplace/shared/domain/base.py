# 📄 File: marketplace/shared/domain/base.py
# 🧭 Purpose (Layman Explanation):
# The common skeleton of every record in the marketplace: each one gets a unique id and
# remembers when it was created and last changed. Some records are "soft deleted" (hidden
# instead of erased) and some keep a star rating.
# 🧪 Purpose (Technical Summary):
# Pydantic v2 base classes for domain entities and value objects: UUID identity, UTC
# timestamps, assignment validation, ORM attribute loading, soft delete and rating cache.
# 🔗 Dependencies:
# pydantic, uuid, datetime, marketplace.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# All module domain models, generic SQLAlchemy repository (model_validate from ORM rows)

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from marketplace.shared.core.exceptions import ValidationError
from marketplace.shared.utils.helpers import round_money, utc_now


class ValueObject(BaseModel):
    """
    Base class for embedded value objects.

    Value objects have no identity of their own; they are stored inside
    their parent entity (JSON columns) and compared by value.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        from_attributes=True,
        populate_by_name=True,
    )


class DomainModel(BaseModel):
    """
    Base class for persisted domain entities.

    Every entity carries:
    - id (UUID4): Unique identifier
    - created_at (UTC datetime): Creation timestamp
    - updated_at (UTC datetime): Last modification timestamp

    Assignments are validated so field constraints (ranges, enums)
    hold after every convenience method, not only at construction.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        from_attributes=True,
        populate_by_name=True,
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        """Update the modification timestamp."""
        self.updated_at = utc_now()


class SoftDeletableModel(DomainModel):
    """Entity hidden from default reads by a deletion flag rather than removed."""

    is_deleted: bool = False

    def soft_delete(self) -> None:
        self.is_deleted = True
        self.touch()

    def restore(self) -> None:
        self.is_deleted = False
        self.touch()


class RatedModel(SoftDeletableModel):
    """
    Entity carrying a cached rating aggregate.

    The cache is written by the review aggregation (average of approved
    reviews and their count); nothing here recomputes it.
    """

    rating: float = Field(default=0, ge=0, le=5)
    rating_count: int = Field(default=0, ge=0)

    def update_rating(self, average: float, count: int) -> None:
        """
        Overwrite the rating cache.

        Args:
            average: Average rating of approved reviews
            count: Number of approved reviews
        """
        self.rating = round_money(average)
        self.rating_count = count
        self.touch()


class ListingModel(RatedModel):
    """
    Publicly listed entity (product, service, venue) that an admin approves
    before it is shown.
    """

    is_active: bool = True
    is_approved: bool = False
    approved_by: Optional[uuid.UUID] = None
    approved_at: Optional[datetime] = None
    is_featured: bool = False

    def approve(self, admin_id: uuid.UUID) -> None:
        self.is_approved = True
        self.approved_by = admin_id
        self.approved_at = utc_now()
        self.touch()

    def revoke_approval(self) -> None:
        self.is_approved = False
        self.approved_by = None
        self.approved_at = None
        self.touch()

    def set_featured(self, featured: bool = True) -> None:
        self.is_featured = featured
        self.touch()

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()


def ensure_positive(value: float, field: str = "quantity") -> None:
    """Guard for quantities and amounts passed to convenience methods."""
    if value is None or value <= 0:
        raise ValidationError(f"{field} must be greater than zero", field=field, value=value)
