# 📄 File: marketplace/modules/providers/domain/models/provider.py
# 🧭 Purpose (Layman Explanation):
# What every professional or seller profile has in common: it belongs to one account, shows
# a star rating, and has to be checked by an admin before it is trusted.
# 🧪 Purpose (Technical Summary):
# Base domain classes for role-specific profiles: one-to-one user link, rating cache,
# verification block with verify/reject, and an onboarding status for seller and
# home-service profiles.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# professional.py, driver.py, business.py, providers repositories

import uuid
from enum import Enum
from typing import Any, ClassVar

from pydantic import Field

from marketplace.shared.domain.base import RatedModel
from marketplace.shared.domain.value_objects import Verification
from marketplace.shared.utils.helpers import generate_slug


class OnboardingStatus(str, Enum):
    """Seller / home-service onboarding status"""
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"


class ProviderProfile(RatedModel):
    """
    One-to-one extension of a User for a specific vertical.

    Subclasses name the field holding their public name in
    ``display_field``; profiles with a ``slug`` get one generated from it.
    """

    display_field: ClassVar[str] = "full_name"

    user_id: uuid.UUID
    verification: Verification = Field(default_factory=Verification)
    is_active: bool = True

    @classmethod
    def create(cls, user_id: uuid.UUID, **data: Any) -> "ProviderProfile":
        if "slug" in cls.model_fields and not data.get("slug"):
            data["slug"] = generate_slug(str(data.get(cls.display_field, "")))
        return cls(user_id=user_id, **data)

    @property
    def display_name(self) -> str:
        return getattr(self, self.display_field)

    @property
    def is_verified(self) -> bool:
        return self.verification.is_verified

    def verify(self, admin_id: uuid.UUID) -> None:
        self.verification = Verification.approved(admin_id)
        self.touch()

    def reject(self, reason: str) -> None:
        self.verification = Verification.rejected(reason)
        self.touch()

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()


class OnboardedProviderProfile(ProviderProfile):
    """Profile whose onboarding status follows verification."""

    status: OnboardingStatus = OnboardingStatus.PENDING

    def verify(self, admin_id: uuid.UUID) -> None:
        self.status = OnboardingStatus.ACTIVE
        super().verify(admin_id)

    def reject(self, reason: str) -> None:
        self.status = OnboardingStatus.REJECTED
        super().reject(reason)
