# 📄 File: marketplace/modules/providers/domain/repositories/provider_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how professional and seller profiles are looked up, mostly "the profile of this user".
# 🧪 Purpose (Technical Summary):
# Generic provider profile repository interface plus typed aliases per profile, with
# driver-specific online lookups.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, providers domain models
# 🔄 Connected Modules / Calls From:
# providers infrastructure implementations, reviews rating service

import uuid
from abc import abstractmethod
from typing import List, Optional, TypeVar

from marketplace.shared.domain.repository import BaseRepository

from ..models import (
    AdvocateProfile,
    B2BSellerProfile,
    B2CSellerProfile,
    BusinessProfile,
    DoctorProfile,
    DriverProfile,
    HomeServiceProfile,
    ProviderProfile,
)

ProfileT = TypeVar("ProfileT", bound=ProviderProfile)


class ProviderProfileRepository(BaseRepository[ProfileT]):
    """
    Repository interface shared by all role-specific profiles.

    Each user owns at most one profile of a given kind.
    """

    @abstractmethod
    async def get_by_user(self, user_id: uuid.UUID) -> Optional[ProfileT]:
        """
        Get the profile belonging to a user.

        Args:
            user_id: Owning user ID

        Returns:
            Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[ProfileT]:
        """Public profile lookup; only profiles with a slug support it."""
        pass


class DoctorProfileRepository(ProviderProfileRepository[DoctorProfile]):
    pass


class AdvocateProfileRepository(ProviderProfileRepository[AdvocateProfile]):
    pass


class DriverProfileRepository(ProviderProfileRepository[DriverProfile]):

    @abstractmethod
    async def list_online(self, limit: int = 50) -> List[DriverProfile]:
        """Active, unblocked drivers currently online."""
        pass


class BusinessProfileRepository(ProviderProfileRepository[BusinessProfile]):
    pass


class B2CSellerProfileRepository(ProviderProfileRepository[B2CSellerProfile]):
    pass


class B2BSellerProfileRepository(ProviderProfileRepository[B2BSellerProfile]):
    pass


class HomeServiceProfileRepository(ProviderProfileRepository[HomeServiceProfile]):
    pass
