# 📄 File: marketplace/modules/providers/infrastructure/database/provider_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for professional and seller profiles, such as finding the
# profile of a given account or listing drivers who are online right now.
#
# 🧪 Purpose (Technical Summary):
# Generic SQLAlchemy provider profile repository (user and slug lookups) with one concrete
# subclass per profile table.
#
# 🔗 Dependencies:
# - providers domain repositories and models
# - providers SQLAlchemy models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - reviews rating service (rating cache targets)
# - Embedding application services

import logging
import uuid
from typing import Generic, List, Optional

from marketplace.modules.providers.domain.models import (
    AdvocateProfile,
    B2BSellerProfile,
    B2CSellerProfile,
    BusinessProfile,
    DoctorProfile,
    DriverProfile,
    HomeServiceProfile,
)
from marketplace.modules.providers.domain.repositories import (
    AdvocateProfileRepository,
    B2BSellerProfileRepository,
    B2CSellerProfileRepository,
    BusinessProfileRepository,
    DoctorProfileRepository,
    DriverProfileRepository,
    HomeServiceProfileRepository,
)
from marketplace.modules.providers.domain.repositories.provider_repository import ProfileT
from marketplace.modules.providers.infrastructure.database.models import (
    AdvocateProfileModel,
    B2BSellerProfileModel,
    B2CSellerProfileModel,
    BusinessProfileModel,
    DoctorProfileModel,
    DriverProfileModel,
    HomeServiceProfileModel,
)
from marketplace.shared.core.exceptions import RepositoryError
from marketplace.shared.infrastructure.database.repository import ModelT, SQLAlchemyRepository

logger = logging.getLogger(__name__)


class ProviderProfileRepositoryImpl(SQLAlchemyRepository[ProfileT, ModelT], Generic[ProfileT, ModelT]):
    """Lookups shared by every provider profile table."""

    async def get_by_user(self, user_id: uuid.UUID) -> Optional[ProfileT]:
        return await self._first(self._select().where(self.model_class.user_id == user_id))

    async def get_by_slug(self, slug: str) -> Optional[ProfileT]:
        if not hasattr(self.model_class, "slug"):
            raise RepositoryError(
                f"{self.resource_name} has no slug",
                operation="get_by_slug",
                entity=self.resource_name
            )
        return await self._first(self._select().where(self.model_class.slug == slug.lower()))


class DoctorProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[DoctorProfile, DoctorProfileModel], DoctorProfileRepository
):
    entity_class = DoctorProfile
    model_class = DoctorProfileModel
    resource_name = "DoctorProfile"


class AdvocateProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[AdvocateProfile, AdvocateProfileModel], AdvocateProfileRepository
):
    entity_class = AdvocateProfile
    model_class = AdvocateProfileModel
    resource_name = "AdvocateProfile"


class DriverProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[DriverProfile, DriverProfileModel], DriverProfileRepository
):
    entity_class = DriverProfile
    model_class = DriverProfileModel
    resource_name = "DriverProfile"

    async def list_online(self, limit: int = 50) -> List[DriverProfile]:
        stmt = (
            self._select()
            .where(
                DriverProfileModel.is_online.is_(True),
                DriverProfileModel.is_active.is_(True),
                DriverProfileModel.is_blocked.is_(False),
            )
            .order_by(DriverProfileModel.rating.desc())
            .limit(limit)
        )
        return await self._all(stmt)


class BusinessProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[BusinessProfile, BusinessProfileModel], BusinessProfileRepository
):
    entity_class = BusinessProfile
    model_class = BusinessProfileModel
    resource_name = "BusinessProfile"


class B2CSellerProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[B2CSellerProfile, B2CSellerProfileModel], B2CSellerProfileRepository
):
    entity_class = B2CSellerProfile
    model_class = B2CSellerProfileModel
    resource_name = "B2CSellerProfile"


class B2BSellerProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[B2BSellerProfile, B2BSellerProfileModel], B2BSellerProfileRepository
):
    entity_class = B2BSellerProfile
    model_class = B2BSellerProfileModel
    resource_name = "B2BSellerProfile"


class HomeServiceProfileRepositoryImpl(
    ProviderProfileRepositoryImpl[HomeServiceProfile, HomeServiceProfileModel], HomeServiceProfileRepository
):
    entity_class = HomeServiceProfile
    model_class = HomeServiceProfileModel
    resource_name = "HomeServiceProfile"
