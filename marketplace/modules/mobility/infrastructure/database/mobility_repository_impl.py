# 📄 File: marketplace/modules/mobility/infrastructure/database/mobility_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for vehicles and rides.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the mobility repository interfaces built on the generic
# SQLAlchemyRepository.
#
# 🔗 Dependencies:
# - mobility domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services (ride matching)

import logging
import re
import uuid
from typing import List, Optional

from marketplace.modules.mobility.domain.models import Ride, RideStatus, Vehicle, VehicleType
from marketplace.modules.mobility.domain.repositories import RideRepository, VehicleRepository
from marketplace.modules.mobility.infrastructure.database.models import RideModel, VehicleModel
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)

_ACTIVE_RIDE_STATUSES = (RideStatus.ACCEPTED.value, RideStatus.ARRIVED.value, RideStatus.IN_PROGRESS.value)


class VehicleRepositoryImpl(SQLAlchemyRepository[Vehicle, VehicleModel], VehicleRepository):

    entity_class = Vehicle
    model_class = VehicleModel
    resource_name = "Vehicle"

    async def get_by_registration(self, registration_number: str) -> Optional[Vehicle]:
        normalized = re.sub(r"[\s-]", "", registration_number).upper()
        return await self._first(self._select().where(VehicleModel.registration_number == normalized))

    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Vehicle]:
        stmt = self._select().where(VehicleModel.owner_id == owner_id).order_by(VehicleModel.created_at)
        return await self._all(stmt)

    async def list_available(self, vehicle_type: VehicleType, verified_only: bool = True) -> List[Vehicle]:
        stmt = self._select().where(
            VehicleModel.vehicle_type == VehicleType(vehicle_type).value,
            VehicleModel.is_active.is_(True),
            VehicleModel.is_available.is_(True),
        )
        vehicles = await self._all(stmt)
        if verified_only:
            # Verification is a JSON block
            vehicles = [v for v in vehicles if v.verification.is_verified]
        logger.debug(f"{len(vehicles)} available {VehicleType(vehicle_type).value} vehicles")
        return vehicles


class RideRepositoryImpl(SQLAlchemyRepository[Ride, RideModel], RideRepository):

    entity_class = Ride
    model_class = RideModel
    resource_name = "Ride"

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Ride]:
        stmt = (
            self._select()
            .where(RideModel.user_id == user_id)
            .order_by(RideModel.requested_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_by_status(self, status: RideStatus, limit: int = 100) -> List[Ride]:
        stmt = (
            self._select()
            .where(RideModel.status == RideStatus(status).value)
            .order_by(RideModel.requested_at)
            .limit(limit)
        )
        return await self._all(stmt)

    async def get_active_for_driver(self, driver_id: uuid.UUID) -> Optional[Ride]:
        stmt = (
            self._select()
            .where(
                RideModel.driver_id == driver_id,
                RideModel.status.in_(_ACTIVE_RIDE_STATUSES),
            )
            .order_by(RideModel.accepted_at.desc())
        )
        return await self._first(stmt)
