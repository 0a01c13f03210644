# 📄 File: marketplace/modules/mobility/domain/repositories/mobility_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how vehicles and rides are looked up: by number plate, free vehicles of a kind,
# a rider's trips and a driver's current ride.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for mobility entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, mobility domain models
# 🔄 Connected Modules / Calls From:
# mobility infrastructure implementations

import uuid
from abc import abstractmethod
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import Ride, RideStatus, Vehicle, VehicleType


class VehicleRepository(BaseRepository[Vehicle]):

    @abstractmethod
    async def get_by_registration(self, registration_number: str) -> Optional[Vehicle]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Vehicle]:
        pass

    @abstractmethod
    async def list_available(self, vehicle_type: VehicleType, verified_only: bool = True) -> List[Vehicle]:
        """Active vehicles of a type that can take a ride now."""
        pass


class RideRepository(BaseRepository[Ride]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Ride]:
        pass

    @abstractmethod
    async def list_by_status(self, status: RideStatus, limit: int = 100) -> List[Ride]:
        pass

    @abstractmethod
    async def get_active_for_driver(self, driver_id: uuid.UUID) -> Optional[Ride]:
        """The driver's accepted, arrived or in-progress ride, if any."""
        pass
