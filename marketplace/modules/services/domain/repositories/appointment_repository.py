# 📄 File: marketplace/modules/services/domain/repositories/appointment_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how doctor/advocate consultations and provider schedules are looked up:
# a patient's or client's history, a professional's day, and who is free when.
# 🧪 Purpose (Technical Summary):
# Appointment and Availability repository interfaces on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, services domain models
# 🔄 Connected Modules / Calls From:
# services infrastructure implementation, AppointmentService

import uuid
from abc import abstractmethod
from datetime import date
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import Appointment, Availability


class AppointmentRepository(BaseRepository[Appointment]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Appointment]:
        pass

    @abstractmethod
    async def list_for_provider_on(self, provider_id: uuid.UUID, day: date) -> List[Appointment]:
        """
        Professional's appointments on a day, cancelled ones excluded.

        Args:
            provider_id: Doctor or advocate user ID
            day: Appointment date

        Returns:
            Appointments ordered by start time
        """
        pass

    @abstractmethod
    async def find_overlapping(
        self,
        provider_id: uuid.UUID,
        day: date,
        start_time: str,
        end_time: str
    ) -> List[Appointment]:
        """Open appointments of the professional that intersect the slot."""
        pass


class AvailabilityRepository(BaseRepository[Availability]):

    @abstractmethod
    async def get_for_provider(
        self,
        provider_id: uuid.UUID,
        service_id: Optional[uuid.UUID] = None
    ) -> Optional[Availability]:
        """
        Active schedule of a provider.

        A service-level schedule wins over the provider-level one when
        service_id is given and both exist.
        """
        pass
