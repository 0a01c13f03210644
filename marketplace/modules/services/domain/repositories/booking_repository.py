# 📄 File: marketplace/modules/services/domain/repositories/booking_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how home-service appointments are found: a customer's history and a
# provider's schedule for a day.
# 🧪 Purpose (Technical Summary):
# Booking and booking status log repository interfaces on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, services domain models
# 🔄 Connected Modules / Calls From:
# services infrastructure implementation

import uuid
from abc import abstractmethod
from datetime import date
from typing import List

from marketplace.shared.domain.repository import BaseRepository

from ..models import Booking, BookingStatusLog


class BookingRepository(BaseRepository[Booking]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Booking]:
        pass

    @abstractmethod
    async def list_for_provider_on(self, provider_id: uuid.UUID, day: date) -> List[Booking]:
        """
        Provider's bookings on a day, cancelled ones excluded.

        Args:
            provider_id: Provider user ID
            day: Schedule date

        Returns:
            Bookings ordered by start time
        """
        pass


class BookingStatusLogRepository(BaseRepository[BookingStatusLog]):
    """Append-only history of booking status changes."""

    @abstractmethod
    async def list_for_booking(self, booking_id: uuid.UUID) -> List[BookingStatusLog]:
        """Entries of one booking, oldest first."""
        pass
