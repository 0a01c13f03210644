# 📄 File: marketplace/modules/services/infrastructure/database/booking_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for home-service appointments.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the BookingRepository and the append-only
# BookingStatusLogRepository interfaces.
#
# 🔗 Dependencies:
# - services domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services
# - finance cancellations

import logging
import uuid
from datetime import date
from typing import List

from marketplace.modules.services.domain.models import Booking, BookingStatus, BookingStatusLog
from marketplace.modules.services.domain.repositories import BookingRepository, BookingStatusLogRepository
from marketplace.modules.services.infrastructure.database.models import BookingModel, BookingStatusLogModel
from marketplace.shared.core.exceptions import RepositoryError
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class BookingRepositoryImpl(SQLAlchemyRepository[Booking, BookingModel], BookingRepository):

    entity_class = Booking
    model_class = BookingModel
    resource_name = "Booking"

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Booking]:
        stmt = (
            self._select()
            .where(BookingModel.user_id == user_id)
            .order_by(BookingModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_provider_on(self, provider_id: uuid.UUID, day: date) -> List[Booking]:
        stmt = (
            self._select()
            .where(
                BookingModel.provider_id == provider_id,
                BookingModel.scheduled_date == day,
                BookingModel.status != BookingStatus.CANCELLED.value,
            )
            .order_by(BookingModel.start_time)
        )
        return await self._all(stmt)


class BookingStatusLogRepositoryImpl(
    SQLAlchemyRepository[BookingStatusLog, BookingStatusLogModel],
    BookingStatusLogRepository
):
    """History entries are append-only: save and delete are refused."""

    entity_class = BookingStatusLog
    model_class = BookingStatusLogModel
    resource_name = "BookingStatusLog"

    async def save(self, entity: BookingStatusLog) -> BookingStatusLog:
        raise RepositoryError(
            "Booking status history is immutable",
            operation="update",
            entity=self.resource_name
        )

    async def delete(self, entity_id: uuid.UUID) -> bool:
        raise RepositoryError(
            "Booking status history cannot be deleted",
            operation="delete",
            entity=self.resource_name
        )

    async def list_for_booking(self, booking_id: uuid.UUID) -> List[BookingStatusLog]:
        stmt = (
            self._select()
            .where(BookingStatusLogModel.booking_id == booking_id)
            .order_by(BookingStatusLogModel.created_at, BookingStatusLogModel.id)
        )
        return await self._all(stmt)
