# 📄 File: marketplace/modules/services/infrastructure/database/appointment_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for doctor/advocate consultations and provider schedules.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the AppointmentRepository and AvailabilityRepository
# interfaces. Slot overlap is tested on HH:MM strings, which sort chronologically.
#
# 🔗 Dependencies:
# - services domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - AppointmentService
# - Embedding application services

import logging
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import or_

from marketplace.modules.services.domain.models import Appointment, AppointmentStatus, Availability
from marketplace.modules.services.domain.repositories import AppointmentRepository, AvailabilityRepository
from marketplace.modules.services.infrastructure.database.models import AppointmentModel, AvailabilityModel
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)

# Appointments that no longer hold their slot
RELEASED_STATUSES = (AppointmentStatus.CANCELLED.value, AppointmentStatus.NO_SHOW.value)


class AppointmentRepositoryImpl(SQLAlchemyRepository[Appointment, AppointmentModel], AppointmentRepository):

    entity_class = Appointment
    model_class = AppointmentModel
    resource_name = "Appointment"

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Appointment]:
        stmt = (
            self._select()
            .where(AppointmentModel.user_id == user_id)
            .order_by(AppointmentModel.appointment_date.desc(), AppointmentModel.start_time.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_provider_on(self, provider_id: uuid.UUID, day: date) -> List[Appointment]:
        stmt = (
            self._select()
            .where(
                AppointmentModel.provider_id == provider_id,
                AppointmentModel.appointment_date == day,
                AppointmentModel.status != AppointmentStatus.CANCELLED.value,
            )
            .order_by(AppointmentModel.start_time)
        )
        return await self._all(stmt)

    async def find_overlapping(
        self,
        provider_id: uuid.UUID,
        day: date,
        start_time: str,
        end_time: str
    ) -> List[Appointment]:
        stmt = (
            self._select()
            .where(
                AppointmentModel.provider_id == provider_id,
                AppointmentModel.appointment_date == day,
                AppointmentModel.status.not_in(RELEASED_STATUSES),
                AppointmentModel.start_time < end_time,
                AppointmentModel.end_time > start_time,
            )
            .order_by(AppointmentModel.start_time)
        )
        return await self._all(stmt)


class AvailabilityRepositoryImpl(SQLAlchemyRepository[Availability, AvailabilityModel], AvailabilityRepository):

    entity_class = Availability
    model_class = AvailabilityModel
    resource_name = "Availability"

    async def get_for_provider(
        self,
        provider_id: uuid.UUID,
        service_id: Optional[uuid.UUID] = None
    ) -> Optional[Availability]:
        stmt = self._select().where(
            AvailabilityModel.provider_id == provider_id,
            AvailabilityModel.is_active.is_(True),
        )
        if service_id is None:
            stmt = stmt.where(AvailabilityModel.service_id.is_(None))
        else:
            stmt = stmt.where(
                or_(AvailabilityModel.service_id == service_id, AvailabilityModel.service_id.is_(None))
            ).order_by(AvailabilityModel.service_id.is_(None))
        return await self._first(stmt)
