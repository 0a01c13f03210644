# 📄 File: marketplace/modules/services/domain/services/appointment_service.py
# 🧭 Purpose (Layman Explanation):
# Books doctor and advocate consultations only into free time: the professional must be
# available then and must not already have someone in that slot.
# 🧪 Purpose (Technical Summary):
# Domain service coordinating the Appointment and Availability repositories: overlap
# check, slot booking on the provider's schedule, and slot release on cancellation.
# 🔗 Dependencies:
# services domain models and repositories, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# consultation flows of the embedding application

import logging
import uuid
from typing import Optional

from marketplace.shared.core.exceptions import BusinessRuleViolationError

from ..models import Appointment, AppointmentActor, Availability
from ..repositories import AppointmentRepository, AvailabilityRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """
    Domain service for consultation booking.

    A professional without a schedule accepts any slot that does not
    overlap an open appointment.
    """

    def __init__(
        self,
        appointment_repository: AppointmentRepository,
        availability_repository: AvailabilityRepository
    ):
        self.appointment_repository = appointment_repository
        self.availability_repository = availability_repository

    async def book(self, appointment: Appointment) -> Appointment:
        """
        Store a new appointment.

        Raises:
            BusinessRuleViolationError: If the slot overlaps another appointment
                or lies outside the professional's free slots
        """
        clashes = await self.appointment_repository.find_overlapping(
            appointment.provider_id,
            appointment.appointment_date,
            appointment.start_time,
            appointment.end_time,
        )
        if clashes:
            raise BusinessRuleViolationError(
                "Professional already has an appointment in this slot",
                rule="appointment_slot_taken",
                context={"appointment_ids": [str(a.id) for a in clashes]}
            )

        availability = await self.availability_repository.get_for_provider(appointment.provider_id)
        if availability is not None:
            self._book_slot(availability, appointment)
            await self.availability_repository.save(availability)

        saved = await self.appointment_repository.add(appointment)
        logger.info(
            f"Booked {appointment.professional_type} appointment {saved.id} "
            f"on {appointment.appointment_date} {appointment.start_time}"
        )
        return saved

    async def confirm(self, appointment_id: uuid.UUID) -> Appointment:
        appointment = await self.appointment_repository.get_or_raise(appointment_id)
        appointment.confirm()
        return await self.appointment_repository.save(appointment)

    async def cancel(
        self,
        appointment_id: uuid.UUID,
        reason: Optional[str] = None,
        by: AppointmentActor = AppointmentActor.USER
    ) -> Appointment:
        """Cancel an appointment and free its slot on the professional's schedule."""
        appointment = await self.appointment_repository.get_or_raise(appointment_id)
        appointment.cancel(reason, by)

        availability = await self.availability_repository.get_for_provider(appointment.provider_id)
        if availability is not None:
            for slot in availability.slots_on(appointment.appointment_date):
                if slot.is_booked and slot.booking_id == appointment.id:
                    availability.release_slot(appointment.appointment_date, slot.start_time)
                    await self.availability_repository.save(availability)
                    break

        logger.info(f"Cancelled appointment {appointment_id} by {AppointmentActor(by).value}")
        return await self.appointment_repository.save(appointment)

    @staticmethod
    def _book_slot(availability: Availability, appointment: Appointment) -> None:
        day = appointment.appointment_date
        for slot in availability.free_slots(day):
            if slot.contains(appointment.start_time, appointment.end_time):
                availability.book_slot(day, slot.start_time, booking_id=appointment.id)
                return
        raise BusinessRuleViolationError(
            "Professional is not available in this slot",
            rule="appointment_outside_availability",
            context={"date": day.isoformat(), "start_time": appointment.start_time}
        )
