# 📄 File: marketplace/modules/services/domain/services/booking_status_service.py
# 🧭 Purpose (Layman Explanation):
# Moves a home-service booking to its next status and writes down who did it and why,
# so the booking's history can always be replayed.
# 🧪 Purpose (Technical Summary):
# Domain service coordinating the Booking and BookingStatusLog repositories. The booking
# update and its history entry go through the same AsyncSession; the caller's commit
# makes them one unit of work.
# 🔗 Dependencies:
# services domain models and repositories, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# booking flows of the embedding application, finance cancellations

import logging
import uuid
from typing import List, Optional, Tuple

from marketplace.shared.core.exceptions import BusinessRuleViolationError

from ..models import Booking, BookingActor, BookingStatus, BookingStatusLog, ChangeMeta
from ..repositories import BookingRepository, BookingStatusLogRepository

logger = logging.getLogger(__name__)

CLOSED_STATUSES = (
    BookingStatus.COMPLETED.value,
    BookingStatus.CANCELLED.value,
    BookingStatus.NO_SHOW.value,
)


class BookingStatusService:
    """
    Domain service for booking status changes.

    Every change produces exactly one history entry. Completed, cancelled
    and no-show bookings are final.
    """

    def __init__(self, booking_repository: BookingRepository, log_repository: BookingStatusLogRepository):
        self.booking_repository = booking_repository
        self.log_repository = log_repository

    async def transition(
        self,
        booking_id: uuid.UUID,
        new_status: BookingStatus,
        changed_by: BookingActor,
        user_id: Optional[uuid.UUID] = None,
        reason: Optional[str] = None,
        notes: Optional[str] = None,
        meta: Optional[ChangeMeta] = None,
        provider_id: Optional[uuid.UUID] = None,
        refund_amount: float = 0
    ) -> Tuple[Booking, BookingStatusLog]:
        """
        Apply a status change to a booking and record it.

        Args:
            booking_id: Booking to change
            new_status: Target status
            changed_by: customer, provider, admin or system
            user_id: User who triggered the change
            reason: Why the status changed
            notes: Free-text notes
            meta: Request metadata (ip, user agent, source)
            provider_id: Provider to assign, for ASSIGNED
            refund_amount: Refund due to the customer, for CANCELLED

        Raises:
            NotFoundError: If the booking does not exist
            BusinessRuleViolationError: If the booking is closed, the status is
                unchanged or the target status cannot be set
        """
        booking = await self.booking_repository.get_or_raise(booking_id)
        new_status = BookingStatus(new_status)
        previous_status = booking.status

        if previous_status in CLOSED_STATUSES:
            raise BusinessRuleViolationError(
                f"Booking is already {previous_status}",
                rule="booking_closed",
                context={"booking_id": str(booking_id), "status": previous_status}
            )
        if previous_status == new_status.value:
            raise BusinessRuleViolationError(
                f"Booking is already {previous_status}",
                rule="booking_status_unchanged",
                context={"booking_id": str(booking_id)}
            )

        if new_status == BookingStatus.CONFIRMED:
            booking.confirm()
        elif new_status == BookingStatus.ASSIGNED:
            booking.assign(provider_id)
        elif new_status == BookingStatus.IN_PROGRESS:
            booking.start()
        elif new_status == BookingStatus.COMPLETED:
            booking.complete()
        elif new_status == BookingStatus.NO_SHOW:
            booking.mark_no_show()
        elif new_status == BookingStatus.CANCELLED:
            booking.cancel(changed_by, reason=reason, refund_amount=refund_amount)
        else:
            raise BusinessRuleViolationError(
                f"Booking cannot move back to {new_status.value}",
                rule="booking_status_invalid",
                context={"booking_id": str(booking_id), "status": previous_status}
            )

        entry = BookingStatusLog(
            booking_id=booking.id,
            previous_status=previous_status,
            new_status=new_status,
            changed_by=changed_by,
            user_id=user_id,
            reason=reason,
            notes=notes,
            meta=meta or ChangeMeta(),
        )
        saved_booking = await self.booking_repository.save(booking)
        saved_entry = await self.log_repository.add(entry)
        logger.info(f"Booking {booking.id} {previous_status} -> {new_status.value} by {BookingActor(changed_by).value}")
        return saved_booking, saved_entry

    async def history(self, booking_id: uuid.UUID) -> List[BookingStatusLog]:
        return await self.log_repository.list_for_booking(booking_id)
