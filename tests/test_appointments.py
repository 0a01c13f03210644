# 📄 File: tests/test_appointments.py
# 🧭 Purpose (Layman Explanation):
# Checks doctor and advocate consultations: only valid consultation modes, no double
# booking of a professional, weekly schedules cut into slots, and a permanent history
# of every home-service booking status change.
# 🧪 Purpose (Technical Summary):
# Tests Appointment/Availability/BookingStatusLog domain rules, their SQLAlchemy
# repositories, and the AppointmentService/BookingStatusService domain services.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.services

import uuid
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from marketplace.modules.services.domain.models import (
    Appointment,
    AppointmentActor,
    AppointmentStatus,
    Availability,
    Booking,
    BookingActor,
    BookingPricing,
    BookingStatus,
    BookingStatusLog,
    ChangeMeta,
    ChangeSource,
    ConsultationFee,
    ConsultationMode,
    ProfessionalType,
    TimeSlot,
    WeeklySchedule,
)
from marketplace.modules.services.domain.services import AppointmentService, BookingStatusService
from marketplace.modules.services.infrastructure.database.appointment_repository_impl import (
    AppointmentRepositoryImpl,
    AvailabilityRepositoryImpl,
)
from marketplace.modules.services.infrastructure.database.booking_repository_impl import (
    BookingRepositoryImpl,
    BookingStatusLogRepositoryImpl,
)
from marketplace.shared.core.exceptions import BusinessRuleViolationError, NotFoundError, RepositoryError

MONDAY = date(2026, 11, 2)
TUESDAY = date(2026, 11, 3)


def make_appointment(user_id: uuid.UUID, provider_id: uuid.UUID, start: str = "10:00", end: str = "10:30", **kwargs) -> Appointment:
    data = dict(
        user_id=user_id,
        provider_id=provider_id,
        professional_type=ProfessionalType.DOCTOR,
        appointment_date=MONDAY,
        start_time=start,
        end_time=end,
        mode=ConsultationMode.CLINIC,
        fee=ConsultationFee(amount=500),
    )
    data.update(kwargs)
    return Appointment(**data)


def make_availability(provider_id: uuid.UUID, **kwargs) -> Availability:
    data = dict(
        provider_id=provider_id,
        weekly=WeeklySchedule(monday=[TimeSlot(start_time="09:00", end_time="12:00")]),
        slot_duration=30,
    )
    data.update(kwargs)
    return Availability(**data)


def make_booking(user_id: uuid.UUID) -> Booking:
    return Booking(
        user_id=user_id,
        provider_id=uuid.uuid4(),
        service_id=uuid.uuid4(),
        address_id=uuid.uuid4(),
        scheduled_date=MONDAY,
        start_time="10:00",
        end_time="11:00",
        pricing=BookingPricing.compute(base_price=499, tax_amount=90),
    )


# ============================================================================
# APPOINTMENT
# ============================================================================

class TestAppointment:
    def test_lifecycle(self, user_id):
        appointment = make_appointment(user_id, uuid.uuid4())
        appointment.confirm()
        appointment.check_in()
        appointment.complete()

        assert appointment.status == AppointmentStatus.COMPLETED
        assert appointment.confirmed_at is not None
        assert appointment.checked_in_at is not None
        assert appointment.completed_at is not None

    def test_mode_must_suit_professional(self, user_id):
        with pytest.raises(PydanticValidationError):
            make_appointment(user_id, uuid.uuid4(), mode=ConsultationMode.CHAMBER)

        advocate = make_appointment(
            user_id,
            uuid.uuid4(),
            professional_type=ProfessionalType.ADVOCATE,
            mode=ConsultationMode.PHONE,
        )
        assert advocate.mode == "phone"

    def test_end_must_follow_start(self, user_id):
        with pytest.raises(PydanticValidationError):
            make_appointment(user_id, uuid.uuid4(), start="11:00", end="10:30")

    def test_closed_appointment_cannot_change(self, user_id):
        appointment = make_appointment(user_id, uuid.uuid4())
        appointment.cancel("travelling", by=AppointmentActor.PROVIDER)

        assert appointment.cancellation.cancelled_by == "provider"
        with pytest.raises(BusinessRuleViolationError) as exc:
            appointment.confirm()
        assert exc.value.details["rule"] == "appointment_closed"

    def test_overlaps(self, user_id):
        appointment = make_appointment(user_id, uuid.uuid4(), start="10:00", end="10:30")
        assert appointment.overlaps("10:15", "10:45")
        assert not appointment.overlaps("10:30", "11:00")


# ============================================================================
# AVAILABILITY
# ============================================================================

class TestAvailability:
    def test_weekly_window_cut_into_slots(self):
        availability = make_availability(uuid.uuid4(), buffer_time=15)
        slots = availability.generate_slots(MONDAY)

        assert [(s.start_time, s.end_time) for s in slots] == [
            ("09:00", "09:30"),
            ("09:45", "10:15"),
            ("10:30", "11:00"),
            ("11:15", "11:45"),
        ]
        assert availability.generate_slots(TUESDAY) == []
        assert not availability.is_available_on(TUESDAY)

    def test_date_override_replaces_weekly(self):
        availability = make_availability(uuid.uuid4())
        availability.set_date_slots(MONDAY, [TimeSlot(start_time="15:00", end_time="16:00")])

        assert [s.start_time for s in availability.slots_on(MONDAY)] == ["15:00"]
        assert not availability.is_slot_free(MONDAY, "09:00", "09:30")

    def test_booking_a_slot(self):
        availability = make_availability(uuid.uuid4())
        booking_id = uuid.uuid4()
        slot = availability.book_slot(MONDAY, "9:30", booking_id=booking_id)

        assert slot.is_booked and slot.booking_id == booking_id
        assert not availability.is_slot_free(MONDAY, "09:30", "10:00")
        assert len(availability.free_slots(MONDAY)) == 5
        with pytest.raises(BusinessRuleViolationError) as exc:
            availability.book_slot(MONDAY, "09:30")
        assert exc.value.details["rule"] == "slot_already_booked"

        availability.release_slot(MONDAY, "09:30")
        assert availability.is_slot_free(MONDAY, "09:30", "10:00")

    def test_unknown_slot(self):
        with pytest.raises(BusinessRuleViolationError) as exc:
            make_availability(uuid.uuid4()).book_slot(MONDAY, "13:00")
        assert exc.value.details["rule"] == "slot_not_found"

    def test_inactive_schedule_has_no_free_slots(self):
        availability = make_availability(uuid.uuid4(), is_active=False)
        assert not availability.is_slot_free(MONDAY, "09:00", "09:30")


# ============================================================================
# BOOKING STATUS HISTORY
# ============================================================================

def test_status_log_is_frozen():
    entry = BookingStatusLog(
        booking_id=uuid.uuid4(),
        previous_status=BookingStatus.PENDING,
        new_status=BookingStatus.CONFIRMED,
        changed_by=BookingActor.ADMIN,
    )
    assert entry.meta.source == "api"
    with pytest.raises(PydanticValidationError):
        entry.new_status = BookingStatus.CANCELLED


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_overlapping_appointments(session, user_id):
    repo = AppointmentRepositoryImpl(session)
    provider_id = uuid.uuid4()
    morning = await repo.add(make_appointment(user_id, provider_id, "10:00", "10:30"))
    dropped = make_appointment(user_id, provider_id, "10:30", "11:00")
    dropped.cancel()
    await repo.add(dropped)
    await repo.add(make_appointment(user_id, uuid.uuid4(), "10:00", "10:30"))

    clashes = await repo.find_overlapping(provider_id, MONDAY, "10:15", "10:45")
    assert [a.id for a in clashes] == [morning.id]
    assert await repo.find_overlapping(provider_id, MONDAY, "10:30", "11:00") == []
    assert [a.id for a in await repo.list_for_provider_on(provider_id, MONDAY)] == [morning.id]


async def test_user_appointments_newest_first(session, user_id):
    repo = AppointmentRepositoryImpl(session)
    earlier = await repo.add(make_appointment(user_id, uuid.uuid4()))
    later = await repo.add(make_appointment(user_id, uuid.uuid4(), appointment_date=TUESDAY))

    assert [a.id for a in await repo.list_by_user(user_id)] == [later.id, earlier.id]


async def test_availability_roundtrip(session):
    repo = AvailabilityRepositoryImpl(session)
    provider_id = uuid.uuid4()
    availability = make_availability(provider_id)
    availability.book_slot(MONDAY, "10:00", booking_id=uuid.uuid4())
    await repo.add(availability)

    loaded = await repo.get_for_provider(provider_id)
    assert loaded.weekly.monday[0].end_time == "12:00"
    assert loaded.date_specific[0].day == MONDAY
    assert not loaded.is_slot_free(MONDAY, "10:00", "10:30")


async def test_service_schedule_preferred_over_provider_schedule(session):
    repo = AvailabilityRepositoryImpl(session)
    provider_id, service_id = uuid.uuid4(), uuid.uuid4()
    general = await repo.add(make_availability(provider_id))
    specific = await repo.add(make_availability(provider_id, service_id=service_id, slot_duration=60))
    await repo.add(make_availability(provider_id, service_id=uuid.uuid4()))

    assert (await repo.get_for_provider(provider_id)).id == general.id
    assert (await repo.get_for_provider(provider_id, service_id=service_id)).id == specific.id
    assert (await repo.get_for_provider(provider_id, service_id=uuid.uuid4())).id == general.id


async def test_status_history_cannot_be_rewritten(session, user_id):
    repo = BookingStatusLogRepositoryImpl(session)
    entry = await repo.add(BookingStatusLog(
        booking_id=uuid.uuid4(),
        new_status=BookingStatus.PENDING,
        changed_by=BookingActor.CUSTOMER,
        user_id=user_id,
    ))

    with pytest.raises(RepositoryError):
        await repo.save(entry)
    with pytest.raises(RepositoryError):
        await repo.delete(entry.id)
    assert [e.id for e in await repo.list_for_booking(entry.booking_id)] == [entry.id]


# ============================================================================
# DOMAIN SERVICES
# ============================================================================

async def test_status_change_writes_history(session, user_id):
    bookings = BookingRepositoryImpl(session)
    service = BookingStatusService(bookings, BookingStatusLogRepositoryImpl(session))
    booking = await bookings.add(make_booking(user_id))
    meta = ChangeMeta(ip_address="10.0.0.7", source=ChangeSource.ANDROID)

    await service.transition(booking.id, BookingStatus.CONFIRMED, BookingActor.ADMIN, meta=meta)
    updated, entry = await service.transition(
        booking.id, BookingStatus.CANCELLED, BookingActor.CUSTOMER,
        user_id=user_id, reason="plans changed", refund_amount=589,
    )

    assert updated.status == BookingStatus.CANCELLED
    assert updated.cancellation.refund_amount == 589
    assert entry.previous_status == BookingStatus.CONFIRMED
    history = await service.history(booking.id)
    assert [(e.previous_status, e.new_status) for e in history] == [
        ("pending", "confirmed"),
        ("confirmed", "cancelled"),
    ]
    assert history[0].meta.source == "android"
    assert history[1].reason == "plans changed"


async def test_closed_booking_keeps_its_status(session, user_id):
    bookings = BookingRepositoryImpl(session)
    logs = BookingStatusLogRepositoryImpl(session)
    service = BookingStatusService(bookings, logs)
    booking = await bookings.add(make_booking(user_id))
    await service.transition(booking.id, BookingStatus.COMPLETED, BookingActor.PROVIDER)

    with pytest.raises(BusinessRuleViolationError) as exc:
        await service.transition(booking.id, BookingStatus.CANCELLED, BookingActor.CUSTOMER)
    assert exc.value.details["rule"] == "booking_closed"
    assert len(await logs.list_for_booking(booking.id)) == 1


async def test_status_change_rejects_noop_and_reopen(session, user_id):
    bookings = BookingRepositoryImpl(session)
    service = BookingStatusService(bookings, BookingStatusLogRepositoryImpl(session))
    booking = await bookings.add(make_booking(user_id))

    with pytest.raises(BusinessRuleViolationError):
        await service.transition(booking.id, BookingStatus.PENDING, BookingActor.ADMIN)
    await service.transition(booking.id, BookingStatus.CONFIRMED, BookingActor.ADMIN)
    with pytest.raises(BusinessRuleViolationError) as exc:
        await service.transition(booking.id, BookingStatus.PENDING, BookingActor.ADMIN)
    assert exc.value.details["rule"] == "booking_status_invalid"
    with pytest.raises(NotFoundError):
        await service.transition(uuid.uuid4(), BookingStatus.CONFIRMED, BookingActor.ADMIN)


async def test_booking_an_appointment_takes_the_slot(session, user_id):
    availabilities = AvailabilityRepositoryImpl(session)
    service = AppointmentService(AppointmentRepositoryImpl(session), availabilities)
    provider_id = uuid.uuid4()
    await availabilities.add(make_availability(provider_id))

    appointment = await service.book(make_appointment(user_id, provider_id, "09:30", "10:00"))

    schedule = await availabilities.get_for_provider(provider_id)
    taken = [s for s in schedule.slots_on(MONDAY) if s.is_booked]
    assert [(s.start_time, s.booking_id) for s in taken] == [("09:30", appointment.id)]

    with pytest.raises(BusinessRuleViolationError) as exc:
        await service.book(make_appointment(uuid.uuid4(), provider_id, "09:30", "10:00"))
    assert exc.value.details["rule"] == "appointment_slot_taken"


async def test_appointment_outside_schedule_rejected(session, user_id):
    availabilities = AvailabilityRepositoryImpl(session)
    appointments = AppointmentRepositoryImpl(session)
    service = AppointmentService(appointments, availabilities)
    provider_id = uuid.uuid4()
    await availabilities.add(make_availability(provider_id))

    with pytest.raises(BusinessRuleViolationError) as exc:
        await service.book(make_appointment(user_id, provider_id, "13:00", "13:30"))
    assert exc.value.details["rule"] == "appointment_outside_availability"
    assert await appointments.list_by_user(user_id) == []


async def test_cancelling_frees_the_slot(session, user_id):
    availabilities = AvailabilityRepositoryImpl(session)
    service = AppointmentService(AppointmentRepositoryImpl(session), availabilities)
    provider_id = uuid.uuid4()
    await availabilities.add(make_availability(provider_id))
    appointment = await service.book(make_appointment(user_id, provider_id, "11:00", "11:30"))

    confirmed = await service.confirm(appointment.id)
    assert confirmed.status == AppointmentStatus.CONFIRMED
    cancelled = await service.cancel(appointment.id, reason="recovered", by=AppointmentActor.USER)

    assert cancelled.status == AppointmentStatus.CANCELLED
    schedule = await availabilities.get_for_provider(provider_id)
    assert schedule.is_slot_free(MONDAY, "11:00", "11:30")
    rebooked = await service.book(make_appointment(uuid.uuid4(), provider_id, "11:00", "11:30"))
    assert rebooked.status == AppointmentStatus.SCHEDULED


async def test_provider_without_schedule_only_checks_overlap(session, user_id):
    service = AppointmentService(AppointmentRepositoryImpl(session), AvailabilityRepositoryImpl(session))
    provider_id = uuid.uuid4()
    await service.book(make_appointment(user_id, provider_id, "18:00", "18:30"))

    with pytest.raises(BusinessRuleViolationError):
        await service.book(make_appointment(user_id, provider_id, "18:15", "18:45"))
