# 📄 File: tests/test_services_providers.py
# 🧭 Purpose (Layman Explanation):
# Checks home-service bookings (price, moving to another slot, a provider's day plan)
# and the profiles providers fill in: doctors, sellers and drivers.
# 🧪 Purpose (Technical Summary):
# Tests Booking/BookingPricing rules, provider profile slugging and verification, and
# the booking/provider SQLAlchemy repositories.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.services
# - marketplace.modules.providers

import uuid
from datetime import date

import pytest

from marketplace.modules.providers.domain.models import (
    B2CSellerProfile,
    DoctorProfile,
    DriverProfile,
    DrivingLicense,
    OnboardingStatus,
)
from marketplace.modules.providers.infrastructure.database.provider_repository_impl import (
    B2CSellerProfileRepositoryImpl,
    DoctorProfileRepositoryImpl,
    DriverProfileRepositoryImpl,
)
from marketplace.modules.services.domain.models import Booking, BookingActor, BookingPricing, BookingStatus
from marketplace.modules.services.infrastructure.database.booking_repository_impl import BookingRepositoryImpl
from marketplace.shared.core.exceptions import RepositoryError

SLOT_DAY = date(2026, 11, 2)


def make_booking(user_id: uuid.UUID, provider_id: uuid.UUID, start: str = "10:00", end: str = "11:00") -> Booking:
    return Booking(
        user_id=user_id,
        provider_id=provider_id,
        service_id=uuid.uuid4(),
        address_id=uuid.uuid4(),
        scheduled_date=SLOT_DAY,
        start_time=start,
        end_time=end,
        pricing=BookingPricing.compute(base_price=499, tax_amount=90),
    )


def make_driver(name: str = "Ravi Kumar", **kwargs) -> DriverProfile:
    return DriverProfile.create(uuid.uuid4(), full_name=name, license=DrivingLicense(number="KA0120200001"), **kwargs)


# ============================================================================
# BOOKINGS
# ============================================================================

class TestBookingPricing:
    def test_option_price_replaces_base(self):
        pricing = BookingPricing.compute(base_price=499, option_price=799, tax_amount=100, discount_amount=50)
        assert pricing.total_amount == 849

    def test_total_never_negative(self):
        assert BookingPricing.compute(base_price=100, discount_amount=500).total_amount == 0


class TestBooking:
    def test_lifecycle(self, user_id):
        booking = make_booking(user_id, uuid.uuid4())
        technician = uuid.uuid4()
        booking.confirm()
        booking.assign(technician)
        booking.start()
        booking.complete()
        booking.mark_paid(uuid.uuid4())

        assert booking.provider_id == technician
        assert booking.status == BookingStatus.COMPLETED
        assert booking.pricing.total_amount == 589

    def test_cancel_records_actor(self, user_id):
        booking = make_booking(user_id, uuid.uuid4())
        booking.cancel(BookingActor.PROVIDER, reason="unwell", refund_amount=589)

        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation.cancelled_by == "provider"
        assert booking.cancellation.refund_amount == 589

    def test_reschedule_links_new_booking(self, user_id):
        booking = make_booking(user_id, uuid.uuid4())
        moved = booking.reschedule(date(2026, 11, 3), "14:00", "15:00")

        assert moved.id != booking.id
        assert moved.is_rescheduled
        assert moved.rescheduled_from == booking.id
        assert moved.status == BookingStatus.PENDING
        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancellation.reason == "rescheduled"

    def test_invalid_slot_rejected(self, user_id):
        with pytest.raises(ValueError):
            make_booking(user_id, uuid.uuid4(), start="9am")


async def test_provider_day_plan_skips_cancelled(session, user_id):
    repo = BookingRepositoryImpl(session)
    provider_id = uuid.uuid4()
    late = await repo.add(make_booking(user_id, provider_id, "15:00", "16:00"))
    early = await repo.add(make_booking(user_id, provider_id, "09:00", "10:00"))
    dropped = make_booking(user_id, provider_id, "12:00", "13:00")
    dropped.cancel(BookingActor.CUSTOMER)
    await repo.add(dropped)

    plan = await repo.list_for_provider_on(provider_id, SLOT_DAY)
    assert [booking.id for booking in plan] == [early.id, late.id]
    assert len(await repo.list_by_user(user_id)) == 3


# ============================================================================
# PROVIDER PROFILES
# ============================================================================

class TestDoctorProfile:
    def test_slug_from_name(self):
        doctor = DoctorProfile.create(
            uuid.uuid4(),
            full_name="Dr Asha Rao",
            consultation_modes=["clinic", "online"],
            fees={"clinic": 500, "online": 350},
        )
        assert doctor.slug == "dr-asha-rao"
        assert doctor.display_name == "Dr Asha Rao"
        assert doctor.fee_for("online") == 350
        assert doctor.fee_for("home-visit") is None

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            DoctorProfile.create(uuid.uuid4(), full_name="Dr Asha Rao", consultation_modes=["chamber"])

    def test_verification(self):
        doctor = DoctorProfile.create(uuid.uuid4(), full_name="Dr Asha Rao")
        admin_id = uuid.uuid4()
        doctor.verify(admin_id)
        assert doctor.is_verified
        assert doctor.verification.verified_by == admin_id

        doctor.reject("registration expired")
        assert not doctor.is_verified


def test_seller_onboarding_follows_verification():
    seller = B2CSellerProfile.create(uuid.uuid4(), store_name="Asha Handlooms", pickup_address_id=uuid.uuid4())
    assert seller.status == OnboardingStatus.PENDING

    seller.verify(uuid.uuid4())
    assert seller.status == OnboardingStatus.ACTIVE
    seller.reject("blurry GST certificate")
    assert seller.status == OnboardingStatus.REJECTED


def test_driver_trip_totals():
    driver = make_driver()
    driver.record_trip(12.5, 240)
    driver.record_trip(3.25, 80)

    assert driver.stats.total_rides == 2
    assert driver.stats.total_distance_km == 15.75
    assert driver.stats.total_earnings == 320


async def test_doctor_lookup(session):
    repo = DoctorProfileRepositoryImpl(session)
    doctor = await repo.add(DoctorProfile.create(uuid.uuid4(), full_name="Dr Asha Rao"))

    assert (await repo.get_by_slug("DR-ASHA-RAO")).id == doctor.id
    assert (await repo.get_by_user(doctor.user_id)).id == doctor.id


async def test_slug_lookup_needs_slug_column(session):
    with pytest.raises(RepositoryError):
        await B2CSellerProfileRepositoryImpl(session).get_by_slug("asha-handlooms")


async def test_online_drivers(session):
    repo = DriverProfileRepositoryImpl(session)
    online = make_driver("Online Driver")
    online.set_online(True)
    blocked = make_driver("Blocked Driver", is_blocked=True)
    blocked.set_online(True)
    await repo.add(online)
    await repo.add(blocked)
    await repo.add(make_driver("Offline Driver"))

    assert [driver.full_name for driver in await repo.list_online()] == ["Online Driver"]
