# 📄 File: tests/test_mobility.py
# 🧭 Purpose (Layman Explanation):
# Checks taxi rides: how a fare is worked out, a ride going from request to drop-off,
# cancellations with a penalty, and vehicles whose papers have run out.
# 🧪 Purpose (Technical Summary):
# Tests Fare.estimate, the Ride state methods and ratings, Vehicle normalization and
# document expiry, plus the vehicle/ride SQLAlchemy repositories.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.mobility

import uuid
from datetime import date

import pytest

from marketplace.modules.mobility.domain.models import (
    Fare,
    Ride,
    RideActor,
    RideLocation,
    RideStatus,
    Vehicle,
    VehicleDocument,
    VehicleType,
)
from marketplace.modules.mobility.infrastructure.database.mobility_repository_impl import (
    RideRepositoryImpl,
    VehicleRepositoryImpl,
)
from marketplace.shared.domain.value_objects import GeoPoint, PaymentStatus


def make_ride(user_id: uuid.UUID, **kwargs) -> Ride:
    return Ride(
        user_id=user_id,
        ride_type=VehicleType.AUTO,
        pickup=RideLocation(address="MG Road Metro", point=GeoPoint(latitude=12.9756, longitude=77.6066)),
        drop=RideLocation(address="Indiranagar", point=GeoPoint(latitude=12.9784, longitude=77.6408)),
        fare=Fare.estimate(base_fare=30, per_km_fare=15, distance_km=5),
        **kwargs
    )


def make_vehicle(registration: str = "ka 01 ab-1234", **kwargs) -> Vehicle:
    return Vehicle(owner_id=uuid.uuid4(), vehicle_type=VehicleType.CAR, registration_number=registration, **kwargs)


# ============================================================================
# FARE
# ============================================================================

class TestFare:
    def test_simple_distance_fare(self):
        assert Fare.estimate(base_fare=30, per_km_fare=15, distance_km=5).total_amount == 105

    def test_surge_applies_before_extras(self):
        fare = Fare.estimate(
            base_fare=50,
            per_km_fare=12,
            distance_km=10,
            per_minute_fare=1,
            duration_minutes=30,
            surge_multiplier=1.5,
            waiting_charge=20,
            tax=10,
            discount=25,
        )
        assert fare.total_amount == (50 + 120 + 30) * 1.5 + 20 + 10 - 25

    def test_discount_floors_at_zero(self):
        assert Fare.estimate(base_fare=20, per_km_fare=0, distance_km=0, discount=100).total_amount == 0

    def test_surge_below_one_rejected(self):
        with pytest.raises(ValueError):
            Fare.estimate(base_fare=20, per_km_fare=10, distance_km=1, surge_multiplier=0.5)


# ============================================================================
# RIDE
# ============================================================================

class TestRide:
    def test_full_trip(self, user_id):
        ride = make_ride(user_id)
        driver_id, vehicle_id = uuid.uuid4(), uuid.uuid4()

        ride.accept(driver_id, vehicle_id)
        ride.mark_arrived()
        ride.start_ride()
        ride.complete_ride(distance_km=5.4, duration_minutes=18)
        ride.mark_paid(uuid.uuid4())

        assert ride.status == RideStatus.COMPLETED
        assert ride.driver_id == driver_id
        assert ride.distance_km == 5.4
        assert ride.payment_status == PaymentStatus.PAID
        assert ride.accepted_at <= ride.completed_at

    def test_cancel_with_penalty(self, user_id):
        ride = make_ride(user_id)
        ride.cancel_ride(reason="driver too far", by=RideActor.USER, penalty_amount=25)

        assert ride.status == RideStatus.CANCELLED
        assert ride.cancellation.cancelled_by == "user"
        assert ride.cancellation.penalty_amount == 25

    def test_both_sides_rate(self, user_id):
        ride = make_ride(user_id)
        ride.rate_driver(5, "smooth ride")
        ride.rate_user(4)

        assert ride.ratings.user_to_driver.rating == 5
        assert ride.ratings.driver_to_user.rating == 4
        with pytest.raises(ValueError):
            ride.rate_driver(6)


# ============================================================================
# VEHICLE
# ============================================================================

class TestVehicle:
    def test_registration_is_normalized(self):
        assert make_vehicle().registration_number == "KA01AB1234"

    def test_reject_takes_vehicle_off_the_road(self):
        vehicle = make_vehicle()
        vehicle.reject("RC unreadable")
        assert not vehicle.is_available
        assert vehicle.verification.rejected_reason == "RC unreadable"

    def test_expired_documents(self):
        vehicle = make_vehicle(
            rc=VehicleDocument(number="RC1", expiry_date=date(2030, 1, 1)),
            insurance=VehicleDocument(number="INS1", expiry_date=date(2026, 1, 31)),
        )
        assert vehicle.expired_documents(date(2026, 2, 1)) == ["insurance"]
        assert vehicle.expired_documents(date(2026, 1, 31)) == []

    def test_trip_counter(self):
        vehicle = make_vehicle()
        vehicle.record_trip(4.2)
        vehicle.record_trip(1.3)
        assert vehicle.stats.total_trips == 2
        assert vehicle.stats.total_distance_km == 5.5


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_vehicle_registration_lookup(session):
    repo = VehicleRepositoryImpl(session)
    vehicle = await repo.add(make_vehicle())

    assert (await repo.get_by_registration("KA-01-AB 1234")).id == vehicle.id
    assert await repo.get_by_registration("KA02ZZ0001") is None


async def test_available_vehicles_need_verification(session):
    repo = VehicleRepositoryImpl(session)
    verified = make_vehicle("KA01AA0001")
    verified.verify(uuid.uuid4())
    await repo.add(verified)
    await repo.add(make_vehicle("KA01AA0002"))
    parked = make_vehicle("KA01AA0003")
    parked.verify(uuid.uuid4())
    parked.set_availability(False)
    await repo.add(parked)

    available = await repo.list_available(VehicleType.CAR)
    assert [vehicle.registration_number for vehicle in available] == ["KA01AA0001"]
    assert len(await repo.list_available(VehicleType.CAR, verified_only=False)) == 2


async def test_active_ride_for_driver(session, user_id):
    repo = RideRepositoryImpl(session)
    driver_id = uuid.uuid4()
    finished = make_ride(user_id)
    finished.accept(driver_id, uuid.uuid4())
    finished.complete_ride()
    await repo.add(finished)

    assert await repo.get_active_for_driver(driver_id) is None

    current = make_ride(user_id)
    current.accept(driver_id, uuid.uuid4())
    await repo.add(current)

    assert (await repo.get_active_for_driver(driver_id)).id == current.id
    assert len(await repo.list_by_user(user_id)) == 2
    assert [ride.id for ride in await repo.list_by_status(RideStatus.COMPLETED)] == [finished.id]
