# 📄 File: tests/test_hospitality.py
# 🧭 Purpose (Layman Explanation):
# Checks hotel rooms and restaurants: rooms cannot be overbooked, stay prices add up
# per night, clashing stays are found, and menu prices pick the right variant.
# 🧪 Purpose (Technical Summary):
# Tests Room/RoomBooking/RestaurantTable/MenuItem/Restaurant domain rules and the
# hospitality SQLAlchemy repositories (overlap query, cuisine filter, table search).
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.hospitality

import uuid
from datetime import date

import pytest

from marketplace.modules.hospitality.domain.models import (
    FoodType,
    GuestCount,
    MenuItem,
    MenuVariant,
    Restaurant,
    RestaurantTable,
    RestaurantTiming,
    Room,
    RoomBooking,
    RoomCapacity,
    StayStatus,
    TableStatus,
)
from marketplace.modules.hospitality.infrastructure.database.hospitality_repository_impl import (
    MenuItemRepositoryImpl,
    RestaurantRepositoryImpl,
    RestaurantTableRepositoryImpl,
    RoomBookingRepositoryImpl,
)
from marketplace.shared.core.exceptions import BusinessRuleViolationError, InsufficientStockError, NotFoundError


def make_room(total: int = 3, available: int = 3) -> Room:
    return Room(
        hotel_id=uuid.uuid4(),
        room_type="Deluxe",
        capacity=RoomCapacity(adults=2, max_guests=3),
        total_rooms=total,
        available_rooms=available,
    )


def make_stay(room_id: uuid.UUID, check_in: date, check_out: date, **kwargs) -> RoomBooking:
    return RoomBooking.create(
        hotel_id=uuid.uuid4(),
        room_id=room_id,
        user_id=uuid.uuid4(),
        check_in_date=check_in,
        check_out_date=check_out,
        guests=GuestCount(adults=2, children=1),
        price_per_night=2500,
        **kwargs
    )


def make_restaurant(name: str, cuisines, **kwargs) -> Restaurant:
    return Restaurant.create(
        uuid.uuid4(),
        name,
        uuid.uuid4(),
        cuisines=cuisines,
        timing=RestaurantTiming(opening_time="11:00", closing_time="23:00"),
        **kwargs
    )


# ============================================================================
# ROOMS
# ============================================================================

class TestRoom:
    def test_reserve_and_release(self):
        room = make_room()
        room.reserve_room(2)
        assert room.available_rooms == 1
        assert room.stats.total_bookings == 1

        room.release_room(2)
        assert room.available_rooms == 3

    def test_cannot_overbook(self):
        room = make_room(total=2, available=1)
        with pytest.raises(InsufficientStockError):
            room.reserve_room(2)
        assert room.available_rooms == 1

    def test_release_cannot_exceed_total(self):
        room = make_room()
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            room.release_room(1)
        assert exc_info.value.details["rule"] == "room_release_exceeds_total"

    def test_available_cannot_exceed_total(self):
        with pytest.raises(ValueError):
            make_room(total=2, available=3)

    def test_fits_guest_count(self):
        room = make_room()
        assert room.fits(3)
        assert not room.fits(4)


class TestRoomBooking:
    def test_total_counts_nights_and_rooms(self):
        stay = make_stay(
            uuid.uuid4(), date(2026, 12, 20), date(2026, 12, 23),
            rooms_booked=2, taxes=1800, discount=500, extra_bed_charge=700,
        )
        assert stay.nights == 3
        assert stay.pricing.total_amount == 2500 * 3 * 2 + 1800 + 700 - 500
        assert stay.booking_number.startswith("HTL-")
        assert stay.guests.total == 3

    def test_check_out_must_follow_check_in(self):
        with pytest.raises(ValueError):
            make_stay(uuid.uuid4(), date(2026, 12, 20), date(2026, 12, 20))

    def test_stay_lifecycle(self):
        stay = make_stay(uuid.uuid4(), date(2026, 12, 20), date(2026, 12, 21))
        stay.confirm()
        stay.mark_paid(uuid.uuid4())
        stay.check_in()
        stay.check_out()

        assert stay.status == StayStatus.COMPLETED
        assert stay.checked_in_at is not None
        assert stay.checked_out_at is not None


async def test_overlapping_stays(session):
    repo = RoomBookingRepositoryImpl(session)
    room_id = uuid.uuid4()
    clash = await repo.add(make_stay(room_id, date(2026, 12, 20), date(2026, 12, 23)))
    await repo.add(make_stay(room_id, date(2026, 12, 23), date(2026, 12, 25)))
    cancelled = make_stay(room_id, date(2026, 12, 21), date(2026, 12, 22))
    cancelled.cancel(reason="plans changed")
    await repo.add(cancelled)

    overlapping = await repo.list_overlapping(room_id, date(2026, 12, 22), date(2026, 12, 23))
    assert [stay.id for stay in overlapping] == [clash.id]
    assert (await repo.get_by_booking_number(clash.booking_number.lower())).id == clash.id


# ============================================================================
# RESTAURANTS
# ============================================================================

def test_table_seats_range():
    table = RestaurantTable(restaurant_id=uuid.uuid4(), table_number="T4", capacity=4, min_capacity=2)
    assert table.seats(2)
    assert not table.seats(1)
    assert not table.seats(5)

    table.mark_reserved()
    assert table.status == TableStatus.RESERVED
    assert table.stats.total_bookings == 1


class TestMenuItem:
    def make_item(self, **kwargs) -> MenuItem:
        return MenuItem.create(
            uuid.uuid4(), "Mains", "Paneer Tikka", food_type=FoodType.VEG, base_price=280, **kwargs
        )

    def test_base_price_without_variants(self):
        item = self.make_item()
        assert item.slug == "paneer-tikka"
        assert item.price_for() == 280

    def test_named_and_default_variants(self):
        item = self.make_item(variants=[
            MenuVariant(name="Half", price=180),
            MenuVariant(name="Full", price=320, is_default=True),
        ])
        assert item.price_for("Half") == 180
        assert item.price_for() == 320

    def test_unknown_variant(self):
        with pytest.raises(NotFoundError):
            self.make_item().price_for("Jumbo")


async def test_tables_for_party(session):
    repo = RestaurantTableRepositoryImpl(session)
    restaurant_id = uuid.uuid4()
    for number, capacity, minimum in (("T1", 2, None), ("T2", 4, 2), ("T3", 8, 5)):
        await repo.add(RestaurantTable(
            restaurant_id=restaurant_id, table_number=number, capacity=capacity, min_capacity=minimum
        ))

    tables = await repo.list_available(restaurant_id, guests=3)
    assert [table.table_number for table in tables] == ["T2"]
    assert (await repo.get_by_number(restaurant_id, " T3 ")).capacity == 8


async def test_restaurants_by_cuisine(session):
    repo = RestaurantRepositoryImpl(session)
    await repo.add(make_restaurant("Dosa Corner", ["South Indian"], is_approved=True))
    await repo.add(make_restaurant("Tandoor House", ["North Indian", "Mughlai"], is_approved=True))
    await repo.add(make_restaurant("Unlisted Dhaba", ["North Indian"]))

    names = [restaurant.name for restaurant in await repo.list_public(cuisine="north indian")]
    assert names == ["Tandoor House"]


async def test_menu_hides_unavailable_items(session):
    repo = MenuItemRepositoryImpl(session)
    restaurant_id = uuid.uuid4()
    await repo.add(MenuItem.create(restaurant_id, "Mains", "Dal Makhani", food_type=FoodType.VEG, base_price=220))
    sold_out = MenuItem.create(restaurant_id, "Mains", "Butter Chicken", food_type=FoodType.NON_VEG, base_price=340)
    sold_out.availability = sold_out.availability.model_copy(update={"is_available": False})
    await repo.add(sold_out)

    assert [item.name for item in await repo.list_for_restaurant(restaurant_id)] == ["Dal Makhani"]
    assert len(await repo.list_for_restaurant(restaurant_id, available_only=False)) == 2
