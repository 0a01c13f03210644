# 📄 File: marketplace/modules/hospitality/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import hotel and restaurant record types from.
# 🧪 Purpose (Technical Summary):
# Re-exports hospitality domain entities, value objects and enums.
# 🔗 Dependencies:
# venue.py, room.py, dining.py
# 🔄 Connected Modules / Calls From:
# hospitality repositories, reviews, finance

from .dining import (
    AdvancePayment,
    BookingContact,
    FoodType,
    MenuAddon,
    MenuAvailability,
    MenuItem,
    MenuStats,
    MenuTags,
    MenuVariant,
    PartySize,
    RestaurantTable,
    TableBooking,
    TableBookingActor,
    TableBookingSource,
    TableFeatures,
    TableStatus,
)
from .room import (
    ROOM_BOOKING_PREFIX,
    BookingSource,
    GuestCount,
    GuestDetail,
    Room,
    RoomBooking,
    RoomBookingActor,
    RoomCapacity,
    RoomSize,
    StayPricing,
    StayStatus,
)
from .venue import (
    DeliverySettings,
    DineInSettings,
    Hotel,
    HotelPolicies,
    HotelTiming,
    HotelType,
    Restaurant,
    RestaurantTiming,
    RestaurantType,
    Venue,
    VenueStats,
)

__all__ = [
    "ROOM_BOOKING_PREFIX",
    "AdvancePayment",
    "BookingContact",
    "BookingSource",
    "DeliverySettings",
    "DineInSettings",
    "FoodType",
    "GuestCount",
    "GuestDetail",
    "Hotel",
    "HotelPolicies",
    "HotelTiming",
    "HotelType",
    "MenuAddon",
    "MenuAvailability",
    "MenuItem",
    "MenuStats",
    "MenuTags",
    "MenuVariant",
    "PartySize",
    "Restaurant",
    "RestaurantTable",
    "RestaurantTiming",
    "RestaurantType",
    "Room",
    "RoomBooking",
    "RoomBookingActor",
    "RoomCapacity",
    "RoomSize",
    "StayPricing",
    "StayStatus",
    "TableBooking",
    "TableBookingActor",
    "TableBookingSource",
    "TableFeatures",
    "TableStatus",
    "Venue",
    "VenueStats",
]
