# 📄 File: marketplace/modules/hospitality/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for hotels and restaurants.
# 🧪 Purpose (Technical Summary):
# Exports hospitality repository interfaces.
# 🔗 Dependencies:
# hospitality_repository.py
# 🔄 Connected Modules / Calls From:
# hospitality infrastructure

from .hospitality_repository import (
    HotelRepository,
    MenuItemRepository,
    RestaurantRepository,
    RestaurantTableRepository,
    RoomBookingRepository,
    RoomRepository,
    TableBookingRepository,
)

__all__ = [
    "HotelRepository",
    "MenuItemRepository",
    "RestaurantRepository",
    "RestaurantTableRepository",
    "RoomBookingRepository",
    "RoomRepository",
    "TableBookingRepository",
]
