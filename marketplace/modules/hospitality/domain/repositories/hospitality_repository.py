# 📄 File: marketplace/modules/hospitality/domain/repositories/hospitality_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how hotels, rooms, restaurants, tables, dishes and reservations are looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for hospitality entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, hospitality domain models
# 🔄 Connected Modules / Calls From:
# hospitality infrastructure implementations

import uuid
from abc import abstractmethod
from datetime import date
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import Hotel, MenuItem, Restaurant, RestaurantTable, Room, RoomBooking, TableBooking


class HotelRepository(BaseRepository[Hotel]):

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Hotel]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Hotel]:
        pass

    @abstractmethod
    async def list_public(self, min_stars: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[Hotel]:
        pass


class RestaurantRepository(BaseRepository[Restaurant]):

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Restaurant]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Restaurant]:
        pass

    @abstractmethod
    async def list_public(self, cuisine: Optional[str] = None, limit: int = 50, offset: int = 0) -> List[Restaurant]:
        """Active, approved restaurants, optionally serving a cuisine."""
        pass


class RoomRepository(BaseRepository[Room]):

    @abstractmethod
    async def list_for_hotel(self, hotel_id: uuid.UUID, bookable_only: bool = False) -> List[Room]:
        pass


class RoomBookingRepository(BaseRepository[RoomBooking]):

    @abstractmethod
    async def get_by_booking_number(self, booking_number: str) -> Optional[RoomBooking]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[RoomBooking]:
        pass

    @abstractmethod
    async def list_overlapping(self, room_id: uuid.UUID, check_in_date: date, check_out_date: date) -> List[RoomBooking]:
        """
        Live bookings of a room whose stay overlaps the given dates.

        A stay checking out on the day another checks in does not overlap.
        """
        pass


class RestaurantTableRepository(BaseRepository[RestaurantTable]):

    @abstractmethod
    async def get_by_number(self, restaurant_id: uuid.UUID, table_number: str) -> Optional[RestaurantTable]:
        pass

    @abstractmethod
    async def list_available(self, restaurant_id: uuid.UUID, guests: int) -> List[RestaurantTable]:
        pass


class MenuItemRepository(BaseRepository[MenuItem]):

    @abstractmethod
    async def list_for_restaurant(self, restaurant_id: uuid.UUID, available_only: bool = True) -> List[MenuItem]:
        pass


class TableBookingRepository(BaseRepository[TableBooking]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[TableBooking]:
        pass

    @abstractmethod
    async def list_for_table_on(self, table_id: uuid.UUID, day: date) -> List[TableBooking]:
        pass
