# 📄 File: marketplace/modules/hospitality/infrastructure/database/hospitality_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for hotels and restaurants: finding listings, free tables,
# today's reservations and stays that clash with a requested date range.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the hospitality repository interfaces built on the
# generic SQLAlchemyRepository.
#
# 🔗 Dependencies:
# - hospitality domain repositories and models
# - hospitality SQLAlchemy models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services
# - reviews rating service (rating cache targets)

import logging
import uuid
from datetime import date
from typing import List, Optional

from marketplace.modules.hospitality.domain.models import (
    Hotel,
    MenuItem,
    Restaurant,
    RestaurantTable,
    Room,
    RoomBooking,
    StayStatus,
    TableBooking,
    TableStatus,
)
from marketplace.modules.hospitality.domain.repositories import (
    HotelRepository,
    MenuItemRepository,
    RestaurantRepository,
    RestaurantTableRepository,
    RoomBookingRepository,
    RoomRepository,
    TableBookingRepository,
)
from marketplace.modules.hospitality.infrastructure.database.models import (
    HotelModel,
    MenuItemModel,
    RestaurantModel,
    RestaurantTableModel,
    RoomBookingModel,
    RoomModel,
    TableBookingModel,
)
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)

_CLOSED_STAY_STATUSES = (StayStatus.CANCELLED.value, StayStatus.NO_SHOW.value)


class HotelRepositoryImpl(SQLAlchemyRepository[Hotel, HotelModel], HotelRepository):

    entity_class = Hotel
    model_class = HotelModel
    resource_name = "Hotel"

    async def get_by_slug(self, slug: str) -> Optional[Hotel]:
        return await self._first(self._select().where(HotelModel.slug == slug.strip().lower()))

    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Hotel]:
        stmt = self._select().where(HotelModel.owner_id == owner_id).order_by(HotelModel.name)
        return await self._all(stmt)

    async def list_public(self, min_stars: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[Hotel]:
        stmt = self._select().where(
            HotelModel.is_active.is_(True),
            HotelModel.is_approved.is_(True),
        )
        if min_stars is not None:
            stmt = stmt.where(HotelModel.star_rating >= min_stars)
        stmt = stmt.order_by(HotelModel.is_featured.desc(), HotelModel.rating.desc())
        return await self._all(stmt.offset(offset).limit(limit))


class RestaurantRepositoryImpl(SQLAlchemyRepository[Restaurant, RestaurantModel], RestaurantRepository):

    entity_class = Restaurant
    model_class = RestaurantModel
    resource_name = "Restaurant"

    async def get_by_slug(self, slug: str) -> Optional[Restaurant]:
        return await self._first(self._select().where(RestaurantModel.slug == slug.strip().lower()))

    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Restaurant]:
        stmt = self._select().where(RestaurantModel.owner_id == owner_id).order_by(RestaurantModel.name)
        return await self._all(stmt)

    async def list_public(self, cuisine: Optional[str] = None, limit: int = 50, offset: int = 0) -> List[Restaurant]:
        stmt = self._select().where(
            RestaurantModel.is_active.is_(True),
            RestaurantModel.is_approved.is_(True),
        ).order_by(RestaurantModel.is_featured.desc(), RestaurantModel.rating.desc())
        if cuisine is None:
            return await self._all(stmt.offset(offset).limit(limit))

        # Cuisines live in a JSON list, so matching happens in Python
        restaurants = [r for r in await self._all(stmt) if r.serves(cuisine)]
        logger.debug(f"{len(restaurants)} restaurants serve {cuisine}")
        return restaurants[offset:offset + limit]


class RoomRepositoryImpl(SQLAlchemyRepository[Room, RoomModel], RoomRepository):

    entity_class = Room
    model_class = RoomModel
    resource_name = "Room"

    async def list_for_hotel(self, hotel_id: uuid.UUID, bookable_only: bool = False) -> List[Room]:
        stmt = self._select().where(RoomModel.hotel_id == hotel_id)
        if bookable_only:
            stmt = stmt.where(
                RoomModel.is_active.is_(True),
                RoomModel.is_bookable.is_(True),
                RoomModel.available_rooms > 0,
            )
        return await self._all(stmt.order_by(RoomModel.room_type))


class RoomBookingRepositoryImpl(SQLAlchemyRepository[RoomBooking, RoomBookingModel], RoomBookingRepository):

    entity_class = RoomBooking
    model_class = RoomBookingModel
    resource_name = "RoomBooking"

    async def get_by_booking_number(self, booking_number: str) -> Optional[RoomBooking]:
        stmt = self._select().where(RoomBookingModel.booking_number == booking_number.strip().upper())
        return await self._first(stmt)

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[RoomBooking]:
        stmt = (
            self._select()
            .where(RoomBookingModel.user_id == user_id)
            .order_by(RoomBookingModel.check_in_date.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_overlapping(self, room_id: uuid.UUID, check_in_date: date, check_out_date: date) -> List[RoomBooking]:
        stmt = self._select().where(
            RoomBookingModel.room_id == room_id,
            RoomBookingModel.status.notin_(_CLOSED_STAY_STATUSES),
            RoomBookingModel.check_in_date < check_out_date,
            RoomBookingModel.check_out_date > check_in_date,
        )
        return await self._all(stmt.order_by(RoomBookingModel.check_in_date))


class RestaurantTableRepositoryImpl(
    SQLAlchemyRepository[RestaurantTable, RestaurantTableModel], RestaurantTableRepository
):

    entity_class = RestaurantTable
    model_class = RestaurantTableModel
    resource_name = "RestaurantTable"

    async def get_by_number(self, restaurant_id: uuid.UUID, table_number: str) -> Optional[RestaurantTable]:
        stmt = self._select().where(
            RestaurantTableModel.restaurant_id == restaurant_id,
            RestaurantTableModel.table_number == table_number.strip(),
        )
        return await self._first(stmt)

    async def list_available(self, restaurant_id: uuid.UUID, guests: int) -> List[RestaurantTable]:
        stmt = (
            self._select()
            .where(
                RestaurantTableModel.restaurant_id == restaurant_id,
                RestaurantTableModel.is_active.is_(True),
                RestaurantTableModel.status == TableStatus.AVAILABLE.value,
                RestaurantTableModel.capacity >= guests,
            )
            .order_by(RestaurantTableModel.capacity, RestaurantTableModel.table_number)
        )
        return [table for table in await self._all(stmt) if table.seats(guests)]


class MenuItemRepositoryImpl(SQLAlchemyRepository[MenuItem, MenuItemModel], MenuItemRepository):

    entity_class = MenuItem
    model_class = MenuItemModel
    resource_name = "MenuItem"

    async def list_for_restaurant(self, restaurant_id: uuid.UUID, available_only: bool = True) -> List[MenuItem]:
        stmt = self._select().where(MenuItemModel.restaurant_id == restaurant_id)
        if available_only:
            stmt = stmt.where(MenuItemModel.is_active.is_(True))
        stmt = stmt.order_by(MenuItemModel.category_name, MenuItemModel.name)
        items = await self._all(stmt)
        if available_only:
            items = [item for item in items if item.availability.is_available]
        return items


class TableBookingRepositoryImpl(SQLAlchemyRepository[TableBooking, TableBookingModel], TableBookingRepository):

    entity_class = TableBooking
    model_class = TableBookingModel
    resource_name = "TableBooking"

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[TableBooking]:
        stmt = (
            self._select()
            .where(TableBookingModel.user_id == user_id)
            .order_by(TableBookingModel.booking_date.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_table_on(self, table_id: uuid.UUID, day: date) -> List[TableBooking]:
        stmt = (
            self._select()
            .where(
                TableBookingModel.table_id == table_id,
                TableBookingModel.booking_date == day,
                TableBookingModel.status.notin_(_CLOSED_STAY_STATUSES),
            )
            .order_by(TableBookingModel.start_time)
        )
        return await self._all(stmt)
