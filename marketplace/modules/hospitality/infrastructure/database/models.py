# 📄 File: marketplace/modules/hospitality/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how hotels, rooms, stays, restaurants, tables, dishes and table reservations
# are stored as database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for hospitality with listing mixins, JSON value objects, a
# per-restaurant unique table number and a non-negative room availability check.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - hospitality_repository_impl.py
# - migrations

from sqlalchemy import Boolean, CheckConstraint, Column, Date, Index, Integer, String, Text, UniqueConstraint

from marketplace.modules.hospitality.domain.models import (
    BookingSource,
    FoodType,
    HotelType,
    RestaurantType,
    StayStatus,
    TableBookingSource,
    TableStatus,
)
from marketplace.shared.domain.value_objects import PaymentStatus
from marketplace.shared.infrastructure.database.base import (
    DatabaseBase,
    ListingMixin,
    RatingMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    Money,
    UTCDateTime,
    enum_check,
    enum_column,
    foreign_key,
)


# =============================================================================
# HOTELS
# =============================================================================

class HotelModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "hotels"
    __table_args__ = (
        enum_check("hotel_type", HotelType),
        Index("ix_hotels_is_active_is_approved", "is_active", "is_approved"),
    )

    owner_id = foreign_key("users.id", ondelete="CASCADE")
    name = Column(String(160), nullable=False, index=True)
    slug = Column(String(180), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    location = Column(JSONType, nullable=True, comment="{latitude, longitude}")
    logo = Column(String(500), nullable=True)
    images = Column(JSONType, nullable=False, default=list)
    commission_percentage = Column(Money, nullable=True)
    hotel_type = enum_column(HotelType, default=HotelType.HOTEL)
    star_rating = Column(Integer, nullable=True)
    amenities = Column(JSONType, nullable=False, default=list)
    timing = Column(JSONType, nullable=False, default=dict, comment="{check_in, check_out, is_24x7}")
    policies = Column(JSONType, nullable=False, default=dict)
    stats = Column(JSONType, nullable=False, default=dict, comment="{total_bookings}")


class RoomModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("available_rooms >= 0", name="available_rooms_non_negative"),
        Index("ix_rooms_hotel_id_is_bookable", "hotel_id", "is_bookable"),
    )

    hotel_id = foreign_key("hotels.id", ondelete="CASCADE", index=False)
    room_number = Column(String(20), nullable=True)
    room_type = Column(String(80), nullable=False)
    description = Column(Text, nullable=True)
    capacity = Column(JSONType, nullable=False, comment="{adults, children, max_guests}")
    bed_type = Column(String(40), nullable=True)
    bed_count = Column(Integer, nullable=False, default=1)
    amenities = Column(JSONType, nullable=False, default=list)
    size = Column(JSONType, nullable=False, default=dict, comment="{value, unit}")
    images = Column(JSONType, nullable=False, default=list)
    total_rooms = Column(Integer, nullable=False)
    available_rooms = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_bookable = Column(Boolean, nullable=False, default=True)
    extra_bed_allowed = Column(Boolean, nullable=False, default=False)
    extra_bed_charge = Column(Money, nullable=True)
    stats = Column(JSONType, nullable=False, default=dict)


class RoomBookingModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "room_bookings"
    __table_args__ = (
        enum_check("status", StayStatus),
        enum_check("payment_status", PaymentStatus),
        enum_check("source", BookingSource),
        Index("ix_room_bookings_hotel_id_check_in_date", "hotel_id", "check_in_date"),
        Index("ix_room_bookings_room_id_check_in_date_check_out_date", "room_id", "check_in_date", "check_out_date"),
    )

    hotel_id = foreign_key("hotels.id", ondelete="RESTRICT", index=False)
    room_id = foreign_key("rooms.id", ondelete="RESTRICT", index=False)
    user_id = foreign_key("users.id", ondelete="RESTRICT")
    booking_number = Column(String(32), nullable=False, unique=True, index=True)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    nights = Column(Integer, nullable=False)
    guests = Column(JSONType, nullable=False, comment="{adults, children}")
    guest_details = Column(JSONType, nullable=False, default=list)
    rooms_booked = Column(Integer, nullable=False, default=1)
    pricing = Column(JSONType, nullable=False)
    coupon_id = foreign_key("coupons.id", ondelete="SET NULL", nullable=True, index=False)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING)
    status = enum_column(StayStatus, default=StayStatus.PENDING, index=True)
    checked_in_at = Column(UTCDateTime, nullable=True)
    checked_out_at = Column(UTCDateTime, nullable=True)
    cancellation = Column(JSONType, nullable=True)
    special_request = Column(Text, nullable=True)
    source = enum_column(BookingSource, default=BookingSource.APP)


# =============================================================================
# RESTAURANTS
# =============================================================================

class RestaurantModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "restaurants"
    __table_args__ = (
        enum_check("restaurant_type", RestaurantType),
        Index("ix_restaurants_is_active_is_approved", "is_active", "is_approved"),
    )

    owner_id = foreign_key("users.id", ondelete="CASCADE")
    name = Column(String(160), nullable=False, index=True)
    slug = Column(String(180), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    location = Column(JSONType, nullable=True)
    logo = Column(String(500), nullable=True)
    images = Column(JSONType, nullable=False, default=list)
    commission_percentage = Column(Money, nullable=True)
    restaurant_type = enum_column(RestaurantType, default=RestaurantType.DELIVERY)
    cuisines = Column(JSONType, nullable=False, default=list)
    timing = Column(JSONType, nullable=False, comment="{opening_time, closing_time, is_24x7, weekly_off}")
    delivery = Column(JSONType, nullable=False, default=dict)
    dine_in = Column(JSONType, nullable=False, default=dict)


class RestaurantTableModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "restaurant_tables"
    __table_args__ = (
        enum_check("status", TableStatus),
        UniqueConstraint("restaurant_id", "table_number", name="uq_restaurant_tables_restaurant_id_table_number"),
    )

    restaurant_id = foreign_key("restaurants.id", ondelete="CASCADE", index=False)
    table_number = Column(String(20), nullable=False)
    name = Column(String(80), nullable=True)
    capacity = Column(Integer, nullable=False)
    min_capacity = Column(Integer, nullable=True)
    section = Column(String(60), nullable=True)
    qr_code = Column(String(500), nullable=True)
    status = enum_column(TableStatus, default=TableStatus.AVAILABLE)
    is_active = Column(Boolean, nullable=False, default=True)
    features = Column(JSONType, nullable=False, default=dict)
    stats = Column(JSONType, nullable=False, default=dict)


class MenuItemModel(TimestampMixin, SoftDeleteMixin, RatingMixin, DatabaseBase):
    __tablename__ = "menu_items"
    __table_args__ = (
        enum_check("food_type", FoodType),
        Index("ix_menu_items_restaurant_id_category_name", "restaurant_id", "category_name"),
    )

    restaurant_id = foreign_key("restaurants.id", ondelete="CASCADE", index=False)
    category_name = Column(String(80), nullable=False)
    name = Column(String(160), nullable=False)
    slug = Column(String(180), nullable=False)
    description = Column(Text, nullable=True)
    food_type = enum_column(FoodType)
    tags = Column(JSONType, nullable=False, default=dict)
    base_price = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    variants = Column(JSONType, nullable=False, default=list)
    addons = Column(JSONType, nullable=False, default=list)
    availability = Column(JSONType, nullable=False, default=dict, comment="{is_available, start_time, end_time}")
    image = Column(String(500), nullable=True)
    gallery = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_recommended = Column(Boolean, nullable=False, default=False)
    stats = Column(JSONType, nullable=False, default=dict, comment="{ordered_count}")


class TableBookingModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "table_bookings"
    __table_args__ = (
        enum_check("status", StayStatus),
        enum_check("source", TableBookingSource),
        Index("ix_table_bookings_table_id_booking_date", "table_id", "booking_date"),
        Index("ix_table_bookings_restaurant_id_booking_date", "restaurant_id", "booking_date"),
    )

    restaurant_id = foreign_key("restaurants.id", ondelete="CASCADE", index=False)
    table_id = foreign_key("restaurant_tables.id", ondelete="CASCADE", index=False)
    user_id = foreign_key("users.id", ondelete="RESTRICT")
    guests = Column(JSONType, nullable=False, comment="{count, adults, children}")
    booking_date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=120)
    contact = Column(JSONType, nullable=False, default=dict)
    special_request = Column(Text, nullable=True)
    status = enum_column(StayStatus, default=StayStatus.PENDING, index=True)
    cancellation = Column(JSONType, nullable=True)
    checked_in_at = Column(UTCDateTime, nullable=True)
    completed_at = Column(UTCDateTime, nullable=True)
    advance_payment = Column(JSONType, nullable=True, comment="{amount, payment_id, is_refundable}")
    source = enum_column(TableBookingSource, default=TableBookingSource.APP)
