# 📄 File: marketplace/modules/mobility/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how vehicles and rides are stored as database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for vehicles (unique registration number) and rides (JSON
# pickup/drop/fare blocks, driver/status and user/date indexes).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - mobility_repository_impl.py
# - migrations

from sqlalchemy import Boolean, Column, Float, Index, Integer, String, Text

from marketplace.modules.mobility.domain.models import (
    FuelType,
    RideSource,
    RideStatus,
    VehicleCategory,
    VehicleType,
)
from marketplace.shared.domain.value_objects import PaymentStatus
from marketplace.shared.infrastructure.database.base import DatabaseBase, SoftDeleteMixin, TimestampMixin
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    UTCDateTime,
    enum_check,
    enum_column,
    foreign_key,
)


class VehicleModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "vehicles"
    __table_args__ = (
        enum_check("vehicle_type", VehicleType),
        enum_check("category", VehicleCategory),
        enum_check("fuel_type", FuelType),
        Index("ix_vehicles_vehicle_type_category", "vehicle_type", "category"),
        Index("ix_vehicles_owner_id_is_active", "owner_id", "is_active"),
    )

    owner_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    driver_profile_id = foreign_key("driver_profiles.id", ondelete="SET NULL", nullable=True)
    vehicle_type = enum_column(VehicleType)
    category = enum_column(VehicleCategory, nullable=True)
    brand = Column(String(60), nullable=True)
    model = Column(String(60), nullable=True)
    year = Column(Integer, nullable=True)
    color = Column(String(30), nullable=True)
    registration_number = Column(String(20), nullable=False, unique=True, index=True)
    rc = Column(JSONType, nullable=True)
    insurance = Column(JSONType, nullable=True)
    fitness_certificate = Column(JSONType, nullable=True)
    permit = Column(JSONType, nullable=True)
    seating_capacity = Column(Integer, nullable=True)
    fuel_type = enum_column(FuelType, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_available = Column(Boolean, nullable=False, default=True, index=True)
    verification = Column(JSONType, nullable=False, default=dict)
    stats = Column(JSONType, nullable=False, default=dict, comment="{total_trips, total_distance_km}")


class RideModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "rides"
    __table_args__ = (
        enum_check("ride_type", VehicleType),
        enum_check("category", VehicleCategory),
        enum_check("status", RideStatus),
        enum_check("payment_status", PaymentStatus),
        enum_check("source", RideSource),
        Index("ix_rides_driver_id_status", "driver_id", "status"),
        Index("ix_rides_user_id_created_at", "user_id", "created_at"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    driver_id = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    driver_profile_id = foreign_key("driver_profiles.id", ondelete="SET NULL", nullable=True)
    vehicle_id = foreign_key("vehicles.id", ondelete="SET NULL", nullable=True)
    ride_type = enum_column(VehicleType, index=True)
    category = enum_column(VehicleCategory, nullable=True)
    pickup = Column(JSONType, nullable=False, comment="{address, point}")
    drop = Column(JSONType, nullable=False, comment="{address, point}")
    requested_at = Column(UTCDateTime, nullable=False, index=True)
    accepted_at = Column(UTCDateTime, nullable=True)
    arrived_at = Column(UTCDateTime, nullable=True)
    started_at = Column(UTCDateTime, nullable=True)
    completed_at = Column(UTCDateTime, nullable=True)
    distance_km = Column(Float, nullable=True)
    duration_minutes = Column(Float, nullable=True)
    fare = Column(JSONType, nullable=False)
    coupon_id = foreign_key("coupons.id", ondelete="SET NULL", nullable=True, index=False)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING)
    status = enum_column(RideStatus, default=RideStatus.REQUESTED)
    cancellation = Column(JSONType, nullable=True, comment="{cancelled_by, reason, cancelled_at, penalty_amount}")
    ratings = Column(JSONType, nullable=False, default=dict)
    notes = Column(Text, nullable=True)
    source = enum_column(RideSource, default=RideSource.APP)
