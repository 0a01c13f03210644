# 📄 File: marketplace/modules/services/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how home-service bookings, their status history, doctor/advocate
# consultations and provider availability are stored as database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for bookings (provider/date and status indexes, self-reference
# for rescheduled bookings), the append-only booking status log, appointments and
# availability schedules.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - booking_repository_impl.py, appointment_repository_impl.py
# - migrations

from sqlalchemy import Boolean, CheckConstraint, Column, Date, Index, Integer, String, Text

from marketplace.modules.services.domain.models import (
    AppointmentSource,
    AppointmentStatus,
    AvailabilityType,
    BookingActor,
    BookingStatus,
    ConsultationMode,
    ProfessionalType,
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


class BookingModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "bookings"
    __table_args__ = (
        enum_check("status", BookingStatus),
        enum_check("payment_status", PaymentStatus),
        Index("ix_bookings_provider_id_scheduled_date", "provider_id", "scheduled_date"),
        Index("ix_bookings_user_id_created_at", "user_id", "created_at"),
        Index("ix_bookings_status_payment_status", "status", "payment_status"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    provider_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    service_id = foreign_key("services.id", ondelete="RESTRICT")
    category_id = foreign_key("categories.id", ondelete="SET NULL", nullable=True, index=False)
    address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    scheduled_date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=False, comment="HH:MM")
    end_time = Column(String(5), nullable=False, comment="HH:MM")
    timezone = Column(String(64), nullable=False, default="Asia/Kolkata")
    pricing = Column(JSONType, nullable=False)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING)
    status = enum_column(BookingStatus, default=BookingStatus.PENDING)
    cancellation = Column(JSONType, nullable=True, comment="{cancelled_by, reason, cancelled_at, refund_amount}")
    invoice_id = foreign_key("invoices.id", ondelete="SET NULL", nullable=True, index=False, use_alter=True)
    customer_notes = Column(Text, nullable=True)
    provider_notes = Column(Text, nullable=True)
    is_rescheduled = Column(Boolean, nullable=False, default=False)
    rescheduled_from = foreign_key("bookings.id", ondelete="SET NULL", nullable=True, index=False)


class BookingStatusLogModel(TimestampMixin, DatabaseBase):
    __tablename__ = "booking_status_logs"
    __table_args__ = (
        enum_check("previous_status", BookingStatus),
        enum_check("new_status", BookingStatus),
        enum_check("changed_by", BookingActor),
        Index("ix_booking_status_logs_booking_id_created_at", "booking_id", "created_at"),
        Index("ix_booking_status_logs_new_status_created_at", "new_status", "created_at"),
    )

    booking_id = foreign_key("bookings.id", ondelete="CASCADE", index=False)
    previous_status = enum_column(BookingStatus, nullable=True)
    new_status = enum_column(BookingStatus)
    changed_by = enum_column(BookingActor, index=True)
    user_id = foreign_key("users.id", ondelete="SET NULL", nullable=True)
    reason = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    meta = Column(JSONType, nullable=False, default=dict, comment="{ip_address, user_agent, source}")


class AppointmentModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "appointments"
    __table_args__ = (
        enum_check("professional_type", ProfessionalType),
        enum_check("mode", ConsultationMode),
        enum_check("payment_status", PaymentStatus),
        enum_check("status", AppointmentStatus),
        enum_check("source", AppointmentSource),
        CheckConstraint("end_time > start_time", name="end_after_start"),
        Index(
            "ix_appointments_provider_id_appointment_date_start_time",
            "provider_id", "appointment_date", "start_time",
        ),
        Index("ix_appointments_user_id_appointment_date", "user_id", "appointment_date"),
        Index("ix_appointments_status_payment_status", "status", "payment_status"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT")
    provider_id = foreign_key("users.id", ondelete="RESTRICT")
    professional_type = enum_column(ProfessionalType, index=True)
    doctor_profile_id = foreign_key("doctor_profiles.id", ondelete="SET NULL", nullable=True, index=False)
    advocate_profile_id = foreign_key("advocate_profiles.id", ondelete="SET NULL", nullable=True, index=False)
    appointment_date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5), nullable=False, comment="HH:MM")
    end_time = Column(String(5), nullable=False, comment="HH:MM")
    duration_minutes = Column(Integer, nullable=False, default=30)
    mode = enum_column(ConsultationMode, index=True)
    location = Column(JSONType, nullable=True, comment="{name, address_id}")
    reason = Column(Text, nullable=True)
    fee = Column(JSONType, nullable=False, comment="{amount, currency}")
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING, index=True)
    status = enum_column(AppointmentStatus, default=AppointmentStatus.SCHEDULED, index=True)
    cancellation = Column(JSONType, nullable=True, comment="{reason, cancelled_at, cancelled_by}")
    confirmed_at = Column(UTCDateTime, nullable=True)
    checked_in_at = Column(UTCDateTime, nullable=True)
    completed_at = Column(UTCDateTime, nullable=True)
    notes = Column(Text, nullable=True)
    source = enum_column(AppointmentSource, default=AppointmentSource.APP)


class AvailabilityModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "availabilities"
    __table_args__ = (
        enum_check("type", AvailabilityType),
        Index("ix_availabilities_provider_id_service_id", "provider_id", "service_id"),
    )

    provider_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    service_id = foreign_key("services.id", ondelete="CASCADE", nullable=True)
    type = enum_column(AvailabilityType, default=AvailabilityType.WEEKLY, index=True)
    weekly = Column(JSONType, nullable=False, default=dict, comment="{monday: [{start_time, end_time}], ...}")
    date_specific = Column(
        JSONType, nullable=False, default=list,
        comment="[{day, slots: [{start_time, end_time, is_booked, booking_id}]}]"
    )
    slot_duration = Column(Integer, nullable=False, default=60)
    buffer_time = Column(Integer, nullable=False, default=0)
    timezone = Column(String(64), nullable=False, default="Asia/Kolkata")
    is_active = Column(Boolean, nullable=False, default=True, index=True)
