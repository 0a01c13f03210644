# 📄 File: marketplace/modules/cinema/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how cinemas, movies, screens, seats, shows and tickets are stored as tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the cinema vertical: screen names unique per cinema, seat
# positions unique per screen, unique BMS ticket numbers and JSON seat counters.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - cinema_repository_impl.py
# - migrations

from sqlalchemy import Boolean, Column, Date, Index, Integer, String, Text, UniqueConstraint

from marketplace.modules.cinema.domain.models import (
    Certification,
    CinemaType,
    ScreenFormat,
    ShowStatus,
    SoundSystem,
    TicketSource,
    TicketStatus,
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


class CinemaModel(TimestampMixin, SoftDeleteMixin, ListingMixin, DatabaseBase):
    __tablename__ = "cinemas"
    __table_args__ = (
        enum_check("cinema_type", CinemaType),
        Index("ix_cinemas_cinema_type_is_active", "cinema_type", "is_active"),
    )

    owner_id = foreign_key("users.id", ondelete="CASCADE")
    name = Column(String(160), nullable=False, index=True)
    slug = Column(String(180), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    address_id = foreign_key("addresses.id", ondelete="RESTRICT", index=False)
    location = Column(JSONType, nullable=True)
    cinema_type = enum_column(CinemaType, default=CinemaType.MULTIPLEX)
    amenities = Column(JSONType, nullable=False, default=list)
    opening_time = Column(String(5), nullable=True)
    closing_time = Column(String(5), nullable=True)
    logo = Column(String(500), nullable=True)
    images = Column(JSONType, nullable=False, default=list)
    commission_percentage = Column(Money, nullable=True)
    stats = Column(JSONType, nullable=False, default=dict, comment="{total_shows, total_bookings}")


class MovieModel(TimestampMixin, SoftDeleteMixin, RatingMixin, DatabaseBase):
    """Movie title; rating is on a 0-10 scale."""
    __tablename__ = "movies"
    __table_args__ = (
        enum_check("certification", Certification),
        Index("ix_movies_title_release_date", "title", "release_date"),
        Index("ix_movies_is_upcoming_is_active", "is_upcoming", "is_active"),
    )

    title = Column(String(200), nullable=False)
    slug = Column(String(220), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    languages = Column(JSONType, nullable=False, default=list)
    genres = Column(JSONType, nullable=False, default=list)
    duration_minutes = Column(Integer, nullable=False)
    certification = enum_column(Certification, nullable=True)
    release_date = Column(Date, nullable=True)
    is_upcoming = Column(Boolean, nullable=False, default=False)
    formats = Column(JSONType, nullable=False, default=list)
    poster = Column(String(500), nullable=True)
    banner = Column(String(500), nullable=True)
    trailer_url = Column(String(500), nullable=True)
    cast = Column(JSONType, nullable=False, default=list)
    crew = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    tags = Column(JSONType, nullable=False, default=list)


class ScreenModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "screens"
    __table_args__ = (
        enum_check("format", ScreenFormat),
        enum_check("sound_system", SoundSystem),
        UniqueConstraint("cinema_id", "name", name="uq_screens_cinema_id_name"),
    )

    cinema_id = foreign_key("cinemas.id", ondelete="CASCADE", index=False)
    name = Column(String(60), nullable=False)
    screen_number = Column(Integer, nullable=True)
    format = enum_column(ScreenFormat, default=ScreenFormat.TWO_D)
    sound_system = enum_column(SoundSystem, nullable=True)
    seating = Column(JSONType, nullable=False, comment="{total_seats, rows, columns}")
    seat_categories = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_maintenance = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)


class SeatModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "seats"
    __table_args__ = (
        UniqueConstraint("screen_id", "row", "column", name="uq_seats_screen_id_row_column"),
        Index("ix_seats_screen_id_category", "screen_id", "category"),
    )

    cinema_id = foreign_key("cinemas.id", ondelete="CASCADE")
    screen_id = foreign_key("screens.id", ondelete="CASCADE", index=False)
    seat_number = Column(String(10), nullable=False)
    row = Column(String(5), nullable=False)
    column = Column(Integer, nullable=False)
    category = Column(String(40), nullable=False)
    features = Column(JSONType, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_under_maintenance = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)


class ShowModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "shows"
    __table_args__ = (
        enum_check("format", ScreenFormat),
        enum_check("status", ShowStatus),
        Index("ix_shows_cinema_id_show_date_start_time", "cinema_id", "show_date", "start_time"),
        Index("ix_shows_movie_id_show_date", "movie_id", "show_date"),
        Index("ix_shows_screen_id_show_date", "screen_id", "show_date"),
        Index("ix_shows_status_show_date", "status", "show_date"),
    )

    cinema_id = foreign_key("cinemas.id", ondelete="CASCADE", index=False)
    screen_id = foreign_key("screens.id", ondelete="CASCADE", index=False)
    movie_id = foreign_key("movies.id", ondelete="CASCADE", index=False)
    format = enum_column(ScreenFormat, default=ScreenFormat.TWO_D)
    language = Column(String(40), nullable=False)
    show_date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    pricing = Column(JSONType, nullable=False, comment="[{category, base_price, convenience_fee, tax_percentage}]")
    seats = Column(JSONType, nullable=False, comment="{total, available, blocked, sold}")
    lock_ttl_seconds = Column(Integer, nullable=False, default=300)
    status = enum_column(ShowStatus, default=ShowStatus.SCHEDULED)
    cancellation = Column(JSONType, nullable=True)
    notes = Column(Text, nullable=True)


class TicketModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "tickets"
    __table_args__ = (
        enum_check("status", TicketStatus),
        enum_check("payment_status", PaymentStatus),
        enum_check("source", TicketSource),
        Index("ix_tickets_show_id_status", "show_id", "status"),
        Index("ix_tickets_user_id_created_at", "user_id", "created_at"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    cinema_id = foreign_key("cinemas.id", ondelete="RESTRICT", index=False)
    screen_id = foreign_key("screens.id", ondelete="RESTRICT", index=False)
    show_id = foreign_key("shows.id", ondelete="RESTRICT", index=False)
    movie_id = foreign_key("movies.id", ondelete="RESTRICT", index=False)
    ticket_number = Column(String(32), nullable=False, unique=True, index=True)
    seats = Column(JSONType, nullable=False, comment="[{seat_id, seat_number, row, column, category, price}]")
    seat_count = Column(Integer, nullable=False)
    pricing = Column(JSONType, nullable=False)
    coupon_id = foreign_key("coupons.id", ondelete="SET NULL", nullable=True, index=False)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PENDING, index=True)
    status = enum_column(TicketStatus, default=TicketStatus.RESERVED)
    qr_code = Column(String(500), nullable=True)
    checked_in_at = Column(UTCDateTime, nullable=True)
    cancellation = Column(JSONType, nullable=True)
    refund = Column(JSONType, nullable=True, comment="{amount, payment_id, refunded_at, reason}")
    source = enum_column(TicketSource, default=TicketSource.APP)
    notes = Column(Text, nullable=True)
