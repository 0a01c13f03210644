# 📄 File: marketplace/modules/cinema/domain/models/venue.py
# 🧭 Purpose (Layman Explanation):
# Cinemas, their screens and seats, and the movies they play.
# 🧪 Purpose (Technical Summary):
# Cinema listing, Movie (0-10 rating scale), Screen (seat categories, maintenance flag)
# and Seat (row/column position, category, features) entities.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.utils
# 🔄 Connected Modules / Calls From:
# cinema shows and tickets, cinema repositories, reviews (rating cache)

import uuid
from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, field_validator

from marketplace.shared.domain.base import ListingModel, RatedModel, SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import GeoPoint, Percentage
from marketplace.shared.utils.helpers import generate_slug
from marketplace.shared.utils.validators import normalize_time_slot


class ScreenFormat(str, Enum):
    TWO_D = "2D"
    THREE_D = "3D"
    IMAX = "IMAX"
    FOUR_DX = "4DX"


# =============================================================================
# CINEMA
# =============================================================================

class CinemaType(str, Enum):
    SINGLE_SCREEN = "single-screen"
    MULTIPLEX = "multiplex"


class CinemaStats(ValueObject):
    total_shows: int = Field(default=0, ge=0)
    total_bookings: int = Field(default=0, ge=0)


class Cinema(ListingModel):
    owner_id: uuid.UUID
    name: str = Field(min_length=1, max_length=160)
    slug: str = Field(min_length=1, max_length=180)
    description: Optional[str] = None
    address_id: uuid.UUID
    location: Optional[GeoPoint] = None
    cinema_type: CinemaType = CinemaType.MULTIPLEX
    amenities: List[str] = Field(default_factory=list)
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    logo: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    commission_percentage: Optional[Percentage] = None
    stats: CinemaStats = Field(default_factory=CinemaStats)

    @field_validator("opening_time", "closing_time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        return normalize_time_slot(v)

    @classmethod
    def create(cls, owner_id: uuid.UUID, name: str, address_id: uuid.UUID, **kwargs: Any) -> "Cinema":
        return cls(
            owner_id=owner_id,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            address_id=address_id,
            **kwargs
        )


# =============================================================================
# MOVIE
# =============================================================================

class Certification(str, Enum):
    U = "U"
    UA = "UA"
    A = "A"
    S = "S"


class CastMember(ValueObject):
    name: str
    role: Optional[str] = None
    character_name: Optional[str] = None
    profile_photo: Optional[str] = None


class CrewMember(ValueObject):
    name: str
    department: Optional[str] = None
    profile_photo: Optional[str] = None


class Movie(RatedModel):
    """Film title. Movies are rated out of 10, unlike other listings."""

    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=220)
    description: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    duration_minutes: int = Field(ge=1)
    certification: Optional[Certification] = None
    release_date: Optional[date] = None
    is_upcoming: bool = False
    formats: List[ScreenFormat] = Field(default_factory=list)
    poster: Optional[str] = None
    banner: Optional[str] = None
    trailer_url: Optional[str] = None
    cast: List[CastMember] = Field(default_factory=list)
    crew: List[CrewMember] = Field(default_factory=list)
    rating: float = Field(default=0, ge=0, le=10)
    is_active: bool = True
    is_featured: bool = False
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def create(cls, title: str, duration_minutes: int, **kwargs: Any) -> "Movie":
        return cls(
            title=title,
            slug=kwargs.pop("slug", None) or generate_slug(title),
            duration_minutes=duration_minutes,
            **kwargs
        )


# =============================================================================
# SCREEN & SEAT
# =============================================================================

class SoundSystem(str, Enum):
    DOLBY = "Dolby"
    DOLBY_ATMOS = "Dolby Atmos"
    DTS = "DTS"
    IMAX_SOUND = "IMAX Sound"


class ScreenSeating(ValueObject):
    total_seats: int = Field(ge=1)
    rows: Optional[int] = Field(None, ge=1)
    columns: Optional[int] = Field(None, ge=1)


class SeatCategory(ValueObject):
    name: str
    price_multiplier: float = Field(default=1, ge=0.5)
    color_code: Optional[str] = None


class Screen(SoftDeletableModel):
    """Auditorium; the name is unique within its cinema."""

    cinema_id: uuid.UUID
    name: str = Field(min_length=1, max_length=60)
    screen_number: Optional[int] = Field(None, ge=1)
    format: ScreenFormat = ScreenFormat.TWO_D
    sound_system: Optional[SoundSystem] = None
    seating: ScreenSeating
    seat_categories: List[SeatCategory] = Field(default_factory=list)
    is_active: bool = True
    is_maintenance: bool = False
    notes: Optional[str] = None

    def mark_maintenance(self) -> None:
        self.is_maintenance = True
        self.touch()

    def activate(self) -> None:
        self.is_maintenance = False
        self.is_active = True
        self.touch()


class SeatFeatures(ValueObject):
    is_wheelchair_accessible: bool = False
    is_couple_seat: bool = False
    is_recliner: bool = False


class Seat(SoftDeletableModel):
    """Physical seat; row and column are unique within a screen."""

    cinema_id: uuid.UUID
    screen_id: uuid.UUID
    seat_number: str = Field(min_length=1, max_length=10)
    row: str = Field(min_length=1, max_length=5)
    column: int = Field(ge=1)
    category: str = Field(min_length=1, max_length=40)
    features: SeatFeatures = Field(default_factory=SeatFeatures)
    is_active: bool = True
    is_under_maintenance: bool = False
    notes: Optional[str] = None

    @field_validator("row", "seat_number")
    @classmethod
    def upper(cls, v: str) -> str:
        return v.strip().upper()

    def mark_maintenance(self) -> None:
        self.is_under_maintenance = True
        self.is_active = False
        self.touch()

    def activate(self) -> None:
        self.is_under_maintenance = False
        self.is_active = True
        self.touch()
