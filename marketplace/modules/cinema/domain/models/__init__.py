# 📄 File: marketplace/modules/cinema/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import cinema, movie, show and ticket record types from.
# 🧪 Purpose (Technical Summary):
# Re-exports cinema domain entities, value objects and enums.
# 🔗 Dependencies:
# venue.py, show.py
# 🔄 Connected Modules / Calls From:
# cinema repositories, finance, reviews

from .show import (
    TICKET_NUMBER_PREFIX,
    PricingTier,
    SeatCounters,
    SeatSnapshot,
    Show,
    ShowActor,
    ShowStatus,
    Ticket,
    TicketActor,
    TicketPricing,
    TicketSource,
    TicketStatus,
)
from .venue import (
    CastMember,
    Certification,
    Cinema,
    CinemaStats,
    CinemaType,
    CrewMember,
    Movie,
    Screen,
    ScreenFormat,
    ScreenSeating,
    Seat,
    SeatCategory,
    SeatFeatures,
    SoundSystem,
)

__all__ = [
    "TICKET_NUMBER_PREFIX",
    "CastMember",
    "Certification",
    "Cinema",
    "CinemaStats",
    "CinemaType",
    "CrewMember",
    "Movie",
    "PricingTier",
    "Screen",
    "ScreenFormat",
    "ScreenSeating",
    "Seat",
    "SeatCategory",
    "SeatCounters",
    "SeatFeatures",
    "SeatSnapshot",
    "Show",
    "ShowActor",
    "ShowStatus",
    "SoundSystem",
    "Ticket",
    "TicketActor",
    "TicketPricing",
    "TicketSource",
    "TicketStatus",
]
