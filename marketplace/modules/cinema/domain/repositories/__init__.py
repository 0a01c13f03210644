# 📄 File: marketplace/modules/cinema/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for cinemas and tickets.
# 🧪 Purpose (Technical Summary):
# Exports cinema repository interfaces.
# 🔗 Dependencies:
# cinema_repository.py
# 🔄 Connected Modules / Calls From:
# cinema infrastructure

from .cinema_repository import (
    CinemaRepository,
    MovieRepository,
    ScreenRepository,
    SeatRepository,
    ShowRepository,
    TicketRepository,
)

__all__ = [
    "CinemaRepository",
    "MovieRepository",
    "ScreenRepository",
    "SeatRepository",
    "ShowRepository",
    "TicketRepository",
]
