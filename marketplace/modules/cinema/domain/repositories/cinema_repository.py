# 📄 File: marketplace/modules/cinema/domain/repositories/cinema_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how cinemas, movies, screens, seats, shows and tickets are looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for cinema entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, cinema domain models
# 🔄 Connected Modules / Calls From:
# cinema infrastructure implementations

import uuid
from abc import abstractmethod
from datetime import date
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import Cinema, Movie, Screen, Seat, Show, Ticket


class CinemaRepository(BaseRepository[Cinema]):

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Cinema]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Cinema]:
        pass


class MovieRepository(BaseRepository[Movie]):

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Movie]:
        pass

    @abstractmethod
    async def list_now_showing(self, limit: int = 50) -> List[Movie]:
        """Active, released movies, best rated first."""
        pass

    @abstractmethod
    async def list_upcoming(self, limit: int = 50) -> List[Movie]:
        pass


class ScreenRepository(BaseRepository[Screen]):

    @abstractmethod
    async def list_for_cinema(self, cinema_id: uuid.UUID) -> List[Screen]:
        pass


class SeatRepository(BaseRepository[Seat]):

    @abstractmethod
    async def list_for_screen(self, screen_id: uuid.UUID, active_only: bool = True) -> List[Seat]:
        """Seats of a screen ordered by row then column."""
        pass


class ShowRepository(BaseRepository[Show]):

    @abstractmethod
    async def list_for_movie_on(self, movie_id: uuid.UUID, day: date) -> List[Show]:
        pass

    @abstractmethod
    async def list_for_cinema_on(self, cinema_id: uuid.UUID, day: date) -> List[Show]:
        pass


class TicketRepository(BaseRepository[Ticket]):

    @abstractmethod
    async def get_by_ticket_number(self, ticket_number: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Ticket]:
        pass

    @abstractmethod
    async def list_for_show(self, show_id: uuid.UUID) -> List[Ticket]:
        pass
