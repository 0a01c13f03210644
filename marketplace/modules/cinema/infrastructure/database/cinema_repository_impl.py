# 📄 File: marketplace/modules/cinema/infrastructure/database/cinema_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for cinemas: what is playing, a day's shows, a screen's
# seat map and people's tickets.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the cinema repository interfaces built on the generic
# SQLAlchemyRepository.
#
# 🔗 Dependencies:
# - cinema domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services (ticket booking)
# - reviews rating service (rating cache targets)

import logging
import uuid
from datetime import date
from typing import List, Optional

from marketplace.modules.cinema.domain.models import Cinema, Movie, Screen, Seat, Show, ShowStatus, Ticket
from marketplace.modules.cinema.domain.repositories import (
    CinemaRepository,
    MovieRepository,
    ScreenRepository,
    SeatRepository,
    ShowRepository,
    TicketRepository,
)
from marketplace.modules.cinema.infrastructure.database.models import (
    CinemaModel,
    MovieModel,
    ScreenModel,
    SeatModel,
    ShowModel,
    TicketModel,
)
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class CinemaRepositoryImpl(SQLAlchemyRepository[Cinema, CinemaModel], CinemaRepository):

    entity_class = Cinema
    model_class = CinemaModel
    resource_name = "Cinema"

    async def get_by_slug(self, slug: str) -> Optional[Cinema]:
        return await self._first(self._select().where(CinemaModel.slug == slug.strip().lower()))

    async def list_by_owner(self, owner_id: uuid.UUID) -> List[Cinema]:
        stmt = self._select().where(CinemaModel.owner_id == owner_id).order_by(CinemaModel.name)
        return await self._all(stmt)


class MovieRepositoryImpl(SQLAlchemyRepository[Movie, MovieModel], MovieRepository):

    entity_class = Movie
    model_class = MovieModel
    resource_name = "Movie"

    async def get_by_slug(self, slug: str) -> Optional[Movie]:
        return await self._first(self._select().where(MovieModel.slug == slug.strip().lower()))

    async def list_now_showing(self, limit: int = 50) -> List[Movie]:
        stmt = (
            self._select()
            .where(MovieModel.is_active.is_(True), MovieModel.is_upcoming.is_(False))
            .order_by(MovieModel.is_featured.desc(), MovieModel.rating.desc())
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_upcoming(self, limit: int = 50) -> List[Movie]:
        stmt = (
            self._select()
            .where(MovieModel.is_active.is_(True), MovieModel.is_upcoming.is_(True))
            .order_by(MovieModel.release_date)
            .limit(limit)
        )
        return await self._all(stmt)


class ScreenRepositoryImpl(SQLAlchemyRepository[Screen, ScreenModel], ScreenRepository):

    entity_class = Screen
    model_class = ScreenModel
    resource_name = "Screen"

    async def list_for_cinema(self, cinema_id: uuid.UUID) -> List[Screen]:
        stmt = (
            self._select()
            .where(ScreenModel.cinema_id == cinema_id)
            .order_by(ScreenModel.screen_number, ScreenModel.name)
        )
        return await self._all(stmt)


class SeatRepositoryImpl(SQLAlchemyRepository[Seat, SeatModel], SeatRepository):

    entity_class = Seat
    model_class = SeatModel
    resource_name = "Seat"

    async def list_for_screen(self, screen_id: uuid.UUID, active_only: bool = True) -> List[Seat]:
        stmt = self._select().where(SeatModel.screen_id == screen_id)
        if active_only:
            stmt = stmt.where(SeatModel.is_active.is_(True))
        return await self._all(stmt.order_by(SeatModel.row, SeatModel.column))


class ShowRepositoryImpl(SQLAlchemyRepository[Show, ShowModel], ShowRepository):

    entity_class = Show
    model_class = ShowModel
    resource_name = "Show"

    async def list_for_movie_on(self, movie_id: uuid.UUID, day: date) -> List[Show]:
        stmt = (
            self._select()
            .where(
                ShowModel.movie_id == movie_id,
                ShowModel.show_date == day,
                ShowModel.status != ShowStatus.CANCELLED.value,
            )
            .order_by(ShowModel.start_time)
        )
        return await self._all(stmt)

    async def list_for_cinema_on(self, cinema_id: uuid.UUID, day: date) -> List[Show]:
        stmt = (
            self._select()
            .where(ShowModel.cinema_id == cinema_id, ShowModel.show_date == day)
            .order_by(ShowModel.start_time, ShowModel.screen_id)
        )
        return await self._all(stmt)


class TicketRepositoryImpl(SQLAlchemyRepository[Ticket, TicketModel], TicketRepository):

    entity_class = Ticket
    model_class = TicketModel
    resource_name = "Ticket"

    async def get_by_ticket_number(self, ticket_number: str) -> Optional[Ticket]:
        stmt = self._select().where(TicketModel.ticket_number == ticket_number.strip().upper())
        return await self._first(stmt)

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Ticket]:
        stmt = (
            self._select()
            .where(TicketModel.user_id == user_id)
            .order_by(TicketModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_show(self, show_id: uuid.UUID) -> List[Ticket]:
        stmt = self._select().where(TicketModel.show_id == show_id).order_by(TicketModel.created_at)
        return await self._all(stmt)
