# 📄 File: tests/test_cinema.py
# 🧭 Purpose (Layman Explanation):
# Checks movie bookings: seat counts on a show stay consistent, seat prices include
# fees and tax, and a ticket moves from held to paid to scanned or refunded.
# 🧪 Purpose (Technical Summary):
# Tests Show counters and pricing tiers, Ticket creation/state methods and the cinema
# SQLAlchemy repositories (seat uniqueness, daily show listings, ticket lookup).
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.cinema

import uuid
from datetime import date
from typing import Optional

import pytest

from marketplace.modules.cinema.domain.models import (
    Movie,
    PricingTier,
    Seat,
    SeatSnapshot,
    Show,
    Ticket,
    TicketStatus,
)
from marketplace.modules.cinema.infrastructure.database.cinema_repository_impl import (
    MovieRepositoryImpl,
    SeatRepositoryImpl,
    ShowRepositoryImpl,
    TicketRepositoryImpl,
)
from marketplace.shared.core.exceptions import DuplicateResourceError, NotFoundError
from marketplace.shared.domain.value_objects import PaymentStatus

SHOW_DAY = date(2026, 11, 14)


def make_show(movie_id: Optional[uuid.UUID] = None, start: str = "18:30", total_seats: int = 120) -> Show:
    return Show.schedule(
        total_seats,
        cinema_id=uuid.uuid4(),
        screen_id=uuid.uuid4(),
        movie_id=movie_id or uuid.uuid4(),
        language="Kannada",
        show_date=SHOW_DAY,
        start_time=start,
        end_time="21:15",
        pricing=[
            PricingTier(category="Silver", base_price=200, convenience_fee=30, tax_percentage=18),
            PricingTier(category="Recliner", base_price=450, convenience_fee=40, tax_percentage=18),
        ],
    )


def seat(number: str, price: float = 236) -> SeatSnapshot:
    return SeatSnapshot(seat_id=uuid.uuid4(), seat_number=number, category="Silver", price=price)


# ============================================================================
# SHOW
# ============================================================================

class TestShow:
    def test_schedule_opens_every_seat(self):
        show = make_show()
        assert show.seats.available == 120
        assert show.lock_ttl_seconds == 300

    def test_counters_track_sold_and_blocked(self):
        show = make_show(total_seats=10)
        show.increment_counters(blocked=3)
        show.increment_counters(sold=3, blocked=-3)
        show.increment_counters(sold=2)

        assert (show.seats.sold, show.seats.blocked, show.seats.available) == (5, 0, 5)

    def test_counters_never_go_negative(self):
        show = make_show(total_seats=4)
        show.increment_counters(sold=-2, blocked=-1)
        assert (show.seats.sold, show.seats.blocked, show.seats.available) == (0, 0, 4)

    def test_price_for_category(self):
        show = make_show()
        tier = show.price_for("recliner")
        assert tier.category == "Recliner"
        assert tier.total_price == 450 + 40 + 81

        with pytest.raises(NotFoundError):
            show.price_for("Balcony")

    def test_show_needs_pricing(self):
        with pytest.raises(ValueError):
            Show.schedule(
                100,
                cinema_id=uuid.uuid4(),
                screen_id=uuid.uuid4(),
                movie_id=uuid.uuid4(),
                language="Hindi",
                show_date=SHOW_DAY,
                start_time="10:00",
                end_time="12:30",
                pricing=[],
            )


# ============================================================================
# TICKET
# ============================================================================

class TestTicket:
    def test_create_sums_seats(self, user_id):
        ticket = Ticket.create(user_id, make_show(), [seat("A1"), seat("A2")], convenience_fee=60, discount=50)

        assert ticket.ticket_number.startswith("BMS-")
        assert ticket.seat_count == 2
        assert ticket.pricing.sub_total == 472
        assert ticket.pricing.total_amount == 482
        assert ticket.status == TicketStatus.RESERVED

    def test_seat_count_must_match(self, user_id):
        ticket = Ticket.create(user_id, make_show(), [seat("A1")])
        with pytest.raises(ValueError):
            Ticket(**{**ticket.model_dump(), "seat_count": 2})

    def test_confirm_then_scan(self, user_id):
        ticket = Ticket.create(user_id, make_show(), [seat("B4")])
        ticket.confirm(uuid.uuid4())
        assert ticket.status == TicketStatus.CONFIRMED
        assert ticket.payment_status == PaymentStatus.PAID

        ticket.mark_used()
        assert ticket.status == TicketStatus.USED
        assert ticket.checked_in_at is not None

    def test_cancel_and_refund(self, user_id):
        ticket = Ticket.create(user_id, make_show(), [seat("C7")])
        ticket.confirm()
        ticket.cancel(reason="show clash")
        assert ticket.cancellation.cancelled_by == "user"

        ticket.mark_refunded(236)
        assert ticket.status == TicketStatus.REFUNDED
        assert ticket.payment_status == PaymentStatus.REFUNDED
        assert ticket.refund.amount == 236


def test_movie_rating_scale():
    movie = Movie.create("Kantara Chapter 1", 168)
    assert movie.slug == "kantara-chapter-1"
    movie.update_rating(8.4, 1200)
    assert movie.rating == 8.4
    with pytest.raises(ValueError):
        movie.rating = 11


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_seat_position_is_unique(session):
    repo = SeatRepositoryImpl(session)
    cinema_id, screen_id = uuid.uuid4(), uuid.uuid4()
    await repo.add(Seat(cinema_id=cinema_id, screen_id=screen_id, seat_number="a1", row="a", column=1, category="Silver"))

    with pytest.raises(DuplicateResourceError):
        await repo.add(Seat(cinema_id=cinema_id, screen_id=screen_id, seat_number="A1X", row="A", column=1, category="Gold"))


async def test_shows_for_movie_skip_cancelled(session):
    repo = ShowRepositoryImpl(session)
    movie_id = uuid.uuid4()
    evening = await repo.add(make_show(movie_id, start="18:30"))
    matinee = await repo.add(make_show(movie_id, start="13:00"))
    cancelled = make_show(movie_id, start="22:00")
    cancelled.cancel_show(reason="projector fault")
    await repo.add(cancelled)

    shows = await repo.list_for_movie_on(movie_id, SHOW_DAY)
    assert [show.id for show in shows] == [matinee.id, evening.id]


async def test_ticket_lookup(session, user_id):
    repo = TicketRepositoryImpl(session)
    show = make_show()
    ticket = await repo.add(Ticket.create(user_id, show, [seat("D1"), seat("D2")]))

    loaded = await repo.get_by_ticket_number(ticket.ticket_number.lower())
    assert loaded.id == ticket.id
    assert [s.seat_number for s in loaded.seats] == ["D1", "D2"]
    assert len(await repo.list_for_show(show.id)) == 1


async def test_now_showing_excludes_upcoming(session):
    repo = MovieRepositoryImpl(session)
    await repo.add(Movie.create("Released Film", 140))
    await repo.add(Movie.create("Future Film", 150, is_upcoming=True))

    assert [movie.title for movie in await repo.list_now_showing()] == ["Released Film"]
    assert [movie.title for movie in await repo.list_upcoming()] == ["Future Film"]
