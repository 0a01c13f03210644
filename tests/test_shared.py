# 📄 File: tests/test_shared.py
# 🧭 Purpose (Layman Explanation):
# Checks the small building blocks everything else relies on: reference numbers,
# money rounding, contact validation, settings and structured log output.
# 🧪 Purpose (Technical Summary):
# Unit tests for shared.utils (helpers, validators, logging), shared.config.settings
# the exception hierarchy and the generic SQLAlchemyRepository behaviour (filters,
# soft delete, duplicates).
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.shared

import json
import logging
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from marketplace.modules.identity.domain.models import User
from marketplace.modules.identity.infrastructure.database.identity_repository_impl import UserRepositoryImpl
from marketplace.shared.config.settings import Settings
from marketplace.shared.core.exceptions import (
    DuplicateResourceError,
    InsufficientBalanceError,
    NotFoundError,
    RepositoryError,
    ValidationError,
    exception_to_dict,
    is_client_error,
)
from marketplace.shared.domain.base import RatedModel, ensure_positive
from marketplace.shared.utils.helpers import (
    ensure_utc,
    generate_reference_number,
    generate_slug,
    percentage_of,
    round_money,
    sum_money,
)
from marketplace.shared.utils.logging import (
    ContextFilter,
    MarketplaceJsonFormatter,
    build_formatter,
    log_context,
    request_id_var,
    setup_logging,
)
from marketplace.shared.utils.validators import (
    validate_email_address,
    validate_ifsc,
    validate_phone_number,
    validate_pincode,
    validate_time_slot,
)


# ============================================================================
# HELPERS
# ============================================================================

def test_reference_number_format():
    when = datetime(2026, 3, 1, tzinfo=timezone.utc)
    assert generate_reference_number("ord", 123, when=when) == "ORD-2026-000123"


def test_reference_number_random_sequence_has_six_digits():
    number = generate_reference_number("INV")
    prefix, year, sequence = number.split("-")
    assert prefix == "INV"
    assert len(year) == 4
    assert len(sequence) == 6 and sequence.isdigit()


def test_reference_number_rejects_oversized_sequence():
    with pytest.raises(ValueError):
        generate_reference_number("ORD", 1_000_000)


def test_generate_slug():
    assert generate_slug("  Fresh Farm Eggs (12 pcs)! ") == "fresh-farm-eggs-12-pcs"
    assert generate_slug("") == ""


def test_money_helpers():
    assert round_money(10.456) == 10.46
    assert sum_money([0.1, 0.2]) == 0.3
    assert percentage_of(250, 18) == 45.0


def test_ensure_utc_tags_naive_values():
    naive = datetime(2026, 1, 1, 12, 0)
    assert ensure_utc(naive).tzinfo == timezone.utc
    ist = timezone(timedelta(hours=5, minutes=30))
    assert ensure_utc(datetime(2026, 1, 1, 17, 30, tzinfo=ist)).hour == 12
    assert ensure_utc(None) is None


def test_ensure_positive():
    ensure_positive(3)
    with pytest.raises(ValidationError):
        ensure_positive(0, field="quantity")


# ============================================================================
# VALIDATORS
# ============================================================================

def test_email_is_normalized():
    result = validate_email_address("  Asha@Example.COM ")
    assert result.is_valid
    assert result.value == "asha@example.com"


def test_invalid_email():
    assert not validate_email_address("not-an-email").is_valid
    assert not validate_email_address("").is_valid


@pytest.mark.parametrize("raw", ["9876543210", "+91 98765 43210", "91-98765-43210"])
def test_indian_mobile_numbers(raw):
    result = validate_phone_number(raw)
    assert result.is_valid
    assert result.value.endswith("9876543210")


def test_phone_rejects_short_numbers():
    assert not validate_phone_number("12345").is_valid


def test_pincode_and_ifsc():
    assert validate_pincode("560001").is_valid
    assert not validate_pincode("056001").is_valid
    assert validate_ifsc("hdfc0001234").value == "HDFC0001234"
    assert not validate_ifsc("HDFC1001234").is_valid


def test_time_slot():
    assert validate_time_slot("09:30").is_valid
    assert not validate_time_slot("25:00").is_valid


# ============================================================================
# SETTINGS
# ============================================================================

def test_settings_reject_unknown_environment():
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="qa")


def test_settings_bcrypt_rounds_bounds():
    with pytest.raises(ValueError):
        Settings(BCRYPT_ROUNDS=3)
    assert Settings(BCRYPT_ROUNDS=31).BCRYPT_ROUNDS == 31


def test_database_url_from_components():
    settings = Settings(DATABASE_URL=None, DB_USER="app", DB_PASSWORD="secret", DB_HOST="db", DB_PORT=6432, DB_NAME="shop")
    assert settings.database_url == "postgresql+asyncpg://app:secret@db:6432/shop"


def test_explicit_database_url_wins():
    settings = Settings(DATABASE_URL="sqlite+aiosqlite:///local.db")
    assert settings.database_url == "sqlite+aiosqlite:///local.db"


# ============================================================================
# EXCEPTIONS
# ============================================================================

def test_not_found_maps_to_http_404():
    error = NotFoundError("Order not found", resource_type="Order", resource_id="42")
    http_error = error.to_http_exception()

    assert http_error.status_code == 404
    assert http_error.detail["code"] == "NOT_FOUND"
    assert http_error.detail["details"] == {"resource_type": "Order", "resource_id": "42"}
    assert is_client_error(error)


def test_insufficient_balance_is_a_client_error():
    error = InsufficientBalanceError(balance=120, requested=500)
    assert error.status_code == 422
    assert is_client_error(error)


@pytest.mark.filterwarnings("error")
def test_unprocessable_errors_use_current_status_constant():
    validation = ValidationError("Bad pincode", field="pincode", value="12")
    rule = InsufficientBalanceError(balance=10, requested=20)

    assert validation.status_code == 422
    assert validation.to_http_exception().status_code == 422
    assert rule.to_http_exception().detail["code"] == rule.error_code


def test_foreign_exceptions_become_server_errors():
    payload = exception_to_dict(KeyError("missing"))
    assert payload["error"]["status_code"] == 500
    assert payload["error"]["code"] == "KEYERROR"
    assert not is_client_error(RepositoryError("boom"))


# ============================================================================
# LOGGING
# ============================================================================

def _format_json(message: str) -> dict:
    record = logging.LogRecord("marketplace.test", logging.INFO, __file__, 10, message, None, None)
    ContextFilter().filter(record)
    return json.loads(MarketplaceJsonFormatter().format(record))


def test_json_formatter_includes_request_context():
    with log_context(request_id="req-42", user_id="user-7"):
        payload = _format_json("wallet credited")

    assert payload["message"] == "wallet credited"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "marketplace.test"
    assert payload["request_id"] == "req-42"
    assert payload["user_id"] == "user-7"
    assert "correlation_id" not in payload


def test_json_formatter_drops_empty_context():
    payload = _format_json("no context")
    assert "request_id" not in payload
    assert payload["service"] == "marketplace"


def test_log_context_resets_after_exit():
    with log_context() as context:
        assert request_id_var.get() == context["request_id"]
    assert request_id_var.get() == ""


def test_text_formatter_carries_request_id():
    record = logging.LogRecord("marketplace.test", logging.WARNING, __file__, 10, "slow query", None, None)
    with log_context(request_id="req-9"):
        line = build_formatter("text").format(record)
    assert line.endswith("marketplace.test - WARNING - [req-9] slow query")


def test_setup_logging_writes_json_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "app.log"
    try:
        setup_logging(log_level="debug", log_format="json", log_file=str(log_file), enable_console=False, force=True)
        logging.getLogger("marketplace.finance").info("ledger written")
        for handler in root.handlers:
            handler.flush()
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

    payload = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert payload["message"] == "ledger written"
    assert payload["logger"] == "marketplace.finance"


# ============================================================================
# RATED MODEL
# ============================================================================

def test_update_rating_rounds_average():
    class Listing(RatedModel):
        pass

    listing = Listing()
    listing.update_rating(4.266, 3)
    assert listing.rating == 4.27
    assert listing.rating_count == 3


# ============================================================================
# GENERIC REPOSITORY
# ============================================================================

async def test_repository_crud_roundtrip(session):
    repo = UserRepositoryImpl(session)
    user = await repo.add(User.create(name="Asha", email="asha@example.com", password="secret123"))

    fetched = await repo.get_by_id(user.id)
    assert fetched is not None
    assert fetched.email == "asha@example.com"

    fetched.name = "Asha K"
    saved = await repo.save(fetched)
    assert saved.name == "Asha K"

    assert await repo.count() == 1
    assert await repo.exists(email="asha@example.com")
    assert not await repo.exists(email="ravi@example.com")


async def test_soft_deleted_rows_are_hidden(session):
    repo = UserRepositoryImpl(session)
    user = await repo.add(User.create(name="Ravi", email="ravi@example.com", password="secret123"))

    assert await repo.soft_delete(user.id) is True
    assert await repo.get_by_id(user.id) is None
    assert await repo.get_by_id(user.id, include_deleted=True) is not None
    assert await repo.count() == 0
    assert await repo.count(include_deleted=True) == 1
    assert await repo.soft_delete(uuid.uuid4()) is False


async def test_hard_delete(session):
    repo = UserRepositoryImpl(session)
    user = await repo.add(User.create(name="Meera", email="meera@example.com", password="secret123"))

    assert await repo.delete(user.id) is True
    assert await repo.get_by_id(user.id, include_deleted=True) is None
    assert await repo.delete(user.id) is False


async def test_get_or_raise_missing(session):
    with pytest.raises(NotFoundError):
        await UserRepositoryImpl(session).get_or_raise(uuid.uuid4())


async def test_save_missing_row_raises_not_found(session):
    user = User.create(name="Ghost", email="ghost@example.com", password="secret123")
    with pytest.raises(NotFoundError):
        await UserRepositoryImpl(session).save(user)


async def test_unknown_filter_is_rejected(session):
    with pytest.raises(RepositoryError):
        await UserRepositoryImpl(session).list(filters={"shoe_size": 42})


async def test_unique_violation_becomes_duplicate_error(session):
    repo = UserRepositoryImpl(session)
    await repo.add(User.create(name="Asha", email="dup@example.com", password="secret123"))

    with pytest.raises(DuplicateResourceError):
        await repo.add(User.create(name="Other", email="DUP@example.com", password="secret123"))


async def test_list_orders_and_paginates(session):
    repo = UserRepositoryImpl(session)
    for index in range(3):
        await repo.add(User.create(name=f"User {index}", email=f"user{index}@example.com", password="secret123"))

    names = [user.name for user in await repo.list(order_by="name")]
    assert names == ["User 0", "User 1", "User 2"]

    page = await repo.list(order_by="name", limit=1, offset=1)
    assert [user.name for user in page] == ["User 1"]
