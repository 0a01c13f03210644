# 📄 File: marketplace/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small shared tools: the current time, human-friendly reference numbers like ORD-2026-000123,
# URL-friendly names, and rounding money to paise.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions for UTC timestamps, prefixed yearly reference numbers,
# slug generation and monetary rounding used across domain entities.

# 🔗 Dependencies:
# - secrets: Secure random generation
# - re: Slug normalization

# 🔄 Connected Modules / Calls From:
# Used by: domain base entities, order/ticket/room-booking/invoice factories, catalog slugs,
# finance arithmetic

import re
import secrets
from datetime import datetime, timezone
from typing import Iterable, Optional

REFERENCE_SEQUENCE_DIGITS = 6


def utc_now() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def generate_reference_number(
    prefix: str,
    sequence: Optional[int] = None,
    when: Optional[datetime] = None
) -> str:
    """
    Generate a human-readable reference number.

    Format is PREFIX-YYYY-NNNNNN, e.g. ORD-2026-000123.

    Args:
        prefix: Upper-case record prefix (ORD, BMS, HTL, INV)
        sequence: Explicit sequence number; a random one is drawn when omitted
        when: Timestamp whose year is embedded (defaults to now)

    Returns:
        Reference number string
    """
    year = (when or utc_now()).year
    if sequence is None:
        sequence = secrets.randbelow(10 ** REFERENCE_SEQUENCE_DIGITS)
    if sequence < 0 or sequence >= 10 ** REFERENCE_SEQUENCE_DIGITS:
        raise ValueError(f"Sequence must fit in {REFERENCE_SEQUENCE_DIGITS} digits")
    return f"{prefix.upper()}-{year}-{sequence:0{REFERENCE_SEQUENCE_DIGITS}d}"


def generate_slug(text: str, max_length: int = 80) -> str:
    """
    Generate URL-friendly slug from text.

    Args:
        text: Text to convert to slug
        max_length: Maximum slug length

    Returns:
        URL-friendly slug
    """
    if not text:
        return ""

    slug = text.lower()
    slug = re.sub(r'[^\w\s-]', '', slug)
    slug = re.sub(r'[-\s_]+', '-', slug)
    slug = slug.strip('-')

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip('-')

    return slug


def round_money(value: float) -> float:
    """Round a monetary amount to 2 decimals."""
    return round(float(value), 2)


def sum_money(values: Iterable[float]) -> float:
    return round_money(sum(values))


def percentage_of(amount: float, percentage: float) -> float:
    return round_money(amount * percentage / 100)
