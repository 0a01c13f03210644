# 📄 File: marketplace/shared/core/security.py
# 🧭 Purpose (Layman Explanation):
# Keeps secrets safe: scrambles passwords and one-time codes before they are stored so that
# nobody reading the database can see the real values.
# 🧪 Purpose (Technical Summary):
# Password hashing via passlib's bcrypt CryptContext, SHA-256 digests for session tokens,
# and secure random generation for OTP codes and opaque tokens.
# 🔗 Dependencies:
# passlib[bcrypt], hashlib, secrets, marketplace.shared.config.settings
# 🔄 Connected Modules / Calls From:
# identity domain models (User, OTP, AuthSession)

"""
Security utilities for password hashing and token digests.
"""

import hashlib
import hmac
import logging
import secrets
from functools import lru_cache

from passlib.context import CryptContext

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_password_context() -> CryptContext:
    """Password hashing context configured from settings."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.BCRYPT_ROUNDS,
    )


def get_password_hash(password: str) -> str:
    """
    Hash password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        str: Hashed password
    """
    hashed = get_password_context().hash(password)
    logger.debug("Password hashed successfully")
    return hashed


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Args:
        plain_password: Plain text password
        hashed_password: Stored hashed password

    Returns:
        bool: True if password matches
    """
    if not hashed_password:
        return False
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except ValueError as e:
        # passlib raises ValueError for malformed hashes
        logger.warning(f"Password verification error: {e}")
        return False


def hash_token(token: str) -> str:
    """SHA-256 digest of an opaque token (sessions store only digests)."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def tokens_match(token: str, digest: str) -> bool:
    return hmac.compare_digest(hash_token(token), digest)


def generate_secure_token(length: int = 32) -> str:
    return secrets.token_urlsafe(length)


def generate_otp_code(length: int = 6) -> str:
    """Numeric one-time code, zero padded."""
    return f"{secrets.randbelow(10 ** length):0{length}d}"
