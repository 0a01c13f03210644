# 📄 File: marketplace/modules/identity/domain/models/auth.py
# 🧭 Purpose (Layman Explanation):
# One-time codes sent by SMS or email, and the login sessions a user has open on their
# phone or browser. Codes and tokens are stored scrambled, never as plain text.
# 🧪 Purpose (Technical Summary):
# Domain models for OTP (hashed code, purpose, expiry, attempt counting, verification) and
# AuthSession (hashed access/refresh tokens, device info, expiry and revocation).
# 🔗 Dependencies:
# pydantic, marketplace.shared.core.security, marketplace.shared.config.settings
# 🔄 Connected Modules / Calls From:
# identity repositories (latest usable OTP, active sessions, revoke-all)

import uuid
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field

from marketplace.shared.config.settings import get_settings
from marketplace.shared.core.security import generate_otp_code, hash_token, tokens_match
from marketplace.shared.domain.base import DomainModel
from marketplace.shared.utils.helpers import utc_now


class OTPPurpose(str, Enum):
    REGISTER = "register"
    LOGIN = "login"
    FORGOT_PASSWORD = "forgot-password"
    VERIFY_EMAIL = "verify-email"
    VERIFY_PHONE = "verify-phone"
    TWO_FACTOR = "2fa"


class OTP(DomainModel):
    """
    One-time password issued to an email address or phone number.

    Only the SHA-256 digest of the code is kept; issue() returns the
    plain code once so the caller can deliver it.
    """

    user_id: Optional[uuid.UUID] = None
    target: str = Field(min_length=3, max_length=254)
    code_hash: str = Field(repr=False)
    purpose: OTPPurpose
    expires_at: datetime
    attempts: int = Field(default=0, ge=0)
    max_attempts: int = Field(default=5, ge=1)
    is_used: bool = False
    used_at: Optional[datetime] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def issue(
        cls,
        target: str,
        purpose: OTPPurpose,
        user_id: Optional[uuid.UUID] = None,
        code: Optional[str] = None,
        expiry_minutes: Optional[int] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> Tuple["OTP", str]:
        """
        Issue a new OTP.

        Args:
            target: Email address or phone number the code is sent to
            purpose: What the code authorizes
            user_id: Owning user when known
            code: Explicit code (a random 6-digit code is generated otherwise)
            expiry_minutes: Validity window, defaults to settings.OTP_EXPIRY_MINUTES

        Returns:
            Tuple of the OTP entity and the plain code
        """
        settings = get_settings()
        code = code or generate_otp_code()
        minutes = expiry_minutes if expiry_minutes is not None else settings.OTP_EXPIRY_MINUTES
        otp = cls(
            user_id=user_id,
            target=target.strip().lower(),
            code_hash=hash_token(code),
            purpose=purpose,
            expires_at=utc_now() + timedelta(minutes=minutes),
            max_attempts=settings.OTP_MAX_ATTEMPTS,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return otp, code

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at < (now or utc_now())

    def is_exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    def increment_attempts(self) -> None:
        self.attempts += 1
        self.touch()

    def mark_used(self) -> None:
        self.is_used = True
        self.used_at = utc_now()
        self.touch()

    def verify(self, code: str) -> bool:
        """
        Check a submitted code.

        Every check against a live code counts as an attempt; a match
        marks the OTP used. Used, expired or exhausted codes never match.
        """
        if self.is_used or self.is_expired() or self.is_exhausted():
            return False

        self.increment_attempts()
        if tokens_match(code, self.code_hash):
            self.mark_used()
            return True
        return False


class DeviceType(str, Enum):
    WEB = "web"
    ANDROID = "android"
    IOS = "ios"
    OTHER = "other"


class AuthSession(DomainModel):
    """
    Login session for one device.

    Access and refresh tokens are stored as digests only.
    """

    user_id: uuid.UUID
    access_token_hash: str = Field(repr=False)
    refresh_token_hash: str = Field(repr=False)
    device_type: DeviceType = DeviceType.WEB
    device_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    access_token_expires_at: datetime
    refresh_token_expires_at: datetime
    is_active: bool = True
    is_revoked: bool = False
    revoked_at: Optional[datetime] = None
    revoke_reason: Optional[str] = None

    @classmethod
    def open(
        cls,
        user_id: uuid.UUID,
        access_token: str,
        refresh_token: str,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
        device_type: DeviceType = DeviceType.WEB,
        device_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> "AuthSession":
        now = utc_now()
        return cls(
            user_id=user_id,
            access_token_hash=hash_token(access_token),
            refresh_token_hash=hash_token(refresh_token),
            device_type=device_type,
            device_id=device_id,
            ip_address=ip_address,
            user_agent=user_agent,
            access_token_expires_at=now + access_ttl,
            refresh_token_expires_at=now + refresh_ttl,
        )

    def is_refresh_expired(self, now: Optional[datetime] = None) -> bool:
        return self.refresh_token_expires_at < (now or utc_now())

    def matches_refresh_token(self, refresh_token: str) -> bool:
        return tokens_match(refresh_token, self.refresh_token_hash)

    def rotate(self, access_token: str, refresh_token: str, access_ttl: timedelta, refresh_ttl: timedelta) -> None:
        """Replace both tokens after a successful refresh."""
        now = utc_now()
        self.access_token_hash = hash_token(access_token)
        self.refresh_token_hash = hash_token(refresh_token)
        self.access_token_expires_at = now + access_ttl
        self.refresh_token_expires_at = now + refresh_ttl
        self.touch()

    def revoke(self, reason: str = "manual") -> None:
        self.is_revoked = True
        self.is_active = False
        self.revoked_at = utc_now()
        self.revoke_reason = reason
        self.touch()
