# 📄 File: tests/test_identity.py
# 🧭 Purpose (Layman Explanation):
# Checks user accounts: password handling, one-time codes, addresses with a single
# default, and logging out every device at once.
# 🧪 Purpose (Technical Summary):
# Tests the identity domain models (User, Role, OTP, AuthSession, Address) and their
# SQLAlchemy repositories against an in-memory database.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.identity

import uuid
from datetime import timedelta

import pytest

from marketplace.modules.identity.domain.models import (
    OTP,
    Address,
    AuthSession,
    OTPPurpose,
    Role,
    User,
    UserRole,
    UserStatus,
)
from marketplace.modules.identity.infrastructure.database.identity_repository_impl import (
    AddressRepositoryImpl,
    AuthSessionRepositoryImpl,
    OTPRepositoryImpl,
    RoleRepositoryImpl,
    UserRepositoryImpl,
)
from marketplace.shared.core.exceptions import DuplicateResourceError, ValidationError


def make_address(user_id: uuid.UUID, line: str, is_default: bool = False) -> Address:
    return Address(
        user_id=user_id,
        address_line1=line,
        city="Bengaluru",
        state="Karnataka",
        pincode="560001",
        is_default=is_default,
    )


# ============================================================================
# USER
# ============================================================================

class TestUser:
    def test_create_hashes_password(self):
        user = User.create(name=" Asha ", email="Asha@Example.com", password="secret123", phone="+91 98765 43210")

        assert user.name == "Asha"
        assert user.email == "asha@example.com"
        assert user.phone == "9876543210"
        assert user.password_hash != "secret123"
        assert user.verify_password("secret123")
        assert not user.verify_password("wrong-password")
        assert user.password_changed_at is not None

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError):
            User.create(name="Asha", email="asha@example.com", password="short")

    def test_public_dict_hides_hash(self):
        user = User.create(name="Asha", email="asha@example.com", password="secret123")
        data = user.to_public_dict()
        assert "password_hash" not in data
        assert data["role"] == UserRole.CUSTOMER.value

    def test_suspend_and_activate(self):
        user = User.create(name="Asha", email="asha@example.com", password="secret123")
        user.suspend()
        assert user.status == UserStatus.SUSPENDED
        assert not user.can_login

        user.block()
        user.activate()
        assert user.can_login

    def test_set_password(self):
        user = User.create(name="Asha", email="asha@example.com", password="secret123")
        user.set_password("another-secret")
        assert user.verify_password("another-secret")


class TestRole:
    def test_grant_is_idempotent(self):
        role = Role(name=" Support ", display_name="Support")
        role.grant("tickets.read")
        role.grant("tickets.read")

        assert role.name == "support"
        assert role.permissions == ["tickets.read"]
        role.revoke("tickets.read")
        assert not role.has_permission("tickets.read")


# ============================================================================
# OTP
# ============================================================================

class TestOTP:
    def test_issue_keeps_only_digest(self):
        otp, code = OTP.issue("Asha@Example.com", OTPPurpose.LOGIN, code="123456")
        assert code == "123456"
        assert otp.code_hash != code
        assert otp.target == "asha@example.com"

    def test_verify_marks_used(self):
        otp, code = OTP.issue("asha@example.com", OTPPurpose.LOGIN)
        assert otp.verify(code)
        assert otp.is_used
        assert not otp.verify(code)

    def test_attempts_are_limited(self):
        otp, code = OTP.issue("asha@example.com", OTPPurpose.LOGIN, code="654321")
        for _ in range(otp.max_attempts):
            assert not otp.verify("000000")
        assert otp.is_exhausted()
        assert not otp.verify(code)

    def test_code_expires_after_window(self):
        otp, code = OTP.issue("asha@example.com", OTPPurpose.LOGIN, expiry_minutes=0)
        assert otp.is_expired(otp.expires_at + timedelta(seconds=1))


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_get_by_email_is_case_insensitive(session):
    repo = UserRepositoryImpl(session)
    await repo.add(User.create(name="Asha", email="asha@example.com", password="secret123", phone="9876543210"))

    assert await repo.get_by_email("ASHA@example.com") is not None
    assert await repo.get_by_phone("+91 98765 43210") is not None
    assert await repo.get_by_phone("not a phone") is None


async def test_duplicate_email_rejected(session):
    repo = UserRepositoryImpl(session)
    await repo.add(User.create(name="Asha", email="asha@example.com", password="secret123"))

    with pytest.raises(DuplicateResourceError):
        await repo.add(User.create(name="Asha Two", email="asha@example.com", password="secret123"))


async def test_list_by_role(session):
    repo = UserRepositoryImpl(session)
    await repo.add(User.create(name="Doc", email="doc@example.com", password="secret123", role=UserRole.DOCTOR))
    await repo.add(User.create(name="Cust", email="cust@example.com", password="secret123"))

    doctors = await repo.list_by_role(UserRole.DOCTOR)
    assert [user.email for user in doctors] == ["doc@example.com"]


async def test_role_lookup_by_name(session):
    repo = RoleRepositoryImpl(session)
    await repo.add(Role(name="moderator", display_name="Moderator", permissions=["reviews.moderate"]))

    role = await repo.get_by_name("Moderator")
    assert role is not None
    assert role.has_permission("reviews.moderate")


async def test_only_one_default_address(session, user_id):
    repo = AddressRepositoryImpl(session)
    first = await repo.add(make_address(user_id, "1 MG Road", is_default=True))
    second = await repo.add(make_address(user_id, "2 Brigade Road", is_default=True))

    default = await repo.get_default(user_id)
    assert default.id == second.id

    await repo.set_default(first.id)
    addresses = await repo.list_for_user(user_id)
    assert [address.is_default for address in addresses].count(True) == 1
    assert addresses[0].id == first.id


async def test_other_users_default_untouched(session):
    repo = AddressRepositoryImpl(session)
    owner, neighbour = uuid.uuid4(), uuid.uuid4()
    await repo.add(make_address(neighbour, "9 Residency Road", is_default=True))
    await repo.add(make_address(owner, "1 MG Road", is_default=True))

    assert (await repo.get_default(neighbour)) is not None


def test_address_one_line():
    address = make_address(uuid.uuid4(), "1 MG Road")
    assert address.one_line() == "1 MG Road, Bengaluru, Karnataka, 560001"


def test_address_rejects_bad_pincode():
    with pytest.raises(ValueError):
        Address(user_id=uuid.uuid4(), address_line1="x", city="c", state="s", pincode="12")


async def test_latest_usable_otp(session):
    repo = OTPRepositoryImpl(session)
    used, code = OTP.issue("asha@example.com", OTPPurpose.LOGIN)
    used.verify(code)
    await repo.add(used)
    fresh, _ = OTP.issue("asha@example.com", OTPPurpose.LOGIN)
    await repo.add(fresh)

    found = await repo.get_latest_usable("ASHA@example.com", OTPPurpose.LOGIN)
    assert found.id == fresh.id
    assert await repo.get_latest_usable("asha@example.com", OTPPurpose.REGISTER) is None


async def test_revoke_all_sessions(session, user_id):
    repo = AuthSessionRepositoryImpl(session)
    for device in ("phone", "laptop"):
        await repo.add(AuthSession.open(
            user_id,
            access_token=f"access-{device}",
            refresh_token=f"refresh-{device}",
            access_ttl=timedelta(minutes=15),
            refresh_ttl=timedelta(days=7),
            device_id=device,
        ))

    assert len(await repo.list_active_for_user(user_id)) == 2
    assert await repo.revoke_all_for_user(user_id) == 2
    assert await repo.list_active_for_user(user_id) == []


def test_session_refresh_token_check():
    auth = AuthSession.open(
        uuid.uuid4(), "access", "refresh", timedelta(minutes=15), timedelta(days=7)
    )
    assert auth.matches_refresh_token("refresh")
    assert not auth.matches_refresh_token("other")
    auth.revoke("logout")
    assert auth.is_revoked and not auth.is_active
