# 📄 File: marketplace/modules/identity/infrastructure/database/identity_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for accounts: finding users by email or phone, keeping a
# single default address, finding a valid one-time code and signing out every device.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the identity repository interfaces built on the generic
# SQLAlchemyRepository, adding entity-specific queries and bulk updates.
#
# 🔗 Dependencies:
# - identity domain repositories and models
# - identity SQLAlchemy models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - Embedding application services
# - tests/identity

import logging
import uuid
from typing import List, Optional

from sqlalchemy import update

from marketplace.modules.identity.domain.models import (
    OTP,
    Address,
    AuthSession,
    OTPPurpose,
    Profile,
    Role,
    User,
    UserRole,
)
from marketplace.modules.identity.domain.repositories import (
    AddressRepository,
    AuthSessionRepository,
    OTPRepository,
    ProfileRepository,
    RoleRepository,
    UserRepository,
)
from marketplace.modules.identity.infrastructure.database.models import (
    AddressModel,
    AuthSessionModel,
    OTPModel,
    ProfileModel,
    RoleModel,
    UserModel,
)
from marketplace.shared.core.exceptions import NotFoundError
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.validators import validate_phone_number

logger = logging.getLogger(__name__)


class UserRepositoryImpl(SQLAlchemyRepository[User, UserModel], UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    entity_class = User
    model_class = UserModel
    resource_name = "User"

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = self._select().where(UserModel.email == email.strip().lower())
        return await self._first(stmt)

    async def get_by_phone(self, phone: str) -> Optional[User]:
        result = validate_phone_number(phone)
        if not result.is_valid:
            return None
        return await self._first(self._select().where(UserModel.phone == result.value))

    async def list_by_role(self, role: UserRole, active_only: bool = True) -> List[User]:
        stmt = self._select().where(UserModel.role == UserRole(role).value)
        if active_only:
            stmt = stmt.where(UserModel.is_active.is_(True))
        return await self._all(stmt.order_by(UserModel.created_at))


class RoleRepositoryImpl(SQLAlchemyRepository[Role, RoleModel], RoleRepository):

    entity_class = Role
    model_class = RoleModel
    resource_name = "Role"

    async def get_by_name(self, name: str) -> Optional[Role]:
        return await self._first(self._select().where(RoleModel.name == name.strip().lower()))


class ProfileRepositoryImpl(SQLAlchemyRepository[Profile, ProfileModel], ProfileRepository):

    entity_class = Profile
    model_class = ProfileModel
    resource_name = "Profile"

    async def get_by_user(self, user_id: uuid.UUID) -> Optional[Profile]:
        return await self._first(self._select().where(ProfileModel.user_id == user_id))


class AddressRepositoryImpl(SQLAlchemyRepository[Address, AddressModel], AddressRepository):
    """
    Address repository keeping at most one default address per user.

    The other addresses are cleared with a bulk UPDATE before the default
    one is written, so the partial unique index never sees two defaults.
    """

    entity_class = Address
    model_class = AddressModel
    resource_name = "Address"

    async def _clear_other_defaults(self, address: Address) -> None:
        async with self._handle_errors("update"):
            await self._session.execute(
                update(AddressModel)
                .where(
                    AddressModel.user_id == address.user_id,
                    AddressModel.id != address.id,
                    AddressModel.is_default.is_(True),
                )
                .values(is_default=False, updated_at=utc_now())
            )

    async def add(self, entity: Address) -> Address:
        if entity.is_default:
            await self._clear_other_defaults(entity)
        return await super().add(entity)

    async def save(self, entity: Address) -> Address:
        if entity.is_default and not entity.is_deleted:
            await self._clear_other_defaults(entity)
        return await super().save(entity)

    async def list_for_user(self, user_id: uuid.UUID) -> List[Address]:
        stmt = (
            self._select()
            .where(AddressModel.user_id == user_id)
            .order_by(AddressModel.is_default.desc(), AddressModel.created_at)
        )
        return await self._all(stmt)

    async def get_default(self, user_id: uuid.UUID) -> Optional[Address]:
        stmt = self._select().where(
            AddressModel.user_id == user_id,
            AddressModel.is_default.is_(True),
        )
        return await self._first(stmt)

    async def set_default(self, address_id: uuid.UUID) -> Address:
        address = await self.get_by_id(address_id)
        if address is None:
            raise NotFoundError("Address not found", resource_type="Address", resource_id=str(address_id))
        address.make_default()
        return await self.save(address)


class OTPRepositoryImpl(SQLAlchemyRepository[OTP, OTPModel], OTPRepository):

    entity_class = OTP
    model_class = OTPModel
    resource_name = "OTP"

    async def get_latest_usable(self, target: str, purpose: OTPPurpose) -> Optional[OTP]:
        stmt = (
            self._select()
            .where(
                OTPModel.target == target.strip().lower(),
                OTPModel.purpose == OTPPurpose(purpose).value,
                OTPModel.is_used.is_(False),
                OTPModel.expires_at > utc_now(),
            )
            .order_by(OTPModel.created_at.desc())
        )
        return await self._first(stmt)


class AuthSessionRepositoryImpl(SQLAlchemyRepository[AuthSession, AuthSessionModel], AuthSessionRepository):

    entity_class = AuthSession
    model_class = AuthSessionModel
    resource_name = "Session"

    async def list_active_for_user(self, user_id: uuid.UUID) -> List[AuthSession]:
        stmt = (
            self._select()
            .where(AuthSessionModel.user_id == user_id, AuthSessionModel.is_active.is_(True))
            .order_by(AuthSessionModel.created_at.desc())
        )
        return await self._all(stmt)

    async def revoke_all_for_user(self, user_id: uuid.UUID, reason: str = "logout-all") -> int:
        now = utc_now()
        async with self._handle_errors("update"):
            result = await self._session.execute(
                update(AuthSessionModel)
                .where(AuthSessionModel.user_id == user_id, AuthSessionModel.is_active.is_(True))
                .values(
                    is_active=False,
                    is_revoked=True,
                    revoked_at=now,
                    revoke_reason=reason,
                    updated_at=now,
                )
            )
        logger.info(f"Revoked {result.rowcount} sessions for user {user_id}")
        return result.rowcount
