# 📄 File: marketplace/modules/identity/domain/repositories/identity_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how account records are found and saved, without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for identity entities extending the shared BaseRepository with the
# lookups each entity needs (email/phone, role name, per-user profile and addresses,
# latest usable OTP, active sessions).
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, identity domain models
# 🔄 Connected Modules / Calls From:
# identity infrastructure implementations, embedding application services

import uuid
from abc import abstractmethod
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import OTP, Address, AuthSession, OTPPurpose, Profile, Role, User, UserRole


class UserRepository(BaseRepository[User]):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Email lookups are case-insensitive (emails are stored lowercased)
    - Soft deleted users are invisible to lookups
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_phone(self, phone: str) -> Optional[User]:
        pass

    @abstractmethod
    async def list_by_role(self, role: UserRole, active_only: bool = True) -> List[User]:
        pass


class RoleRepository(BaseRepository[Role]):

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        pass


class ProfileRepository(BaseRepository[Profile]):

    @abstractmethod
    async def get_by_user(self, user_id: uuid.UUID) -> Optional[Profile]:
        pass


class AddressRepository(BaseRepository[Address]):
    """
    Address storage. Saving a default address clears the flag on the
    user's other addresses in the same unit of work.
    """

    @abstractmethod
    async def list_for_user(self, user_id: uuid.UUID) -> List[Address]:
        pass

    @abstractmethod
    async def get_default(self, user_id: uuid.UUID) -> Optional[Address]:
        pass

    @abstractmethod
    async def set_default(self, address_id: uuid.UUID) -> Address:
        """
        Make an address the user's default.

        Raises:
            NotFoundError: If the address does not exist
        """
        pass


class OTPRepository(BaseRepository[OTP]):

    @abstractmethod
    async def get_latest_usable(self, target: str, purpose: OTPPurpose) -> Optional[OTP]:
        """
        Most recent OTP for a target and purpose that is unused and unexpired.
        """
        pass


class AuthSessionRepository(BaseRepository[AuthSession]):

    @abstractmethod
    async def list_active_for_user(self, user_id: uuid.UUID) -> List[AuthSession]:
        pass

    @abstractmethod
    async def revoke_all_for_user(self, user_id: uuid.UUID, reason: str = "logout-all") -> int:
        """
        Revoke every active session of a user.

        Returns:
            Number of sessions revoked
        """
        pass
