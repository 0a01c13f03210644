# 📄 File: marketplace/modules/finance/domain/repositories/finance_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how payments, wallets, commissions, refunds, invoices and subscriptions are
# looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for finance entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, finance domain models
# 🔄 Connected Modules / Calls From:
# finance services, finance infrastructure implementations

import uuid
from abc import abstractmethod
from datetime import datetime
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import (
    Cancellation,
    Commission,
    CommissionRule,
    Invoice,
    Payment,
    Refund,
    Subscription,
    SubscriptionPlan,
    Wallet,
    WalletTransaction,
)


class PaymentRepository(BaseRepository[Payment]):

    @abstractmethod
    async def get_by_gateway_order_id(self, gateway_order_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Payment]:
        pass

    @abstractmethod
    async def list_for_reference(self, reference_type: str, reference_id: uuid.UUID) -> List[Payment]:
        pass


class WalletRepository(BaseRepository[Wallet]):

    @abstractmethod
    async def get_by_user(self, user_id: uuid.UUID, include_deleted: bool = False) -> Optional[Wallet]:
        pass


class WalletTransactionRepository(BaseRepository[WalletTransaction]):

    @abstractmethod
    async def list_for_wallet(self, wallet_id: uuid.UUID, limit: int = 50, offset: int = 0) -> List[WalletTransaction]:
        """Ledger lines, newest first."""
        pass


class CommissionRepository(BaseRepository[Commission]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, status: Optional[str] = None) -> List[Commission]:
        pass

    @abstractmethod
    async def list_for_reference(self, reference_type: str, reference_id: uuid.UUID) -> List[Commission]:
        pass


class CommissionRuleRepository(BaseRepository[CommissionRule]):

    @abstractmethod
    async def get_for(self, module: str, plan: str) -> Optional[CommissionRule]:
        """Active rule for a module and plan code."""
        pass


class RefundRepository(BaseRepository[Refund]):

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID) -> List[Refund]:
        pass

    @abstractmethod
    async def list_by_status(self, status: str, limit: int = 100) -> List[Refund]:
        pass


class CancellationRepository(BaseRepository[Cancellation]):

    @abstractmethod
    async def get_by_booking(self, booking_id: uuid.UUID) -> Optional[Cancellation]:
        pass


class InvoiceRepository(BaseRepository[Invoice]):

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Invoice]:
        pass


class SubscriptionPlanRepository(BaseRepository[SubscriptionPlan]):

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[SubscriptionPlan]:
        pass


class SubscriptionRepository(BaseRepository[Subscription]):

    @abstractmethod
    async def get_active_for_user(self, user_id: uuid.UUID, now: Optional[datetime] = None) -> Optional[Subscription]:
        """Latest active subscription whose window has not ended."""
        pass

    @abstractmethod
    async def list_expiring(self, before: datetime) -> List[Subscription]:
        """Active subscriptions ending before the given time."""
        pass
