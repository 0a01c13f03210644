# 📄 File: marketplace/modules/finance/infrastructure/database/finance_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for money records: finding a payment from the gateway's
# order id, a user's wallet and statement, commission rules, and current subscriptions.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the finance repository interfaces built on the generic
# SQLAlchemyRepository.
#
# 🔗 Dependencies:
# - finance domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - finance WalletService and CommissionService
# - Embedding application services (checkout, refunds, billing)

import logging
import uuid
from datetime import datetime
from typing import List, Optional

from marketplace.modules.finance.domain.models import (
    Cancellation,
    Commission,
    CommissionRule,
    Invoice,
    Payment,
    Refund,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
    Wallet,
    WalletTransaction,
)
from marketplace.modules.finance.domain.repositories import (
    CancellationRepository,
    CommissionRepository,
    CommissionRuleRepository,
    InvoiceRepository,
    PaymentRepository,
    RefundRepository,
    SubscriptionPlanRepository,
    SubscriptionRepository,
    WalletRepository,
    WalletTransactionRepository,
)
from marketplace.modules.finance.infrastructure.database.models import (
    CancellationModel,
    CommissionModel,
    CommissionRuleModel,
    InvoiceModel,
    PaymentModel,
    RefundModel,
    SubscriptionModel,
    SubscriptionPlanModel,
    WalletModel,
    WalletTransactionModel,
)
from marketplace.shared.core.exceptions import RepositoryError
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository
from marketplace.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class PaymentRepositoryImpl(SQLAlchemyRepository[Payment, PaymentModel], PaymentRepository):

    entity_class = Payment
    model_class = PaymentModel
    resource_name = "Payment"

    async def get_by_gateway_order_id(self, gateway_order_id: str) -> Optional[Payment]:
        return await self._first(self._select().where(PaymentModel.gateway_order_id == gateway_order_id))

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Payment]:
        stmt = (
            self._select()
            .where(PaymentModel.user_id == user_id)
            .order_by(PaymentModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_for_reference(self, reference_type: str, reference_id: uuid.UUID) -> List[Payment]:
        stmt = (
            self._select()
            .where(PaymentModel.reference_type == reference_type, PaymentModel.reference_id == reference_id)
            .order_by(PaymentModel.created_at)
        )
        return await self._all(stmt)


class WalletRepositoryImpl(SQLAlchemyRepository[Wallet, WalletModel], WalletRepository):

    entity_class = Wallet
    model_class = WalletModel
    resource_name = "Wallet"

    async def get_by_user(self, user_id: uuid.UUID, include_deleted: bool = False) -> Optional[Wallet]:
        stmt = self._select(include_deleted=include_deleted).where(WalletModel.user_id == user_id)
        return await self._first(stmt)


class WalletTransactionRepositoryImpl(
    SQLAlchemyRepository[WalletTransaction, WalletTransactionModel],
    WalletTransactionRepository
):
    """Ledger lines are append-only: save and delete are refused."""

    entity_class = WalletTransaction
    model_class = WalletTransactionModel
    resource_name = "WalletTransaction"

    async def save(self, entity: WalletTransaction) -> WalletTransaction:
        raise RepositoryError(
            "Wallet transactions are immutable",
            operation="update",
            entity=self.resource_name
        )

    async def delete(self, entity_id: uuid.UUID) -> bool:
        raise RepositoryError(
            "Wallet transactions cannot be deleted",
            operation="delete",
            entity=self.resource_name
        )

    async def list_for_wallet(self, wallet_id: uuid.UUID, limit: int = 50, offset: int = 0) -> List[WalletTransaction]:
        stmt = (
            self._select()
            .where(WalletTransactionModel.wallet_id == wallet_id)
            .order_by(WalletTransactionModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)


class CommissionRepositoryImpl(SQLAlchemyRepository[Commission, CommissionModel], CommissionRepository):

    entity_class = Commission
    model_class = CommissionModel
    resource_name = "Commission"

    async def list_by_user(self, user_id: uuid.UUID, status: Optional[str] = None) -> List[Commission]:
        stmt = self._select().where(CommissionModel.user_id == user_id)
        if status:
            stmt = stmt.where(CommissionModel.status == status)
        return await self._all(stmt.order_by(CommissionModel.created_at.desc()))

    async def list_for_reference(self, reference_type: str, reference_id: uuid.UUID) -> List[Commission]:
        stmt = self._select().where(
            CommissionModel.reference_type == reference_type,
            CommissionModel.reference_id == reference_id,
        )
        return await self._all(stmt)


class CommissionRuleRepositoryImpl(SQLAlchemyRepository[CommissionRule, CommissionRuleModel], CommissionRuleRepository):

    entity_class = CommissionRule
    model_class = CommissionRuleModel
    resource_name = "CommissionRule"

    async def get_for(self, module: str, plan: str) -> Optional[CommissionRule]:
        stmt = self._select().where(
            CommissionRuleModel.module == module,
            CommissionRuleModel.plan == plan,
            CommissionRuleModel.is_active.is_(True),
        )
        return await self._first(stmt)


class RefundRepositoryImpl(SQLAlchemyRepository[Refund, RefundModel], RefundRepository):

    entity_class = Refund
    model_class = RefundModel
    resource_name = "Refund"

    async def list_by_user(self, user_id: uuid.UUID) -> List[Refund]:
        stmt = self._select().where(RefundModel.user_id == user_id).order_by(RefundModel.initiated_at.desc())
        return await self._all(stmt)

    async def list_by_status(self, status: str, limit: int = 100) -> List[Refund]:
        stmt = (
            self._select()
            .where(RefundModel.status == status)
            .order_by(RefundModel.initiated_at)
            .limit(limit)
        )
        return await self._all(stmt)


class CancellationRepositoryImpl(SQLAlchemyRepository[Cancellation, CancellationModel], CancellationRepository):

    entity_class = Cancellation
    model_class = CancellationModel
    resource_name = "Cancellation"

    async def get_by_booking(self, booking_id: uuid.UUID) -> Optional[Cancellation]:
        return await self._first(self._select().where(CancellationModel.booking_id == booking_id))


class InvoiceRepositoryImpl(SQLAlchemyRepository[Invoice, InvoiceModel], InvoiceRepository):

    entity_class = Invoice
    model_class = InvoiceModel
    resource_name = "Invoice"

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        stmt = self._select().where(InvoiceModel.invoice_number == invoice_number.strip().upper())
        return await self._first(stmt)

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Invoice]:
        stmt = (
            self._select()
            .where(InvoiceModel.user_id == user_id)
            .order_by(InvoiceModel.invoice_date.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)


class SubscriptionPlanRepositoryImpl(
    SQLAlchemyRepository[SubscriptionPlan, SubscriptionPlanModel],
    SubscriptionPlanRepository
):

    entity_class = SubscriptionPlan
    model_class = SubscriptionPlanModel
    resource_name = "SubscriptionPlan"

    async def get_by_code(self, code: str) -> Optional[SubscriptionPlan]:
        return await self._first(self._select().where(SubscriptionPlanModel.code == code.strip().upper()))


class SubscriptionRepositoryImpl(SQLAlchemyRepository[Subscription, SubscriptionModel], SubscriptionRepository):

    entity_class = Subscription
    model_class = SubscriptionModel
    resource_name = "Subscription"

    async def get_active_for_user(self, user_id: uuid.UUID, now: Optional[datetime] = None) -> Optional[Subscription]:
        stmt = (
            self._select()
            .where(
                SubscriptionModel.user_id == user_id,
                SubscriptionModel.status == SubscriptionStatus.ACTIVE.value,
                SubscriptionModel.end_date > (now or utc_now()),
            )
            .order_by(SubscriptionModel.end_date.desc())
        )
        return await self._first(stmt)

    async def list_expiring(self, before: datetime) -> List[Subscription]:
        stmt = (
            self._select()
            .where(
                SubscriptionModel.status == SubscriptionStatus.ACTIVE.value,
                SubscriptionModel.end_date < before,
            )
            .order_by(SubscriptionModel.end_date)
        )
        return await self._all(stmt)
