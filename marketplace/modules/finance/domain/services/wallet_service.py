# 📄 File: marketplace/modules/finance/domain/services/wallet_service.py
# 🧭 Purpose (Layman Explanation):
# Moves money in and out of a user's wallet and writes the matching statement line
# every time, so the balance and the statement always agree.
# 🧪 Purpose (Technical Summary):
# Domain service coordinating Wallet and WalletTransaction repositories. Both writes go
# through the same AsyncSession; the caller's commit makes them one unit of work. A
# rejected debit raises before anything is written.
# 🔗 Dependencies:
# finance domain models and repositories, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# refunds and cancellations, order/booking payment flows, payouts

import logging
import uuid
from typing import List, Optional, Tuple

from marketplace.shared.core.exceptions import BusinessRuleViolationError, NotFoundError

from ..models import ReferenceType, TransactionPurpose, TransactionType, Wallet, WalletTransaction
from ..repositories import WalletRepository, WalletTransactionRepository

logger = logging.getLogger(__name__)


class WalletService:
    """
    Domain service for wallet balance changes.

    Every balance change produces exactly one ledger line whose opening and
    closing balances bracket the change.
    """

    def __init__(
        self,
        wallet_repository: WalletRepository,
        transaction_repository: WalletTransactionRepository
    ):
        self.wallet_repository = wallet_repository
        self.transaction_repository = transaction_repository

    async def get_or_create(self, user_id: uuid.UUID, currency: Optional[str] = None) -> Wallet:
        """
        Return the user's wallet, creating it on first use.

        A soft deleted wallet is restored with its balance and ledger intact,
        since user_id stays unique across deleted rows.
        """
        wallet = await self.wallet_repository.get_by_user(user_id, include_deleted=True)
        if wallet and wallet.is_deleted:
            logger.info(f"Restoring wallet {wallet.id} for user: {user_id}")
            wallet.restore()
            return await self.wallet_repository.save(wallet)
        if wallet:
            return wallet
        logger.info(f"Creating wallet for user: {user_id}")
        wallet = Wallet(user_id=user_id, currency=currency) if currency else Wallet(user_id=user_id)
        return await self.wallet_repository.add(wallet)

    async def credit(
        self,
        user_id: uuid.UUID,
        amount: float,
        purpose: TransactionPurpose,
        reference_type: Optional[ReferenceType] = None,
        reference_id: Optional[uuid.UUID] = None,
        payment_id: Optional[uuid.UUID] = None,
        description: Optional[str] = None
    ) -> Tuple[Wallet, WalletTransaction]:
        """
        Add money to a user's wallet, creating the wallet on first use.

        Returns:
            The updated wallet and the ledger line written for it
        """
        wallet = await self.get_or_create(user_id)
        opening_balance = wallet.balance
        wallet.credit(amount)
        return await self._persist(
            wallet, TransactionType.CREDIT, purpose, amount, opening_balance,
            reference_type, reference_id, payment_id, description
        )

    async def debit(
        self,
        user_id: uuid.UUID,
        amount: float,
        purpose: TransactionPurpose,
        reference_type: Optional[ReferenceType] = None,
        reference_id: Optional[uuid.UUID] = None,
        payment_id: Optional[uuid.UUID] = None,
        description: Optional[str] = None
    ) -> Tuple[Wallet, WalletTransaction]:
        """
        Take money out of a user's wallet.

        Raises:
            NotFoundError: If the user has no wallet
            InsufficientBalanceError: If the balance is too low; nothing is written
            BusinessRuleViolationError: If the wallet is blocked or inactive
        """
        wallet = await self.wallet_repository.get_by_user(user_id)
        if wallet is None:
            raise NotFoundError(
                "Wallet not found",
                resource_type="Wallet",
                resource_id=str(user_id)
            )
        if not wallet.is_active:
            raise BusinessRuleViolationError(
                "Wallet is not active",
                rule="wallet_active",
                context={"wallet_id": str(wallet.id)}
            )

        opening_balance = wallet.balance
        try:
            wallet.debit(amount)
        except BusinessRuleViolationError:
            logger.warning(f"Debit of {amount} rejected for wallet {wallet.id} (balance {opening_balance})")
            raise
        return await self._persist(
            wallet, TransactionType.DEBIT, purpose, amount, opening_balance,
            reference_type, reference_id, payment_id, description
        )

    async def statement(self, user_id: uuid.UUID, limit: int = 50, offset: int = 0) -> List[WalletTransaction]:
        wallet = await self.wallet_repository.get_by_user(user_id)
        if wallet is None:
            return []
        return await self.transaction_repository.list_for_wallet(wallet.id, limit=limit, offset=offset)

    async def _persist(
        self,
        wallet: Wallet,
        type: TransactionType,
        purpose: TransactionPurpose,
        amount: float,
        opening_balance: float,
        reference_type: Optional[ReferenceType],
        reference_id: Optional[uuid.UUID],
        payment_id: Optional[uuid.UUID],
        description: Optional[str]
    ) -> Tuple[Wallet, WalletTransaction]:
        transaction = WalletTransaction.record(
            wallet,
            type=type,
            purpose=purpose,
            amount=amount,
            opening_balance=opening_balance,
            reference_type=reference_type,
            reference_id=reference_id,
            payment_id=payment_id,
            description=description,
        )
        saved_wallet = await self.wallet_repository.save(wallet)
        saved_transaction = await self.transaction_repository.add(transaction)
        logger.info(
            f"Wallet {wallet.id} {type.value} {amount} ({purpose}): "
            f"{opening_balance} -> {saved_wallet.balance}"
        )
        return saved_wallet, saved_transaction
