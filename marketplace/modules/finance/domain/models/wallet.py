# 📄 File: marketplace/modules/finance/domain/models/wallet.py
# 🧭 Purpose (Layman Explanation):
# Each user's in-app wallet and the statement lines that record every rupee going in
# or out of it.
# 🧪 Purpose (Technical Summary):
# Wallet entity with guarded credit/debit (balance never negative) and block state, and
# the immutable WalletTransaction ledger line with opening/closing balances.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# finance wallet service, finance repositories, refunds

import uuid
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError, InsufficientBalanceError
from marketplace.shared.domain.base import DomainModel, SoftDeletableModel, ensure_positive
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, BankAccount
from marketplace.shared.utils.helpers import round_money

from .payment import ReferenceType

BALANCE_EPSILON = 0.01


class Wallet(SoftDeletableModel):
    """
    User wallet; one per user.

    balance never drops below zero. total_credit and total_debit only grow.
    """

    user_id: uuid.UUID
    balance: Amount = 0
    currency: str = DEFAULT_CURRENCY
    total_credit: Amount = 0
    total_debit: Amount = 0
    is_active: bool = True
    is_blocked: bool = False
    blocked_reason: Optional[str] = None
    settlement_account: Optional[BankAccount] = None

    def credit(self, amount: float) -> None:
        ensure_positive(amount, field="amount")
        self.balance = round_money(self.balance + amount)
        self.total_credit = round_money(self.total_credit + amount)
        self.touch()

    def debit(self, amount: float) -> None:
        """
        Take money out of the wallet.

        Raises:
            BusinessRuleViolationError: If the wallet is blocked
            InsufficientBalanceError: If the balance cannot cover the amount
        """
        ensure_positive(amount, field="amount")
        if self.is_blocked:
            raise BusinessRuleViolationError(
                "Wallet is blocked",
                rule="wallet_not_blocked",
                context={"wallet_id": str(self.id), "reason": self.blocked_reason}
            )
        if self.balance < amount:
            raise InsufficientBalanceError(
                balance=self.balance,
                requested=amount,
                wallet_id=str(self.id)
            )
        self.balance = round_money(self.balance - amount)
        self.total_debit = round_money(self.total_debit + amount)
        self.touch()

    def can_debit(self, amount: float) -> bool:
        return not self.is_blocked and self.balance >= amount

    def block(self, reason: Optional[str] = None) -> None:
        self.is_blocked = True
        self.blocked_reason = reason
        self.touch()

    def unblock(self) -> None:
        self.is_blocked = False
        self.blocked_reason = None
        self.touch()


# =============================================================================
# LEDGER
# =============================================================================

class TransactionType(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"


class TransactionPurpose(str, Enum):
    ORDER_PAYMENT = "order_payment"
    ORDER_REFUND = "order_refund"
    BOOKING_PAYMENT = "booking_payment"
    BOOKING_REFUND = "booking_refund"
    COMMISSION = "commission"
    EARNING = "earning"
    PAYOUT = "payout"
    WALLET_TOPUP = "wallet_topup"
    ADJUSTMENT = "adjustment"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REVERSED = "reversed"


class WalletTransaction(DomainModel):
    """
    Ledger line. Lines are never edited or deleted; corrections are new
    lines with the opposite type.
    """

    model_config = ConfigDict(frozen=True)

    wallet_id: uuid.UUID
    user_id: uuid.UUID
    type: TransactionType
    purpose: TransactionPurpose
    amount: Amount
    currency: str = DEFAULT_CURRENCY
    opening_balance: Amount
    closing_balance: Amount
    reference_type: Optional[ReferenceType] = None
    reference_id: Optional[uuid.UUID] = None
    payment_id: Optional[uuid.UUID] = None
    description: Optional[str] = Field(None, max_length=500)
    status: TransactionStatus = TransactionStatus.COMPLETED

    @model_validator(mode="after")
    def check_closing_balance(self) -> "WalletTransaction":
        sign = 1 if self.type == TransactionType.CREDIT.value else -1
        if abs(self.opening_balance + sign * self.amount - self.closing_balance) > BALANCE_EPSILON:
            raise ValueError("closing_balance must equal opening_balance plus or minus amount")
        return self

    @classmethod
    def record(
        cls,
        wallet: Wallet,
        type: TransactionType,
        purpose: TransactionPurpose,
        amount: float,
        opening_balance: float,
        reference_type: Optional[ReferenceType] = None,
        reference_id: Optional[uuid.UUID] = None,
        payment_id: Optional[uuid.UUID] = None,
        description: Optional[str] = None,
    ) -> "WalletTransaction":
        """Ledger line for a movement on a wallet; closing = opening +/- amount."""
        type = TransactionType(type)
        closing = opening_balance + amount if type == TransactionType.CREDIT else opening_balance - amount
        return cls(
            wallet_id=wallet.id,
            user_id=wallet.user_id,
            type=type,
            purpose=purpose,
            amount=amount,
            currency=wallet.currency,
            opening_balance=opening_balance,
            closing_balance=round_money(closing),
            reference_type=reference_type,
            reference_id=reference_id,
            payment_id=payment_id,
            description=description,
        )
