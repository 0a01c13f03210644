# 📄 File: marketplace/modules/finance/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for money-related records.
# 🧪 Purpose (Technical Summary):
# Exports finance repository interfaces.
# 🔗 Dependencies:
# finance_repository.py
# 🔄 Connected Modules / Calls From:
# finance services and infrastructure

from .finance_repository import (
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

__all__ = [
    "CancellationRepository",
    "CommissionRepository",
    "CommissionRuleRepository",
    "InvoiceRepository",
    "PaymentRepository",
    "RefundRepository",
    "SubscriptionPlanRepository",
    "SubscriptionRepository",
    "WalletRepository",
    "WalletTransactionRepository",
]
