# 📄 File: marketplace/modules/finance/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import all the money-related records from.
# 🧪 Purpose (Technical Summary):
# Re-exports finance domain entities, value objects and enums.
# 🔗 Dependencies:
# payment.py, wallet.py, commission.py, billing.py
# 🔄 Connected Modules / Calls From:
# finance services, repositories and infrastructure

from .billing import (
    INVOICE_NUMBER_PREFIX,
    BillingCycle,
    Cancellation,
    CancellationAmounts,
    CancellationStatus,
    CancelledBy,
    Invoice,
    InvoiceAmounts,
    InvoiceLine,
    InvoiceTax,
    PlanLimits,
    RefundPolicy,
    SellerDetails,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
)
from .commission import (
    Commission,
    CommissionModule,
    CommissionRule,
    CommissionSource,
    CommissionStatus,
    PlanCode,
    ServiceType,
)
from .payment import (
    GatewayStatus,
    Payment,
    PaymentGateway,
    PaymentPurpose,
    PaymentRefund,
    ReferenceType,
    Refund,
    RefundMethod,
    RefundStatus,
)
from .wallet import (
    TransactionPurpose,
    TransactionStatus,
    TransactionType,
    Wallet,
    WalletTransaction,
)

__all__ = [
    "INVOICE_NUMBER_PREFIX",
    "BillingCycle",
    "Cancellation",
    "CancellationAmounts",
    "CancellationStatus",
    "CancelledBy",
    "Commission",
    "CommissionModule",
    "CommissionRule",
    "CommissionSource",
    "CommissionStatus",
    "GatewayStatus",
    "Invoice",
    "InvoiceAmounts",
    "InvoiceLine",
    "InvoiceTax",
    "Payment",
    "PaymentGateway",
    "PaymentPurpose",
    "PaymentRefund",
    "PlanCode",
    "PlanLimits",
    "ReferenceType",
    "Refund",
    "RefundMethod",
    "RefundPolicy",
    "RefundStatus",
    "SellerDetails",
    "ServiceType",
    "Subscription",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "TransactionPurpose",
    "TransactionStatus",
    "TransactionType",
    "Wallet",
    "WalletTransaction",
]
