# 📄 File: marketplace/modules/finance/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how payments, wallets, statement lines, commissions, refunds, cancellations,
# invoices and subscriptions are stored as tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for finance. Money columns are Numeric(12, 2); financial history
# uses ON DELETE RESTRICT; wallet ledger lines have no soft delete; balances and
# percentages are guarded by CHECK constraints.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - marketplace.shared.infrastructure.database (base, mixins, column types)
#
# 🔄 Connected Modules / Calls From:
# - finance_repository_impl.py
# - migrations

from sqlalchemy import Boolean, CheckConstraint, Column, Float, Index, Integer, String, Text, UniqueConstraint

from marketplace.modules.finance.domain.models import (
    BillingCycle,
    CancellationStatus,
    CancelledBy,
    CommissionModule,
    CommissionSource,
    CommissionStatus,
    GatewayStatus,
    PaymentGateway,
    PaymentPurpose,
    PlanCode,
    ReferenceType,
    RefundMethod,
    RefundStatus,
    ServiceType,
    SubscriptionStatus,
    TransactionPurpose,
    TransactionStatus,
    TransactionType,
)
from marketplace.shared.domain.value_objects import PaymentStatus
from marketplace.shared.infrastructure.database.base import DatabaseBase, SoftDeleteMixin, TimestampMixin
from marketplace.shared.infrastructure.database.types import (
    JSONType,
    Money,
    UTCDateTime,
    UUIDType,
    enum_check,
    enum_column,
    foreign_key,
)


class PaymentModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "payments"
    __table_args__ = (
        enum_check("gateway", PaymentGateway),
        enum_check("purpose", PaymentPurpose),
        enum_check("status", GatewayStatus),
        enum_check("reference_type", ReferenceType),
        Index("ix_payments_reference_type_reference_id", "reference_type", "reference_id"),
        Index("ix_payments_user_id_created_at", "user_id", "created_at"),
        Index("ix_payments_status_is_settled", "status", "is_settled"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    wallet_id = foreign_key("wallets.id", ondelete="SET NULL", nullable=True, index=False)
    reference_type = enum_column(ReferenceType, nullable=True)
    reference_id = Column(UUIDType, nullable=True)
    amount = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    gateway = enum_column(PaymentGateway)
    gateway_order_id = Column(String(100), nullable=True, unique=True, index=True)
    gateway_payment_id = Column(String(100), nullable=True, index=True)
    gateway_signature = Column(String(255), nullable=True)
    purpose = enum_column(PaymentPurpose)
    status = enum_column(GatewayStatus, default=GatewayStatus.CREATED)
    refund = Column(JSONType, nullable=False, default=dict,
                    comment="{is_refunded, refund_amount, refund_at, refund_gateway_id}")
    webhook_payload = Column(JSONType, nullable=True)
    failure_reason = Column(Text, nullable=True)
    is_settled = Column(Boolean, nullable=False, default=False)
    settled_at = Column(UTCDateTime, nullable=True)


class WalletModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "wallets"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="balance_non_negative"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False, unique=True)
    balance = Column(Money, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="INR")
    total_credit = Column(Money, nullable=False, default=0)
    total_debit = Column(Money, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    is_blocked = Column(Boolean, nullable=False, default=False)
    blocked_reason = Column(Text, nullable=True)
    settlement_account = Column(JSONType, nullable=True,
                                comment="{account_holder_name, account_number, ifsc_code, bank_name, upi_id}")


class WalletTransactionModel(TimestampMixin, DatabaseBase):
    """Append-only ledger; rows are never updated or soft deleted."""
    __tablename__ = "wallet_transactions"
    __table_args__ = (
        enum_check("type", TransactionType),
        enum_check("purpose", TransactionPurpose),
        enum_check("status", TransactionStatus),
        enum_check("reference_type", ReferenceType),
        CheckConstraint("amount >= 0", name="amount_non_negative"),
        Index("ix_wallet_transactions_wallet_id_created_at", "wallet_id", "created_at"),
        Index("ix_wallet_transactions_reference_type_reference_id", "reference_type", "reference_id"),
    )

    wallet_id = foreign_key("wallets.id", ondelete="RESTRICT", index=False)
    user_id = foreign_key("users.id", ondelete="RESTRICT")
    type = enum_column(TransactionType)
    purpose = enum_column(TransactionPurpose)
    amount = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    opening_balance = Column(Money, nullable=False)
    closing_balance = Column(Money, nullable=False)
    reference_type = enum_column(ReferenceType, nullable=True)
    reference_id = Column(UUIDType, nullable=True)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    description = Column(String(500), nullable=True)
    status = enum_column(TransactionStatus, default=TransactionStatus.COMPLETED)


class CommissionModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "commissions"
    __table_args__ = (
        enum_check("service_type", ServiceType),
        enum_check("status", CommissionStatus),
        enum_check("source", CommissionSource),
        enum_check("reference_type", ReferenceType),
        CheckConstraint(
            "commission_percentage >= 0 AND commission_percentage <= 100",
            name="commission_percentage_range"
        ),
        Index("ix_commissions_user_id_status", "user_id", "status"),
        Index("ix_commissions_reference_type_reference_id", "reference_type", "reference_id"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    service_type = enum_column(ServiceType)
    reference_type = enum_column(ReferenceType, nullable=True)
    reference_id = Column(UUIDType, nullable=True)
    gross_amount = Column(Money, nullable=False)
    commission_percentage = Column(Float, nullable=False)
    commission_amount = Column(Money, nullable=False)
    net_amount = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    status = enum_column(CommissionStatus, default=CommissionStatus.PENDING)
    source = enum_column(CommissionSource, default=CommissionSource.DEFAULT)
    applied_at = Column(UTCDateTime, nullable=True)
    reversed_at = Column(UTCDateTime, nullable=True)
    reversed_reason = Column(Text, nullable=True)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    wallet_transaction_id = foreign_key("wallet_transactions.id", ondelete="SET NULL", nullable=True, index=False)


class CommissionRuleModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "commission_rules"
    __table_args__ = (
        enum_check("module", CommissionModule),
        enum_check("plan", PlanCode),
        CheckConstraint("percentage >= 0 AND percentage <= 100", name="percentage_range"),
        UniqueConstraint("module", "plan", name="uq_commission_rules_module_plan"),
    )

    module = enum_column(CommissionModule)
    plan = enum_column(PlanCode, default=PlanCode.FREE)
    percentage = Column(Float, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    description = Column(Text, nullable=True)


class RefundModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "refunds"
    __table_args__ = (
        enum_check("method", RefundMethod),
        enum_check("status", RefundStatus),
        enum_check("reference_type", ReferenceType),
        Index("ix_refunds_user_id_status", "user_id", "status"),
        Index("ix_refunds_status_initiated_at", "status", "initiated_at"),
    )

    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    reference_type = enum_column(ReferenceType, nullable=True)
    reference_id = Column(UUIDType, nullable=True)
    cancellation_id = foreign_key("cancellations.id", ondelete="SET NULL", nullable=True)
    payment_id = foreign_key("payments.id", ondelete="RESTRICT", nullable=True)
    amount = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    method = enum_column(RefundMethod, default=RefundMethod.ORIGINAL)
    gateway = enum_column(PaymentGateway, nullable=True)
    gateway_refund_id = Column(String(100), nullable=True)
    status = enum_column(RefundStatus, default=RefundStatus.INITIATED)
    initiated_at = Column(UTCDateTime, nullable=False)
    processed_at = Column(UTCDateTime, nullable=True)
    wallet_transaction_id = foreign_key("wallet_transactions.id", ondelete="SET NULL", nullable=True, index=False)
    failure_reason = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    processed_by = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)


class CancellationModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "cancellations"
    __table_args__ = (
        enum_check("cancelled_by", CancelledBy),
        enum_check("status", CancellationStatus),
        Index("ix_cancellations_user_id_status", "user_id", "status"),
    )

    booking_id = foreign_key("bookings.id", ondelete="RESTRICT", index=False, unique=True)
    cancelled_by = enum_column(CancelledBy)
    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    reason = Column(String(500), nullable=True)
    cancelled_at = Column(UTCDateTime, nullable=False)
    hours_before_service = Column(Float, nullable=True)
    refund_policy = Column(JSONType, nullable=False, comment="{is_refundable, refund_percentage, penalty_amount}")
    amounts = Column(JSONType, nullable=False,
                     comment="{booking_amount, refundable_amount, refunded_amount, currency}")
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    wallet_transaction_id = foreign_key("wallet_transactions.id", ondelete="SET NULL", nullable=True, index=False)
    status = enum_column(CancellationStatus, default=CancellationStatus.PENDING)
    processed_at = Column(UTCDateTime, nullable=True)
    processed_by = foreign_key("users.id", ondelete="SET NULL", nullable=True, index=False)
    notes = Column(Text, nullable=True)


class InvoiceModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "invoices"
    __table_args__ = (
        enum_check("payment_status", PaymentStatus),
        Index("ix_invoices_user_id_invoice_date", "user_id", "invoice_date"),
    )

    invoice_number = Column(String(32), nullable=False, unique=True, index=True)
    invoice_date = Column(UTCDateTime, nullable=False)
    user_id = foreign_key("users.id", ondelete="RESTRICT", index=False)
    provider_id = foreign_key("users.id", ondelete="SET NULL", nullable=True)
    order_id = foreign_key("orders.id", ondelete="RESTRICT", nullable=True)
    booking_id = foreign_key("bookings.id", ondelete="RESTRICT", nullable=True)
    items = Column(JSONType, nullable=False, comment="[{name, description, quantity, unit_price, total_price}]")
    amounts = Column(JSONType, nullable=False,
                     comment="{sub_total, discount, tax: {cgst, sgst, igst}, total_tax, grand_total, currency}")
    seller_details = Column(JSONType, nullable=True)
    billing_address = Column(JSONType, nullable=True)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    payment_status = enum_column(PaymentStatus, default=PaymentStatus.PAID)
    notes = Column(Text, nullable=True)


class SubscriptionPlanModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "subscription_plans"
    __table_args__ = (
        enum_check("code", PlanCode),
        enum_check("billing_cycle", BillingCycle),
        CheckConstraint("duration_days >= 1", name="duration_days_positive"),
    )

    code = enum_column(PlanCode, unique=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Money, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="INR")
    duration_days = Column(Integer, nullable=False, default=30)
    billing_cycle = enum_column(BillingCycle, default=BillingCycle.MONTHLY)
    applicable_roles = Column(JSONType, nullable=False, default=list)
    features = Column(JSONType, nullable=False, default=list)
    limits = Column(JSONType, nullable=False, default=dict, comment="{listings, bookings_per_month, team_members}")
    commission_percentage = Column(Float, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class SubscriptionModel(TimestampMixin, SoftDeleteMixin, DatabaseBase):
    __tablename__ = "subscriptions"
    __table_args__ = (
        enum_check("plan_code", PlanCode),
        enum_check("billing_cycle", BillingCycle),
        enum_check("status", SubscriptionStatus),
        CheckConstraint("end_date > start_date", name="end_after_start"),
        Index("ix_subscriptions_user_id_status", "user_id", "status"),
        Index("ix_subscriptions_status_end_date", "status", "end_date"),
    )

    user_id = foreign_key("users.id", ondelete="CASCADE", index=False)
    plan_id = foreign_key("subscription_plans.id", ondelete="RESTRICT")
    plan_name = Column(String(100), nullable=False)
    plan_code = enum_column(PlanCode)
    price = Column(Money, nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    billing_cycle = enum_column(BillingCycle, default=BillingCycle.MONTHLY)
    start_date = Column(UTCDateTime, nullable=False)
    end_date = Column(UTCDateTime, nullable=False)
    auto_renew = Column(Boolean, nullable=False, default=False)
    renewed_from = foreign_key("subscriptions.id", ondelete="SET NULL", nullable=True, index=False)
    features = Column(JSONType, nullable=False, default=list)
    limits = Column(JSONType, nullable=False, default=dict)
    commission_percentage = Column(Float, nullable=True)
    payment_id = foreign_key("payments.id", ondelete="SET NULL", nullable=True, index=False)
    status = enum_column(SubscriptionStatus, default=SubscriptionStatus.ACTIVE)
    cancelled_at = Column(UTCDateTime, nullable=True)
