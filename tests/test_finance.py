# 📄 File: tests/test_finance.py
# 🧭 Purpose (Layman Explanation):
# Checks the money side: wallet top-ups and spends always leave a matching ledger line,
# the platform's cut is taken from the right place, refunds stay within policy and
# invoices split GST correctly.
# 🧪 Purpose (Technical Summary):
# Tests WalletService/CommissionService against the SQLAlchemy repositories, plus the
# Commission, Cancellation, Invoice, Subscription, Payment and Refund domain rules.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.finance

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from marketplace.modules.finance.domain.models import (
    Cancellation,
    CancellationStatus,
    CancelledBy,
    Commission,
    CommissionModule,
    CommissionRule,
    CommissionSource,
    CommissionStatus,
    GatewayStatus,
    Invoice,
    InvoiceLine,
    Payment,
    PaymentGateway,
    PaymentPurpose,
    PlanCode,
    Refund,
    RefundMethod,
    RefundPolicy,
    RefundStatus,
    ServiceType,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
    TransactionPurpose,
    TransactionType,
    Wallet,
    WalletTransaction,
)
from marketplace.modules.finance.domain.services import CommissionService, WalletService
from marketplace.modules.finance.infrastructure.database.finance_repository_impl import (
    CommissionRepositoryImpl,
    CommissionRuleRepositoryImpl,
    InvoiceRepositoryImpl,
    PaymentRepositoryImpl,
    SubscriptionRepositoryImpl,
    WalletRepositoryImpl,
    WalletTransactionRepositoryImpl,
)
from marketplace.modules.identity.domain.models import UserRole
from marketplace.shared.core.exceptions import (
    BusinessRuleViolationError,
    InsufficientBalanceError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)


def make_plan(code: PlanCode = PlanCode.PRO, commission_percentage=None, **kwargs) -> SubscriptionPlan:
    return SubscriptionPlan(
        code=code,
        name=f"{code.value.title()} plan",
        price=999,
        duration_days=30,
        commission_percentage=commission_percentage,
        applicable_roles=[UserRole.SELLER_B2C],
        **kwargs
    )


@pytest.fixture
def wallet_service(session) -> WalletService:
    return WalletService(WalletRepositoryImpl(session), WalletTransactionRepositoryImpl(session))


@pytest.fixture
def commission_service(session) -> CommissionService:
    return CommissionService(
        CommissionRuleRepositoryImpl(session),
        CommissionRepositoryImpl(session),
        SubscriptionRepositoryImpl(session),
    )


# ============================================================================
# WALLET
# ============================================================================

class TestWalletModel:
    def test_credit_and_debit_totals(self, user_id):
        wallet = Wallet(user_id=user_id)
        wallet.credit(500)
        wallet.debit(120.5)

        assert wallet.balance == 379.5
        assert wallet.total_credit == 500
        assert wallet.total_debit == 120.5

    def test_non_positive_amount_rejected(self, user_id):
        with pytest.raises(ValidationError):
            Wallet(user_id=user_id).credit(0)

    def test_ledger_line_must_balance(self, user_id):
        with pytest.raises(ValueError):
            WalletTransaction(
                wallet_id=uuid.uuid4(),
                user_id=user_id,
                type=TransactionType.CREDIT,
                purpose=TransactionPurpose.WALLET_TOPUP,
                amount=100,
                opening_balance=0,
                closing_balance=90,
            )

    def test_ledger_line_is_frozen(self, user_id):
        wallet = Wallet(user_id=user_id)
        line = WalletTransaction.record(wallet, TransactionType.CREDIT, TransactionPurpose.WALLET_TOPUP, 100, 0)
        assert line.closing_balance == 100
        with pytest.raises(ValueError):
            line.amount = 1


async def test_credit_creates_wallet_and_ledger_line(wallet_service, user_id):
    wallet, line = await wallet_service.credit(user_id, 750, TransactionPurpose.WALLET_TOPUP)

    assert wallet.balance == 750
    assert line.type == TransactionType.CREDIT
    assert (line.opening_balance, line.closing_balance) == (0, 750)
    assert line.wallet_id == wallet.id


async def test_debit_brackets_balance(wallet_service, user_id):
    await wallet_service.credit(user_id, 1000, TransactionPurpose.WALLET_TOPUP)
    wallet, line = await wallet_service.debit(user_id, 400, TransactionPurpose.ORDER_PAYMENT)

    assert wallet.balance == 600
    assert (line.opening_balance, line.closing_balance) == (1000, 600)
    assert len(await wallet_service.statement(user_id)) == 2


async def test_failed_debit_writes_nothing(wallet_service, user_id):
    await wallet_service.credit(user_id, 100, TransactionPurpose.WALLET_TOPUP)

    with pytest.raises(InsufficientBalanceError) as exc_info:
        await wallet_service.debit(user_id, 150, TransactionPurpose.ORDER_PAYMENT)
    assert exc_info.value.details["rule"] == "wallet_balance_non_negative"

    wallet = await wallet_service.wallet_repository.get_by_user(user_id)
    assert wallet.balance == 100
    assert len(await wallet_service.statement(user_id)) == 1


async def test_debit_without_wallet(wallet_service, user_id):
    with pytest.raises(NotFoundError):
        await wallet_service.debit(user_id, 10, TransactionPurpose.ORDER_PAYMENT)
    assert await wallet_service.statement(user_id) == []


async def test_blocked_and_inactive_wallets_refuse_debits(wallet_service, user_id):
    wallet, _ = await wallet_service.credit(user_id, 500, TransactionPurpose.WALLET_TOPUP)
    wallet.block("chargeback under review")
    await wallet_service.wallet_repository.save(wallet)

    with pytest.raises(BusinessRuleViolationError) as exc_info:
        await wallet_service.debit(user_id, 10, TransactionPurpose.ORDER_PAYMENT)
    assert exc_info.value.details["rule"] == "wallet_not_blocked"

    wallet.unblock()
    wallet.is_active = False
    await wallet_service.wallet_repository.save(wallet)
    with pytest.raises(BusinessRuleViolationError) as exc_info:
        await wallet_service.debit(user_id, 10, TransactionPurpose.ORDER_PAYMENT)
    assert exc_info.value.details["rule"] == "wallet_active"


async def test_credit_restores_soft_deleted_wallet(wallet_service, user_id):
    wallet, _ = await wallet_service.credit(user_id, 50, TransactionPurpose.WALLET_TOPUP)
    assert await wallet_service.wallet_repository.soft_delete(wallet.id)
    assert await wallet_service.wallet_repository.get_by_user(user_id) is None

    restored, line = await wallet_service.credit(user_id, 10, TransactionPurpose.WALLET_TOPUP)

    assert restored.id == wallet.id
    assert not restored.is_deleted
    assert restored.balance == 60
    assert (line.opening_balance, line.closing_balance) == (50, 60)
    assert len(await wallet_service.statement(user_id)) == 2


async def test_ledger_refuses_edits(session, wallet_service, user_id):
    _, line = await wallet_service.credit(user_id, 50, TransactionPurpose.WALLET_TOPUP)
    repo = WalletTransactionRepositoryImpl(session)

    with pytest.raises(RepositoryError):
        await repo.save(line)
    with pytest.raises(RepositoryError):
        await repo.delete(line.id)


# ============================================================================
# COMMISSION
# ============================================================================

def test_commission_splits_gross():
    commission = Commission.calculate(uuid.uuid4(), ServiceType.HOTEL, 1999.99, 12.5)
    assert commission.commission_amount + commission.net_amount == pytest.approx(1999.99)
    assert commission.commission_amount == 250.0


def test_commission_reverses_once():
    commission = Commission.calculate(uuid.uuid4(), ServiceType.B2C, 1000, 10)
    commission.apply()
    assert commission.status == CommissionStatus.APPLIED
    commission.reverse("order returned")
    with pytest.raises(BusinessRuleViolationError):
        commission.reverse("again")


async def test_default_percentage(commission_service, user_id):
    percentage, source = await commission_service.resolve_percentage(user_id, ServiceType.B2C)
    assert (percentage, source) == (10.0, CommissionSource.DEFAULT)


async def test_rule_for_free_plan(session, commission_service, user_id):
    await CommissionRuleRepositoryImpl(session).add(
        CommissionRule(module=CommissionModule.B2C, plan=PlanCode.FREE, percentage=8)
    )

    assert await commission_service.resolve_percentage(user_id, ServiceType.B2C) == (8, CommissionSource.RULE)
    # Rules only cover the product and home-service lines
    assert (await commission_service.resolve_percentage(user_id, ServiceType.HOTEL))[1] == CommissionSource.DEFAULT


async def test_rule_follows_subscription_plan(session, commission_service, user_id):
    rules = CommissionRuleRepositoryImpl(session)
    await rules.add(CommissionRule(module=CommissionModule.HOME_SERVICE, plan=PlanCode.FREE, percentage=15))
    await rules.add(CommissionRule(module=CommissionModule.HOME_SERVICE, plan=PlanCode.PRO, percentage=9))
    await SubscriptionRepositoryImpl(session).add(Subscription.start(make_plan(PlanCode.PRO), user_id))

    assert await commission_service.resolve_percentage(user_id, ServiceType.SERVICE) == (9, CommissionSource.RULE)


async def test_subscription_override_wins(session, commission_service, user_id):
    await CommissionRuleRepositoryImpl(session).add(
        CommissionRule(module=CommissionModule.B2B, plan=PlanCode.ENTERPRISE, percentage=6)
    )
    plan = make_plan(PlanCode.ENTERPRISE, commission_percentage=4)
    await SubscriptionRepositoryImpl(session).add(Subscription.start(plan, user_id))

    commission = await commission_service.record(user_id, ServiceType.B2B, 5000)
    assert commission.source == CommissionSource.SUBSCRIPTION
    assert commission.commission_amount == 200
    assert commission.net_amount == 4800


async def test_manual_percentage_and_reverse(commission_service, user_id):
    commission = await commission_service.record(user_id, ServiceType.DOCTOR, 800, percentage=20)
    assert commission.source == CommissionSource.MANUAL
    assert commission.commission_amount == 160

    reversed_commission = await commission_service.reverse(commission.id, "consultation refunded")
    assert reversed_commission.status == CommissionStatus.REVERSED
    assert reversed_commission.reversed_reason == "consultation refunded"


# ============================================================================
# CANCELLATION, INVOICE
# ============================================================================

class TestCancellation:
    def make(self, policy: RefundPolicy) -> Cancellation:
        return Cancellation.create(uuid.uuid4(), uuid.uuid4(), CancelledBy.CUSTOMER, 1000, refund_policy=policy)

    def test_refundable_amount(self):
        cancellation = self.make(RefundPolicy(refund_percentage=80, penalty_amount=50))
        assert cancellation.amounts.refundable_amount == 750

    def test_penalty_floors_at_zero(self):
        cancellation = self.make(RefundPolicy(refund_percentage=10, penalty_amount=500))
        assert cancellation.amounts.refundable_amount == 0

    def test_non_refundable_policy(self):
        assert self.make(RefundPolicy(is_refundable=False)).amounts.refundable_amount == 0

    def test_process_within_refundable(self):
        cancellation = self.make(RefundPolicy(refund_percentage=50))
        with pytest.raises(BusinessRuleViolationError):
            cancellation.mark_processed(600)

        cancellation.mark_processed()
        assert cancellation.status == CancellationStatus.PROCESSED
        assert cancellation.amounts.refunded_amount == 500
        with pytest.raises(BusinessRuleViolationError):
            cancellation.mark_processed()


class TestInvoice:
    lines = [InvoiceLine(name="Deep cleaning", quantity=2, unit_price=750)]

    def test_intra_state_splits_gst(self):
        invoice = Invoice.create(uuid.uuid4(), self.lines, gst_percentage=18, discount=100)

        assert invoice.items[0].total_price == 1500
        assert invoice.amounts.total_tax == 252
        assert (invoice.amounts.tax.cgst, invoice.amounts.tax.sgst, invoice.amounts.tax.igst) == (126, 126, 0)
        assert invoice.amounts.grand_total == 1652
        assert invoice.invoice_number.startswith("INV-")

    def test_inter_state_charges_igst(self):
        invoice = Invoice.create(uuid.uuid4(), self.lines, gst_percentage=18, inter_state=True)
        assert invoice.amounts.tax.igst == 270
        assert invoice.amounts.tax.cgst == 0
        assert invoice.amounts.grand_total == 1770


async def test_invoice_number_lookup(session, user_id):
    repo = InvoiceRepositoryImpl(session)
    invoice = await repo.add(Invoice.create(user_id, TestInvoice.lines, invoice_number="inv-2026-000042"))

    assert invoice.invoice_number == "INV-2026-000042"
    assert (await repo.get_by_invoice_number("inv-2026-000042")).id == invoice.id


# ============================================================================
# SUBSCRIPTION
# ============================================================================

class TestSubscription:
    def test_start_copies_plan_terms(self, user_id):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        subscription = Subscription.start(make_plan(commission_percentage=7), user_id, start_date=start)

        assert subscription.end_date == start + timedelta(days=30)
        assert subscription.plan_code == PlanCode.PRO
        assert subscription.commission_percentage == 7
        assert subscription.is_active(now=start + timedelta(days=1))
        assert not subscription.is_active(now=start + timedelta(days=31))
        assert subscription.days_remaining(today=start.date() + timedelta(days=10)) == 20

    def test_renew_links_successor(self, user_id):
        plan = make_plan()
        current = Subscription.start(plan, user_id)
        successor = current.renew(plan)

        assert current.status == SubscriptionStatus.EXPIRED
        assert successor.renewed_from == current.id
        assert successor.start_date >= current.end_date

    def test_cancelled_cannot_renew(self, user_id):
        plan = make_plan()
        subscription = Subscription.start(plan, user_id)
        subscription.cancel()
        with pytest.raises(BusinessRuleViolationError):
            subscription.renew(plan)

    def test_plan_roles(self):
        plan = make_plan()
        assert plan.applies_to(UserRole.SELLER_B2C.value)
        assert not plan.applies_to(UserRole.DOCTOR.value)


async def test_active_subscription_lookup(session, user_id):
    repo = SubscriptionRepositoryImpl(session)
    old_start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    await repo.add(Subscription.start(make_plan(), user_id, start_date=old_start))
    assert await repo.get_active_for_user(user_id) is None

    current = await repo.add(Subscription.start(make_plan(), user_id))
    assert (await repo.get_active_for_user(user_id)).id == current.id


# ============================================================================
# PAYMENTS & REFUNDS
# ============================================================================

async def test_payment_by_gateway_order(session, user_id):
    repo = PaymentRepositoryImpl(session)
    payment = Payment(
        user_id=user_id,
        amount=499,
        gateway=PaymentGateway.RAZORPAY,
        gateway_order_id="order_Nx12",
        purpose=PaymentPurpose.ORDER_PAYMENT,
    )
    await repo.add(payment)

    loaded = await repo.get_by_gateway_order_id("order_Nx12")
    loaded.mark_success("pay_Qa9")
    saved = await repo.save(loaded)
    assert saved.is_successful
    assert saved.status == GatewayStatus.SUCCESS


def test_refund_keeps_existing_ids():
    refund = Refund(user_id=uuid.uuid4(), amount=250, method=RefundMethod.WALLET, gateway_refund_id="rfnd_1")
    refund.mark_processing()
    refund.mark_completed()

    assert refund.status == RefundStatus.COMPLETED
    assert refund.gateway_refund_id == "rfnd_1"
    assert refund.processed_at is not None
