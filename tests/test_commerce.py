# 📄 File: tests/test_commerce.py
# 🧭 Purpose (Layman Explanation):
# Checks shopping: cart totals, coupons and their limits, order totals that always
# match their items, per-seller order items and shipment tracking.
# 🧪 Purpose (Technical Summary):
# Tests Cart/Coupon/Order/OrderItem/Shipment domain rules and the commerce
# SQLAlchemy repositories (unique order numbers, JSON lookups).
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.commerce

import uuid
from datetime import timedelta

import pytest

from marketplace.modules.commerce.domain.models import (
    Cart,
    Coupon,
    CouponScope,
    Courier,
    DiscountType,
    Order,
    OrderItem,
    OrderItemStatus,
    OrderLine,
    OrderStatus,
    OrderTotals,
    Shipment,
    ShipmentStatus,
    UsageLimit,
)
from marketplace.modules.commerce.infrastructure.database.commerce_repository_impl import (
    CartRepositoryImpl,
    CouponRepositoryImpl,
    OrderItemRepositoryImpl,
    OrderRepositoryImpl,
    ShipmentRepositoryImpl,
)
from marketplace.shared.core.exceptions import BusinessRuleViolationError, DuplicateResourceError
from marketplace.shared.domain.value_objects import PaymentStatus, PriceSnapshot
from marketplace.shared.utils.helpers import utc_now


def price(selling_price: float, mrp: float = 0) -> PriceSnapshot:
    return PriceSnapshot(mrp=mrp or selling_price, selling_price=selling_price)


def make_coupon(**kwargs) -> Coupon:
    now = utc_now()
    data = dict(
        code="save10",
        applicable_on=CouponScope.ORDER,
        discount_type=DiscountType.PERCENTAGE,
        discount_value=10,
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=1),
    )
    data.update(kwargs)
    return Coupon(**data)


def make_order(user_id: uuid.UUID, seller_id: uuid.UUID, **kwargs) -> Order:
    lines = [
        OrderLine.create(product_id=uuid.uuid4(), seller_id=seller_id, quantity=2, pricing=price(250)),
        OrderLine.create(product_id=uuid.uuid4(), seller_id=uuid.uuid4(), quantity=1, pricing=price(99.5)),
    ]
    return Order.create(user_id=user_id, shipping_address_id=uuid.uuid4(), items=lines, **kwargs)


# ============================================================================
# COUPON
# ============================================================================

class TestCoupon:
    def test_code_is_uppercased(self):
        assert make_coupon().code == "SAVE10"

    def test_percentage_discount_is_capped(self):
        coupon = make_coupon(max_discount_amount=30)
        assert coupon.discount_for(1000) == 30
        assert coupon.discount_for(200) == 20

    def test_flat_discount_never_exceeds_amount(self):
        coupon = make_coupon(discount_type=DiscountType.FLAT, discount_value=150)
        assert coupon.discount_for(100) == 100

    def test_validity_window_and_minimum(self):
        coupon = make_coupon(min_order_amount=500)
        assert coupon.is_valid(600)
        assert not coupon.is_valid(400)
        assert not coupon.is_valid(600, now=coupon.end_date + timedelta(seconds=1))

    def test_usage_limit(self):
        coupon = make_coupon(usage_limit=UsageLimit(total=1))
        coupon.redeem()
        assert not coupon.is_valid(100)
        with pytest.raises(BusinessRuleViolationError):
            coupon.redeem()


# ============================================================================
# CART
# ============================================================================

class TestCart:
    def test_adding_same_item_merges_quantity(self, user_id):
        cart = Cart(user_id=user_id)
        product_id = uuid.uuid4()
        cart.add_item(product_id, 1, price(100))
        cart.add_item(product_id, 2, price(90))

        assert len(cart.items) == 1
        assert cart.item_count == 3
        assert cart.totals.sub_total == 270

    def test_coupon_discount_in_grand_total(self, user_id):
        cart = Cart(user_id=user_id)
        cart.add_item(uuid.uuid4(), 2, price(500))
        discount = cart.apply_coupon(make_coupon())

        assert discount == 100
        assert cart.totals.grand_total == 900

    def test_booking_coupon_rejected_for_cart(self, user_id):
        cart = Cart(user_id=user_id)
        cart.add_item(uuid.uuid4(), 1, price(500))
        with pytest.raises(BusinessRuleViolationError):
            cart.apply_coupon(make_coupon(applicable_on=CouponScope.BOOKING))

    def test_remove_and_clear(self, user_id):
        cart = Cart(user_id=user_id)
        product_id = uuid.uuid4()
        cart.add_item(product_id, 1, price(100))
        assert cart.remove_item(product_id)
        assert not cart.remove_item(product_id)

        cart.add_item(product_id, 1, price(100))
        cart.clear()
        assert cart.items == []
        assert cart.totals.grand_total == 0

    def test_removal_below_minimum_drops_coupon(self, user_id):
        cart = Cart(user_id=user_id)
        shoes, socks = uuid.uuid4(), uuid.uuid4()
        cart.add_item(shoes, 1, price(600))
        cart.add_item(socks, 1, price(100))
        coupon = make_coupon(discount_type=DiscountType.FLAT, discount_value=50, min_order_amount=500)
        cart.apply_coupon(coupon)
        assert cart.totals.grand_total == 650

        assert cart.remove_item(shoes, coupon=coupon)
        assert cart.coupon_id is None
        assert cart.discount_amount == 0
        assert cart.totals.grand_total == 100

    def test_removal_recomputes_percentage_discount(self, user_id):
        cart = Cart(user_id=user_id)
        shirt, belt = uuid.uuid4(), uuid.uuid4()
        cart.add_item(shirt, 2, price(500))
        cart.add_item(belt, 1, price(200))
        coupon = make_coupon(min_order_amount=500)
        assert cart.apply_coupon(coupon) == 120

        cart.remove_item(belt, coupon=coupon)
        assert cart.coupon_id == coupon.id
        assert cart.discount_amount == 100
        assert cart.totals.grand_total == 900

    def test_removal_without_coupon_terms_drops_discount(self, user_id):
        cart = Cart(user_id=user_id)
        shirt, belt = uuid.uuid4(), uuid.uuid4()
        cart.add_item(shirt, 2, price(500))
        cart.add_item(belt, 1, price(200))
        cart.apply_coupon(make_coupon())

        cart.remove_item(belt)
        assert cart.coupon_id is None
        assert cart.totals.grand_total == 1000


# ============================================================================
# ORDER
# ============================================================================

class TestOrder:
    def test_sub_total_is_sum_of_items(self, user_id, seller_id):
        order = make_order(user_id, seller_id, discount=50, shipping=40, tax=10)
        assert order.totals.sub_total == 599.5
        assert order.totals.grand_total == 599.5
        assert order.order_number.startswith("ORD-")

    def test_mismatched_sub_total_rejected(self, user_id, seller_id):
        order = make_order(user_id, seller_id)
        with pytest.raises(ValueError):
            Order(**{**order.model_dump(), "totals": OrderTotals(sub_total=1, grand_total=1)})

    def test_grand_total_must_add_up(self):
        with pytest.raises(ValueError):
            OrderTotals(sub_total=100, discount=10, grand_total=100)

    def test_seller_ids_are_unique_and_ordered(self, user_id, seller_id):
        order = make_order(user_id, seller_id)
        assert order.seller_ids[0] == seller_id
        assert len(order.seller_ids) == 2

    def test_lifecycle(self, user_id, seller_id):
        order = make_order(user_id, seller_id)
        payment_id = uuid.uuid4()
        order.mark_paid(payment_id)
        order.confirm()
        assert order.payment_status == PaymentStatus.PAID
        assert order.status == OrderStatus.CONFIRMED

        order.cancel(reason="changed mind", refund_amount=599.5)
        assert order.cancellation.refund_amount == 599.5
        assert order.cancellation.cancelled_by == "user"

    def test_order_item_from_line(self, user_id, seller_id):
        order = make_order(user_id, seller_id)
        item = OrderItem.from_line(order, order.items[0], product_name="Kurta")

        assert item.order_id == order.id
        assert item.total_price == 500
        item.mark_delivered()
        item.mark_refunded(250)
        assert item.status == OrderItemStatus.REFUNDED
        assert item.refund.amount == 250


def test_shipment_tracking():
    shipment = Shipment(order_id=uuid.uuid4(), user_id=uuid.uuid4(), seller_id=uuid.uuid4())
    shipment.update_status(ShipmentStatus.PICKED_UP, location="Bengaluru hub")
    shipped_at = shipment.shipped_at
    shipment.update_status(ShipmentStatus.IN_TRANSIT)
    shipment.update_status(ShipmentStatus.PICKED_UP)
    shipment.update_status(ShipmentStatus.DELIVERED)

    assert shipment.shipped_at == shipped_at
    assert shipment.delivered_at is not None
    assert len(shipment.tracking_history) == 4
    assert shipment.latest_event.status == ShipmentStatus.DELIVERED


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_cart_get_or_create(session, user_id):
    repo = CartRepositoryImpl(session)
    first = await repo.get_or_create_for_user(user_id)
    second = await repo.get_or_create_for_user(user_id)
    assert first.id == second.id


async def test_cart_restored_after_soft_delete(session, user_id):
    repo = CartRepositoryImpl(session)
    cart = await repo.get_or_create_for_user(user_id)
    cart.add_item(uuid.uuid4(), 1, price(300))
    await repo.save(cart)
    assert await repo.soft_delete(cart.id)

    restored = await repo.get_or_create_for_user(user_id)

    assert restored.id == cart.id
    assert not restored.is_deleted
    assert restored.items == []
    assert (await repo.get_by_user(user_id)).id == cart.id


async def test_coupon_lookup(session):
    repo = CouponRepositoryImpl(session)
    await repo.add(make_coupon())
    await repo.add(make_coupon(code="hidden", is_public=False))

    assert (await repo.get_by_code(" save10 ")).code == "SAVE10"
    assert [coupon.code for coupon in await repo.list_public_active()] == ["SAVE10"]


async def test_order_roundtrip(session, user_id, seller_id):
    repo = OrderRepositoryImpl(session)
    order = await repo.add(make_order(user_id, seller_id))

    loaded = await repo.get_by_order_number(order.order_number)
    assert loaded.totals.sub_total == order.totals.sub_total
    assert len(loaded.items) == 2
    assert [o.id for o in await repo.list_by_user(user_id)] == [order.id]


async def test_order_number_is_unique(session, user_id, seller_id):
    repo = OrderRepositoryImpl(session)
    await repo.add(make_order(user_id, seller_id, order_number="ORD-2026-000001"))
    with pytest.raises(DuplicateResourceError):
        await repo.add(make_order(user_id, seller_id, order_number="ORD-2026-000001"))


async def test_pending_commission_items(session, user_id, seller_id):
    order = make_order(user_id, seller_id)
    repo = OrderItemRepositoryImpl(session)
    delivered = OrderItem.from_line(order, order.items[0], product_name="Kurta")
    delivered.mark_delivered()
    settled = OrderItem.from_line(order, order.items[1], product_name="Socks")
    settled.mark_delivered()
    settled.mark_commission_applied()
    await repo.add(delivered)
    await repo.add(settled)

    pending = await repo.list_pending_commission()
    assert [item.id for item in pending] == [delivered.id]
    assert len(await repo.list_for_seller(seller_id, status=OrderItemStatus.DELIVERED)) == 1


async def test_shipment_by_awb(session):
    repo = ShipmentRepositoryImpl(session)
    shipment = Shipment(
        order_id=uuid.uuid4(),
        user_id=uuid.uuid4(),
        seller_id=uuid.uuid4(),
        courier=Courier(name="Delhivery", awb="AWB123"),
    )
    await repo.add(shipment)

    assert (await repo.get_by_awb("AWB123")).id == shipment.id
    assert await repo.get_by_awb("MISSING") is None
