# 📄 File: marketplace/modules/commerce/infrastructure/database/commerce_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for shopping: a customer's cart, coupon lookups, order
# history and parcel tracking.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the commerce repository interfaces built on the generic
# SQLAlchemyRepository, including JSON-path lookup of courier AWB numbers.
#
# 🔗 Dependencies:
# - commerce domain repositories and models
# - commerce SQLAlchemy models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - finance commission service (pending commission lines)
# - Embedding application services

import logging
import uuid
from typing import List, Optional

from marketplace.modules.commerce.domain.models import (
    Cart,
    Coupon,
    Order,
    OrderItem,
    OrderItemStatus,
    OrderStatus,
    Shipment,
)
from marketplace.modules.commerce.domain.repositories import (
    CartRepository,
    CouponRepository,
    OrderItemRepository,
    OrderRepository,
    ShipmentRepository,
)
from marketplace.modules.commerce.infrastructure.database.models import (
    CartModel,
    CouponModel,
    OrderItemModel,
    OrderModel,
    ShipmentModel,
)
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository
from marketplace.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class CartRepositoryImpl(SQLAlchemyRepository[Cart, CartModel], CartRepository):

    entity_class = Cart
    model_class = CartModel
    resource_name = "Cart"

    async def get_by_user(self, user_id: uuid.UUID, include_deleted: bool = False) -> Optional[Cart]:
        stmt = self._select(include_deleted=include_deleted).where(CartModel.user_id == user_id)
        return await self._first(stmt)

    async def get_or_create_for_user(self, user_id: uuid.UUID) -> Cart:
        cart = await self.get_by_user(user_id, include_deleted=True)
        if cart is not None:
            if cart.is_deleted:
                # user_id stays unique across deleted rows
                logger.info(f"Restoring cart for user {user_id}")
                cart.clear()
                cart.restore()
                return await self.save(cart)
            return cart
        logger.info(f"Creating cart for user {user_id}")
        return await self.add(Cart(user_id=user_id))


class CouponRepositoryImpl(SQLAlchemyRepository[Coupon, CouponModel], CouponRepository):

    entity_class = Coupon
    model_class = CouponModel
    resource_name = "Coupon"

    async def get_by_code(self, code: str) -> Optional[Coupon]:
        return await self._first(self._select().where(CouponModel.code == code.strip().upper()))

    async def list_public_active(self) -> List[Coupon]:
        now = utc_now()
        stmt = (
            self._select()
            .where(
                CouponModel.is_active.is_(True),
                CouponModel.is_public.is_(True),
                CouponModel.start_date <= now,
                CouponModel.end_date >= now,
            )
            .order_by(CouponModel.end_date)
        )
        return await self._all(stmt)


class OrderRepositoryImpl(SQLAlchemyRepository[Order, OrderModel], OrderRepository):

    entity_class = Order
    model_class = OrderModel
    resource_name = "Order"

    async def get_by_order_number(self, order_number: str) -> Optional[Order]:
        return await self._first(self._select().where(OrderModel.order_number == order_number.strip().upper()))

    async def list_by_user(self, user_id: uuid.UUID, limit: int = 20, offset: int = 0) -> List[Order]:
        stmt = (
            self._select()
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_by_status(self, status: OrderStatus, limit: int = 100) -> List[Order]:
        stmt = (
            self._select()
            .where(OrderModel.status == OrderStatus(status).value)
            .order_by(OrderModel.created_at)
            .limit(limit)
        )
        return await self._all(stmt)


class OrderItemRepositoryImpl(SQLAlchemyRepository[OrderItem, OrderItemModel], OrderItemRepository):

    entity_class = OrderItem
    model_class = OrderItemModel
    resource_name = "OrderItem"

    async def list_for_order(self, order_id: uuid.UUID) -> List[OrderItem]:
        stmt = self._select().where(OrderItemModel.order_id == order_id).order_by(OrderItemModel.created_at)
        return await self._all(stmt)

    async def list_for_seller(
        self,
        seller_id: uuid.UUID,
        status: Optional[OrderItemStatus] = None,
        limit: int = 100
    ) -> List[OrderItem]:
        stmt = self._select().where(OrderItemModel.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(OrderItemModel.status == OrderItemStatus(status).value)
        return await self._all(stmt.order_by(OrderItemModel.created_at.desc()).limit(limit))

    async def list_pending_commission(self, limit: int = 100) -> List[OrderItem]:
        stmt = (
            self._select()
            .where(
                OrderItemModel.status == OrderItemStatus.DELIVERED.value,
                OrderItemModel.is_commission_applied.is_(False),
            )
            .order_by(OrderItemModel.updated_at)
            .limit(limit)
        )
        return await self._all(stmt)


class ShipmentRepositoryImpl(SQLAlchemyRepository[Shipment, ShipmentModel], ShipmentRepository):

    entity_class = Shipment
    model_class = ShipmentModel
    resource_name = "Shipment"

    async def get_by_awb(self, awb: str) -> Optional[Shipment]:
        stmt = self._select().where(ShipmentModel.courier["awb"].as_string() == awb.strip())
        return await self._first(stmt)

    async def list_for_order(self, order_id: uuid.UUID) -> List[Shipment]:
        stmt = self._select().where(ShipmentModel.order_id == order_id).order_by(ShipmentModel.created_at)
        return await self._all(stmt)
