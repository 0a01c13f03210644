# 📄 File: marketplace/modules/catalog/domain/models/product.py
# 🧭 Purpose (Layman Explanation):
# Things sellers list for sale: the product itself, its variants (size, colour) with their
# own stock, and the warehouse stock counts that go down when an order is placed.
# 🧪 Purpose (Technical Summary):
# Product, ProductVariant and Inventory domain models: pricing/tax/shipping value objects,
# B2C stock and B2B MOQ creation rules, variant stock updates and warehouse
# reserve/release/commit/restock operations raising InsufficientStockError.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# commerce (cart, order snapshots), catalog repositories, reviews

import uuid
from enum import Enum
from typing import Any, List, Optional

from pydantic import Field, model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError, InsufficientStockError
from marketplace.shared.domain.base import ListingModel, SoftDeletableModel, ValueObject, ensure_positive
from marketplace.shared.domain.value_objects import PriceSnapshot, TaxInfo
from marketplace.shared.utils.helpers import generate_slug


class ProductType(str, Enum):
    B2C = "b2c"
    B2B = "b2b"


class ProductStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"


class ProductPricing(PriceSnapshot):
    """Catalog price; selling price may not exceed MRP."""
    tax_included: bool = True

    @model_validator(mode="after")
    def check_selling_price(self) -> "ProductPricing":
        if self.mrp and self.selling_price > self.mrp:
            raise ValueError("Selling price cannot exceed MRP")
        return self

    def snapshot(self) -> PriceSnapshot:
        return PriceSnapshot(mrp=self.mrp, selling_price=self.selling_price, currency=self.currency)


class ProductAttribute(ValueObject):
    name: str
    values: List[str] = Field(default_factory=list)


class VariantAttribute(ValueObject):
    name: str
    value: str


class ShippingInfo(ValueObject):
    weight_grams: Optional[float] = Field(None, ge=0)
    length_cm: Optional[float] = Field(None, ge=0)
    width_cm: Optional[float] = Field(None, ge=0)
    height_cm: Optional[float] = Field(None, ge=0)
    is_free_shipping: bool = False


# =============================================================================
# PRODUCT
# =============================================================================

class Product(ListingModel):
    """
    Product listing.

    Creation rule: a B2C product starts with stock on hand, a B2B product
    with a minimum order quantity.
    """

    seller_id: uuid.UUID
    category_id: uuid.UUID
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=220)
    description: Optional[str] = None
    brand: Optional[str] = Field(None, max_length=100)
    images: List[str] = Field(default_factory=list)
    product_type: ProductType = ProductType.B2C
    status: ProductStatus = ProductStatus.DRAFT
    pricing: ProductPricing
    attributes: List[ProductAttribute] = Field(default_factory=list)
    stock: int = Field(default=0, ge=0)
    moq: int = Field(default=1, ge=1)
    shipping: ShippingInfo = Field(default_factory=ShippingInfo)
    tax: TaxInfo = Field(default_factory=TaxInfo)
    return_policy_days: int = Field(default=7, ge=0)

    @classmethod
    def create(
        cls,
        seller_id: uuid.UUID,
        category_id: uuid.UUID,
        name: str,
        pricing: ProductPricing,
        product_type: ProductType = ProductType.B2C,
        stock: int = 0,
        moq: int = 1,
        **kwargs: Any
    ) -> "Product":
        """
        Create a product listing.

        Raises:
            BusinessRuleViolationError: B2C without stock or B2B without MOQ
        """
        product_type = ProductType(product_type)
        if product_type == ProductType.B2C and stock <= 0:
            raise BusinessRuleViolationError(
                "Stock is required for B2C product",
                rule="b2c_stock_required",
                context={"stock": stock}
            )
        if product_type == ProductType.B2B and moq <= 0:
            raise BusinessRuleViolationError(
                "MOQ is required for B2B product",
                rule="b2b_moq_required",
                context={"moq": moq}
            )
        return cls(
            seller_id=seller_id,
            category_id=category_id,
            name=name,
            slug=kwargs.pop("slug", None) or generate_slug(name),
            pricing=pricing,
            product_type=product_type,
            stock=stock,
            moq=moq,
            **kwargs
        )

    def publish(self) -> None:
        self.status = ProductStatus.ACTIVE
        self.touch()

    def unpublish(self) -> None:
        self.status = ProductStatus.INACTIVE
        self.touch()

    @property
    def discount_percentage(self) -> float:
        if not self.pricing.mrp:
            return 0
        return round((self.pricing.mrp - self.pricing.selling_price) / self.pricing.mrp * 100, 2)


class ProductVariant(SoftDeletableModel):
    """Sellable variant (SKU) of a product with its own stock."""

    product_id: uuid.UUID
    seller_id: uuid.UUID
    sku: str = Field(min_length=1, max_length=64)
    attributes: List[VariantAttribute] = Field(default_factory=list)
    pricing: ProductPricing
    stock: int = Field(default=0, ge=0)
    low_stock_threshold: int = Field(default=5, ge=0)
    images: List[str] = Field(default_factory=list)
    shipping: ShippingInfo = Field(default_factory=ShippingInfo)
    tax: TaxInfo = Field(default_factory=TaxInfo)
    is_active: bool = True
    is_default: bool = False

    def decrease_stock(self, quantity: int) -> None:
        """
        Take units out of stock.

        Raises:
            InsufficientStockError: If fewer units are in stock
        """
        ensure_positive(quantity)
        if self.stock < quantity:
            raise InsufficientStockError(
                "Insufficient stock for variant",
                resource_type="ProductVariant",
                available=self.stock,
                requested=quantity
            )
        self.stock -= quantity
        self.touch()

    def increase_stock(self, quantity: int) -> None:
        ensure_positive(quantity)
        self.stock += quantity
        self.touch()

    def is_low_stock(self) -> bool:
        return self.stock <= self.low_stock_threshold


# =============================================================================
# INVENTORY
# =============================================================================

class InventoryReason(str, Enum):
    """Why the stock counters last changed"""
    INITIAL = "initial"
    ORDER_PLACED = "order_placed"
    ORDER_CANCELLED = "order_cancelled"
    ORDER_SHIPPED = "order_shipped"
    ORDER_RETURNED = "order_returned"
    MANUAL_ADJUSTMENT = "manual_adjustment"
    RESTOCK = "restock"


class Warehouse(ValueObject):
    name: str
    code: Optional[str] = None
    address_id: Optional[uuid.UUID] = None


class StockLevels(ValueObject):
    available: int = Field(default=0, ge=0)
    reserved: int = Field(default=0, ge=0)
    damaged: int = Field(default=0, ge=0)

    @property
    def on_hand(self) -> int:
        return self.available + self.reserved


class Inventory(SoftDeletableModel):
    """
    Warehouse stock of a product (or variant).

    reserve/release move units between available and reserved without
    changing their sum; commit removes reserved units when an order ships.
    """

    product_id: uuid.UUID
    variant_id: Optional[uuid.UUID] = None
    seller_id: uuid.UUID
    warehouse: Warehouse
    stock: StockLevels = Field(default_factory=StockLevels)
    low_stock_threshold: int = Field(default=5, ge=0)
    last_updated_reason: InventoryReason = InventoryReason.INITIAL
    is_active: bool = True

    def _set_stock(self, reason: InventoryReason, **levels: int) -> None:
        self.stock = self.stock.model_copy(update=levels)
        self.last_updated_reason = reason
        self.touch()

    def reserve_stock(self, quantity: int) -> None:
        """
        Hold units for a placed order.

        Raises:
            InsufficientStockError: If fewer units are available
        """
        ensure_positive(quantity)
        if self.stock.available < quantity:
            raise InsufficientStockError(
                "Insufficient inventory stock",
                resource_type="Inventory",
                available=self.stock.available,
                requested=quantity
            )
        self._set_stock(
            InventoryReason.ORDER_PLACED,
            available=self.stock.available - quantity,
            reserved=self.stock.reserved + quantity,
        )

    def release_stock(self, quantity: int) -> None:
        """Return held units to available stock (order cancelled)."""
        ensure_positive(quantity)
        if self.stock.reserved < quantity:
            raise InsufficientStockError(
                "Insufficient reserved stock",
                resource_type="Inventory",
                available=self.stock.reserved,
                requested=quantity
            )
        self._set_stock(
            InventoryReason.ORDER_CANCELLED,
            available=self.stock.available + quantity,
            reserved=self.stock.reserved - quantity,
        )

    def commit_stock(self, quantity: int) -> None:
        """Remove held units for good (order shipped)."""
        ensure_positive(quantity)
        if self.stock.reserved < quantity:
            raise InsufficientStockError(
                "Insufficient reserved stock",
                resource_type="Inventory",
                available=self.stock.reserved,
                requested=quantity
            )
        self._set_stock(InventoryReason.ORDER_SHIPPED, reserved=self.stock.reserved - quantity)

    def restock(self, quantity: int) -> None:
        ensure_positive(quantity)
        self._set_stock(InventoryReason.RESTOCK, available=self.stock.available + quantity)

    def record_return(self, quantity: int, damaged: bool = False) -> None:
        """Put returned units back on the shelf, or into damaged stock."""
        ensure_positive(quantity)
        if damaged:
            self._set_stock(InventoryReason.ORDER_RETURNED, damaged=self.stock.damaged + quantity)
        else:
            self._set_stock(InventoryReason.ORDER_RETURNED, available=self.stock.available + quantity)

    def is_low_stock(self) -> bool:
        return self.stock.available <= self.low_stock_threshold
