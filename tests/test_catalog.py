# 📄 File: tests/test_catalog.py
# 🧭 Purpose (Layman Explanation):
# Checks the catalogue: products need stock or a minimum order, stock moves between
# "on the shelf" and "held for an order" without units appearing or vanishing, and a
# product has a single default variant.
# 🧪 Purpose (Technical Summary):
# Tests Product/ProductVariant/Inventory/Service/BulkProduct/Category domain rules and
# the catalog SQLAlchemy repositories.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.catalog

import uuid

import pytest

from marketplace.modules.catalog.domain.models import (
    Category,
    CategoryType,
    Inventory,
    Product,
    ProductPricing,
    ProductStatus,
    ProductType,
    ProductVariant,
    Service,
    ServiceDuration,
    ServiceOption,
    ServicePricing,
    Warehouse,
)
from marketplace.modules.catalog.infrastructure.database.catalog_repository_impl import (
    CategoryRepositoryImpl,
    InventoryRepositoryImpl,
    ProductRepositoryImpl,
    ProductVariantRepositoryImpl,
)
from marketplace.shared.core.exceptions import (
    BusinessRuleViolationError,
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)


def pricing(mrp: float = 500, selling_price: float = 450) -> ProductPricing:
    return ProductPricing(mrp=mrp, selling_price=selling_price)


def make_product(seller_id: uuid.UUID, name: str = "Cotton Kurta", **kwargs) -> Product:
    kwargs.setdefault("stock", 10)
    return Product.create(seller_id=seller_id, category_id=uuid.uuid4(), name=name, pricing=pricing(), **kwargs)


def make_inventory(seller_id: uuid.UUID, available: int = 10) -> Inventory:
    inventory = Inventory(product_id=uuid.uuid4(), seller_id=seller_id, warehouse=Warehouse(name="Main"))
    inventory.restock(available)
    return inventory


# ============================================================================
# PRODUCT
# ============================================================================

class TestProduct:
    def test_b2c_requires_stock(self, seller_id):
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            make_product(seller_id, stock=0)
        assert exc_info.value.details["rule"] == "b2c_stock_required"

    def test_b2b_needs_moq_not_stock(self, seller_id):
        product = make_product(seller_id, product_type=ProductType.B2B, stock=0, moq=50)
        assert product.product_type == ProductType.B2B
        assert product.moq == 50

    def test_slug_and_discount(self, seller_id):
        product = make_product(seller_id, name="Cotton Kurta Blue")
        assert product.slug == "cotton-kurta-blue"
        assert product.discount_percentage == 10.0
        assert product.status == ProductStatus.DRAFT

        product.publish()
        assert product.status == ProductStatus.ACTIVE

    def test_selling_price_cannot_exceed_mrp(self):
        with pytest.raises(ValueError):
            ProductPricing(mrp=100, selling_price=120)


class TestVariant:
    def test_decrease_stock(self, seller_id):
        variant = ProductVariant(product_id=uuid.uuid4(), seller_id=seller_id, sku="KURTA-M", pricing=pricing(), stock=3)
        variant.decrease_stock(2)
        assert variant.stock == 1
        assert variant.is_low_stock()

        with pytest.raises(InsufficientStockError):
            variant.decrease_stock(5)
        assert variant.stock == 1

    def test_non_positive_quantity_rejected(self, seller_id):
        variant = ProductVariant(product_id=uuid.uuid4(), seller_id=seller_id, sku="KURTA-L", pricing=pricing())
        with pytest.raises(ValidationError):
            variant.increase_stock(0)


# ============================================================================
# INVENTORY
# ============================================================================

class TestInventory:
    def test_reserve_and_release_conserve_units(self, seller_id):
        inventory = make_inventory(seller_id, available=10)
        on_hand = inventory.stock.on_hand

        inventory.reserve_stock(4)
        assert (inventory.stock.available, inventory.stock.reserved) == (6, 4)
        assert inventory.stock.on_hand == on_hand

        inventory.release_stock(1)
        assert (inventory.stock.available, inventory.stock.reserved) == (7, 3)
        assert inventory.stock.on_hand == on_hand

    def test_commit_removes_reserved_units(self, seller_id):
        inventory = make_inventory(seller_id, available=5)
        inventory.reserve_stock(2)
        inventory.commit_stock(2)
        assert inventory.stock.reserved == 0
        assert inventory.stock.available == 3
        assert inventory.last_updated_reason == "order_shipped"

    def test_over_reservation_changes_nothing(self, seller_id):
        inventory = make_inventory(seller_id, available=2)
        with pytest.raises(InsufficientStockError):
            inventory.reserve_stock(3)
        assert (inventory.stock.available, inventory.stock.reserved) == (2, 0)

    def test_release_more_than_reserved(self, seller_id):
        inventory = make_inventory(seller_id, available=2)
        with pytest.raises(InsufficientStockError):
            inventory.release_stock(1)

    def test_damaged_returns(self, seller_id):
        inventory = make_inventory(seller_id, available=2)
        inventory.record_return(1, damaged=True)
        inventory.record_return(1)
        assert inventory.stock.damaged == 1
        assert inventory.stock.available == 3


# ============================================================================
# SERVICE & CATEGORY
# ============================================================================

def test_service_option_pricing():
    service = Service.create(
        provider_id=uuid.uuid4(),
        category_id=uuid.uuid4(),
        name="AC Repair",
        pricing=ServicePricing(base_price=499),
        duration=ServiceDuration(value=2, unit="hours"),
        options=[ServiceOption(name="Gas refill", price=1499)],
    )
    assert service.duration.minutes == 120
    assert service.price_for() == 499
    assert service.price_for("Gas refill") == 1499
    with pytest.raises(NotFoundError):
        service.price_for("Deep clean")


def test_category_cannot_parent_itself():
    category = Category.create("Electronics", CategoryType.B2C)
    assert category.is_root
    with pytest.raises(ValueError):
        category.move_under(category.id)


# ============================================================================
# REPOSITORIES
# ============================================================================

async def test_category_tree(session):
    repo = CategoryRepositoryImpl(session)
    root = await repo.add(Category.create("Home Services", CategoryType.HOME_SERVICE))
    await repo.add(Category.create("Plumbing", CategoryType.HOME_SERVICE, parent_id=root.id))

    children = await repo.list_children(root.id)
    assert [child.slug for child in children] == ["plumbing"]
    assert (await repo.get_by_slug("home-services", CategoryType.HOME_SERVICE)).id == root.id


async def test_product_roundtrip_keeps_nested_values(session, seller_id):
    repo = ProductRepositoryImpl(session)
    product = await repo.add(make_product(seller_id))

    loaded = await repo.get_by_slug("cotton-kurta")
    assert loaded.id == product.id
    assert loaded.pricing.selling_price == 450
    assert loaded.pricing.tax_included is True


async def test_public_listing_needs_approval(session, seller_id):
    repo = ProductRepositoryImpl(session)
    hidden = await repo.add(make_product(seller_id, name="Hidden"))
    visible = make_product(seller_id, name="Visible")
    visible.is_approved = True
    visible = await repo.add(visible)

    public = await repo.list_public()
    assert [product.id for product in public] == [visible.id]
    assert hidden.id in [product.id for product in await repo.list_by_seller(seller_id)]


async def test_single_default_variant(session, seller_id):
    repo = ProductVariantRepositoryImpl(session)
    product_id = uuid.uuid4()

    def variant(sku: str) -> ProductVariant:
        return ProductVariant(product_id=product_id, seller_id=seller_id, sku=sku, pricing=pricing(), is_default=True)

    small = await repo.add(variant("TEE-S"))
    medium = await repo.add(variant("TEE-M"))
    assert (await repo.get_default(product_id)).id == medium.id

    await repo.set_default(small.id)
    variants = await repo.list_for_product(product_id)
    defaults = [v.sku for v in variants if v.is_default]
    assert defaults == ["TEE-S"]


async def test_inventory_low_stock_filtered_in_python(session, seller_id):
    repo = InventoryRepositoryImpl(session)
    plenty = make_inventory(seller_id, available=50)
    scarce = make_inventory(seller_id, available=2)
    await repo.add(plenty)
    await repo.add(scarce)

    low = await repo.list_low_stock(seller_id)
    assert [inventory.id for inventory in low] == [scarce.id]

    loaded = await repo.get_for_product(scarce.product_id)
    loaded.reserve_stock(2)
    saved = await repo.save(loaded)
    assert saved.stock.reserved == 2
    assert saved.stock.available == 0
