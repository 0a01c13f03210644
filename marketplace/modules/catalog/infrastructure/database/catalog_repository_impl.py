# 📄 File: marketplace/modules/catalog/infrastructure/database/catalog_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for the catalog: finding products and services to show,
# keeping one default variant per product and spotting stock that is running low.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of the catalog repository interfaces built on the generic
# SQLAlchemyRepository.
#
# 🔗 Dependencies:
# - catalog domain repositories and models
# - catalog SQLAlchemy models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - commerce services (stock reservation)
# - reviews rating service (rating cache targets)

import logging
import uuid
from typing import List, Optional

from sqlalchemy import update

from marketplace.modules.catalog.domain.models import (
    BulkProduct,
    Category,
    CategoryType,
    Inventory,
    Product,
    ProductVariant,
    Service,
)
from marketplace.modules.catalog.domain.repositories import (
    BulkProductRepository,
    CategoryRepository,
    InventoryRepository,
    ProductRepository,
    ProductVariantRepository,
    ServiceRepository,
)
from marketplace.modules.catalog.infrastructure.database.models import (
    BulkProductModel,
    CategoryModel,
    InventoryModel,
    ProductModel,
    ProductVariantModel,
    ServiceModel,
)
from marketplace.shared.core.exceptions import NotFoundError
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository
from marketplace.shared.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class CategoryRepositoryImpl(SQLAlchemyRepository[Category, CategoryModel], CategoryRepository):

    entity_class = Category
    model_class = CategoryModel
    resource_name = "Category"

    async def get_by_slug(self, slug: str, type: CategoryType) -> Optional[Category]:
        stmt = self._select().where(
            CategoryModel.slug == slug.strip().lower(),
            CategoryModel.type == CategoryType(type).value,
        )
        return await self._first(stmt)

    async def list_children(self, parent_id: Optional[uuid.UUID], type: Optional[CategoryType] = None) -> List[Category]:
        stmt = self._select()
        if parent_id is None:
            stmt = stmt.where(CategoryModel.parent_id.is_(None))
        else:
            stmt = stmt.where(CategoryModel.parent_id == parent_id)
        if type is not None:
            stmt = stmt.where(CategoryModel.type == CategoryType(type).value)
        return await self._all(stmt.order_by(CategoryModel.sort_order, CategoryModel.name))


class ProductRepositoryImpl(SQLAlchemyRepository[Product, ProductModel], ProductRepository):

    entity_class = Product
    model_class = ProductModel
    resource_name = "Product"

    async def get_by_slug(self, slug: str) -> Optional[Product]:
        return await self._first(self._select().where(ProductModel.slug == slug.strip().lower()))

    async def list_by_seller(self, seller_id: uuid.UUID, limit: int = 100, offset: int = 0) -> List[Product]:
        stmt = (
            self._select()
            .where(ProductModel.seller_id == seller_id)
            .order_by(ProductModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def list_public(self, category_id: Optional[uuid.UUID] = None, limit: int = 50, offset: int = 0) -> List[Product]:
        stmt = self._select().where(
            ProductModel.is_active.is_(True),
            ProductModel.is_approved.is_(True),
        )
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)
        stmt = stmt.order_by(ProductModel.is_featured.desc(), ProductModel.rating.desc())
        return await self._all(stmt.offset(offset).limit(limit))


class ProductVariantRepositoryImpl(
    SQLAlchemyRepository[ProductVariant, ProductVariantModel], ProductVariantRepository
):
    """
    Variant repository keeping at most one default variant per product.

    Works like the address repository: the previous default is cleared
    with a bulk UPDATE before the new default row is flushed.
    """

    entity_class = ProductVariant
    model_class = ProductVariantModel
    resource_name = "ProductVariant"

    async def _clear_other_defaults(self, variant: ProductVariant) -> None:
        async with self._handle_errors("update"):
            await self._session.execute(
                update(ProductVariantModel)
                .where(
                    ProductVariantModel.product_id == variant.product_id,
                    ProductVariantModel.id != variant.id,
                    ProductVariantModel.is_default.is_(True),
                )
                .values(is_default=False, updated_at=utc_now())
            )

    async def add(self, entity: ProductVariant) -> ProductVariant:
        if entity.is_default:
            await self._clear_other_defaults(entity)
        return await super().add(entity)

    async def save(self, entity: ProductVariant) -> ProductVariant:
        if entity.is_default and not entity.is_deleted:
            await self._clear_other_defaults(entity)
        return await super().save(entity)

    async def get_by_sku(self, sku: str) -> Optional[ProductVariant]:
        return await self._first(self._select().where(ProductVariantModel.sku == sku.strip()))

    async def list_for_product(self, product_id: uuid.UUID) -> List[ProductVariant]:
        stmt = (
            self._select()
            .where(ProductVariantModel.product_id == product_id)
            .order_by(ProductVariantModel.is_default.desc(), ProductVariantModel.created_at)
        )
        return await self._all(stmt)

    async def get_default(self, product_id: uuid.UUID) -> Optional[ProductVariant]:
        stmt = self._select().where(
            ProductVariantModel.product_id == product_id,
            ProductVariantModel.is_default.is_(True),
        )
        return await self._first(stmt)

    async def set_default(self, variant_id: uuid.UUID) -> ProductVariant:
        variant = await self.get_by_id(variant_id)
        if variant is None:
            raise NotFoundError("Variant not found", resource_type="ProductVariant", resource_id=str(variant_id))
        variant.is_default = True
        variant.touch()
        return await self.save(variant)


class InventoryRepositoryImpl(SQLAlchemyRepository[Inventory, InventoryModel], InventoryRepository):

    entity_class = Inventory
    model_class = InventoryModel
    resource_name = "Inventory"

    async def get_for_product(self, product_id: uuid.UUID, variant_id: Optional[uuid.UUID] = None) -> Optional[Inventory]:
        stmt = self._select().where(InventoryModel.product_id == product_id)
        if variant_id is None:
            stmt = stmt.where(InventoryModel.variant_id.is_(None))
        else:
            stmt = stmt.where(InventoryModel.variant_id == variant_id)
        return await self._first(stmt)

    async def list_low_stock(self, seller_id: uuid.UUID) -> List[Inventory]:
        # Stock levels live in a JSON column, so the threshold is compared in Python
        stmt = self._select().where(
            InventoryModel.seller_id == seller_id,
            InventoryModel.is_active.is_(True),
        )
        inventories = await self._all(stmt)
        low = [inventory for inventory in inventories if inventory.is_low_stock()]
        logger.debug(f"{len(low)} of {len(inventories)} inventories low on stock for seller {seller_id}")
        return low


class ServiceRepositoryImpl(SQLAlchemyRepository[Service, ServiceModel], ServiceRepository):

    entity_class = Service
    model_class = ServiceModel
    resource_name = "Service"

    async def list_by_provider(self, provider_id: uuid.UUID) -> List[Service]:
        stmt = self._select().where(ServiceModel.provider_id == provider_id).order_by(ServiceModel.name)
        return await self._all(stmt)

    async def list_public(self, category_id: Optional[uuid.UUID] = None, limit: int = 50, offset: int = 0) -> List[Service]:
        stmt = self._select().where(
            ServiceModel.is_active.is_(True),
            ServiceModel.is_approved.is_(True),
        )
        if category_id is not None:
            stmt = stmt.where(ServiceModel.category_id == category_id)
        stmt = stmt.order_by(ServiceModel.is_featured.desc(), ServiceModel.rating.desc())
        return await self._all(stmt.offset(offset).limit(limit))


class BulkProductRepositoryImpl(SQLAlchemyRepository[BulkProduct, BulkProductModel], BulkProductRepository):

    entity_class = BulkProduct
    model_class = BulkProductModel
    resource_name = "BulkProduct"

    async def list_by_business(self, business_profile_id: uuid.UUID) -> List[BulkProduct]:
        stmt = (
            self._select()
            .where(BulkProductModel.business_profile_id == business_profile_id)
            .order_by(BulkProductModel.created_at.desc())
        )
        return await self._all(stmt)

    async def list_public(self, max_moq: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[BulkProduct]:
        stmt = self._select().where(
            BulkProductModel.is_active.is_(True),
            BulkProductModel.is_approved.is_(True),
        )
        if max_moq is not None:
            stmt = stmt.where(BulkProductModel.moq <= max_moq)
        stmt = stmt.order_by(BulkProductModel.is_featured.desc(), BulkProductModel.rating.desc())
        return await self._all(stmt.offset(offset).limit(limit))
