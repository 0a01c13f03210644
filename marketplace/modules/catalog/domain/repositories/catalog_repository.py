# 📄 File: marketplace/modules/catalog/domain/repositories/catalog_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how catalog entries are looked up: categories by slug, a seller's products,
# a product's variants and the warehouse stock of a product.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for catalog entities on top of the shared BaseRepository.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, catalog domain models
# 🔄 Connected Modules / Calls From:
# catalog infrastructure implementations, commerce services

import uuid
from abc import abstractmethod
from typing import List, Optional

from marketplace.shared.domain.repository import BaseRepository

from ..models import BulkProduct, Category, CategoryType, Inventory, Product, ProductVariant, Service


class CategoryRepository(BaseRepository[Category]):

    @abstractmethod
    async def get_by_slug(self, slug: str, type: CategoryType) -> Optional[Category]:
        pass

    @abstractmethod
    async def list_children(self, parent_id: Optional[uuid.UUID], type: Optional[CategoryType] = None) -> List[Category]:
        """
        List direct children of a category.

        Args:
            parent_id: Parent category, None for root categories
            type: Restrict to one category type
        """
        pass


class ProductRepository(BaseRepository[Product]):

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def list_by_seller(self, seller_id: uuid.UUID, limit: int = 100, offset: int = 0) -> List[Product]:
        pass

    @abstractmethod
    async def list_public(self, category_id: Optional[uuid.UUID] = None, limit: int = 50, offset: int = 0) -> List[Product]:
        """Active, approved products, best rated first."""
        pass


class ProductVariantRepository(BaseRepository[ProductVariant]):
    """
    Repository interface for product variants.

    Implementation Notes:
    - SKUs are unique across the catalog
    - At most one live default variant exists per product
    """

    @abstractmethod
    async def get_by_sku(self, sku: str) -> Optional[ProductVariant]:
        pass

    @abstractmethod
    async def list_for_product(self, product_id: uuid.UUID) -> List[ProductVariant]:
        pass

    @abstractmethod
    async def get_default(self, product_id: uuid.UUID) -> Optional[ProductVariant]:
        pass

    @abstractmethod
    async def set_default(self, variant_id: uuid.UUID) -> ProductVariant:
        """
        Make a variant its product's default, clearing the previous one.

        Raises:
            NotFoundError: If the variant does not exist
        """
        pass


class InventoryRepository(BaseRepository[Inventory]):

    @abstractmethod
    async def get_for_product(self, product_id: uuid.UUID, variant_id: Optional[uuid.UUID] = None) -> Optional[Inventory]:
        pass

    @abstractmethod
    async def list_low_stock(self, seller_id: uuid.UUID) -> List[Inventory]:
        pass


class ServiceRepository(BaseRepository[Service]):

    @abstractmethod
    async def list_by_provider(self, provider_id: uuid.UUID) -> List[Service]:
        pass

    @abstractmethod
    async def list_public(self, category_id: Optional[uuid.UUID] = None, limit: int = 50, offset: int = 0) -> List[Service]:
        pass


class BulkProductRepository(BaseRepository[BulkProduct]):

    @abstractmethod
    async def list_by_business(self, business_profile_id: uuid.UUID) -> List[BulkProduct]:
        pass

    @abstractmethod
    async def list_public(self, max_moq: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[BulkProduct]:
        """Approved wholesale listings, optionally with a MOQ ceiling."""
        pass
