"""Abstract interface for product storage."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from gestpro.core.entities.product import Product, StockAdjustment, StockDecrement


class IProductStore(ABC):
    """Interface for tenant-scoped product persistence and stock updates."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Create a product."""
        pass

    @abstractmethod
    async def get_product(self, product_id: int, user_id: str) -> Product | None:
        """Get product by ID."""
        pass

    @abstractmethod
    async def list_products(self, user_id: str) -> list[Product]:
        """List the tenant's products, newest first."""
        pass

    @abstractmethod
    async def search_products(
        self, user_id: str, query: str, limit: int = 10
    ) -> list[Product]:
        """Case-insensitive search on name and description."""
        pass

    @abstractmethod
    async def update_product(
        self, product_id: int, user_id: str, changes: dict[str, Any]
    ) -> Product | None:
        """Apply field changes, returning the updated product."""
        pass

    @abstractmethod
    async def delete_product(self, product_id: int, user_id: str) -> bool:
        """Delete a product."""
        pass

    @abstractmethod
    async def decrement_stock(
        self,
        user_id: str,
        decrements: Sequence[StockDecrement],
        conn: Any | None = None,
    ) -> list[StockAdjustment]:
        """
        Decrease stock for each entry, clamping at zero.

        Each decrement is a single conditional statement evaluated by the
        database against the stored value. When ``conn`` is given the
        updates join the caller's transaction.
        """
        pass
