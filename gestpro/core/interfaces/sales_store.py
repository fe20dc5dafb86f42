"""Abstract interface for the sales ledger."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from gestpro.core.entities.invoice import CatalogItem
from gestpro.core.entities.sale import Sale


class ISalesStore(ABC):
    """Interface for sales records derived from settled invoices."""

    @abstractmethod
    async def create_from_items(
        self,
        invoice_id: int,
        user_id: str,
        items: Sequence[CatalogItem],
        conn: Any | None = None,
    ) -> list[Sale]:
        """Insert one sale per catalog item of a settled invoice."""
        pass

    @abstractmethod
    async def list_sales(self, user_id: str) -> list[Sale]:
        """List the tenant's sales, newest first."""
        pass

    @abstractmethod
    async def list_by_invoice(self, invoice_id: int, user_id: str) -> list[Sale]:
        """List sales materialized from one invoice."""
        pass

    @abstractmethod
    async def count_by_product(self, product_id: int, user_id: str) -> int:
        """Number of sales referencing a product."""
        pass
