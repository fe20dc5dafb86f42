"""Abstract interface for invoice storage."""

from abc import ABC, abstractmethod
from typing import Any

from gestpro.core.entities.invoice import Invoice, InvoiceStatus


class IInvoiceStore(ABC):
    """Interface for tenant-scoped invoice persistence."""

    @abstractmethod
    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert header and items in one transaction."""
        pass

    @abstractmethod
    async def get_invoice(self, invoice_id: int, user_id: str) -> Invoice | None:
        """Get invoice with its items and client."""
        pass

    @abstractmethod
    async def list_invoices(self, user_id: str) -> list[Invoice]:
        """List invoice headers, newest first."""
        pass

    @abstractmethod
    async def count_by_client(self, client_id: int, user_id: str) -> int:
        """Number of invoices billed to a client."""
        pass

    @abstractmethod
    async def update_fields(
        self,
        invoice_id: int,
        user_id: str,
        changes: dict[str, Any],
        conn: Any | None = None,
    ) -> bool:
        """Update non-status header fields. False if the invoice is not found."""
        pass

    @abstractmethod
    async def set_status(
        self,
        invoice_id: int,
        user_id: str,
        status: InvoiceStatus,
        conn: Any | None = None,
    ) -> bool:
        """
        Write a new status.

        Moving to ``paid`` only succeeds if the stored status is not already
        ``paid``; the return value tells whether a row changed.
        """
        pass

    @abstractmethod
    async def delete_invoice(self, invoice_id: int, user_id: str) -> bool:
        """Delete sales, then items, then the invoice, in one transaction."""
        pass
