"""Delete Invoice Use Case."""

from gestpro.config import get_logger
from gestpro.core.exceptions import InvoiceNotFoundError
from gestpro.core.interfaces import IInvoiceStore

logger = get_logger(__name__)


class DeleteInvoiceUseCase:
    """
    Delete an invoice with its sales and items.

    Stock decremented by a past settlement is not restored.
    """

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from gestpro.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, user_id: str, invoice_id: int) -> None:
        """Execute delete invoice use case."""
        store = await self._get_invoice_store()
        if not await store.delete_invoice(invoice_id, user_id):
            raise InvoiceNotFoundError(invoice_id)
        logger.info("delete_invoice_complete", invoice_id=invoice_id, user_id=user_id)
