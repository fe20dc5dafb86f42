"""Update Invoice Use Case: header patch plus the settlement edge."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from typing import Any

from gestpro.application.dto.converters import invoice_to_response, settlement_to_response
from gestpro.application.dto.requests import UpdateInvoiceRequest
from gestpro.application.dto.responses import InvoiceResponse
from gestpro.config import get_logger
from gestpro.core.entities import (
    Invoice,
    InvoiceStatus,
    Sale,
    StockAdjustment,
    StockDecrement,
)
from gestpro.core.exceptions import InvoiceNotFoundError
from gestpro.core.interfaces import IInvoiceStore, IProductStore, ISalesStore
from gestpro.core.services import parse_status, triggers_settlement

logger = get_logger(__name__)

TransactionFactory = Callable[[], AbstractAsyncContextManager[Any]]


@dataclass
class UpdateInvoiceResult:
    """Result of updating an invoice."""

    invoice: Invoice
    settled: bool = False
    stock_adjustments: list[StockAdjustment] = field(default_factory=list)
    sales: list[Sale] = field(default_factory=list)


class UpdateInvoiceUseCase:
    """
    Patch an invoice and settle it on its first move to ``paid``.

    Field changes, the status write, stock decrements and sales inserts
    share one transaction: either all of them land or none do. The status
    write to ``paid`` is conditional on the stored status, and its row
    count decides whether settlement runs, so concurrent requests settle
    an invoice at most once.
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        product_store: IProductStore | None = None,
        sales_store: ISalesStore | None = None,
        transaction: TransactionFactory | None = None,
    ):
        self._invoice_store = invoice_store
        self._product_store = product_store
        self._sales_store = sales_store
        self._transaction = transaction

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from gestpro.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from gestpro.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_sales_store(self) -> ISalesStore:
        if self._sales_store is None:
            from gestpro.infrastructure.storage.sqlite import get_sales_store

            self._sales_store = await get_sales_store()
        return self._sales_store

    def _get_transaction(self) -> TransactionFactory:
        if self._transaction is None:
            from gestpro.infrastructure.storage.sqlite import get_transaction

            self._transaction = get_transaction
        return self._transaction

    async def execute(
        self, user_id: str, invoice_id: int, request: UpdateInvoiceRequest
    ) -> UpdateInvoiceResult:
        """Execute update invoice use case."""
        changes = request.changes()
        raw_status = changes.pop("status", None)

        # 1. Reject unknown status before anything is written
        requested = parse_status(raw_status) if raw_status is not None else None

        invoice_store = await self._get_invoice_store()
        current = await invoice_store.get_invoice(invoice_id, user_id)
        if current is None:
            raise InvoiceNotFoundError(invoice_id)

        logger.info(
            "update_invoice_started",
            invoice_id=invoice_id,
            fields=sorted(changes),
            previous_status=current.status.value,
            requested_status=requested.value if requested else None,
            settlement_expected=(
                triggers_settlement(current.status, requested) if requested else False
            ),
        )

        result = UpdateInvoiceResult(invoice=current)
        transaction = self._get_transaction()

        async with transaction() as conn:
            # 2. Header fields
            if changes:
                await invoice_store.update_fields(invoice_id, user_id, changes, conn=conn)

            # 3. Status. A paid write only matches a row that is not paid, so
            # its row count decides the paid edge.
            if requested is not None:
                changed = await invoice_store.set_status(
                    invoice_id, user_id, requested, conn=conn
                )
                if changed and requested is InvoiceStatus.PAID:
                    await self._settle(user_id, current, conn, result)

        invoice = await invoice_store.get_invoice(invoice_id, user_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)
        result.invoice = invoice

        logger.info(
            "update_invoice_complete",
            invoice_id=invoice_id,
            status=invoice.status.value,
            settled=result.settled,
        )
        return result

    async def _settle(
        self,
        user_id: str,
        invoice: Invoice,
        conn: Any,
        result: UpdateInvoiceResult,
    ) -> None:
        """Decrement stock and record sales for every catalog line."""
        product_store = await self._get_product_store()
        sales_store = await self._get_sales_store()

        items = invoice.catalog_items
        adjustments = await product_store.decrement_stock(
            user_id,
            [StockDecrement(product_id=i.product_id, quantity=i.quantity) for i in items],
            conn=conn,
        )

        # A line whose product vanished since creation has nothing to record
        sold = [item for item, adj in zip(items, adjustments) if adj.applied]
        sales = await sales_store.create_from_items(
            invoice.id,  # type: ignore[arg-type]
            user_id,
            sold,
            conn=conn,
        )

        result.settled = True
        result.stock_adjustments = adjustments
        result.sales = sales

        logger.info(
            "invoice_settled",
            invoice_id=invoice.id,
            stock_adjustments=len(adjustments),
            sales=len(sales),
        )

    def to_response(self, result: UpdateInvoiceResult) -> InvoiceResponse:
        """Convert result to API response."""
        settlement = (
            settlement_to_response(result.stock_adjustments, result.sales)
            if result.settled
            else None
        )
        return invoice_to_response(result.invoice, settlement=settlement)
