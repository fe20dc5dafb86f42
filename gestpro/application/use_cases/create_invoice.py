"""Create Invoice Use Case: snapshot catalog lines and compute totals."""

from dataclasses import dataclass

from gestpro.application.dto.converters import invoice_to_response
from gestpro.application.dto.requests import CatalogItemRequest, CreateInvoiceRequest
from gestpro.application.dto.responses import InvoiceResponse
from gestpro.config import get_logger
from gestpro.core.entities import AdHocItem, CatalogItem, Invoice, InvoiceItem, InvoiceStatus
from gestpro.core.entities.common import to_money
from gestpro.core.exceptions import (
    ClientNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from gestpro.core.interfaces import IClientStore, IInvoiceStore, IProductStore
from gestpro.core.services import compute_invoice_totals, normalize_tax_rate

logger = get_logger(__name__)


@dataclass
class CreateInvoiceResult:
    """Result of creating an invoice."""

    invoice: Invoice


class CreateInvoiceUseCase:
    """
    Create a pending invoice with its line items.

    Catalog lines take their name and unit price from the tenant's product
    at creation time, so later product edits never change the invoice.
    Creation has no stock effect; stock moves on settlement only.
    """

    def __init__(
        self,
        client_store: IClientStore | None = None,
        product_store: IProductStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._client_store = client_store
        self._product_store = product_store
        self._invoice_store = invoice_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from gestpro.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from gestpro.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from gestpro.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(
        self, user_id: str, request: CreateInvoiceRequest
    ) -> CreateInvoiceResult:
        """Execute create invoice use case."""
        logger.info(
            "create_invoice_started",
            user_id=user_id,
            number=request.number,
            items=len(request.items),
        )

        # 1. Cheap checks before touching storage
        tva_rate = normalize_tax_rate(request.tva_rate)
        if not request.items:
            raise ValidationError("items", "invoice must have at least one item")

        # 2. Client must belong to the tenant
        client_store = await self._get_client_store()
        client = await client_store.get_client(request.client_id, user_id)
        if client is None:
            raise ClientNotFoundError(request.client_id)

        # 3. Resolve lines, snapshotting catalog data
        product_store = await self._get_product_store()
        lines: list[InvoiceItem] = []
        for item_req in request.items:
            if isinstance(item_req, CatalogItemRequest):
                product = await product_store.get_product(item_req.product_id, user_id)
                if product is None:
                    raise ProductNotFoundError(item_req.product_id)
                price = item_req.price_ht if item_req.price_ht is not None else product.price_ht
                lines.append(
                    CatalogItem(
                        product_id=item_req.product_id,
                        product_name=item_req.product_name or product.name,
                        quantity=item_req.quantity,
                        price_ht=to_money(price),
                    )
                )
            else:
                lines.append(
                    AdHocItem(
                        product_name=item_req.product_name,
                        quantity=item_req.quantity,
                        price_ht=to_money(item_req.price_ht),
                    )
                )

        # 4. Totals
        totals = compute_invoice_totals(lines, tva_rate)
        for line, line_total in zip(lines, totals.line_totals):
            line.total_ht = line_total

        invoice = Invoice(
            user_id=user_id,
            number=request.number,
            client_id=client.id,  # type: ignore[arg-type]
            status=InvoiceStatus.PENDING,
            total_ht=totals.total_ht,
            tva_rate=totals.tva_rate,
            total_tva=totals.total_tva,
            total_ttc=totals.total_ttc,
            due_date=request.due_date,
            notes=request.notes,
            items=lines,
        )

        # 5. Persist header and items together
        invoice_store = await self._get_invoice_store()
        invoice = await invoice_store.create_invoice(invoice)
        invoice.client = client

        logger.info(
            "create_invoice_complete",
            invoice_id=invoice.id,
            total_ttc=str(invoice.total_ttc),
        )
        return CreateInvoiceResult(invoice=invoice)

    def to_response(self, result: CreateInvoiceResult) -> InvoiceResponse:
        """Convert result to API response."""
        return invoice_to_response(result.invoice)
