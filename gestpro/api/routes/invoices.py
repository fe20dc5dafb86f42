"""Invoice endpoints."""

from fastapi import APIRouter, Depends, status

from gestpro.api.dependencies import (
    get_create_invoice_use_case,
    get_delete_invoice_use_case,
    get_inv_store,
    get_sale_store,
    get_tenant_id,
    get_update_invoice_use_case,
)
from gestpro.application.dto.converters import invoice_to_response, sale_to_response
from gestpro.application.dto.requests import CreateInvoiceRequest, UpdateInvoiceRequest
from gestpro.application.dto.responses import (
    ErrorResponse,
    InvoiceListResponse,
    InvoiceResponse,
    SaleListResponse,
)
from gestpro.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    UpdateInvoiceUseCase,
)
from gestpro.core.exceptions import InvoiceNotFoundError
from gestpro.infrastructure.storage.sqlite import SQLiteInvoiceStore, SQLiteSalesStore

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> InvoiceListResponse:
    """List invoice headers, newest first."""
    invoices = await store.list_invoices(user_id)
    return InvoiceListResponse(
        invoices=[invoice_to_response(inv) for inv in invoices],
        total=len(invoices),
    )


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def create_invoice(
    request: CreateInvoiceRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
) -> InvoiceResponse:
    """Create a pending invoice with its items. Stock is not touched."""
    result = await use_case.execute(user_id, request)
    return use_case.to_response(result)


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: int,
    user_id: str = Depends(get_tenant_id),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> InvoiceResponse:
    """Get an invoice with its items and client."""
    invoice = await store.get_invoice(invoice_id, user_id)
    if invoice is None:
        raise InvoiceNotFoundError(invoice_id)
    return invoice_to_response(invoice)


@router.get(
    "/{invoice_id}/details",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice_details(
    invoice_id: int,
    user_id: str = Depends(get_tenant_id),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> InvoiceResponse:
    """Alias of GET /{invoice_id}, kept for document previews."""
    return await get_invoice(invoice_id, user_id, store)


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: UpdateInvoiceUseCase = Depends(get_update_invoice_use_case),
) -> InvoiceResponse:
    """
    Patch an invoice.

    The first move to ``paid`` decrements stock and records sales in the
    same transaction; the response then carries a ``settlement`` block.
    """
    result = await use_case.execute(user_id, invoice_id, request)
    return use_case.to_response(result)


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: DeleteInvoiceUseCase = Depends(get_delete_invoice_use_case),
) -> None:
    """Delete an invoice with its sales and items. Stock is not restored."""
    await use_case.execute(user_id, invoice_id)


@router.get(
    "/{invoice_id}/sales",
    response_model=SaleListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_invoice_sales(
    invoice_id: int,
    user_id: str = Depends(get_tenant_id),
    invoice_store: SQLiteInvoiceStore = Depends(get_inv_store),
    sales_store: SQLiteSalesStore = Depends(get_sale_store),
) -> SaleListResponse:
    """Sales recorded when this invoice was settled."""
    if await invoice_store.get_invoice(invoice_id, user_id) is None:
        raise InvoiceNotFoundError(invoice_id)
    sales = await sales_store.list_by_invoice(invoice_id, user_id)
    return SaleListResponse(
        sales=[sale_to_response(s) for s in sales],
        total=len(sales),
    )
