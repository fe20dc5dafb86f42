"""Sales ledger endpoints."""

from fastapi import APIRouter, Depends

from gestpro.api.dependencies import get_sale_store, get_tenant_id
from gestpro.application.dto.converters import sale_to_response
from gestpro.application.dto.responses import SaleListResponse
from gestpro.infrastructure.storage.sqlite import SQLiteSalesStore

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.get("", response_model=SaleListResponse)
async def list_sales(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteSalesStore = Depends(get_sale_store),
) -> SaleListResponse:
    """List the tenant's sales, newest first."""
    sales = await store.list_sales(user_id)
    return SaleListResponse(
        sales=[sale_to_response(s) for s in sales],
        total=len(sales),
    )
