"""
CSV export endpoints.

Each entity is written with a fixed column header.
"""

import csv
import io
from collections.abc import Iterable, Sequence
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from gestpro.api.dependencies import (
    get_cli_store,
    get_inv_store,
    get_prod_store,
    get_tenant_id,
)
from gestpro.config import get_logger
from gestpro.infrastructure.storage.sqlite import (
    SQLiteClientStore,
    SQLiteInvoiceStore,
    SQLiteProductStore,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/export", tags=["export"])

CLIENT_COLUMNS = ["id", "name", "email", "phone", "company", "address", "created_at"]
PRODUCT_COLUMNS = ["id", "name", "description", "price_ht", "stock", "created_at"]
INVOICE_COLUMNS = [
    "id",
    "number",
    "client_id",
    "status",
    "total_ht",
    "tva_rate",
    "total_tva",
    "total_ttc",
    "due_date",
    "created_at",
]


def _csv_response(
    filename: str, header: Sequence[str], rows: Iterable[Sequence[Any]]
) -> StreamingResponse:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(header)
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )


@router.get("/clients", response_model=None)
async def export_clients(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteClientStore = Depends(get_cli_store),
) -> StreamingResponse:
    clients = await store.list_clients(user_id)
    logger.info("export_generated", entity="clients", rows=len(clients))
    return _csv_response(
        "clients.csv",
        CLIENT_COLUMNS,
        (
            [c.id, c.name, c.email, c.phone, c.company, c.address, c.created_at.isoformat()]
            for c in clients
        ),
    )


@router.get("/products", response_model=None)
async def export_products(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteProductStore = Depends(get_prod_store),
) -> StreamingResponse:
    products = await store.list_products(user_id)
    logger.info("export_generated", entity="products", rows=len(products))
    return _csv_response(
        "products.csv",
        PRODUCT_COLUMNS,
        (
            [p.id, p.name, p.description, p.price_ht, p.stock, p.created_at.isoformat()]
            for p in products
        ),
    )


@router.get("/invoices", response_model=None)
async def export_invoices(
    user_id: str = Depends(get_tenant_id),
    store: SQLiteInvoiceStore = Depends(get_inv_store),
) -> StreamingResponse:
    invoices = await store.list_invoices(user_id)
    logger.info("export_generated", entity="invoices", rows=len(invoices))
    return _csv_response(
        "invoices.csv",
        INVOICE_COLUMNS,
        (
            [
                inv.id,
                inv.number,
                inv.client_id,
                inv.status.value,
                inv.total_ht,
                inv.tva_rate,
                inv.total_tva,
                inv.total_ttc,
                inv.due_date.isoformat() if inv.due_date else None,
                inv.created_at.isoformat(),
            ]
            for inv in invoices
        ),
    )
