"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ProviderHealthResponse(BaseModel):
    """Health status of a backing component."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Catalog ---


class ClientResponse(BaseModel):
    """Client response DTO."""

    id: int
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    company: str | None = None
    created_at: datetime


class ClientListResponse(BaseModel):
    clients: list[ClientResponse]
    total: int


class CategoryResponse(BaseModel):
    """Category response DTO."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]
    total: int


class ProductResponse(BaseModel):
    """Product response DTO."""

    id: int
    name: str
    description: str | None = None
    price_ht: Decimal = Field(..., description="Tax-exclusive unit price")
    stock: int
    category_id: int | None = None
    created_at: datetime


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    total: int


# --- Invoices ---


class InvoiceItemResponse(BaseModel):
    """Invoice line in response. ``product_id`` is null for ad-hoc lines."""

    id: int
    kind: str = Field(..., description="catalog or ad_hoc")
    product_id: int | None = None
    product_name: str
    quantity: int
    price_ht: Decimal
    total_ht: Decimal


class StockAdjustmentResponse(BaseModel):
    """Stock change applied to one product during settlement."""

    product_id: int
    quantity: int
    applied: bool
    stock_after: int | None = None


class SaleResponse(BaseModel):
    """Sales ledger record."""

    id: int
    invoice_id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    total: Decimal
    created_at: datetime


class SaleListResponse(BaseModel):
    sales: list[SaleResponse]
    total: int


class SettlementResponse(BaseModel):
    """Side effects of moving an invoice to paid."""

    stock_adjustments: list[StockAdjustmentResponse] = Field(default_factory=list)
    sales: list[SaleResponse] = Field(default_factory=list)


class InvoiceResponse(BaseModel):
    """Invoice response DTO.

    ``items`` and ``client`` are populated on single-invoice reads;
    ``settlement`` only on the update that moved the invoice to paid.
    """

    id: int
    number: str
    client_id: int
    status: str
    total_ht: Decimal
    tva_rate: Decimal
    total_tva: Decimal
    total_ttc: Decimal
    due_date: date | None = None
    notes: str | None = None
    items: list[InvoiceItemResponse] = Field(default_factory=list)
    client: ClientResponse | None = None
    settlement: SettlementResponse | None = None
    created_at: datetime


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceResponse]
    total: int


# --- Dashboard ---


class TopProductResponse(BaseModel):
    product: ProductResponse
    sales_count: int


class DashboardStatsResponse(BaseModel):
    """Per-tenant summary figures."""

    revenue: Decimal = Field(..., description="Sum of total_ttc over paid invoices")
    invoice_count: int
    client_count: int
    product_count: int
    recent_invoices: list[InvoiceResponse]
    top_products: list[TopProductResponse]
    low_stock_products: list[ProductResponse]
