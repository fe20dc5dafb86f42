"""Dashboard read models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from gestpro.core.entities.invoice import Invoice
from gestpro.core.entities.product import Product


class TopProduct(BaseModel):
    """Product ranked by number of sales records."""

    product: Product
    sales_count: int


class DashboardStats(BaseModel):
    """Per-tenant summary figures."""

    revenue: Decimal = Decimal("0.00")  # sum of total_ttc over paid invoices
    invoice_count: int = 0
    client_count: int = 0
    product_count: int = 0
    recent_invoices: list[Invoice] = Field(default_factory=list)
    top_products: list[TopProduct] = Field(default_factory=list)
    low_stock_products: list[Product] = Field(default_factory=list)
