"""Core domain entities."""

from gestpro.core.entities.category import Category
from gestpro.core.entities.client import Client
from gestpro.core.entities.common import (
    MAX_PRICE,
    MAX_QUANTITY,
    TWOPLACES,
    to_money,
    utc_now,
)
from gestpro.core.entities.dashboard import DashboardStats, TopProduct
from gestpro.core.entities.invoice import (
    TAX_RATES,
    AdHocItem,
    CatalogItem,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)
from gestpro.core.entities.product import Product, StockAdjustment, StockDecrement
from gestpro.core.entities.sale import Sale

__all__ = [
    # Catalog
    "Client",
    "Category",
    "Product",
    "StockDecrement",
    "StockAdjustment",
    # Invoices
    "Invoice",
    "InvoiceItem",
    "CatalogItem",
    "AdHocItem",
    "InvoiceStatus",
    "TAX_RATES",
    # Sales
    "Sale",
    # Dashboard
    "DashboardStats",
    "TopProduct",
    # Helpers
    "TWOPLACES",
    "MAX_QUANTITY",
    "MAX_PRICE",
    "to_money",
    "utc_now",
]
