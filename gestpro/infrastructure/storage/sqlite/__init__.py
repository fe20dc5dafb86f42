"""SQLite storage implementations."""

from gestpro.infrastructure.storage.sqlite.category_store import SQLiteCategoryStore
from gestpro.infrastructure.storage.sqlite.client_store import SQLiteClientStore
from gestpro.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
    transaction_scope,
)
from gestpro.infrastructure.storage.sqlite.dashboard_store import SQLiteDashboardStore
from gestpro.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from gestpro.infrastructure.storage.sqlite.product_store import SQLiteProductStore
from gestpro.infrastructure.storage.sqlite.sales_store import SQLiteSalesStore

# Singleton instances
_client_store: SQLiteClientStore | None = None
_category_store: SQLiteCategoryStore | None = None
_product_store: SQLiteProductStore | None = None
_invoice_store: SQLiteInvoiceStore | None = None
_sales_store: SQLiteSalesStore | None = None
_dashboard_store: SQLiteDashboardStore | None = None


async def get_client_store() -> SQLiteClientStore:
    """Get singleton client store instance."""
    global _client_store
    if _client_store is None:
        _client_store = SQLiteClientStore()
    return _client_store


async def get_category_store() -> SQLiteCategoryStore:
    """Get singleton category store instance."""
    global _category_store
    if _category_store is None:
        _category_store = SQLiteCategoryStore()
    return _category_store


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_sales_store() -> SQLiteSalesStore:
    """Get singleton sales store instance."""
    global _sales_store
    if _sales_store is None:
        _sales_store = SQLiteSalesStore()
    return _sales_store


async def get_dashboard_store() -> SQLiteDashboardStore:
    """Get singleton dashboard store instance."""
    global _dashboard_store
    if _dashboard_store is None:
        _dashboard_store = SQLiteDashboardStore()
    return _dashboard_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "transaction_scope",
    # Store classes
    "SQLiteClientStore",
    "SQLiteCategoryStore",
    "SQLiteProductStore",
    "SQLiteInvoiceStore",
    "SQLiteSalesStore",
    "SQLiteDashboardStore",
    # Factory functions
    "get_client_store",
    "get_category_store",
    "get_product_store",
    "get_invoice_store",
    "get_sales_store",
    "get_dashboard_store",
]
