"""Storage infrastructure implementations."""

from gestpro.infrastructure.storage.sqlite import (
    SQLiteCategoryStore,
    SQLiteClientStore,
    SQLiteDashboardStore,
    SQLiteInvoiceStore,
    SQLiteProductStore,
    SQLiteSalesStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteClientStore",
    "SQLiteCategoryStore",
    "SQLiteProductStore",
    "SQLiteInvoiceStore",
    "SQLiteSalesStore",
    "SQLiteDashboardStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
