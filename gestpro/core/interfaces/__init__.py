"""Core interfaces (ports) for dependency injection."""

from gestpro.core.interfaces.category_store import ICategoryStore
from gestpro.core.interfaces.client_store import IClientStore
from gestpro.core.interfaces.dashboard_store import IDashboardStore
from gestpro.core.interfaces.invoice_store import IInvoiceStore
from gestpro.core.interfaces.product_store import IProductStore
from gestpro.core.interfaces.sales_store import ISalesStore

__all__ = [
    "IClientStore",
    "ICategoryStore",
    "IProductStore",
    "IInvoiceStore",
    "ISalesStore",
    "IDashboardStore",
]
