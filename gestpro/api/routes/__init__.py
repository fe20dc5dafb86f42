"""API route modules."""

from gestpro.api.routes.categories import router as categories_router
from gestpro.api.routes.clients import router as clients_router
from gestpro.api.routes.dashboard import router as dashboard_router
from gestpro.api.routes.export import router as export_router
from gestpro.api.routes.health import router as health_router
from gestpro.api.routes.invoices import router as invoices_router
from gestpro.api.routes.products import router as products_router
from gestpro.api.routes.sales import router as sales_router

__all__ = [
    "health_router",
    "clients_router",
    "categories_router",
    "products_router",
    "invoices_router",
    "sales_router",
    "dashboard_router",
    "export_router",
]
