"""
Dependency injection container for FastAPI.

Provides store, use case and tenant identity instances to route handlers.
"""

from functools import lru_cache

from fastapi import Request

from gestpro.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    ManageCategoriesUseCase,
    ManageClientsUseCase,
    ManageProductsUseCase,
    UpdateInvoiceUseCase,
)
from gestpro.config import Settings, bind_request_context, get_settings
from gestpro.core.exceptions import AuthenticationError
from gestpro.infrastructure.storage.sqlite import (
    SQLiteClientStore,
    SQLiteDashboardStore,
    SQLiteInvoiceStore,
    SQLiteProductStore,
    SQLiteSalesStore,
    get_client_store,
    get_dashboard_store,
    get_invoice_store,
    get_product_store,
    get_sales_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Identity
def get_tenant_id(request: Request) -> str:
    """
    Read the authenticated tenant id from the trusted identity header.

    The value is passed explicitly to every store and use case call.
    """
    header = get_app_settings().auth.tenant_header
    tenant_id = (request.headers.get(header) or "").strip()
    if not tenant_id:
        raise AuthenticationError(f"Missing tenant identity header: {header}")
    bind_request_context(user_id=tenant_id)
    return tenant_id


# Store dependencies
async def get_cli_store() -> SQLiteClientStore:
    """Get client store."""
    return await get_client_store()


async def get_prod_store() -> SQLiteProductStore:
    """Get product store."""
    return await get_product_store()


async def get_inv_store() -> SQLiteInvoiceStore:
    """Get invoice store."""
    return await get_invoice_store()


async def get_sale_store() -> SQLiteSalesStore:
    """Get sales store."""
    return await get_sales_store()


async def get_dash_store() -> SQLiteDashboardStore:
    """Get dashboard store."""
    return await get_dashboard_store()


# Use case dependencies
def get_manage_clients_use_case() -> ManageClientsUseCase:
    """Get client management use case."""
    return ManageClientsUseCase()


def get_manage_categories_use_case() -> ManageCategoriesUseCase:
    """Get category management use case."""
    return ManageCategoriesUseCase()


def get_manage_products_use_case() -> ManageProductsUseCase:
    """Get product management use case."""
    return ManageProductsUseCase()


def get_create_invoice_use_case() -> CreateInvoiceUseCase:
    """Get create invoice use case."""
    return CreateInvoiceUseCase()


def get_update_invoice_use_case() -> UpdateInvoiceUseCase:
    """Get update invoice use case."""
    return UpdateInvoiceUseCase()


def get_delete_invoice_use_case() -> DeleteInvoiceUseCase:
    """Get delete invoice use case."""
    return DeleteInvoiceUseCase()
