"""Application use cases."""

from gestpro.application.use_cases.create_invoice import (
    CreateInvoiceResult,
    CreateInvoiceUseCase,
)
from gestpro.application.use_cases.delete_invoice import DeleteInvoiceUseCase
from gestpro.application.use_cases.manage_categories import ManageCategoriesUseCase
from gestpro.application.use_cases.manage_clients import ManageClientsUseCase
from gestpro.application.use_cases.manage_products import ManageProductsUseCase
from gestpro.application.use_cases.update_invoice import (
    UpdateInvoiceResult,
    UpdateInvoiceUseCase,
)

__all__ = [
    "CreateInvoiceUseCase",
    "CreateInvoiceResult",
    "UpdateInvoiceUseCase",
    "UpdateInvoiceResult",
    "DeleteInvoiceUseCase",
    "ManageClientsUseCase",
    "ManageCategoriesUseCase",
    "ManageProductsUseCase",
]
