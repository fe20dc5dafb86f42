"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers that write.
"""

from gestpro.application.use_cases import (
    CreateInvoiceUseCase,
    DeleteInvoiceUseCase,
    ManageCategoriesUseCase,
    ManageClientsUseCase,
    ManageProductsUseCase,
    UpdateInvoiceUseCase,
)

__all__ = [
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "DeleteInvoiceUseCase",
    "ManageClientsUseCase",
    "ManageCategoriesUseCase",
    "ManageProductsUseCase",
]
