"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from gestpro.application.dto.requests import (
    AdHocItemRequest,
    CatalogItemRequest,
    CreateCategoryRequest,
    CreateClientRequest,
    CreateInvoiceRequest,
    CreateProductRequest,
    InvoiceItemRequest,
    PatchRequest,
    UpdateCategoryRequest,
    UpdateClientRequest,
    UpdateInvoiceRequest,
    UpdateProductRequest,
)
from gestpro.application.dto.responses import (
    CategoryListResponse,
    CategoryResponse,
    ClientListResponse,
    ClientResponse,
    DashboardStatsResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceItemResponse,
    InvoiceListResponse,
    InvoiceResponse,
    ProductListResponse,
    ProductResponse,
    ProviderHealthResponse,
    SaleListResponse,
    SaleResponse,
    SettlementResponse,
    StockAdjustmentResponse,
    TopProductResponse,
)

__all__ = [
    # Requests
    "PatchRequest",
    "CreateClientRequest",
    "UpdateClientRequest",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CreateProductRequest",
    "UpdateProductRequest",
    "CatalogItemRequest",
    "AdHocItemRequest",
    "InvoiceItemRequest",
    "CreateInvoiceRequest",
    "UpdateInvoiceRequest",
    # Responses
    "ClientResponse",
    "ClientListResponse",
    "CategoryResponse",
    "CategoryListResponse",
    "ProductResponse",
    "ProductListResponse",
    "InvoiceItemResponse",
    "InvoiceResponse",
    "InvoiceListResponse",
    "StockAdjustmentResponse",
    "SaleResponse",
    "SaleListResponse",
    "SettlementResponse",
    "TopProductResponse",
    "DashboardStatsResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
