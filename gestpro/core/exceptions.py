"""
Domain exceptions for the GestPro application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class GestProError(Exception):
    """Base exception for all GestPro errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(GestProError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


# Lookup Exceptions
class NotFoundError(GestProError):
    """
    Entity does not exist for the requesting tenant.

    Raised the same way whether the row is absent or owned by another
    tenant, so callers cannot probe other tenants' ids.
    """

    entity = "Entity"

    def __init__(self, entity_id: int):
        super().__init__(
            f"{self.entity} not found: {entity_id}",
            code=f"{self.entity.upper()}_NOT_FOUND",
            details={f"{self.entity.lower()}_id": entity_id},
        )


class ClientNotFoundError(NotFoundError):
    entity = "Client"


class CategoryNotFoundError(NotFoundError):
    entity = "Category"


class ProductNotFoundError(NotFoundError):
    entity = "Product"


class InvoiceNotFoundError(NotFoundError):
    entity = "Invoice"


# Conflict Exceptions
class ConflictError(GestProError):
    """Operation conflicts with the current state of related rows."""

    pass


class ClientInUseError(ConflictError):
    """Client still has invoices."""

    def __init__(self, client_id: int, invoice_count: int):
        super().__init__(
            f"Client {client_id} is referenced by {invoice_count} invoice(s)",
            code="CLIENT_IN_USE",
            details={"client_id": client_id, "invoice_count": invoice_count},
        )


class ProductInUseError(ConflictError):
    """Product is referenced by sales records."""

    def __init__(self, product_id: int, sale_count: int):
        super().__init__(
            f"Product {product_id} is referenced by {sale_count} sale(s)",
            code="PRODUCT_IN_USE",
            details={"product_id": product_id, "sale_count": sale_count},
        )


# Identity Exceptions
class AuthenticationError(GestProError):
    """Request carries no tenant identity."""

    def __init__(self, reason: str = "Missing tenant identity"):
        super().__init__(reason, code="UNAUTHENTICATED")


# Storage Exceptions
class StorageError(GestProError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(GestProError):
    """Configuration error."""

    pass
