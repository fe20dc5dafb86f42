"""Unit tests for domain exceptions."""

import pytest

from gestpro.core.exceptions import (
    AuthenticationError,
    CategoryNotFoundError,
    ClientInUseError,
    ClientNotFoundError,
    ConflictError,
    DatabaseError,
    GestProError,
    InvoiceNotFoundError,
    NotFoundError,
    ProductInUseError,
    ProductNotFoundError,
    StorageError,
    ValidationError,
)


class TestGestProError:
    """Tests for base GestProError exception."""

    def test_basic_initialization(self):
        error = GestProError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.code == "GestProError"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_with_code_and_details(self):
        error = GestProError("Failed", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        error = GestProError("Failed", code="CUSTOM", details={"a": 1})
        assert error.to_dict() == {
            "error": "CUSTOM",
            "message": "Failed",
            "details": {"a": 1},
        }


class TestValidationError:
    def test_message_and_details(self):
        error = ValidationError("tva_rate", "must be one of 3, 5", 7)
        assert error.code == "VALIDATION_ERROR"
        assert "tva_rate" in error.message
        assert error.details["field"] == "tva_rate"
        assert error.details["value"] == "7"

    def test_value_is_truncated(self):
        error = ValidationError("notes", "too long", "x" * 500)
        assert len(error.details["value"]) == 100

    def test_none_value(self):
        error = ValidationError("items", "invoice must have at least one item")
        assert error.details["value"] is None


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("exc_class", "code", "key"),
        [
            (ClientNotFoundError, "CLIENT_NOT_FOUND", "client_id"),
            (CategoryNotFoundError, "CATEGORY_NOT_FOUND", "category_id"),
            (ProductNotFoundError, "PRODUCT_NOT_FOUND", "product_id"),
            (InvoiceNotFoundError, "INVOICE_NOT_FOUND", "invoice_id"),
        ],
    )
    def test_codes(self, exc_class, code, key):
        error = exc_class(42)
        assert isinstance(error, NotFoundError)
        assert error.code == code
        assert error.details == {key: 42}
        assert "42" in error.message


class TestConflictErrors:
    def test_client_in_use(self):
        error = ClientInUseError(5, 2)
        assert isinstance(error, ConflictError)
        assert error.code == "CLIENT_IN_USE"
        assert error.details == {"client_id": 5, "invoice_count": 2}

    def test_product_in_use(self):
        error = ProductInUseError(9, 4)
        assert isinstance(error, ConflictError)
        assert error.code == "PRODUCT_IN_USE"
        assert error.details["sale_count"] == 4


class TestOtherErrors:
    def test_authentication_error(self):
        error = AuthenticationError()
        assert error.code == "UNAUTHENTICATED"
        assert error.message == "Missing tenant identity"

    def test_database_error_is_storage_error(self):
        error = DatabaseError("insert", "disk full")
        assert isinstance(error, StorageError)
        assert error.code == "DATABASE_ERROR"
        assert error.details == {"operation": "insert", "error": "disk full"}
