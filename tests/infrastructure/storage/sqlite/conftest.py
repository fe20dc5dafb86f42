"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gestpro.core.entities import (
    AdHocItem,
    CatalogItem,
    Client,
    Invoice,
    Product,
)
from gestpro.infrastructure.storage.sqlite.migrations import initialize_database


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def migrated_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """
    Migrated database with the global pool pointed at it.

    The pool is reset before and closed after each test.
    """
    import gestpro.infrastructure.storage.sqlite.connection as conn_module

    await initialize_database(temp_db_path, create_backup_before=False)

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield temp_db_path
        finally:
            await conn_module.close_pool()


def make_client(user_id: str, name: str = "Atelier Nord", **fields) -> Client:
    return Client(user_id=user_id, name=name, **fields)


def make_product(
    user_id: str, name: str = "Desk lamp", price: str = "1000", stock: int = 10, **fields
) -> Product:
    return Product(user_id=user_id, name=name, price_ht=Decimal(price), stock=stock, **fields)


def make_invoice(
    user_id: str,
    client_id: int,
    product_id: int | None = None,
    quantity: int = 3,
    number: str = "F-2024-001",
    total_ttc: str = "4130.00",
) -> Invoice:
    """Invoice with one ad-hoc line and, when product_id is given, one catalog line."""
    items: list = [
        AdHocItem(
            product_name="Delivery",
            quantity=1,
            price_ht=Decimal("500.00"),
            total_ht=Decimal("500.00"),
        )
    ]
    if product_id is not None:
        items.insert(
            0,
            CatalogItem(
                product_id=product_id,
                product_name="Desk lamp",
                quantity=quantity,
                price_ht=Decimal("1000.00"),
                total_ht=Decimal("1000.00") * quantity,
            ),
        )
    return Invoice(
        user_id=user_id,
        number=number,
        client_id=client_id,
        total_ht=Decimal("3500.00"),
        tva_rate=Decimal("18.00"),
        total_tva=Decimal("630.00"),
        total_ttc=Decimal(total_ttc),
        items=items,
    )


@pytest.fixture
def client_factory():
    return make_client


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def invoice_factory():
    return make_invoice
