"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gestpro.api.main import app
from gestpro.core.entities import (
    AdHocItem,
    CatalogItem,
    Client,
    Invoice,
    InvoiceStatus,
    Product,
)

TENANT = "tenant-a"
OTHER_TENANT = "tenant-b"
TENANT_HEADERS = {"X-Tenant-ID": TENANT}


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_client() -> Client:
    """A stored client owned by TENANT."""
    return Client(
        id=1,
        user_id=TENANT,
        name="Atelier Nord",
        email="contact@atelier-nord.example",
        phone="0600000000",
        company="Atelier Nord SARL",
        created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_product() -> Product:
    """A stored product with 10 units in stock."""
    return Product(
        id=7,
        user_id=TENANT,
        name="Desk lamp",
        description="LED desk lamp",
        price_ht=Decimal("1000"),
        stock=10,
        created_at=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_invoice(sample_client: Client) -> Invoice:
    """A pending invoice with one catalog line and one ad-hoc line."""
    return Invoice(
        id=3,
        user_id=TENANT,
        number="F-2024-001",
        client_id=sample_client.id,
        status=InvoiceStatus.PENDING,
        total_ht=Decimal("3500.00"),
        tva_rate=Decimal("18.00"),
        total_tva=Decimal("630.00"),
        total_ttc=Decimal("4130.00"),
        items=[
            CatalogItem(
                id=1,
                invoice_id=3,
                product_id=7,
                product_name="Desk lamp",
                quantity=3,
                price_ht=Decimal("1000.00"),
                total_ht=Decimal("3000.00"),
            ),
            AdHocItem(
                id=2,
                invoice_id=3,
                product_name="Delivery",
                quantity=1,
                price_ht=Decimal("500.00"),
                total_ht=Decimal("500.00"),
            ),
        ],
        client=sample_client,
        created_at=datetime(2024, 3, 2, 10, 0, tzinfo=timezone.utc),
    )
