"""API tests for CSV export endpoints."""

import csv
import io
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from gestpro.api.dependencies import get_cli_store, get_inv_store, get_prod_store
from gestpro.api.main import app

HEADERS = {"X-Tenant-ID": "tenant-a"}


@pytest.fixture
async def export_client(sample_client, sample_product, sample_invoice):
    client_store = AsyncMock()
    client_store.list_clients.return_value = [sample_client]
    product_store = AsyncMock()
    product_store.list_products.return_value = [sample_product]
    invoice_store = AsyncMock()
    invoice_store.list_invoices.return_value = [sample_invoice]

    app.dependency_overrides[get_cli_store] = lambda: client_store
    app.dependency_overrides[get_prod_store] = lambda: product_store
    app.dependency_overrides[get_inv_store] = lambda: invoice_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_cli_store, None)
    app.dependency_overrides.pop(get_prod_store, None)
    app.dependency_overrides.pop(get_inv_store, None)


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


class TestExportAPI:
    async def test_clients_csv(self, export_client: AsyncClient):
        response = await export_client.get("/api/export/clients", headers=HEADERS)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="clients.csv"'
        )
        header, row = _rows(response.text)
        assert header == ["id", "name", "email", "phone", "company", "address", "created_at"]
        assert row[1] == "Atelier Nord"
        # Missing address is written as an empty cell
        assert row[5] == ""

    async def test_products_csv(self, export_client: AsyncClient):
        response = await export_client.get("/api/export/products", headers=HEADERS)

        assert response.status_code == 200
        header, row = _rows(response.text)
        assert header == ["id", "name", "description", "price_ht", "stock", "created_at"]
        assert row[3] == "1000.00"
        assert row[4] == "10"

    async def test_invoices_csv(self, export_client: AsyncClient):
        response = await export_client.get("/api/export/invoices", headers=HEADERS)

        assert response.status_code == 200
        assert 'filename="invoices.csv"' in response.headers["content-disposition"]
        header, row = _rows(response.text)
        assert header[0:4] == ["id", "number", "client_id", "status"]
        assert row[1] == "F-2024-001"
        assert row[3] == "pending"
        assert row[7] == "4130.00"
        assert row[8] == ""

    async def test_requires_tenant(self, export_client: AsyncClient):
        response = await export_client.get("/api/export/clients")
        assert response.status_code == 401
