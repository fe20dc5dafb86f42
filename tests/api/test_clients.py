"""API tests for client and category endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from gestpro.api.dependencies import (
    get_manage_categories_use_case,
    get_manage_clients_use_case,
)
from gestpro.api.main import app
from gestpro.application.use_cases import ManageCategoriesUseCase, ManageClientsUseCase
from gestpro.core.entities import Category

HEADERS = {"X-Tenant-ID": "tenant-a"}


@pytest.fixture
def mock_client_store(sample_client):
    store = AsyncMock()
    store.list_clients.return_value = [sample_client]
    store.search_clients.return_value = [sample_client]
    store.get_client.return_value = sample_client
    store.update_client.return_value = sample_client
    store.delete_client.return_value = True

    async def _create(client):
        client.id = 2
        return client

    store.create_client.side_effect = _create
    return store


@pytest.fixture
def mock_invoice_store():
    store = AsyncMock()
    store.count_by_client.return_value = 0
    return store


@pytest.fixture
def mock_category_store():
    store = AsyncMock()
    store.list_categories.return_value = [Category(id=1, user_id="tenant-a", name="Lighting")]
    store.delete_category.return_value = False
    return store


@pytest.fixture
async def clients_client(mock_client_store, mock_invoice_store, mock_category_store):
    app.dependency_overrides[get_manage_clients_use_case] = lambda: ManageClientsUseCase(
        client_store=mock_client_store, invoice_store=mock_invoice_store
    )
    app.dependency_overrides[get_manage_categories_use_case] = lambda: ManageCategoriesUseCase(
        category_store=mock_category_store
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_manage_clients_use_case, None)
    app.dependency_overrides.pop(get_manage_categories_use_case, None)


class TestTenantIdentity:
    async def test_missing_header_is_401(self, clients_client: AsyncClient):
        response = await clients_client.get("/api/clients")

        assert response.status_code == 401
        body = response.json()
        assert body["error_code"] == "UNAUTHENTICATED"
        assert "X-Tenant-ID" in body["message"]

    async def test_blank_header_is_401(self, clients_client: AsyncClient):
        response = await clients_client.get("/api/clients", headers={"X-Tenant-ID": "  "})
        assert response.status_code == 401

    async def test_tenant_passed_to_store(
        self, clients_client: AsyncClient, mock_client_store
    ):
        await clients_client.get("/api/clients", headers=HEADERS)
        mock_client_store.list_clients.assert_awaited_once_with("tenant-a")


class TestClientsAPI:
    async def test_list(self, clients_client: AsyncClient):
        response = await clients_client.get("/api/clients", headers=HEADERS)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["clients"][0]["name"] == "Atelier Nord"

    async def test_search(self, clients_client: AsyncClient, mock_client_store):
        response = await clients_client.get("/api/clients?search=nord", headers=HEADERS)

        assert response.status_code == 200
        mock_client_store.search_clients.assert_awaited_once_with("tenant-a", "nord", limit=10)

    async def test_create_returns_201(self, clients_client: AsyncClient):
        response = await clients_client.post(
            "/api/clients", json={"name": "Bureau Sud"}, headers=HEADERS
        )

        assert response.status_code == 201
        assert response.json()["id"] == 2

    async def test_create_without_name_is_400(self, clients_client: AsyncClient):
        response = await clients_client.post("/api/clients", json={}, headers=HEADERS)

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert "name" in body["detail"]

    async def test_update_unknown_field_is_400(self, clients_client: AsyncClient):
        response = await clients_client.put(
            "/api/clients/1", json={"user_id": "tenant-b"}, headers=HEADERS
        )
        assert response.status_code == 400

    async def test_update_null_name_is_400(self, clients_client: AsyncClient):
        response = await clients_client.put(
            "/api/clients/1", json={"name": None}, headers=HEADERS
        )
        assert response.status_code == 400

    async def test_get_missing_is_404(self, clients_client: AsyncClient, mock_client_store):
        mock_client_store.get_client.return_value = None

        response = await clients_client.get("/api/clients/99", headers=HEADERS)

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "CLIENT_NOT_FOUND"
        assert body["hint"]

    async def test_delete_returns_204(self, clients_client: AsyncClient):
        response = await clients_client.delete("/api/clients/1", headers=HEADERS)
        assert response.status_code == 204

    async def test_delete_with_invoices_is_409(
        self, clients_client: AsyncClient, mock_invoice_store
    ):
        mock_invoice_store.count_by_client.return_value = 3

        response = await clients_client.delete("/api/clients/1", headers=HEADERS)

        assert response.status_code == 409
        assert response.json()["error_code"] == "CLIENT_IN_USE"

    async def test_unexpected_error_is_500_without_details(
        self, clients_client: AsyncClient, mock_client_store
    ):
        mock_client_store.list_clients.side_effect = RuntimeError("database is locked")

        response = await clients_client.get("/api/clients", headers=HEADERS)

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "An unexpected error occurred"
        assert "locked" not in response.text


class TestCategoriesAPI:
    async def test_list(self, clients_client: AsyncClient):
        response = await clients_client.get("/api/categories", headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["categories"][0]["name"] == "Lighting"

    async def test_delete_missing_is_404(self, clients_client: AsyncClient):
        response = await clients_client.delete("/api/categories/5", headers=HEADERS)

        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"
