"""Tests for CreateInvoiceUseCase."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from gestpro.application.dto.requests import CreateInvoiceRequest
from gestpro.application.use_cases.create_invoice import CreateInvoiceUseCase
from gestpro.core.entities import AdHocItem, CatalogItem, InvoiceStatus
from gestpro.core.exceptions import (
    ClientNotFoundError,
    ProductNotFoundError,
    ValidationError,
)

TENANT = "tenant-a"


@pytest.fixture
def mock_client_store(sample_client):
    store = AsyncMock()
    store.get_client.return_value = sample_client
    return store


@pytest.fixture
def mock_product_store(sample_product):
    store = AsyncMock()
    store.get_product.return_value = sample_product
    return store


@pytest.fixture
def mock_invoice_store():
    store = AsyncMock()

    async def _create(invoice):
        invoice.id = 11
        for n, item in enumerate(invoice.items, start=1):
            item.id = n
            item.invoice_id = invoice.id
        return invoice

    store.create_invoice.side_effect = _create
    return store


@pytest.fixture
def use_case(mock_client_store, mock_product_store, mock_invoice_store):
    return CreateInvoiceUseCase(
        client_store=mock_client_store,
        product_store=mock_product_store,
        invoice_store=mock_invoice_store,
    )


def _request(**overrides) -> CreateInvoiceRequest:
    body = {
        "number": "F-2024-010",
        "client_id": 1,
        "tva_rate": 18,
        "items": [
            {"product_id": 7, "quantity": 3},
            {"product_name": "Delivery", "quantity": 1, "price_ht": 500},
        ],
    }
    body.update(overrides)
    return CreateInvoiceRequest.model_validate(body)


class TestCreateInvoiceUseCase:
    async def test_totals_and_status(self, use_case):
        result = await use_case.execute(TENANT, _request())
        invoice = result.invoice

        assert invoice.id == 11
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.total_ht == Decimal("3500.00")
        assert invoice.total_tva == Decimal("630.00")
        assert invoice.total_ttc == Decimal("4130.00")

    async def test_catalog_line_snapshots_product(self, use_case):
        result = await use_case.execute(TENANT, _request())
        catalog, ad_hoc = result.invoice.items

        assert isinstance(catalog, CatalogItem)
        assert catalog.product_name == "Desk lamp"
        assert catalog.price_ht == Decimal("1000.00")
        assert catalog.total_ht == Decimal("3000.00")
        assert isinstance(ad_hoc, AdHocItem)
        assert ad_hoc.total_ht == Decimal("500.00")

    async def test_price_override_wins(self, use_case):
        request = _request(items=[{"product_id": 7, "quantity": 2, "price_ht": "900"}])

        result = await use_case.execute(TENANT, request)

        assert result.invoice.items[0].price_ht == Decimal("900.00")
        assert result.invoice.total_ht == Decimal("1800.00")

    async def test_no_stock_effect(self, use_case, mock_product_store):
        await use_case.execute(TENANT, _request())
        mock_product_store.decrement_stock.assert_not_called()

    async def test_client_attached_to_result(self, use_case, sample_client):
        result = await use_case.execute(TENANT, _request())
        assert result.invoice.client == sample_client

    async def test_lookups_are_tenant_scoped(
        self, use_case, mock_client_store, mock_product_store
    ):
        await use_case.execute(TENANT, _request())
        mock_client_store.get_client.assert_awaited_once_with(1, TENANT)
        mock_product_store.get_product.assert_awaited_once_with(7, TENANT)

    async def test_unknown_client(self, use_case, mock_client_store, mock_invoice_store):
        mock_client_store.get_client.return_value = None

        with pytest.raises(ClientNotFoundError):
            await use_case.execute(TENANT, _request())
        mock_invoice_store.create_invoice.assert_not_called()

    async def test_unknown_product(self, use_case, mock_product_store, mock_invoice_store):
        mock_product_store.get_product.return_value = None

        with pytest.raises(ProductNotFoundError):
            await use_case.execute(TENANT, _request())
        mock_invoice_store.create_invoice.assert_not_called()

    async def test_bad_rate_rejected_before_lookup(self, use_case, mock_client_store):
        with pytest.raises(ValidationError):
            await use_case.execute(TENANT, _request(tva_rate=7))
        mock_client_store.get_client.assert_not_called()

    async def test_empty_items_rejected(self, use_case, mock_invoice_store):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(TENANT, _request(items=[]))
        assert exc_info.value.details["field"] == "items"
        mock_invoice_store.create_invoice.assert_not_called()

    async def test_to_response(self, use_case):
        result = await use_case.execute(TENANT, _request())
        response = use_case.to_response(result)

        assert response.id == 11
        assert response.status == "pending"
        assert [i.kind for i in response.items] == ["catalog", "ad_hoc"]
        assert response.items[1].product_id is None
        assert response.settlement is None
