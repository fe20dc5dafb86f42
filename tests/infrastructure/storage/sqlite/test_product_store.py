"""Tests for SQLite product store and stock decrements."""

from decimal import Decimal

from gestpro.core.entities import AdHocItem, CatalogItem, StockDecrement
from gestpro.infrastructure.storage.sqlite.client_store import SQLiteClientStore
from gestpro.infrastructure.storage.sqlite.connection import get_transaction
from gestpro.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from gestpro.infrastructure.storage.sqlite.product_store import SQLiteProductStore

TENANT = "tenant-a"
OTHER_TENANT = "tenant-b"


class TestSQLiteProductStore:
    """Tests for SQLiteProductStore."""

    async def test_create_and_get(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        created = await store.create_product(product_factory(TENANT, price="12.5"))

        fetched = await store.get_product(created.id, TENANT)

        assert fetched is not None
        assert fetched.price_ht == Decimal("12.50")
        assert fetched.stock == 10

    async def test_search_on_description(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        await store.create_product(product_factory(TENANT, name="Lamp", description="Brass finish"))
        await store.create_product(product_factory(TENANT, name="Chair"))

        results = await store.search_products(TENANT, "brass")

        assert [p.name for p in results] == ["Lamp"]

    async def test_update_fields(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        created = await store.create_product(product_factory(TENANT))

        updated = await store.update_product(
            created.id, TENANT, {"price_ht": Decimal("1200.00"), "stock": 4}
        )

        assert updated.price_ht == Decimal("1200.00")
        assert updated.stock == 4

    async def test_update_other_tenant(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        created = await store.create_product(product_factory(TENANT))

        assert await store.update_product(created.id, OTHER_TENANT, {"stock": 0}) is None
        assert (await store.get_product(created.id, TENANT)).stock == 10


class TestDecrementStock:
    async def test_decrement(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=10))

        adjustments = await store.decrement_stock(
            TENANT, [StockDecrement(product_id=product.id, quantity=3)]
        )

        assert adjustments[0].applied is True
        assert adjustments[0].stock_after == 7
        assert (await store.get_product(product.id, TENANT)).stock == 7

    async def test_clamps_at_zero(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=2))

        adjustments = await store.decrement_stock(
            TENANT, [StockDecrement(product_id=product.id, quantity=5)]
        )

        assert adjustments[0].stock_after == 0
        assert (await store.get_product(product.id, TENANT)).stock == 0

    async def test_same_product_twice(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=10))

        adjustments = await store.decrement_stock(
            TENANT,
            [
                StockDecrement(product_id=product.id, quantity=4),
                StockDecrement(product_id=product.id, quantity=4),
            ],
        )

        assert [a.stock_after for a in adjustments] == [6, 2]

    async def test_missing_product_is_skipped(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=5))

        adjustments = await store.decrement_stock(
            TENANT,
            [
                StockDecrement(product_id=9999, quantity=1),
                StockDecrement(product_id=product.id, quantity=1),
            ],
        )

        assert adjustments[0].applied is False
        assert adjustments[0].stock_after is None
        assert adjustments[1].stock_after == 4

    async def test_other_tenant_product_untouched(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=5))

        adjustments = await store.decrement_stock(
            OTHER_TENANT, [StockDecrement(product_id=product.id, quantity=5)]
        )

        assert adjustments[0].applied is False
        assert (await store.get_product(product.id, TENANT)).stock == 5

    async def test_rolled_back_with_caller_transaction(self, migrated_db, product_factory):
        store = SQLiteProductStore()
        product = await store.create_product(product_factory(TENANT, stock=5))

        try:
            async with get_transaction() as conn:
                await store.decrement_stock(
                    TENANT, [StockDecrement(product_id=product.id, quantity=2)], conn=conn
                )
                raise RuntimeError("abort")
        except RuntimeError:
            pass

        assert (await store.get_product(product.id, TENANT)).stock == 5


class TestDeleteProduct:
    async def test_invoice_lines_become_ad_hoc(
        self, migrated_db, client_factory, product_factory, invoice_factory
    ):
        clients = SQLiteClientStore()
        products = SQLiteProductStore()
        invoices = SQLiteInvoiceStore()
        client = await clients.create_client(client_factory(TENANT))
        product = await products.create_product(product_factory(TENANT))
        invoice = await invoices.create_invoice(
            invoice_factory(TENANT, client.id, product_id=product.id)
        )
        assert isinstance(invoice.items[0], CatalogItem)

        assert await products.delete_product(product.id, TENANT) is True

        reloaded = await invoices.get_invoice(invoice.id, TENANT)
        line = reloaded.items[0]
        assert isinstance(line, AdHocItem)
        assert line.product_name == "Desk lamp"
        assert line.price_ht == Decimal("1000.00")
