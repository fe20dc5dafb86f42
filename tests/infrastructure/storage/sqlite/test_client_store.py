"""Tests for SQLite client and category stores."""

from decimal import Decimal

from gestpro.core.entities import Category, Product
from gestpro.infrastructure.storage.sqlite.category_store import SQLiteCategoryStore
from gestpro.infrastructure.storage.sqlite.client_store import SQLiteClientStore
from gestpro.infrastructure.storage.sqlite.product_store import SQLiteProductStore

TENANT = "tenant-a"
OTHER_TENANT = "tenant-b"


class TestSQLiteClientStore:
    """Tests for SQLiteClientStore."""

    async def test_create_and_get(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        created = await store.create_client(
            client_factory(TENANT, email="contact@nord.example")
        )

        assert created.id is not None
        fetched = await store.get_client(created.id, TENANT)
        assert fetched is not None
        assert fetched.name == "Atelier Nord"
        assert fetched.email == "contact@nord.example"
        assert fetched.created_at.tzinfo is not None

    async def test_other_tenant_sees_nothing(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        created = await store.create_client(client_factory(TENANT))

        assert await store.get_client(created.id, OTHER_TENANT) is None
        assert await store.list_clients(OTHER_TENANT) == []
        assert await store.update_client(created.id, OTHER_TENANT, {"name": "X"}) is None
        assert await store.delete_client(created.id, OTHER_TENANT) is False
        assert await store.get_client(created.id, TENANT) is not None

    async def test_list_newest_first(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        first = await store.create_client(client_factory(TENANT, name="First"))
        second = await store.create_client(client_factory(TENANT, name="Second"))

        clients = await store.list_clients(TENANT)

        assert [c.id for c in clients] == [second.id, first.id]

    async def test_search_matches_company_case_insensitive(
        self, migrated_db, client_factory
    ):
        store = SQLiteClientStore()
        await store.create_client(client_factory(TENANT, name="Alice", company="Nordic Ltd"))
        await store.create_client(client_factory(TENANT, name="Bob"))

        results = await store.search_clients(TENANT, "NORDIC")

        assert [c.name for c in results] == ["Alice"]

    async def test_search_limit(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        for n in range(12):
            await store.create_client(client_factory(TENANT, name=f"Client {n}"))

        results = await store.search_clients(TENANT, "client", limit=10)

        assert len(results) == 10

    async def test_update_partial(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        created = await store.create_client(client_factory(TENANT, phone="0600"))

        updated = await store.update_client(created.id, TENANT, {"phone": None})

        assert updated is not None
        assert updated.phone is None
        assert updated.name == "Atelier Nord"

    async def test_delete(self, migrated_db, client_factory):
        store = SQLiteClientStore()
        created = await store.create_client(client_factory(TENANT))

        assert await store.delete_client(created.id, TENANT) is True
        assert await store.get_client(created.id, TENANT) is None


class TestSQLiteCategoryStore:
    """Tests for SQLiteCategoryStore."""

    async def test_crud(self, migrated_db):
        store = SQLiteCategoryStore()
        created = await store.create_category(Category(user_id=TENANT, name="Lighting"))

        updated = await store.update_category(
            created.id, TENANT, {"description": "Lamps and bulbs"}
        )
        assert updated.description == "Lamps and bulbs"
        assert [c.name for c in await store.list_categories(TENANT)] == ["Lighting"]
        assert await store.get_category(created.id, OTHER_TENANT) is None

    async def test_delete_detaches_products(self, migrated_db):
        categories = SQLiteCategoryStore()
        products = SQLiteProductStore()
        category = await categories.create_category(Category(user_id=TENANT, name="Lighting"))
        product = await products.create_product(
            Product(
                user_id=TENANT,
                name="Lamp",
                price_ht=Decimal("10"),
                category_id=category.id,
            )
        )

        assert await categories.delete_category(category.id, TENANT) is True

        reloaded = await products.get_product(product.id, TENANT)
        assert reloaded is not None
        assert reloaded.category_id is None
