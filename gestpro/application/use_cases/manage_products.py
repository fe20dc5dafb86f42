"""Product management use case."""

from gestpro.application.dto.requests import CreateProductRequest, UpdateProductRequest
from gestpro.config import get_logger
from gestpro.core.entities import Product
from gestpro.core.entities.common import to_money
from gestpro.core.exceptions import (
    CategoryNotFoundError,
    ProductInUseError,
    ProductNotFoundError,
)
from gestpro.core.interfaces import ICategoryStore, IProductStore, ISalesStore

logger = get_logger(__name__)

SEARCH_LIMIT = 10


class ManageProductsUseCase:
    """
    Tenant-scoped product CRUD.

    A product's category must belong to the same tenant. A product with
    sales cannot be deleted; invoice lines pointing at a deleted product
    keep their snapshot and become ad-hoc lines.
    """

    def __init__(
        self,
        product_store: IProductStore | None = None,
        category_store: ICategoryStore | None = None,
        sales_store: ISalesStore | None = None,
    ):
        self._product_store = product_store
        self._category_store = category_store
        self._sales_store = sales_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from gestpro.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_category_store(self) -> ICategoryStore:
        if self._category_store is None:
            from gestpro.infrastructure.storage.sqlite import get_category_store

            self._category_store = await get_category_store()
        return self._category_store

    async def _get_sales_store(self) -> ISalesStore:
        if self._sales_store is None:
            from gestpro.infrastructure.storage.sqlite import get_sales_store

            self._sales_store = await get_sales_store()
        return self._sales_store

    async def _check_category(self, user_id: str, category_id: int | None) -> None:
        if category_id is None:
            return
        category_store = await self._get_category_store()
        if await category_store.get_category(category_id, user_id) is None:
            raise CategoryNotFoundError(category_id)

    async def list_all(self, user_id: str, search: str | None = None) -> list[Product]:
        store = await self._get_product_store()
        if search:
            return await store.search_products(user_id, search, limit=SEARCH_LIMIT)
        return await store.list_products(user_id)

    async def get(self, user_id: str, product_id: int) -> Product:
        store = await self._get_product_store()
        product = await store.get_product(product_id, user_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create(self, user_id: str, request: CreateProductRequest) -> Product:
        await self._check_category(user_id, request.category_id)
        store = await self._get_product_store()
        return await store.create_product(Product(user_id=user_id, **request.model_dump()))

    async def update(
        self, user_id: str, product_id: int, request: UpdateProductRequest
    ) -> Product:
        changes = request.changes()
        if "category_id" in changes:
            await self._check_category(user_id, changes["category_id"])
        if "price_ht" in changes:
            changes["price_ht"] = to_money(changes["price_ht"])

        store = await self._get_product_store()
        product = await store.update_product(product_id, user_id, changes)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def delete(self, user_id: str, product_id: int) -> None:
        await self.get(user_id, product_id)

        sales_store = await self._get_sales_store()
        sale_count = await sales_store.count_by_product(product_id, user_id)
        if sale_count:
            logger.warning(
                "product_delete_blocked", product_id=product_id, sales=sale_count
            )
            raise ProductInUseError(product_id, sale_count)

        store = await self._get_product_store()
        if not await store.delete_product(product_id, user_id):
            raise ProductNotFoundError(product_id)
