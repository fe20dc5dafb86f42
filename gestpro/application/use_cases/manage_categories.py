"""Category management use case."""

from gestpro.application.dto.requests import CreateCategoryRequest, UpdateCategoryRequest
from gestpro.core.entities import Category
from gestpro.core.exceptions import CategoryNotFoundError
from gestpro.core.interfaces import ICategoryStore


class ManageCategoriesUseCase:
    """Tenant-scoped category CRUD. Deleting a category detaches its products."""

    def __init__(self, category_store: ICategoryStore | None = None):
        self._category_store = category_store

    async def _get_category_store(self) -> ICategoryStore:
        if self._category_store is None:
            from gestpro.infrastructure.storage.sqlite import get_category_store

            self._category_store = await get_category_store()
        return self._category_store

    async def list_all(self, user_id: str) -> list[Category]:
        store = await self._get_category_store()
        return await store.list_categories(user_id)

    async def get(self, user_id: str, category_id: int) -> Category:
        store = await self._get_category_store()
        category = await store.get_category(category_id, user_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def create(self, user_id: str, request: CreateCategoryRequest) -> Category:
        store = await self._get_category_store()
        return await store.create_category(
            Category(user_id=user_id, **request.model_dump())
        )

    async def update(
        self, user_id: str, category_id: int, request: UpdateCategoryRequest
    ) -> Category:
        store = await self._get_category_store()
        category = await store.update_category(category_id, user_id, request.changes())
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def delete(self, user_id: str, category_id: int) -> None:
        store = await self._get_category_store()
        if not await store.delete_category(category_id, user_id):
            raise CategoryNotFoundError(category_id)
