"""Abstract interface for category storage."""

from abc import ABC, abstractmethod
from typing import Any

from gestpro.core.entities.category import Category


class ICategoryStore(ABC):
    """Interface for tenant-scoped category persistence."""

    @abstractmethod
    async def create_category(self, category: Category) -> Category:
        """Create a category."""
        pass

    @abstractmethod
    async def get_category(self, category_id: int, user_id: str) -> Category | None:
        """Get category by ID."""
        pass

    @abstractmethod
    async def list_categories(self, user_id: str) -> list[Category]:
        """List the tenant's categories, newest first."""
        pass

    @abstractmethod
    async def update_category(
        self, category_id: int, user_id: str, changes: dict[str, Any]
    ) -> Category | None:
        """Apply field changes, returning the updated category."""
        pass

    @abstractmethod
    async def delete_category(self, category_id: int, user_id: str) -> bool:
        """Delete a category, detaching its products."""
        pass
