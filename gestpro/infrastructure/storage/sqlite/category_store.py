"""SQLite implementation of category storage."""

from typing import Any

import aiosqlite

from gestpro.config import get_logger
from gestpro.core.entities.category import Category
from gestpro.core.interfaces.category_store import ICategoryStore
from gestpro.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gestpro.infrastructure.storage.sqlite.rows import build_set_clause, parse_datetime

logger = get_logger(__name__)

UPDATABLE_COLUMNS = ("name", "description")


class SQLiteCategoryStore(ICategoryStore):
    """SQLite implementation of tenant-scoped category storage."""

    async def create_category(self, category: Category) -> Category:
        """Create a category."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO categories (user_id, name, description, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    category.user_id,
                    category.name,
                    category.description,
                    category.created_at.isoformat(),
                ),
            )
            category.id = cursor.lastrowid
            logger.info("category_created", category_id=category.id)
            return category

    async def get_category(self, category_id: int, user_id: str) -> Category | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM categories WHERE id = ? AND user_id = ?",
                (category_id, user_id),
            )
            row = await cursor.fetchone()
            return self._row_to_category(row) if row else None

    async def list_categories(self, user_id: str) -> list[Category]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM categories
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_category(row) for row in rows]

    async def update_category(
        self, category_id: int, user_id: str, changes: dict[str, Any]
    ) -> Category | None:
        if changes:
            clause, values = build_set_clause(changes, UPDATABLE_COLUMNS)
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    f"UPDATE categories SET {clause} WHERE id = ? AND user_id = ?",
                    (*values, category_id, user_id),
                )
                if cursor.rowcount == 0:
                    return None
            logger.info("category_updated", category_id=category_id)
        return await self.get_category(category_id, user_id)

    async def delete_category(self, category_id: int, user_id: str) -> bool:
        """Delete a category. Products keep existing with no category."""
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE products SET category_id = NULL WHERE category_id = ? AND user_id = ?",
                (category_id, user_id),
            )
            cursor = await conn.execute(
                "DELETE FROM categories WHERE id = ? AND user_id = ?",
                (category_id, user_id),
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("category_deleted", category_id=category_id)
        return deleted

    @staticmethod
    def _row_to_category(row: aiosqlite.Row) -> Category:
        return Category(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            description=row["description"],
            created_at=parse_datetime(row["created_at"]),
        )
