"""SQLite implementation of product storage and stock adjustment."""

from collections.abc import Sequence
from typing import Any

import aiosqlite

from gestpro.config import get_logger
from gestpro.core.entities.product import Product, StockAdjustment, StockDecrement
from gestpro.core.interfaces.product_store import IProductStore
from gestpro.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    transaction_scope,
)
from gestpro.infrastructure.storage.sqlite.rows import build_set_clause, row_to_product

logger = get_logger(__name__)

UPDATABLE_COLUMNS = ("name", "description", "price_ht", "stock", "category_id")


class SQLiteProductStore(IProductStore):
    """SQLite implementation of tenant-scoped product storage."""

    async def create_product(self, product: Product) -> Product:
        """Create a product."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO products (
                    user_id, name, description, price_ht,
                    stock, category_id, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    product.user_id,
                    product.name,
                    product.description,
                    str(product.price_ht),
                    product.stock,
                    product.category_id,
                    product.created_at.isoformat(),
                ),
            )
            product.id = cursor.lastrowid
            logger.info(
                "product_created",
                product_id=product.id,
                stock=product.stock,
            )
            return product

    async def get_product(self, product_id: int, user_id: str) -> Product | None:
        """Get product by ID within the tenant."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products WHERE id = ? AND user_id = ?",
                (product_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row_to_product(row)

    async def list_products(self, user_id: str) -> list[Product]:
        """List the tenant's products, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM products
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [row_to_product(row) for row in rows]

    async def search_products(
        self, user_id: str, query: str, limit: int = 10
    ) -> list[Product]:
        """Case-insensitive search on name and description."""
        term = f"%{query.lower()}%"
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM products
                WHERE user_id = ?
                  AND (LOWER(name) LIKE ? OR LOWER(COALESCE(description, '')) LIKE ?)
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (user_id, term, term, limit),
            )
            rows = await cursor.fetchall()
            return [row_to_product(row) for row in rows]

    async def update_product(
        self, product_id: int, user_id: str, changes: dict[str, Any]
    ) -> Product | None:
        """Apply field changes, returning the updated product."""
        if changes:
            clause, values = build_set_clause(changes, UPDATABLE_COLUMNS)
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    f"UPDATE products SET {clause} WHERE id = ? AND user_id = ?",
                    (*values, product_id, user_id),
                )
                if cursor.rowcount == 0:
                    return None
            logger.info("product_updated", product_id=product_id, fields=sorted(changes))
        return await self.get_product(product_id, user_id)

    async def delete_product(self, product_id: int, user_id: str) -> bool:
        """Delete a product. Invoice lines pointing at it become ad-hoc lines."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM products WHERE id = ? AND user_id = ?",
                (product_id, user_id),
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("product_deleted", product_id=product_id)
        return deleted

    async def decrement_stock(
        self,
        user_id: str,
        decrements: Sequence[StockDecrement],
        conn: aiosqlite.Connection | None = None,
    ) -> list[StockAdjustment]:
        """
        Decrease stock for each entry, clamping at zero.

        The clamp is evaluated by SQLite against the stored value inside a
        single UPDATE, so concurrent settlements never lose a decrement.
        """
        adjustments: list[StockAdjustment] = []
        async with transaction_scope(conn) as tx:
            for entry in decrements:
                cursor = await tx.execute(
                    """
                    UPDATE products
                    SET stock = MAX(0, stock - ?)
                    WHERE id = ? AND user_id = ?
                    RETURNING stock
                    """,
                    (entry.quantity, entry.product_id, user_id),
                )
                row = await cursor.fetchone()
                await cursor.close()

                if row is None:
                    logger.warning(
                        "stock_decrement_skipped",
                        product_id=entry.product_id,
                        reason="product_not_found",
                    )
                    adjustments.append(
                        StockAdjustment(
                            product_id=entry.product_id,
                            quantity=entry.quantity,
                            applied=False,
                        )
                    )
                    continue

                adjustments.append(
                    StockAdjustment(
                        product_id=entry.product_id,
                        quantity=entry.quantity,
                        applied=True,
                        stock_after=row[0],
                    )
                )

        logger.info(
            "stock_decremented",
            user_id=user_id,
            products=len(adjustments),
            skipped=sum(1 for a in adjustments if not a.applied),
        )
        return adjustments
