"""SQLite implementation of the sales ledger."""

from collections.abc import Sequence
from decimal import Decimal

import aiosqlite

from gestpro.config import get_logger
from gestpro.core.entities.common import utc_now
from gestpro.core.entities.invoice import CatalogItem
from gestpro.core.entities.sale import Sale
from gestpro.core.interfaces.sales_store import ISalesStore
from gestpro.infrastructure.storage.sqlite.connection import get_connection, transaction_scope
from gestpro.infrastructure.storage.sqlite.rows import parse_datetime

logger = get_logger(__name__)


class SQLiteSalesStore(ISalesStore):
    """SQLite implementation of sales record storage."""

    async def create_from_items(
        self,
        invoice_id: int,
        user_id: str,
        items: Sequence[CatalogItem],
        conn: aiosqlite.Connection | None = None,
    ) -> list[Sale]:
        """Insert one sale per catalog item, copying quantity, price and total."""
        now = utc_now()
        sales: list[Sale] = []
        async with transaction_scope(conn) as tx:
            for item in items:
                sale = Sale(
                    user_id=user_id,
                    invoice_id=invoice_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.price_ht,
                    total=item.total_ht,
                    created_at=now,
                )
                cursor = await tx.execute(
                    """
                    INSERT INTO sales (
                        user_id, invoice_id, product_id, quantity,
                        unit_price, total, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        sale.user_id,
                        sale.invoice_id,
                        sale.product_id,
                        sale.quantity,
                        str(sale.unit_price),
                        str(sale.total),
                        sale.created_at.isoformat(),
                    ),
                )
                sale.id = cursor.lastrowid
                sales.append(sale)

        logger.info("sales_materialized", invoice_id=invoice_id, sales=len(sales))
        return sales

    async def list_sales(self, user_id: str) -> list[Sale]:
        """List the tenant's sales, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM sales
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_sale(row) for row in rows]

    async def list_by_invoice(self, invoice_id: int, user_id: str) -> list[Sale]:
        """List sales materialized from one invoice."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM sales
                WHERE invoice_id = ? AND user_id = ?
                ORDER BY id
                """,
                (invoice_id, user_id),
            )
            rows = await cursor.fetchall()
            return [self._row_to_sale(row) for row in rows]

    async def count_by_product(self, product_id: int, user_id: str) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM sales WHERE product_id = ? AND user_id = ?",
                (product_id, user_id),
            )
            row = await cursor.fetchone()
            return int(row[0])

    @staticmethod
    def _row_to_sale(row: aiosqlite.Row) -> Sale:
        """Convert a database row to a Sale entity."""
        return Sale(
            id=row["id"],
            user_id=row["user_id"],
            invoice_id=row["invoice_id"],
            product_id=row["product_id"],
            quantity=int(row["quantity"]),
            unit_price=Decimal(row["unit_price"]),
            total=Decimal(row["total"]),
            created_at=parse_datetime(row["created_at"]),
        )
