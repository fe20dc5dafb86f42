"""SQLite implementation of dashboard aggregates."""

from decimal import Decimal

from gestpro.config import get_logger
from gestpro.core.entities.common import to_money
from gestpro.core.entities.dashboard import DashboardStats, TopProduct
from gestpro.core.entities.invoice import InvoiceStatus
from gestpro.core.interfaces.dashboard_store import IDashboardStore
from gestpro.infrastructure.storage.sqlite.connection import get_connection
from gestpro.infrastructure.storage.sqlite.rows import (
    row_to_client,
    row_to_invoice,
    row_to_product,
)

logger = get_logger(__name__)


class SQLiteDashboardStore(IDashboardStore):
    """Computes per-tenant summary figures with read-only queries."""

    async def get_stats(
        self,
        user_id: str,
        recent_limit: int = 5,
        top_limit: int = 5,
        low_stock_threshold: int = 0,
        low_stock_limit: int = 10,
    ) -> DashboardStats:
        async with get_connection() as conn:
            # Money is stored as TEXT; sum in Decimal to avoid float drift
            cursor = await conn.execute(
                "SELECT total_ttc FROM invoices WHERE user_id = ? AND status = ?",
                (user_id, InvoiceStatus.PAID.value),
            )
            revenue = sum(
                (Decimal(row["total_ttc"]) for row in await cursor.fetchall()),
                Decimal("0"),
            )

            counts = {}
            for table in ("invoices", "clients", "products"):
                cursor = await conn.execute(
                    f"SELECT COUNT(*) FROM {table} WHERE user_id = ?",
                    (user_id,),
                )
                row = await cursor.fetchone()
                counts[table] = int(row[0])

            cursor = await conn.execute(
                """
                SELECT * FROM invoices
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (user_id, recent_limit),
            )
            invoice_rows = await cursor.fetchall()

            recent_invoices = []
            for invoice_row in invoice_rows:
                client_cursor = await conn.execute(
                    "SELECT * FROM clients WHERE id = ? AND user_id = ?",
                    (invoice_row["client_id"], user_id),
                )
                client_row = await client_cursor.fetchone()
                recent_invoices.append(
                    row_to_invoice(
                        invoice_row,
                        client=row_to_client(client_row) if client_row else None,
                    )
                )

            cursor = await conn.execute(
                """
                SELECT p.*, COUNT(s.id) AS sales_count
                FROM products p
                LEFT JOIN sales s ON s.product_id = p.id AND s.user_id = p.user_id
                WHERE p.user_id = ?
                GROUP BY p.id
                ORDER BY sales_count DESC, p.id ASC
                LIMIT ?
                """,
                (user_id, top_limit),
            )
            top_products = [
                TopProduct(product=row_to_product(row), sales_count=int(row["sales_count"]))
                for row in await cursor.fetchall()
            ]

            cursor = await conn.execute(
                """
                SELECT * FROM products
                WHERE user_id = ? AND stock <= ?
                ORDER BY stock ASC, id ASC
                LIMIT ?
                """,
                (user_id, low_stock_threshold, low_stock_limit),
            )
            low_stock_products = [row_to_product(row) for row in await cursor.fetchall()]

        stats = DashboardStats(
            revenue=to_money(revenue),
            invoice_count=counts["invoices"],
            client_count=counts["clients"],
            product_count=counts["products"],
            recent_invoices=recent_invoices,
            top_products=top_products,
            low_stock_products=low_stock_products,
        )
        logger.debug(
            "dashboard_stats_computed",
            user_id=user_id,
            revenue=str(stats.revenue),
            invoices=stats.invoice_count,
        )
        return stats
