"""SQLite implementation of invoice storage."""

from decimal import Decimal
from typing import Any

import aiosqlite

from gestpro.config import get_logger
from gestpro.core.entities.invoice import (
    AdHocItem,
    CatalogItem,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)
from gestpro.core.interfaces.invoice_store import IInvoiceStore
from gestpro.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_transaction,
    transaction_scope,
)
from gestpro.infrastructure.storage.sqlite.rows import (
    build_set_clause,
    row_to_client,
    row_to_invoice,
)

logger = get_logger(__name__)

UPDATABLE_COLUMNS = ("number", "due_date", "notes")


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of tenant-scoped invoice storage."""

    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert the header and all items in one transaction."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO invoices (
                    user_id, number, client_id, status,
                    total_ht, tva_rate, total_tva, total_ttc,
                    due_date, notes, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    invoice.user_id,
                    invoice.number,
                    invoice.client_id,
                    invoice.status.value,
                    str(invoice.total_ht),
                    str(invoice.tva_rate),
                    str(invoice.total_tva),
                    str(invoice.total_ttc),
                    invoice.due_date.isoformat() if invoice.due_date else None,
                    invoice.notes,
                    invoice.created_at.isoformat(),
                ),
            )
            invoice.id = cursor.lastrowid

            for item in invoice.items:
                item.invoice_id = invoice.id
                item_cursor = await conn.execute(
                    """
                    INSERT INTO invoice_items (
                        invoice_id, product_id, product_name,
                        quantity, price_ht, total_ht
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.invoice_id,
                        item.product_id if isinstance(item, CatalogItem) else None,
                        item.product_name,
                        item.quantity,
                        str(item.price_ht),
                        str(item.total_ht),
                    ),
                )
                item.id = item_cursor.lastrowid

            logger.info(
                "invoice_created",
                invoice_id=invoice.id,
                items=len(invoice.items),
                total_ttc=str(invoice.total_ttc),
            )
            return invoice

    async def get_invoice(self, invoice_id: int, user_id: str) -> Invoice | None:
        """Get invoice with items and client."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM invoices WHERE id = ? AND user_id = ?",
                (invoice_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            items_cursor = await conn.execute(
                "SELECT * FROM invoice_items WHERE invoice_id = ? ORDER BY id",
                (invoice_id,),
            )
            item_rows = await items_cursor.fetchall()
            items = [self._row_to_item(r) for r in item_rows]

            client_cursor = await conn.execute(
                "SELECT * FROM clients WHERE id = ? AND user_id = ?",
                (row["client_id"], user_id),
            )
            client_row = await client_cursor.fetchone()
            client = row_to_client(client_row) if client_row else None

            return row_to_invoice(row, items, client)

    async def list_invoices(self, user_id: str) -> list[Invoice]:
        """List invoice headers (without items), newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM invoices
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [row_to_invoice(row) for row in rows]

    async def count_by_client(self, client_id: int, user_id: str) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM invoices WHERE client_id = ? AND user_id = ?",
                (client_id, user_id),
            )
            row = await cursor.fetchone()
            return int(row[0])

    async def update_fields(
        self,
        invoice_id: int,
        user_id: str,
        changes: dict[str, Any],
        conn: aiosqlite.Connection | None = None,
    ) -> bool:
        """Update number, due date or notes."""
        if not changes:
            return True
        clause, values = build_set_clause(changes, UPDATABLE_COLUMNS)
        async with transaction_scope(conn) as tx:
            cursor = await tx.execute(
                f"UPDATE invoices SET {clause} WHERE id = ? AND user_id = ?",
                (*values, invoice_id, user_id),
            )
            updated = cursor.rowcount > 0
        if updated:
            logger.info("invoice_fields_updated", invoice_id=invoice_id, fields=sorted(changes))
        return updated

    async def set_status(
        self,
        invoice_id: int,
        user_id: str,
        status: InvoiceStatus,
        conn: aiosqlite.Connection | None = None,
    ) -> bool:
        """
        Write a new status.

        The move to ``paid`` is a conditional update: it only matches a row
        whose stored status is not already ``paid``. Two racing requests
        cannot both see it succeed.
        """
        if status == InvoiceStatus.PAID:
            sql = """
                UPDATE invoices SET status = ?
                WHERE id = ? AND user_id = ? AND status <> ?
            """
            params: tuple[Any, ...] = (
                status.value,
                invoice_id,
                user_id,
                InvoiceStatus.PAID.value,
            )
        else:
            sql = "UPDATE invoices SET status = ? WHERE id = ? AND user_id = ?"
            params = (status.value, invoice_id, user_id)

        async with transaction_scope(conn) as tx:
            cursor = await tx.execute(sql, params)
            changed = cursor.rowcount > 0

        logger.info(
            "invoice_status_written",
            invoice_id=invoice_id,
            status=status.value,
            changed=changed,
        )
        return changed

    async def delete_invoice(self, invoice_id: int, user_id: str) -> bool:
        """Delete sales, then items, then the invoice itself."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "SELECT id FROM invoices WHERE id = ? AND user_id = ?",
                (invoice_id, user_id),
            )
            if await cursor.fetchone() is None:
                return False

            sales_cursor = await conn.execute(
                "DELETE FROM sales WHERE invoice_id = ? AND user_id = ?",
                (invoice_id, user_id),
            )
            items_cursor = await conn.execute(
                "DELETE FROM invoice_items WHERE invoice_id = ?",
                (invoice_id,),
            )
            await conn.execute(
                "DELETE FROM invoices WHERE id = ? AND user_id = ?",
                (invoice_id, user_id),
            )

            logger.info(
                "invoice_deleted",
                invoice_id=invoice_id,
                sales_removed=sales_cursor.rowcount,
                items_removed=items_cursor.rowcount,
            )
            return True

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InvoiceItem:
        """Convert a database row to a catalog or ad-hoc line."""
        fields = {
            "id": row["id"],
            "invoice_id": row["invoice_id"],
            "product_name": row["product_name"],
            "quantity": int(row["quantity"]),
            "price_ht": Decimal(row["price_ht"]),
            "total_ht": Decimal(row["total_ht"]),
        }
        if row["product_id"] is None:
            return AdHocItem(**fields)
        return CatalogItem(product_id=row["product_id"], **fields)
