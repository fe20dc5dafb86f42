"""SQLite implementation of client storage."""

from typing import Any

from gestpro.config import get_logger
from gestpro.core.entities.client import Client
from gestpro.core.interfaces.client_store import IClientStore
from gestpro.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from gestpro.infrastructure.storage.sqlite.rows import build_set_clause, row_to_client

logger = get_logger(__name__)

UPDATABLE_COLUMNS = ("name", "email", "phone", "address", "company")


class SQLiteClientStore(IClientStore):
    """SQLite implementation of tenant-scoped client storage."""

    async def create_client(self, client: Client) -> Client:
        """Create a client."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO clients (
                    user_id, name, email, phone, address, company, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    client.user_id,
                    client.name,
                    client.email,
                    client.phone,
                    client.address,
                    client.company,
                    client.created_at.isoformat(),
                ),
            )
            client.id = cursor.lastrowid
            logger.info("client_created", client_id=client.id, user_id=client.user_id)
            return client

    async def get_client(self, client_id: int, user_id: str) -> Client | None:
        """Get client by ID within the tenant."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM clients WHERE id = ? AND user_id = ?",
                (client_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row_to_client(row)

    async def list_clients(self, user_id: str) -> list[Client]:
        """List the tenant's clients, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM clients
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [row_to_client(row) for row in rows]

    async def search_clients(
        self, user_id: str, query: str, limit: int = 10
    ) -> list[Client]:
        """Case-insensitive search on name, email and company."""
        term = f"%{query.lower()}%"
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM clients
                WHERE user_id = ?
                  AND (
                    LOWER(name) LIKE ?
                    OR LOWER(COALESCE(email, '')) LIKE ?
                    OR LOWER(COALESCE(company, '')) LIKE ?
                  )
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (user_id, term, term, term, limit),
            )
            rows = await cursor.fetchall()
            return [row_to_client(row) for row in rows]

    async def update_client(
        self, client_id: int, user_id: str, changes: dict[str, Any]
    ) -> Client | None:
        """Apply field changes, returning the updated client."""
        if changes:
            clause, values = build_set_clause(changes, UPDATABLE_COLUMNS)
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    f"UPDATE clients SET {clause} WHERE id = ? AND user_id = ?",
                    (*values, client_id, user_id),
                )
                if cursor.rowcount == 0:
                    return None
            logger.info("client_updated", client_id=client_id, fields=sorted(changes))
        return await self.get_client(client_id, user_id)

    async def delete_client(self, client_id: int, user_id: str) -> bool:
        """Delete a client."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM clients WHERE id = ? AND user_id = ?",
                (client_id, user_id),
            )
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("client_deleted", client_id=client_id)
        return deleted
