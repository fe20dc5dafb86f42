"""Abstract interface for client storage."""

from abc import ABC, abstractmethod
from typing import Any

from gestpro.core.entities.client import Client


class IClientStore(ABC):
    """Interface for tenant-scoped client persistence."""

    @abstractmethod
    async def create_client(self, client: Client) -> Client:
        """Create a client."""
        pass

    @abstractmethod
    async def get_client(self, client_id: int, user_id: str) -> Client | None:
        """Get client by ID, None if absent or owned by another tenant."""
        pass

    @abstractmethod
    async def list_clients(self, user_id: str) -> list[Client]:
        """List the tenant's clients, newest first."""
        pass

    @abstractmethod
    async def search_clients(
        self, user_id: str, query: str, limit: int = 10
    ) -> list[Client]:
        """Case-insensitive search on name, email and company."""
        pass

    @abstractmethod
    async def update_client(
        self, client_id: int, user_id: str, changes: dict[str, Any]
    ) -> Client | None:
        """Apply field changes, returning the updated client."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: int, user_id: str) -> bool:
        """Delete a client. Returns False if nothing was deleted."""
        pass
