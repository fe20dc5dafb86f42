"""Client management use case."""

from gestpro.application.dto.requests import CreateClientRequest, UpdateClientRequest
from gestpro.config import get_logger
from gestpro.core.entities import Client
from gestpro.core.exceptions import ClientInUseError, ClientNotFoundError
from gestpro.core.interfaces import IClientStore, IInvoiceStore

logger = get_logger(__name__)

SEARCH_LIMIT = 10


class ManageClientsUseCase:
    """Tenant-scoped client CRUD. A client with invoices cannot be deleted."""

    def __init__(
        self,
        client_store: IClientStore | None = None,
        invoice_store: IInvoiceStore | None = None,
    ):
        self._client_store = client_store
        self._invoice_store = invoice_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from gestpro.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from gestpro.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def list_all(self, user_id: str, search: str | None = None) -> list[Client]:
        store = await self._get_client_store()
        if search:
            return await store.search_clients(user_id, search, limit=SEARCH_LIMIT)
        return await store.list_clients(user_id)

    async def get(self, user_id: str, client_id: int) -> Client:
        store = await self._get_client_store()
        client = await store.get_client(client_id, user_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    async def create(self, user_id: str, request: CreateClientRequest) -> Client:
        store = await self._get_client_store()
        return await store.create_client(Client(user_id=user_id, **request.model_dump()))

    async def update(
        self, user_id: str, client_id: int, request: UpdateClientRequest
    ) -> Client:
        store = await self._get_client_store()
        client = await store.update_client(client_id, user_id, request.changes())
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    async def delete(self, user_id: str, client_id: int) -> None:
        await self.get(user_id, client_id)

        invoice_store = await self._get_invoice_store()
        invoice_count = await invoice_store.count_by_client(client_id, user_id)
        if invoice_count:
            logger.warning(
                "client_delete_blocked", client_id=client_id, invoices=invoice_count
            )
            raise ClientInUseError(client_id, invoice_count)

        store = await self._get_client_store()
        if not await store.delete_client(client_id, user_id):
            raise ClientNotFoundError(client_id)
