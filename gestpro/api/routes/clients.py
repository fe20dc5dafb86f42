"""Client endpoints."""

from fastapi import APIRouter, Depends, Query, status

from gestpro.api.dependencies import get_manage_clients_use_case, get_tenant_id
from gestpro.application.dto.converters import client_to_response
from gestpro.application.dto.requests import CreateClientRequest, UpdateClientRequest
from gestpro.application.dto.responses import (
    ClientListResponse,
    ClientResponse,
    ErrorResponse,
)
from gestpro.application.use_cases import ManageClientsUseCase

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("", response_model=ClientListResponse)
async def list_clients(
    search: str | None = Query(default=None, description="Match name, email or company"),
    user_id: str = Depends(get_tenant_id),
    use_case: ManageClientsUseCase = Depends(get_manage_clients_use_case),
) -> ClientListResponse:
    """List the tenant's clients, or up to 10 matches for ``search``."""
    clients = await use_case.list_all(user_id, search=search)
    return ClientListResponse(
        clients=[client_to_response(c) for c in clients],
        total=len(clients),
    )


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_client(
    client_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageClientsUseCase = Depends(get_manage_clients_use_case),
) -> ClientResponse:
    return client_to_response(await use_case.get(user_id, client_id))


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_client(
    request: CreateClientRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageClientsUseCase = Depends(get_manage_clients_use_case),
) -> ClientResponse:
    return client_to_response(await use_case.create(user_id, request))


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_client(
    client_id: int,
    request: UpdateClientRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageClientsUseCase = Depends(get_manage_clients_use_case),
) -> ClientResponse:
    """Apply the fields present in the body."""
    return client_to_response(await use_case.update(user_id, client_id, request))


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_client(
    client_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageClientsUseCase = Depends(get_manage_clients_use_case),
) -> None:
    """Delete a client that has no invoices."""
    await use_case.delete(user_id, client_id)
