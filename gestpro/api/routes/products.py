"""Product catalog endpoints."""

from fastapi import APIRouter, Depends, Query, status

from gestpro.api.dependencies import get_manage_products_use_case, get_tenant_id
from gestpro.application.dto.converters import product_to_response
from gestpro.application.dto.requests import CreateProductRequest, UpdateProductRequest
from gestpro.application.dto.responses import (
    ErrorResponse,
    ProductListResponse,
    ProductResponse,
)
from gestpro.application.use_cases import ManageProductsUseCase

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    search: str | None = Query(default=None, description="Match name or description"),
    user_id: str = Depends(get_tenant_id),
    use_case: ManageProductsUseCase = Depends(get_manage_products_use_case),
) -> ProductListResponse:
    """List the tenant's products, or up to 10 matches for ``search``."""
    products = await use_case.list_all(user_id, search=search)
    return ProductListResponse(
        products=[product_to_response(p) for p in products],
        total=len(products),
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageProductsUseCase = Depends(get_manage_products_use_case),
) -> ProductResponse:
    return product_to_response(await use_case.get(user_id, product_id))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_product(
    request: CreateProductRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageProductsUseCase = Depends(get_manage_products_use_case),
) -> ProductResponse:
    return product_to_response(await use_case.create(user_id, request))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageProductsUseCase = Depends(get_manage_products_use_case),
) -> ProductResponse:
    """Apply the fields present in the body."""
    return product_to_response(await use_case.update(user_id, product_id, request))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_product(
    product_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageProductsUseCase = Depends(get_manage_products_use_case),
) -> None:
    """Delete a product that has no recorded sales."""
    await use_case.delete(user_id, product_id)
