"""Product category endpoints."""

from fastapi import APIRouter, Depends, status

from gestpro.api.dependencies import get_manage_categories_use_case, get_tenant_id
from gestpro.application.dto.converters import category_to_response
from gestpro.application.dto.requests import CreateCategoryRequest, UpdateCategoryRequest
from gestpro.application.dto.responses import (
    CategoryListResponse,
    CategoryResponse,
    ErrorResponse,
)
from gestpro.application.use_cases import ManageCategoriesUseCase

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    user_id: str = Depends(get_tenant_id),
    use_case: ManageCategoriesUseCase = Depends(get_manage_categories_use_case),
) -> CategoryListResponse:
    categories = await use_case.list_all(user_id)
    return CategoryListResponse(
        categories=[category_to_response(c) for c in categories],
        total=len(categories),
    )


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_category(
    category_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageCategoriesUseCase = Depends(get_manage_categories_use_case),
) -> CategoryResponse:
    return category_to_response(await use_case.get(user_id, category_id))


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_category(
    request: CreateCategoryRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageCategoriesUseCase = Depends(get_manage_categories_use_case),
) -> CategoryResponse:
    return category_to_response(await use_case.create(user_id, request))


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_category(
    category_id: int,
    request: UpdateCategoryRequest,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageCategoriesUseCase = Depends(get_manage_categories_use_case),
) -> CategoryResponse:
    return category_to_response(await use_case.update(user_id, category_id, request))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_category(
    category_id: int,
    user_id: str = Depends(get_tenant_id),
    use_case: ManageCategoriesUseCase = Depends(get_manage_categories_use_case),
) -> None:
    """Delete a category; its products are kept without a category."""
    await use_case.delete(user_id, category_id)
