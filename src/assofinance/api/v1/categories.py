"""Category management endpoints."""

from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from assofinance.api.deps import get_category_service
from assofinance.schemas.category import (
    CategoryCreateRequest,
    CategoryListResult,
    CategoryResponse,
)
from assofinance.services.category import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    payload: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await service.create_category(payload.name, payload.type)
    return CategoryResponse.model_validate(category)


@router.get("", response_model=CategoryListResult, summary="List categories by name")
async def list_categories(
    type: Annotated[
        Literal["income", "expense"] | None,
        Query(description="Only categories of this type"),
    ] = None,
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResult:
    categories = await service.list_categories(type)
    return CategoryListResult(
        categories=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories),
    )


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    description="""
    Delete a category.

    Transactions in this category become uncategorized and the rules
    targeting it are deleted.
    """,
    responses={404: {"description": "Category not found"}},
)
async def delete_category(
    category_id: UUID,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
