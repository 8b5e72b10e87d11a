"""Category routes."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.database import get_db_session
from astro.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from astro.schemas.common import ErrorResponse
from astro.services.category_service import category_service

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get("/category", response_model=List[CategoryResponse], summary="List categories")
async def list_categories(db: AsyncSession = Depends(get_db_session)) -> List[CategoryResponse]:
    return await category_service.list_categories(db)


@router.post("/category", status_code=201, response_model=CategoryResponse, summary="Create a category")
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.create_category(db, payload)


@router.get(
    "/category/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found", "model": ErrorResponse}},
    summary="Get a category with its services",
)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.get_category(db, category_id)


@router.patch(
    "/category/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found", "model": ErrorResponse}},
    summary="Update a category",
)
async def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    return await category_service.update_category(db, category_id, payload)


@router.delete(
    "/category/{category_id}",
    status_code=204,
    responses={
        404: {"description": "Category not found", "model": ErrorResponse},
        409: {"description": "Category still has services", "model": ErrorResponse},
    },
    summary="Delete an empty category",
)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await category_service.delete_category(db, category_id)
    return Response(status_code=204)
