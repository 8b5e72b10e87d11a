"""Theme routes: what the theme store syncs from."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.config import get_config_id
from astro.database import get_db_session
from astro.schemas.common import ErrorResponse
from astro.schemas.theme import ThemeCreate, ThemeResponse, ThemeUpdate
from astro.services.theme_service import theme_service

router = APIRouter(prefix="/api", tags=["Themes"])


@router.get("/theme", response_model=List[ThemeResponse], summary="List themes")
async def list_themes(db: AsyncSession = Depends(get_db_session)) -> List[ThemeResponse]:
    return await theme_service.list_themes(db)


@router.post(
    "/theme",
    status_code=201,
    response_model=ThemeResponse,
    responses={409: {"description": "Theme id already taken", "model": ErrorResponse}},
    summary="Create a theme",
)
async def create_theme(
    payload: ThemeCreate,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> ThemeResponse:
    return await theme_service.create_theme(db, config_id, payload)


@router.get(
    "/theme/{theme_id}",
    response_model=ThemeResponse,
    responses={404: {"description": "Theme not found", "model": ErrorResponse}},
    summary="Get a theme",
)
async def get_theme(theme_id: str, db: AsyncSession = Depends(get_db_session)) -> ThemeResponse:
    return await theme_service.get_theme(db, theme_id)


@router.put(
    "/theme/{theme_id}",
    response_model=ThemeResponse,
    responses={404: {"description": "Theme not found", "model": ErrorResponse}},
    summary="Replace a theme's palette",
)
async def replace_theme(
    theme_id: str,
    payload: ThemeUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ThemeResponse:
    return await theme_service.replace_theme(db, theme_id, payload)


@router.delete(
    "/theme/{theme_id}",
    status_code=204,
    responses={404: {"description": "Theme not found", "model": ErrorResponse}},
    summary="Delete a theme",
)
async def delete_theme(theme_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await theme_service.delete_theme(db, theme_id)
    return Response(status_code=204)
