"""Bookmark bar routes."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.config import get_config_id
from astro.database import get_db_session
from astro.schemas.common import ErrorResponse
from astro.schemas.link import LinkCreate, LinkResponse, LinkUpdate
from astro.services.link_service import link_service

router = APIRouter(prefix="/api", tags=["Links"])


@router.get("/link", response_model=List[LinkResponse], summary="List links")
async def list_links(
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[LinkResponse]:
    return await link_service.list_links(db, config_id)


@router.post(
    "/link",
    status_code=201,
    response_model=LinkResponse,
    responses={400: {"description": "Invalid URL", "model": ErrorResponse}},
    summary="Create a link",
)
async def create_link(
    payload: LinkCreate,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> LinkResponse:
    return await link_service.create_link(db, config_id, payload)


@router.patch(
    "/link/{link_id}",
    response_model=LinkResponse,
    responses={404: {"description": "Link not found", "model": ErrorResponse}},
    summary="Update a link",
)
async def update_link(
    link_id: int,
    payload: LinkUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> LinkResponse:
    return await link_service.update_link(db, link_id, payload)


@router.delete(
    "/link/{link_id}",
    status_code=204,
    responses={404: {"description": "Link not found", "model": ErrorResponse}},
    summary="Delete a link",
)
async def delete_link(
    link_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await link_service.delete_link(db, link_id)
    return Response(status_code=204)
