"""Dashboard config routes: the payload the config store syncs from."""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.config import get_config_id
from astro.database import get_db_session
from astro.schemas.common import ErrorResponse
from astro.schemas.config import ConfigResponse, ConfigUpdate
from astro.services.config_service import config_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Config"])


@router.get(
    "/config",
    response_model=ConfigResponse,
    responses={404: {"description": "Config not seeded", "model": ErrorResponse}},
    summary="Get the dashboard configuration",
    description=(
        "Returns the dashboard with every category (and its services), "
        "plus the config's notes, links and themes."
    ),
)
async def get_config(
    response: Response,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> ConfigResponse:
    result = await config_service.get_config(db, config_id)
    # Stores refetch after every mutation; never let a cache answer for us
    response.headers["Cache-Control"] = "no-store"
    return result


@router.patch(
    "/config",
    response_model=ConfigResponse,
    responses={
        404: {"description": "Config not seeded", "model": ErrorResponse},
        422: {"description": "Invalid fields"},
    },
    summary="Update title, subtitle or column count",
)
async def update_config(
    payload: ConfigUpdate,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> ConfigResponse:
    return await config_service.update_config(db, config_id, payload)
