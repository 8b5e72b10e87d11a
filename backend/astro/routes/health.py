"""
Health check route.

GET /api/healthz runs `SELECT 1` against the database and reports uptime.
An unreachable database answers 503 so container health checks and load
balancers stop routing to this instance.
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text

from astro import __version__
from astro.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health"])

_start_time = time.time()


@router.get(
    "/healthz",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def healthz(response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        from astro.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
