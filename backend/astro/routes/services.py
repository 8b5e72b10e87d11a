"""
Start page tile routes (the `Service` entity).

POST validation failures come back as 400 with every failing field:
    {"error": "validation_error", "details": {"errors": {"url": "..."}}}
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.database import get_db_session
from astro.schemas.common import ErrorResponse
from astro.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from astro.services.service_catalog import service_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Services"])


@router.get("/service", response_model=List[ServiceResponse], summary="List services")
async def list_services(
    response: Response,
    category: Optional[int] = Query(default=None, description="Only services in this category id"),
    tag: Optional[str] = Query(default=None, description="Only services carrying this tag"),
    q: Optional[str] = Query(default=None, max_length=200, description="Search name and description"),
    db: AsyncSession = Depends(get_db_session),
) -> List[ServiceResponse]:
    services = await service_catalog.list_services(db, category=category, tag=tag, q=q)
    response.headers["X-Total-Count"] = str(len(services))
    return services


@router.post(
    "/service",
    status_code=201,
    response_model=ServiceResponse,
    responses={400: {"description": "Invalid service", "model": ErrorResponse}},
    summary="Create a service",
)
async def create_service(
    payload: ServiceCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await service_catalog.create_service(db, payload)


@router.get(
    "/service/{service_id}",
    response_model=ServiceResponse,
    responses={404: {"description": "Service not found", "model": ErrorResponse}},
    summary="Get a service",
)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await service_catalog.get_service(db, service_id)


@router.patch(
    "/service/{service_id}",
    response_model=ServiceResponse,
    responses={
        400: {"description": "Invalid service", "model": ErrorResponse},
        404: {"description": "Service not found", "model": ErrorResponse},
    },
    summary="Update a service",
)
async def update_service(
    service_id: int,
    payload: ServiceUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceResponse:
    return await service_catalog.update_service(db, service_id, payload)


@router.delete(
    "/service/{service_id}",
    status_code=204,
    responses={404: {"description": "Service not found", "model": ErrorResponse}},
    summary="Delete a service",
)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await service_catalog.delete_service(db, service_id)
    return Response(status_code=204)
