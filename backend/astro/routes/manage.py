"""
Management screen listing.

GET /api/manage/{entity} backs the admin sidebar: `service`, `category`
and `note` each map to a listing from the matching service. Any other
entity name is a 404.
"""

from typing import Awaitable, Callable, Dict, List, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from astro.config import get_config_id
from astro.database import get_db_session
from astro.exceptions import NotFoundError
from astro.schemas.category import CategoryResponse
from astro.schemas.common import ErrorResponse
from astro.schemas.note import NoteResponse
from astro.schemas.service import ServiceResponse
from astro.services.category_service import category_service
from astro.services.note_service import note_service
from astro.services.service_catalog import service_catalog

router = APIRouter(prefix="/api", tags=["Manage"])

ManageItem = Union[ServiceResponse, CategoryResponse, NoteResponse]


class ManageListResponse(BaseModel):
    entity: str = Field(description="Entity being managed")
    total: int = Field(description="Number of items")
    items: List[ManageItem] = Field(default_factory=list)


Lister = Callable[[AsyncSession, str], Awaitable[list]]

MANAGEABLE_ENTITIES: Dict[str, Lister] = {
    "service": lambda db, config_id: service_catalog.list_services(db),
    "category": lambda db, config_id: category_service.list_categories(db),
    "note": lambda db, config_id: note_service.list_notes(db, config_id),
}


@router.get(
    "/manage/{entity}",
    response_model=ManageListResponse,
    responses={404: {"description": "Unknown entity", "model": ErrorResponse}},
    summary="List the items of one manageable entity",
)
async def list_manageable(
    entity: str,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> ManageListResponse:
    lister = MANAGEABLE_ENTITIES.get(entity.lower())
    if lister is None:
        raise NotFoundError(resource="entity", resource_id=entity)
    items = await lister(db, config_id)
    return ManageListResponse(entity=entity.lower(), total=len(items), items=items)
