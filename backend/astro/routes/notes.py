"""Dashboard note routes."""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from astro.config import get_config_id
from astro.database import get_db_session
from astro.schemas.common import ErrorResponse
from astro.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from astro.services.note_service import note_service

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get("/note", response_model=List[NoteResponse], summary="List notes")
async def list_notes(
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db, config_id)


@router.post(
    "/note",
    status_code=201,
    response_model=NoteResponse,
    responses={404: {"description": "Config not seeded", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    config_id: str = Depends(get_config_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.create_note(db, config_id, payload)


@router.patch(
    "/note/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Update a note",
)
async def update_note(
    note_id: int,
    payload: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(db, note_id, payload)


@router.delete(
    "/note/{note_id}",
    status_code=204,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)
