"""
Astro — Note Service
=====================

CRUD for the short notes pinned to a dashboard config.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.models.note import Note
from astro.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from astro.services.base import EntityService, translate_db_errors
from astro.services.config_service import config_service

logger = logging.getLogger(__name__)


class NoteService(EntityService[Note]):
    model = Note
    resource = "note"

    async def list_models(self, db: AsyncSession, config_id: str) -> List[Note]:
        result = await db.execute(
            select(Note).where(Note.config_id == config_id).order_by(asc(Note.id))
        )
        return list(result.scalars().all())

    async def list_notes(self, db: AsyncSession, config_id: str) -> List[NoteResponse]:
        async with translate_db_errors("list notes", config_id=config_id):
            notes = await self.list_models(db, config_id)
        return [NoteResponse.model_validate(n) for n in notes]

    async def create_note(
        self, db: AsyncSession, config_id: str, payload: NoteCreate
    ) -> NoteResponse:
        async with translate_db_errors("create the note", config_id=config_id):
            config = await config_service.get_or_404(db, config_id)
            note = Note(title=payload.title.strip(), content=payload.content, config=config)
            db.add(note)
            await db.flush()
        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self, db: AsyncSession, note_id: int, payload: NoteUpdate
    ) -> NoteResponse:
        async with translate_db_errors("update the note", note_id=note_id):
            note = await self.get_or_404(db, note_id)
            self.apply_changes(note, payload.model_dump(exclude_unset=True))
            await db.flush()
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        async with translate_db_errors("delete the note", note_id=note_id):
            note = await self.get_or_404(db, note_id)
            await db.delete(note)
            await db.flush()
        logger.info("Note deleted: %s", note_id)


note_service = NoteService()
