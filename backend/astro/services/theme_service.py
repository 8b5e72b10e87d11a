"""
Astro — Theme Service
======================

CRUD for colour palettes. Theme ids are chosen by the user (they are what
the device-local `activeTheme` preference stores), so creating an id that
already exists is a conflict rather than an upsert.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.exceptions import ConflictError
from astro.models.theme import PALETTE_GROUPS, Theme
from astro.schemas.theme import ThemeCreate, ThemeResponse, ThemeUpdate
from astro.services.base import EntityService, translate_db_errors
from astro.services.config_service import config_service

logger = logging.getLogger(__name__)


class ThemeService(EntityService[Theme]):
    model = Theme
    resource = "theme"

    async def list_themes(self, db: AsyncSession) -> List[ThemeResponse]:
        async with translate_db_errors("list themes"):
            result = await db.execute(select(Theme).order_by(asc(Theme.id)))
            themes = list(result.scalars().all())
        return [ThemeResponse.model_validate(t) for t in themes]

    async def get_theme(self, db: AsyncSession, theme_id: str) -> ThemeResponse:
        async with translate_db_errors("retrieve the theme", theme_id=theme_id):
            theme = await self.get_or_404(db, theme_id)
        return ThemeResponse.model_validate(theme)

    async def create_theme(
        self, db: AsyncSession, config_id: str, payload: ThemeCreate
    ) -> ThemeResponse:
        async with translate_db_errors("create the theme", theme_id=payload.id):
            if await self.find(db, payload.id) is not None:
                raise ConflictError(
                    message=f"A theme with id '{payload.id}' already exists",
                    context={"theme_id": payload.id},
                )
            config = await config_service.get_or_404(db, config_id)
            theme = Theme(id=payload.id, config=config)
            self._set_palette(theme, payload)
            db.add(theme)
            await db.flush()
        logger.info("Theme created: %s", theme.id)
        return ThemeResponse.model_validate(theme)

    async def replace_theme(
        self, db: AsyncSession, theme_id: str, payload: ThemeUpdate
    ) -> ThemeResponse:
        async with translate_db_errors("update the theme", theme_id=theme_id):
            theme = await self.get_or_404(db, theme_id)
            self._set_palette(theme, payload)
            await db.flush()
        return ThemeResponse.model_validate(theme)

    async def delete_theme(self, db: AsyncSession, theme_id: str) -> None:
        async with translate_db_errors("delete the theme", theme_id=theme_id):
            theme = await self.get_or_404(db, theme_id)
            await db.delete(theme)
            await db.flush()
        logger.info("Theme deleted: %s", theme_id)

    @staticmethod
    def _set_palette(theme: Theme, payload) -> None:
        for group in PALETTE_GROUPS:
            setattr(theme, group, getattr(payload, group).model_dump())


theme_service = ThemeService()
