"""
Astro — Config Service
=======================

What:  Builds the dashboard payload behind GET /api/config and applies
       title/subtitle/column edits.

The payload is what the client-side config store mirrors: one round trip
returns the config row, every category with its services, and the
config's notes, links and themes.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.models.config import Config
from astro.schemas.category import CategoryResponse
from astro.schemas.config import ConfigResponse, ConfigUpdate
from astro.schemas.link import LinkResponse
from astro.schemas.note import NoteResponse
from astro.schemas.theme import ThemeResponse
from astro.services.base import EntityService, translate_db_errors
from astro.services.category_service import category_service

logger = logging.getLogger(__name__)


class ConfigService(EntityService[Config]):
    model = Config
    resource = "config"

    async def find(self, db: AsyncSession, entity_id):
        result = await db.execute(select(Config).where(Config.id == entity_id))
        return result.scalar_one_or_none()

    async def get_config(self, db: AsyncSession, config_id: str) -> ConfigResponse:
        async with translate_db_errors("retrieve the dashboard config", config_id=config_id):
            config = await self.get_or_404(db, config_id)
            categories = await category_service.list_models(db)

        return ConfigResponse(
            id=config.id,
            title=config.title,
            subtitle=config.subtitle,
            columns=config.columns,
            created_at=config.created_at,
            updated_at=config.updated_at,
            categories=[CategoryResponse.model_validate(c) for c in categories],
            notes=[NoteResponse.model_validate(n) for n in config.notes],
            links=[LinkResponse.model_validate(link) for link in config.links],
            themes=[ThemeResponse.model_validate(t) for t in config.themes],
        )

    async def update_config(
        self, db: AsyncSession, config_id: str, payload: ConfigUpdate
    ) -> ConfigResponse:
        changes = payload.model_dump(exclude_unset=True)
        async with translate_db_errors("update the dashboard config", config_id=config_id):
            config = await self.get_or_404(db, config_id)
            if "title" in changes and changes["title"] is not None:
                changes["title"] = changes["title"].strip()
            self.apply_changes(config, changes)
            await db.flush()
        logger.info("Config %s updated: %s", config_id, sorted(changes))
        return await self.get_config(db, config_id)


config_service = ConfigService()
