"""
Astro — Link Service
=====================

CRUD for the dashboard's bookmark bar. Link URLs follow the same rule as
service URLs: absolute http(s).
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.exceptions import ValidationError
from astro.models.link import Link
from astro.schemas.link import LinkCreate, LinkResponse, LinkUpdate
from astro.services.base import EntityService, translate_db_errors
from astro.services.config_service import config_service
from astro.validation import SERVICE_MESSAGES, is_valid_url

logger = logging.getLogger(__name__)


def _check_url(url: str) -> str:
    cleaned = url.strip()
    if not is_valid_url(cleaned):
        raise ValidationError(message=SERVICE_MESSAGES["url_invalid"], field="url")
    return cleaned


class LinkService(EntityService[Link]):
    model = Link
    resource = "link"

    async def list_links(self, db: AsyncSession, config_id: str) -> List[LinkResponse]:
        async with translate_db_errors("list links", config_id=config_id):
            result = await db.execute(
                select(Link)
                .where(Link.config_id == config_id)
                .order_by(asc(Link.position), asc(Link.id))
            )
            links = list(result.scalars().all())
        return [LinkResponse.model_validate(link) for link in links]

    async def create_link(
        self, db: AsyncSession, config_id: str, payload: LinkCreate
    ) -> LinkResponse:
        url = _check_url(payload.url)
        async with translate_db_errors("create the link", config_id=config_id):
            config = await config_service.get_or_404(db, config_id)
            link = Link(
                label=payload.label.strip(),
                url=url,
                icon=payload.icon,
                target=payload.target,
                position=payload.position,
                config=config,
            )
            db.add(link)
            await db.flush()
        logger.info("Link created: %s (%s)", link.id, link.label)
        return LinkResponse.model_validate(link)

    async def update_link(
        self, db: AsyncSession, link_id: int, payload: LinkUpdate
    ) -> LinkResponse:
        changes = payload.model_dump(exclude_unset=True)
        if changes.get("url") is not None:
            changes["url"] = _check_url(changes["url"])
        async with translate_db_errors("update the link", link_id=link_id):
            link = await self.get_or_404(db, link_id)
            self.apply_changes(link, changes)
            await db.flush()
        return LinkResponse.model_validate(link)

    async def delete_link(self, db: AsyncSession, link_id: int) -> None:
        async with translate_db_errors("delete the link", link_id=link_id):
            link = await self.get_or_404(db, link_id)
            await db.delete(link)
            await db.flush()
        logger.info("Link deleted: %s", link_id)


link_service = LinkService()
