"""
Astro — Shared Service Plumbing
================================

What:  Lookup-or-404 and error translation used by every entity service.
How:   Services wrap their bodies in `translate_db_errors`, which lets Astro
       exceptions through untouched and turns SQLAlchemy failures into a
       DatabaseError with a generic, client-safe message.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from astro.exceptions import DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@asynccontextmanager
async def translate_db_errors(action: str, **context: Any) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error while trying to %s: %s", action, str(e), exc_info=True)
        raise DatabaseError(
            message=f"Could not {action}. Please try again.",
            context={"error_type": type(e).__name__, **context},
        ) from e


class EntityService(Generic[ModelT]):
    """Base for services that own one ORM model."""

    model: Type[ModelT]
    resource: str = "resource"

    async def find(self, db: AsyncSession, entity_id: Any) -> Optional[ModelT]:
        result = await db.execute(select(self.model).where(self.model.id == entity_id))
        return result.unique().scalar_one_or_none()

    async def get_or_404(self, db: AsyncSession, entity_id: Any) -> ModelT:
        entity = await self.find(db, entity_id)
        if entity is None:
            raise NotFoundError(resource=self.resource, resource_id=str(entity_id))
        return entity

    @staticmethod
    def apply_changes(entity: Any, changes: dict) -> None:
        for key, value in changes.items():
            setattr(entity, key, value)
