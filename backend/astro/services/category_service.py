"""
Astro — Category Service
=========================

CRUD for service categories. A category that still holds services cannot be
deleted; the caller has to move or delete its services first.
"""

import logging
from typing import List

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.exceptions import ConflictError
from astro.models.category import Category
from astro.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from astro.services.base import EntityService, translate_db_errors

logger = logging.getLogger(__name__)


class CategoryService(EntityService[Category]):
    model = Category
    resource = "category"

    async def list_models(self, db: AsyncSession) -> List[Category]:
        result = await db.execute(
            select(Category).order_by(asc(Category.position), asc(Category.id))
        )
        return list(result.scalars().all())

    async def list_categories(self, db: AsyncSession) -> List[CategoryResponse]:
        async with translate_db_errors("list categories"):
            categories = await self.list_models(db)
        return [CategoryResponse.model_validate(c) for c in categories]

    async def get_category(self, db: AsyncSession, category_id: int) -> CategoryResponse:
        async with translate_db_errors("retrieve the category", category_id=category_id):
            category = await self.get_or_404(db, category_id)
        return CategoryResponse.model_validate(category)

    async def create_category(self, db: AsyncSession, payload: CategoryCreate) -> CategoryResponse:
        async with translate_db_errors("create the category"):
            category = Category(
                name=payload.name.strip(),
                description=payload.description,
                icon=payload.icon,
                position=payload.position,
                services=[],
            )
            db.add(category)
            await db.flush()
        logger.info("Category created: %s (%s)", category.id, category.name)
        return CategoryResponse.model_validate(category)

    async def update_category(
        self, db: AsyncSession, category_id: int, payload: CategoryUpdate
    ) -> CategoryResponse:
        async with translate_db_errors("update the category", category_id=category_id):
            category = await self.get_or_404(db, category_id)
            self.apply_changes(category, payload.model_dump(exclude_unset=True))
            await db.flush()
        return CategoryResponse.model_validate(category)

    async def delete_category(self, db: AsyncSession, category_id: int) -> None:
        async with translate_db_errors("delete the category", category_id=category_id):
            category = await self.get_or_404(db, category_id)
            if category.services:
                raise ConflictError(
                    message=(
                        f"Category '{category.name}' still has {len(category.services)} "
                        "service(s). Move or delete them first."
                    ),
                    context={"category_id": category_id, "services": len(category.services)},
                )
            await db.delete(category)
            await db.flush()
        logger.info("Category deleted: %s", category_id)


category_service = CategoryService()
