"""
Astro — Service Catalog
========================

What:  CRUD for the start page tiles (the `Service` entity).

Validation:
    Creating a tile needs a name, an absolute http(s) URL and an existing
    category. All failing fields are reported together as
    ValidationError(errors={field: message}) → 400, mirroring what the
    new-service form shows next to each input.

Listing filters:
    category  only tiles in this category id
    tag       only tiles carrying this tag (case-insensitive)
    q         substring match on name or description (case-insensitive)
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.exceptions import ValidationError
from astro.models.category import Category
from astro.models.service import DEFAULT_LOGO, Service
from astro.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from astro.services.base import EntityService, translate_db_errors
from astro.services.logo_service import logo_service
from astro.validation import service_field_errors

logger = logging.getLogger(__name__)


def normalize_tags(tags: Optional[List[str]]) -> List[str]:
    """Strip, drop empties and de-duplicate while keeping first-seen order."""
    seen = []
    for tag in tags or []:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class ServiceCatalog(EntityService[Service]):
    model = Service
    resource = "service"

    async def list_models(
        self,
        db: AsyncSession,
        category: Optional[int] = None,
        tag: Optional[str] = None,
        q: Optional[str] = None,
    ) -> List[Service]:
        query = select(Service).order_by(asc(Service.id))
        if category is not None:
            query = query.where(Service.category_id == category)
        if q:
            pattern = f"%{q.lower()}%"
            query = query.where(
                or_(
                    func.lower(Service.name).like(pattern),
                    func.lower(func.coalesce(Service.description, "")).like(pattern),
                )
            )
        result = await db.execute(query)
        services = list(result.unique().scalars().all())

        # JSON containment differs per backend; filter tags in Python
        if tag:
            wanted = tag.strip().lower()
            services = [s for s in services if wanted in {t.lower() for t in s.tags or []}]
        return services

    async def list_services(
        self,
        db: AsyncSession,
        category: Optional[int] = None,
        tag: Optional[str] = None,
        q: Optional[str] = None,
    ) -> List[ServiceResponse]:
        async with translate_db_errors("list services"):
            services = await self.list_models(db, category=category, tag=tag, q=q)
        return [ServiceResponse.model_validate(s) for s in services]

    async def get_service(self, db: AsyncSession, service_id: int) -> ServiceResponse:
        async with translate_db_errors("retrieve the service", service_id=service_id):
            service = await self.get_or_404(db, service_id)
        return ServiceResponse.model_validate(service)

    async def _find_category(self, db: AsyncSession, category_id: Optional[int]) -> Optional[Category]:
        if category_id is None:
            return None
        result = await db.execute(select(Category).where(Category.id == category_id))
        return result.scalar_one_or_none()

    async def create_service(self, db: AsyncSession, payload: ServiceCreate) -> ServiceResponse:
        async with translate_db_errors("create the service"):
            category = await self._find_category(db, payload.category)
            errors = service_field_errors(
                {"name": payload.name, "url": payload.url, "category": payload.category}
            )
            if "category" not in errors and category is None:
                errors["category"] = "The selected category does not exist"
            if errors:
                raise ValidationError(message="Service is invalid", errors=errors)

            service = Service(
                name=payload.name.strip(),
                description=payload.description,
                url=payload.url.strip(),
                tags=normalize_tags(payload.tags),
                target=payload.target,
                logo=payload.logo or DEFAULT_LOGO,
                category=category,
            )
            db.add(service)
            await db.flush()

        logger.info("Service created: %s (%s) in category %s", service.id, service.name, category.id)
        return ServiceResponse.model_validate(service)

    async def update_service(
        self, db: AsyncSession, service_id: int, payload: ServiceUpdate
    ) -> ServiceResponse:
        changes = payload.model_dump(exclude_unset=True)
        async with translate_db_errors("update the service", service_id=service_id):
            service = await self.get_or_404(db, service_id)

            errors = service_field_errors(
                {k: changes[k] for k in ("name", "url", "category") if k in changes},
                partial=True,
            )
            category = None
            if "category" in changes and "category" not in errors:
                category = await self._find_category(db, changes["category"])
                if category is None:
                    errors["category"] = "The selected category does not exist"
            if errors:
                raise ValidationError(message="Service is invalid", errors=errors)

            if "category" in changes:
                changes.pop("category")
                service.category = category
            if "tags" in changes:
                changes["tags"] = normalize_tags(changes["tags"])
            for key in ("name", "url"):
                if key in changes:
                    changes[key] = changes[key].strip()
            if "logo" in changes and not changes["logo"]:
                changes["logo"] = DEFAULT_LOGO
            previous_logo = service.logo
            self.apply_changes(service, changes)
            await db.flush()

        if "logo" in changes and previous_logo != service.logo:
            logo_service.discard_after_commit(db, previous_logo)
        return ServiceResponse.model_validate(service)

    async def delete_service(self, db: AsyncSession, service_id: int) -> None:
        async with translate_db_errors("delete the service", service_id=service_id):
            service = await self.get_or_404(db, service_id)
            await db.delete(service)
            await db.flush()
        logo_service.discard_after_commit(db, service.logo)
        logger.info("Service deleted: %s", service_id)


service_catalog = ServiceCatalog()
