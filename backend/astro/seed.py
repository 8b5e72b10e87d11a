"""
Astro — Database Seeding
=========================

What:  Writes the sample dashboard from `astro.sample_data` on first start.
Who:   `bootstrap_data()` in main.py when settings.seed_sample_data is on.

Seeding is idempotent: an existing config row is left untouched, and
built-in themes are only added when their id is free.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from astro.models import Category, Config, Link, Note, Service, Theme
from astro.sample_data import SAMPLE_CONFIG, SAMPLE_THEMES

logger = logging.getLogger(__name__)


async def seed_database(db: AsyncSession, config_id: str) -> bool:
    """
    Insert the sample dashboard under `config_id` if it does not exist.

    Returns:
        True when anything was inserted.
    """
    existing = await db.execute(select(Config).where(Config.id == config_id))
    if existing.scalar_one_or_none() is not None:
        logger.debug("Config '%s' already present; skipping seed", config_id)
        return False

    config = Config(
        id=config_id,
        title=SAMPLE_CONFIG["title"],
        subtitle=SAMPLE_CONFIG["subtitle"],
        columns=SAMPLE_CONFIG["columns"],
        notes=[Note(**note) for note in SAMPLE_CONFIG["notes"]],
        links=[Link(**link) for link in SAMPLE_CONFIG["links"]],
        themes=[],
    )
    db.add(config)

    for theme_id, palette in SAMPLE_THEMES.items():
        taken = await db.execute(select(Theme.id).where(Theme.id == theme_id))
        if taken.scalar_one_or_none() is None:
            config.themes.append(Theme(id=theme_id, **palette))

    for position, entry in enumerate(SAMPLE_CONFIG["categories"]):
        category = Category(name=entry["name"], icon=entry.get("icon"), position=position, services=[])
        for service in entry["services"]:
            category.services.append(Service(**service))
        db.add(category)

    await db.flush()
    logger.info("Seeded sample dashboard '%s'", config_id)
    return True
