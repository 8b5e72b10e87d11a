"""
Astro — ORM Models
===================

Importing this package registers every table on `Base.metadata`
(used by Alembic autogenerate and `database.create_schema`).

Entity map:
    Config 1──* Note
    Config 1──* Link
    Config 1──* Theme
    Category 1──* Service
"""

from astro.models.category import Category
from astro.models.config import Config
from astro.models.link import Link
from astro.models.note import Note
from astro.models.service import Service, TARGET_TYPES
from astro.models.theme import Theme, PALETTE_GROUPS

__all__ = [
    "Category",
    "Config",
    "Link",
    "Note",
    "Service",
    "Theme",
    "TARGET_TYPES",
    "PALETTE_GROUPS",
]
