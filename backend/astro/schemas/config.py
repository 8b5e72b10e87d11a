"""Config schemas: the full dashboard payload returned by GET /api/config."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from astro.schemas.category import CategoryResponse
from astro.schemas.common import reject_null
from astro.schemas.link import LinkResponse
from astro.schemas.note import NoteResponse
from astro.schemas.theme import ThemeResponse


class ConfigResponse(BaseModel):
    """
    Everything a start page needs in one round trip.

    Categories are not owned by a config row; an install renders all of
    them, ordered by position.
    """
    id: str
    title: str
    subtitle: Optional[str] = None
    columns: int
    created_at: datetime
    updated_at: datetime
    categories: List[CategoryResponse] = Field(default_factory=list)
    notes: List[NoteResponse] = Field(default_factory=list)
    links: List[LinkResponse] = Field(default_factory=list)
    themes: List[ThemeResponse] = Field(default_factory=list)


class ConfigUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    subtitle: Optional[str] = Field(default=None, max_length=255)
    columns: Optional[int] = Field(default=None, ge=1, le=12)

    @field_validator("title", "columns")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)
