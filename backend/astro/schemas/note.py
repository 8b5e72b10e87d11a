"""Note schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from astro.schemas.common import reject_null


class NoteResponse(BaseModel):
    id: int
    title: str
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}


class NoteCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = ""


class NoteUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = None

    @field_validator("title", "content")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)
