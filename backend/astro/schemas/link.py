"""Link (bookmark bar) schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from astro.schemas.common import reject_null
from astro.schemas.service import TargetType


class LinkResponse(BaseModel):
    id: int
    label: str
    url: str
    icon: Optional[str] = None
    target: str
    position: int = 0

    model_config = {"from_attributes": True}


class LinkCreate(BaseModel):
    label: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=2048)
    icon: Optional[str] = Field(default=None, max_length=100)
    target: TargetType = "_blank"
    position: int = Field(default=0, ge=0)


class LinkUpdate(BaseModel):
    label: Optional[str] = Field(default=None, min_length=1, max_length=200)
    url: Optional[str] = Field(default=None, min_length=1, max_length=2048)
    icon: Optional[str] = Field(default=None, max_length=100)
    target: Optional[TargetType] = None
    position: Optional[int] = Field(default=None, ge=0)

    @field_validator("label", "url", "target", "position")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)
