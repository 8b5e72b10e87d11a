"""Service (start page tile) schemas."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from astro.schemas.common import reject_null

TargetType = Literal["_blank", "_self", "_parent", "_top", ""]


class CategorySummary(BaseModel):
    id: int
    name: str
    icon: Optional[str] = None

    model_config = {"from_attributes": True}


class ServiceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    url: str
    tags: List[str] = Field(default_factory=list)
    target: str
    logo: str
    category: Optional[CategorySummary] = None

    model_config = {"from_attributes": True}

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v):
        return v or []


class ServiceCreate(BaseModel):
    """
    Body of POST /api/service.

    `name`, `url` and `category` are deliberately optional here: the service
    layer checks them together and reports every missing field in one 400
    rather than letting the first schema error win.
    """
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    url: Optional[str] = Field(default=None, max_length=2048)
    tags: List[str] = Field(default_factory=list)
    target: TargetType = "_blank"
    logo: Optional[str] = Field(default=None, max_length=255)
    category: Optional[int] = Field(default=None, description="Category id")


class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    url: Optional[str] = Field(default=None, max_length=2048)
    tags: Optional[List[str]] = None
    target: Optional[TargetType] = None
    logo: Optional[str] = Field(default=None, max_length=255)
    category: Optional[int] = None

    @field_validator("target")
    @classmethod
    def target_not_null(cls, v):
        return reject_null(v)
