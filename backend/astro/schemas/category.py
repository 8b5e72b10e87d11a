"""Category schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from astro.schemas.common import reject_null
from astro.schemas.service import ServiceResponse


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    position: int = 0
    services: List[ServiceResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    icon: Optional[str] = Field(default=None, max_length=100)
    position: int = Field(default=0, ge=0)


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    icon: Optional[str] = Field(default=None, max_length=100)
    position: Optional[int] = Field(default=None, ge=0)

    @field_validator("name", "position")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)
