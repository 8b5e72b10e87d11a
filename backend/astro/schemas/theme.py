"""
Theme schemas.

A theme travels as four palette groups, matching what the front end's
styling layer reads (`theme.background.primary`, `theme.border.primary`, ...).
"""

from typing import Optional

from pydantic import BaseModel, Field


class Palette(BaseModel):
    primary: str = Field(min_length=1, max_length=64)
    secondary: Optional[str] = Field(default=None, max_length=64)


class ThemeResponse(BaseModel):
    id: str
    background: Palette
    text: Palette
    border: Palette
    accent: Palette

    model_config = {"from_attributes": True}


class ThemeCreate(BaseModel):
    id: str = Field(min_length=1, max_length=100, pattern=r"^[a-z0-9][a-z0-9_-]*$")
    background: Palette
    text: Palette
    border: Palette
    accent: Palette


class ThemeUpdate(BaseModel):
    background: Palette
    text: Palette
    border: Palette
    accent: Palette
