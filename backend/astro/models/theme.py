"""
Astro — Theme Model
====================

What:  A named colour palette ("dark", "light", or user-made).
How:   Four palette groups, each stored as a JSON object
       {"primary": "#...", "secondary": "#..."}.

The id doubles as the value of the device-local `activeTheme` preference,
which is why it is a readable string rather than a sequence number.
"""

from typing import Dict, Optional

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base

PALETTE_GROUPS = ("background", "text", "border", "accent")


class Theme(Base):
    __tablename__ = "themes"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)

    config_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("configs.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    config: Mapped[Optional["Config"]] = relationship(back_populates="themes")

    background: Mapped[Dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    text: Mapped[Dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    border: Mapped[Dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    accent: Mapped[Dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)

    def palette(self) -> Dict[str, Dict[str, str]]:
        return {group: dict(getattr(self, group) or {}) for group in PALETTE_GROUPS}

    def __repr__(self) -> str:
        return f"<Theme(id='{self.id}')>"
