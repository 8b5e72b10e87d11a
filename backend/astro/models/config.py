"""
Astro — Config Model
=====================

What:  The dashboard itself: title, subtitle and grid width, plus the notes,
       links and themes that belong to it.
Why string primary key: an install addresses its dashboard by a stable,
       human-chosen id (`settings.config_id`, default "astro").
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base
from astro.models._columns import created_at_column, updated_at_column


class Config(Base):
    __tablename__ = "configs"

    id: Mapped[str] = mapped_column(String(200), primary_key=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    subtitle: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Number of category columns on the start page grid
    columns: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=4,
        server_default=text("4"),
    )

    created_at: Mapped[datetime] = created_at_column()
    updated_at: Mapped[datetime] = updated_at_column()

    # selectin: async sessions cannot lazy-load on attribute access
    notes: Mapped[List["Note"]] = relationship(
        back_populates="config",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Note.id",
    )
    links: Mapped[List["Link"]] = relationship(
        back_populates="config",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="[Link.position, Link.id]",
    )
    themes: Mapped[List["Theme"]] = relationship(
        back_populates="config",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Theme.id",
    )

    def __repr__(self) -> str:
        return f"<Config(id='{self.id}', title='{self.title}', columns={self.columns})>"
