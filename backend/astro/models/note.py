"""
Astro — Note Model
===================

A short free-text note pinned to the dashboard.
"""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base
from astro.models._columns import created_at_column


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    config_id: Mapped[str] = mapped_column(
        ForeignKey("configs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    config: Mapped["Config"] = relationship(back_populates="notes")

    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"
