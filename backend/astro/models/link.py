"""
Astro — Link Model
===================

A bookmark shown in the dashboard's link bar (smaller than a service tile,
no category).
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base


class Link(Base):
    __tablename__ = "links"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    label: Mapped[str] = mapped_column(String(200), nullable=False)

    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    icon: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    target: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="_blank",
        server_default=text("'_blank'"),
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    config_id: Mapped[str] = mapped_column(
        ForeignKey("configs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    config: Mapped["Config"] = relationship(back_populates="links")

    def __repr__(self) -> str:
        return f"<Link(id={self.id}, label='{self.label}')>"
