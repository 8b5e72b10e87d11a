"""
Astro — Service Model
======================

What:  One tile on the start page: a named URL with optional description,
       tags and logo, filed under a category.

Columns:
    - url defaults to "#" so a tile can exist before its address is known
    - tags is a JSON list of strings
    - target is the HTML anchor target; "" opens in the same tab
    - logo is a path below the logo storage root or a bundled placeholder
"""

from typing import List, Optional

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base
from astro.sample_data import PLACEHOLDER_LOGO as DEFAULT_LOGO

TARGET_TYPES = ("_blank", "_self", "_parent", "_top", "")


class Service(Base):
    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        default="#",
        server_default=text("'#'"),
    )

    tags: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)

    target: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="_blank",
        server_default=text("'_blank'"),
    )

    logo: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=DEFAULT_LOGO,
        server_default=text(f"'{DEFAULT_LOGO}'"),
    )

    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Eager: every service payload carries its category
    category: Mapped[Optional["Category"]] = relationship(
        back_populates="services",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, name='{self.name}', url='{self.url}')>"
