"""
Astro — Category Model
=======================

A named group of services rendered as one column block on the start page.
"""

from typing import List, Optional

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from astro.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Icon name as understood by the front end's icon set
    icon: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Display order on the grid; ties fall back to id
    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    services: Mapped[List["Service"]] = relationship(
        back_populates="category",
        lazy="selectin",
        order_by="Service.id",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
