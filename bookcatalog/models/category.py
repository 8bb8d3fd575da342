from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookcatalog.models.base import Base

if TYPE_CHECKING:
    from bookcatalog.models.book import BookRow


class CategoryRow(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Navigational only: removing a category leaves its books in place.
    books: Mapped[list["BookRow"]] = relationship(
        "BookRow", back_populates="category", passive_deletes="all"
    )
