from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookcatalog.models.base import Base
from bookcatalog.models.category import CategoryRow


class BookRow(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str | None] = mapped_column(String(13), nullable=True)

    # Negative values are BCE years.
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # No ON DELETE rule: dangling references are handled at read time.
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), index=True, nullable=False
    )

    category: Mapped[CategoryRow | None] = relationship(
        CategoryRow, back_populates="books"
    )


Index("ix_books_title", BookRow.title)
Index("ix_books_author", BookRow.author)
