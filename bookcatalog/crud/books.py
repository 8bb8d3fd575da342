from __future__ import annotations

from bookcatalog.models.book import BookRow
from bookcatalog.services.catalog.executor import paged_books_stmt
from bookcatalog.services.catalog.types import BookDraft, PageQuery
from sqlalchemy import select
from sqlalchemy.orm import Session

_WRITABLE = ("title", "author", "isbn", "publication_year", "quantity", "category_id")


def list_books(db: Session) -> list[BookRow]:
    return list(db.execute(select(BookRow).order_by(BookRow.id.asc())).scalars().all())


def list_books_paged(db: Session, *, query: PageQuery) -> list[BookRow]:
    return list(db.execute(paged_books_stmt(query)).scalars().all())


def get_book(db: Session, *, book_id: int) -> BookRow | None:
    return db.get(BookRow, book_id)


def create_book(db: Session, *, draft: BookDraft) -> BookRow:
    row = BookRow(**draft.model_dump(include=set(_WRITABLE)))
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_book(db: Session, *, book_id: int, draft: BookDraft) -> bool:
    """Overwrite every writable field. Returns False when the book is missing."""
    row = db.get(BookRow, book_id)
    if row is None:
        return False

    for field in _WRITABLE:
        setattr(row, field, getattr(draft, field))
    db.commit()
    return True


def delete_book(db: Session, *, book_id: int) -> bool:
    row = db.get(BookRow, book_id)
    if row is None:
        return False

    db.delete(row)
    db.commit()
    return True
