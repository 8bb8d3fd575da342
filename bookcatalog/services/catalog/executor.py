"""Run a sanitized ``PageQuery``.

Both variants share one contract: case-insensitive substring filter on title
OR author, single-key ordering with NULLs first ascending / last descending,
``id`` ascending as the tie-break, then offset/limit.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from bookcatalog.models.book import BookRow
from bookcatalog.services.catalog.sanitizer import LIKE_ESCAPE
from bookcatalog.services.catalog.types import Book, PageQuery, SortColumn
from sqlalchemy import Select, or_, select
from sqlalchemy.orm import InstrumentedAttribute

B = TypeVar("B", bound=Book)

SORT_COLUMNS: dict[SortColumn, InstrumentedAttribute[Any]] = {
    SortColumn.title: BookRow.title,
    SortColumn.author: BookRow.author,
    SortColumn.isbn: BookRow.isbn,
    SortColumn.publication_year: BookRow.publication_year,
}

_ATTRS: dict[SortColumn, str] = {
    SortColumn.title: "title",
    SortColumn.author: "author",
    SortColumn.isbn: "isbn",
    SortColumn.publication_year: "publication_year",
}


def paged_books_stmt(q: PageQuery) -> Select[tuple[BookRow]]:
    """Build the paged SELECT. Only whitelisted columns reach ORDER BY."""
    stmt = select(BookRow)

    if q.has_search:
        stmt = stmt.where(
            or_(
                BookRow.title.ilike(q.search_pattern, escape=LIKE_ESCAPE),
                BookRow.author.ilike(q.search_pattern, escape=LIKE_ESCAPE),
            )
        )

    column = SORT_COLUMNS[q.sort_column]
    order = column.desc().nulls_last() if q.descending else column.asc().nulls_first()

    return stmt.order_by(order, BookRow.id.asc()).offset(q.offset).limit(q.limit)


def _matcher(q: PageQuery) -> Callable[[Book], bool]:
    # Unicode-aware folding. SQLite ILIKE folds ASCII only.
    needle = q.search_term.lower()

    def _matches(book: Book) -> bool:
        return needle in book.title.lower() or needle in book.author.lower()

    return _matches


def _sort_key(column: SortColumn) -> Callable[[Book], tuple[bool, Any]]:
    attr = _ATTRS[column]

    def _key(book: Book) -> tuple[bool, Any]:
        value = getattr(book, attr)
        # (False, ...) sorts before (True, ...): NULLs first when ascending.
        return (value is not None, value if value is not None else 0)

    return _key


def page_books(books: Iterable[B], q: PageQuery) -> list[B]:
    """In-memory equivalent of ``paged_books_stmt``."""
    rows = sorted(books, key=lambda b: b.id)
    if q.has_search:
        matches = _matcher(q)
        rows = [b for b in rows if matches(b)]

    # sorted() is stable under reverse=True, so id order survives for ties.
    rows = sorted(rows, key=_sort_key(q.sort_column), reverse=q.descending)
    return rows[q.offset : q.offset + q.limit]
