from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

from bookcatalog.crud import books as books_crud
from bookcatalog.crud import categories as categories_crud
from bookcatalog.services.catalog.errors import CatalogUnavailableError
from bookcatalog.services.catalog.types import (
    Book,
    BookDraft,
    Category,
    CategoryDraft,
    PageQuery,
)
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors(db: Session, operation: str) -> Iterator[None]:
    """Re-raise connectivity/timeout failures as ``CatalogUnavailableError``.

    Anything else (integrity errors, programming errors) propagates unchanged.
    """
    try:
        yield
    except (OperationalError, PoolTimeoutError) as exc:
        db.rollback()
        logger.warning("catalog store unavailable during %s: %s", operation, exc)
        raise CatalogUnavailableError(operation, type(exc).__name__) from exc
    except DBAPIError as exc:
        if not exc.connection_invalidated:
            raise
        db.rollback()
        logger.warning("catalog store connection lost during %s: %s", operation, exc)
        raise CatalogUnavailableError(operation, "connection invalidated") from exc


class SqlBookStore:
    name = "sql"

    def __init__(self, db: Session):
        self._db = db

    def list_books(self) -> list[Book]:
        with translate_store_errors(self._db, "list_books"):
            rows = books_crud.list_books(self._db)
            return [Book.model_validate(r) for r in rows]

    def list_books_paged(self, query: PageQuery) -> list[Book]:
        with translate_store_errors(self._db, "list_books_paged"):
            rows = books_crud.list_books_paged(self._db, query=query)
            return [Book.model_validate(r) for r in rows]

    def get_book(self, book_id: int) -> Book | None:
        with translate_store_errors(self._db, "get_book"):
            row = books_crud.get_book(self._db, book_id=book_id)
            return Book.model_validate(row) if row is not None else None

    def add_book(self, draft: BookDraft) -> Book:
        with translate_store_errors(self._db, "add_book"):
            row = books_crud.create_book(self._db, draft=draft)
            return Book.model_validate(row)

    def update_book(self, book: Book) -> bool:
        with translate_store_errors(self._db, "update_book"):
            return books_crud.update_book(self._db, book_id=book.id, draft=book)

    def delete_book(self, book_id: int) -> bool:
        with translate_store_errors(self._db, "delete_book"):
            return books_crud.delete_book(self._db, book_id=book_id)


class SqlCategoryStore:
    name = "sql"

    def __init__(self, db: Session):
        self._db = db

    def list_categories(self) -> list[Category]:
        with translate_store_errors(self._db, "list_categories"):
            rows = categories_crud.list_categories(self._db)
            return [Category.model_validate(r) for r in rows]

    def get_category(self, category_id: int) -> Category | None:
        with translate_store_errors(self._db, "get_category"):
            row = categories_crud.get_category(self._db, category_id=category_id)
            return Category.model_validate(row) if row is not None else None

    def get_categories(self, category_ids: Iterable[int]) -> dict[int, Category]:
        with translate_store_errors(self._db, "get_categories"):
            rows = categories_crud.get_categories(self._db, category_ids=category_ids)
            return {cid: Category.model_validate(r) for cid, r in rows.items()}

    def add_category(self, draft: CategoryDraft) -> Category:
        with translate_store_errors(self._db, "add_category"):
            row = categories_crud.create_category(self._db, draft=draft)
            return Category.model_validate(row)

    def update_category(self, category: Category) -> bool:
        with translate_store_errors(self._db, "update_category"):
            return categories_crud.update_category(
                self._db, category_id=category.id, draft=category
            )

    def delete_category(self, category_id: int) -> bool:
        with translate_store_errors(self._db, "delete_category"):
            return categories_crud.delete_category(self._db, category_id=category_id)
