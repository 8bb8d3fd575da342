from __future__ import annotations

import logging

from bookcatalog.services.catalog.category_cache import CategoryNameCache
from bookcatalog.services.catalog.sanitizer import build_page_query
from bookcatalog.services.catalog.store import BookStore, CategoryStore
from bookcatalog.services.catalog.types import (
    Book,
    BookDraft,
    CatalogBook,
    Category,
    CategoryDraft,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Operations the HTTP layer (or any other caller) uses on the catalog.

    Not-found outcomes come back as ``None`` / ``False``. Store outages raise
    ``CatalogUnavailableError``; nothing here retries.
    """

    def __init__(self, books: BookStore, categories: CategoryStore):
        self.books = books
        self.categories = categories

    def new_cache(self) -> CategoryNameCache:
        return CategoryNameCache(self.categories)

    def _cache(self, cache: CategoryNameCache | None) -> CategoryNameCache:
        # An empty cache is falsy (it has __len__), so test for None explicitly.
        return cache if cache is not None else self.new_cache()

    def get_paged_books(
        self,
        page_number: int | None = 1,
        page_size: int | None = None,
        search_term: str | None = "",
        sort_column: str | None = "Title",
        sort_direction: str | None = "asc",
        *,
        cache: CategoryNameCache | None = None,
    ) -> list[CatalogBook]:
        query = build_page_query(
            page_number, page_size, search_term, sort_column, sort_direction
        )
        logger.debug(
            "paged query offset=%s limit=%s sort=%s %s search=%r",
            query.offset,
            query.limit,
            query.sort_column.value,
            query.sort_direction.value,
            query.search_term,
        )
        rows = self.books.list_books_paged(query)
        return self._cache(cache).annotate(rows)

    def get_all_books(self, *, cache: CategoryNameCache | None = None) -> list[CatalogBook]:
        return self._cache(cache).annotate(self.books.list_books())

    def get_book_by_id(
        self, book_id: int, *, cache: CategoryNameCache | None = None
    ) -> CatalogBook | None:
        book = self.books.get_book(book_id)
        if book is None:
            return None
        return self._cache(cache).annotate([book])[0]

    def add_book(self, draft: BookDraft) -> Book:
        book = self.books.add_book(draft)
        logger.info("book added id=%s", book.id)
        return book

    def update_book(self, book: Book) -> bool:
        updated = self.books.update_book(book)
        if not updated:
            logger.info("update skipped, book not found id=%s", book.id)
        return updated

    def delete_book(self, book_id: int) -> bool:
        deleted = self.books.delete_book(book_id)
        if not deleted:
            logger.info("delete skipped, book not found id=%s", book_id)
        return deleted

    def resolve_category_name(
        self, category_id: int, *, cache: CategoryNameCache | None = None
    ) -> str | None:
        return self._cache(cache).resolve(category_id)

    def category_exists(self, category_id: int) -> bool:
        return self.categories.get_category(category_id) is not None

    def get_all_categories(self) -> list[Category]:
        return self.categories.list_categories()

    def add_category(self, draft: CategoryDraft) -> Category:
        return self.categories.add_category(draft)
