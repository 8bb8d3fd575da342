from __future__ import annotations

import threading
from typing import Iterable

from bookcatalog.services.catalog.executor import page_books
from bookcatalog.services.catalog.types import (
    Book,
    BookDraft,
    Category,
    CategoryDraft,
    PageQuery,
)


class InMemoryCatalog:
    """Process-local book and category records shared by both memory stores.

    Records are stored as immutable copies and handed out as copies, so
    callers can never mutate store state through a returned object.
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.books: dict[int, Book] = {}
        self.categories: dict[int, Category] = {}
        self._next_book_id = 1
        self._next_category_id = 1

    def next_book_id(self) -> int:
        bid = self._next_book_id
        self._next_book_id += 1
        return bid

    def next_category_id(self) -> int:
        cid = self._next_category_id
        self._next_category_id += 1
        return cid

    def clear(self) -> None:
        with self.lock:
            self.books.clear()
            self.categories.clear()
            self._next_book_id = 1
            self._next_category_id = 1


class InMemoryBookStore:
    name = "memory"

    def __init__(self, catalog: InMemoryCatalog):
        self._catalog = catalog

    def list_books(self) -> list[Book]:
        with self._catalog.lock:
            return [b.model_copy() for _, b in sorted(self._catalog.books.items())]

    def list_books_paged(self, query: PageQuery) -> list[Book]:
        with self._catalog.lock:
            snapshot = list(self._catalog.books.values())
        return [b.model_copy() for b in page_books(snapshot, query)]

    def get_book(self, book_id: int) -> Book | None:
        with self._catalog.lock:
            book = self._catalog.books.get(book_id)
        return book.model_copy() if book is not None else None

    def add_book(self, draft: BookDraft) -> Book:
        with self._catalog.lock:
            book = Book(
                id=self._catalog.next_book_id(),
                **draft.model_dump(include=set(BookDraft.model_fields)),
            )
            self._catalog.books[book.id] = book
        return book.model_copy()

    def update_book(self, book: Book) -> bool:
        with self._catalog.lock:
            if book.id not in self._catalog.books:
                return False
            self._catalog.books[book.id] = Book.model_validate(book.model_dump())
            return True

    def delete_book(self, book_id: int) -> bool:
        with self._catalog.lock:
            return self._catalog.books.pop(book_id, None) is not None


class InMemoryCategoryStore:
    name = "memory"

    def __init__(self, catalog: InMemoryCatalog):
        self._catalog = catalog

    def list_categories(self) -> list[Category]:
        with self._catalog.lock:
            return [c.model_copy() for _, c in sorted(self._catalog.categories.items())]

    def get_category(self, category_id: int) -> Category | None:
        with self._catalog.lock:
            category = self._catalog.categories.get(category_id)
        return category.model_copy() if category is not None else None

    def get_categories(self, category_ids: Iterable[int]) -> dict[int, Category]:
        wanted = set(category_ids)
        with self._catalog.lock:
            return {
                cid: c.model_copy()
                for cid, c in self._catalog.categories.items()
                if cid in wanted
            }

    def add_category(self, draft: CategoryDraft) -> Category:
        with self._catalog.lock:
            category = Category(
                id=self._catalog.next_category_id(),
                **draft.model_dump(include=set(CategoryDraft.model_fields)),
            )
            self._catalog.categories[category.id] = category
        return category.model_copy()

    def update_category(self, category: Category) -> bool:
        with self._catalog.lock:
            if category.id not in self._catalog.categories:
                return False
            self._catalog.categories[category.id] = Category.model_validate(
                category.model_dump()
            )
            return True

    def delete_category(self, category_id: int) -> bool:
        with self._catalog.lock:
            return self._catalog.categories.pop(category_id, None) is not None
