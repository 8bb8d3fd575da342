from __future__ import annotations

from typing import Iterable, Protocol

from bookcatalog.services.catalog.types import (
    Book,
    BookDraft,
    Category,
    CategoryDraft,
    PageQuery,
)


class BookStore(Protocol):
    name: str

    def list_books(self) -> list[Book]: ...

    def list_books_paged(self, query: PageQuery) -> list[Book]: ...

    def get_book(self, book_id: int) -> Book | None: ...

    def add_book(self, draft: BookDraft) -> Book: ...

    def update_book(self, book: Book) -> bool: ...

    def delete_book(self, book_id: int) -> bool: ...


class CategoryStore(Protocol):
    name: str

    def list_categories(self) -> list[Category]: ...

    def get_category(self, category_id: int) -> Category | None: ...

    def get_categories(self, category_ids: Iterable[int]) -> dict[int, Category]: ...

    def add_category(self, draft: CategoryDraft) -> Category: ...

    def update_category(self, category: Category) -> bool: ...

    def delete_category(self, category_id: int) -> bool: ...
