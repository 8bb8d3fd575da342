from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortColumn(str, Enum):
    title = "Title"
    author = "Author"
    isbn = "ISBN"
    publication_year = "PublicationYear"


class SortDirection(str, Enum):
    asc = "ASC"
    desc = "DESC"


class CategoryDraft(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=500)


class Category(CategoryDraft):
    id: int


class BookDraft(BaseModel):
    """Every writable field of a book; the store assigns the id."""

    model_config = ConfigDict(from_attributes=True)

    title: str = Field(min_length=1, max_length=255)
    author: str = Field(min_length=1, max_length=255)
    isbn: str | None = Field(default=None, max_length=13)
    publication_year: int = 0
    quantity: int = Field(default=0, ge=0)
    category_id: int


class Book(BookDraft):
    id: int


class CatalogBook(Book):
    # None when the category reference is dangling.
    category_name: str | None = None


@dataclass(frozen=True)
class PageQuery:
    """Paging, search and sort values that are safe to hand to a store."""

    offset: int
    limit: int
    search_term: str
    search_pattern: str
    sort_column: SortColumn
    sort_direction: SortDirection

    @property
    def has_search(self) -> bool:
        return bool(self.search_term)

    @property
    def descending(self) -> bool:
        return self.sort_direction is SortDirection.desc
