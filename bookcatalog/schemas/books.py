from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BookIn(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    author: str = Field(min_length=1, max_length=255)
    isbn: str | None = Field(default=None, max_length=13)
    publication_year: int = 0
    quantity: int = Field(default=0, ge=0)
    category_id: int


class BookUpdateIn(BookIn):
    id: int


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    isbn: str | None
    publication_year: int
    quantity: int
    category_id: int
    category_name: str | None = None
