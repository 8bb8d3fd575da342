from __future__ import annotations

from bookcatalog.api.deps import get_catalog_service
from bookcatalog.schemas.books import BookIn, BookOut, BookUpdateIn
from bookcatalog.services.catalog.seed import seed_demo_catalog
from bookcatalog.services.catalog.service import CatalogService
from bookcatalog.services.catalog.types import Book, BookDraft
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

router = APIRouter(prefix="/api", tags=["books"])


def _require_category(catalog: CatalogService, category_id: int) -> None:
    if not catalog.category_exists(category_id):
        raise HTTPException(status_code=400, detail="Unknown category")


@router.get("/books", response_model=list[BookOut])
def list_books(
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=100, alias="pageSize"),
    search_term: str = Query(default="", alias="searchTerm"),
    sort_column: str = Query(default="Title", alias="sortColumn"),
    sort_direction: str = Query(default="asc", alias="sortDirection"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    # Out-of-range paging and unknown sort values are normalized, not rejected.
    return catalog.get_paged_books(
        page_number, page_size, search_term, sort_column, sort_direction
    )


@router.get("/books/{book_id}", response_model=BookOut)
def get_book(book_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    book = catalog.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post("/books", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def add_book(payload: BookIn, catalog: CatalogService = Depends(get_catalog_service)):
    _require_category(catalog, payload.category_id)
    created = catalog.add_book(BookDraft.model_validate(payload.model_dump()))
    return catalog.get_book_by_id(created.id) or created


@router.put("/books/{book_id}", response_model=BookOut)
def update_book(
    book_id: int,
    payload: BookUpdateIn,
    catalog: CatalogService = Depends(get_catalog_service),
):
    if payload.id != book_id:
        raise HTTPException(status_code=400, detail="Book ID mismatch")
    _require_category(catalog, payload.category_id)

    if not catalog.update_book(Book.model_validate(payload.model_dump())):
        raise HTTPException(status_code=404, detail="Book not found")
    return catalog.get_book_by_id(book_id)


@router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    if not catalog.delete_book(book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/books/addPredefined")
def add_predefined_books(catalog: CatalogService = Depends(get_catalog_service)):
    """Load the demo catalog into an empty store."""
    return {"inserted": seed_demo_catalog(catalog)}
