from __future__ import annotations

from functools import lru_cache

from bookcatalog.core.config import settings
from bookcatalog.services.catalog.memory_store import (
    InMemoryBookStore,
    InMemoryCatalog,
    InMemoryCategoryStore,
)
from bookcatalog.services.catalog.service import CatalogService
from bookcatalog.services.catalog.sql_store import SqlBookStore, SqlCategoryStore
from sqlalchemy.orm import Session


@lru_cache
def get_memory_catalog() -> InMemoryCatalog:
    return InMemoryCatalog()


def build_catalog_service(db: Session | None, store: str | None = None) -> CatalogService:
    """Compose a request-scoped service over the configured store."""
    kind = store or settings.catalog_store
    if kind == "memory":
        catalog = get_memory_catalog()
        return CatalogService(InMemoryBookStore(catalog), InMemoryCategoryStore(catalog))
    if kind == "sql":
        if db is None:
            raise ValueError("The sql catalog store needs a database session")
        return CatalogService(SqlBookStore(db), SqlCategoryStore(db))
    raise ValueError(f"Unknown catalog store: {kind}")
