from __future__ import annotations

import logging
from typing import Iterable, Sequence

from bookcatalog.services.catalog.store import CategoryStore
from bookcatalog.services.catalog.types import Book, CatalogBook

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "<missing category>"


MISSING = _Missing()


class CategoryNameCache:
    """Category id -> name memo for one batch or request.

    Create a fresh instance per request and pass it down explicitly; it is
    never shared between requests and is dropped with the request.

    A category that does not exist is remembered as ``MISSING`` (never as a
    name) and reported to callers as ``None``, so repeated lookups of a
    dangling id do not go back to the store.
    """

    def __init__(self, store: CategoryStore):
        self._store = store
        self._names: dict[int, str | _Missing] = {}
        self.store_lookups = 0

    def __contains__(self, category_id: int) -> bool:
        return category_id in self._names

    def __len__(self) -> int:
        return len(self._names)

    def is_missing(self, category_id: int) -> bool:
        return self._names.get(category_id) is MISSING

    def prime(self, category_ids: Iterable[int]) -> None:
        """Resolve every id not seen yet with a single store call."""
        pending = {cid for cid in category_ids if cid not in self._names}
        if not pending:
            return

        self.store_lookups += 1
        found = self._store.get_categories(pending)
        for cid in pending:
            category = found.get(cid)
            if category is None:
                logger.debug("dangling category reference: %s", cid)
                self._names[cid] = MISSING
            else:
                self._names[cid] = category.name

    def resolve(self, category_id: int) -> str | None:
        if category_id not in self._names:
            self.store_lookups += 1
            category = self._store.get_category(category_id)
            if category is None:
                logger.debug("dangling category reference: %s", category_id)
                self._names[category_id] = MISSING
            else:
                self._names[category_id] = category.name

        name = self._names[category_id]
        return None if isinstance(name, _Missing) else name

    def annotate(self, books: Sequence[Book]) -> list[CatalogBook]:
        self.prime(b.category_id for b in books)
        return [
            CatalogBook(
                **b.model_dump(include=set(Book.model_fields)),
                category_name=self.resolve(b.category_id),
            )
            for b in books
        ]
