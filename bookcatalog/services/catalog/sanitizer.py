"""Turn caller-supplied paging/search/sort values into a ``PageQuery``.

Sort column and direction select query *structure*, so they are mapped onto a
fixed whitelist (case-insensitive, surrounding whitespace ignored) and fall
back to ``Title`` / ``ASC`` for anything else. The search term and the paging
bounds only ever travel as bound values.

Paging policy: non-positive ``page_number`` / ``page_size`` are clamped to 1
and ``page_size`` is capped at ``max_page_size``. The offset is capped so
that offset + limit fits a signed 64-bit integer; such a page is always past
the end and comes back empty. Nothing here raises.
"""

from __future__ import annotations

from bookcatalog.core.config import settings
from bookcatalog.services.catalog.types import PageQuery, SortColumn, SortDirection

DEFAULT_SORT_COLUMN = SortColumn.title
DEFAULT_SORT_DIRECTION = SortDirection.asc

LIKE_ESCAPE = "\\"

# Largest OFFSET + LIMIT the SQL backends accept (signed BIGINT).
MAX_OFFSET_END = 2**63 - 1

_COLUMNS: dict[str, SortColumn] = {c.value.lower(): c for c in SortColumn}
_DIRECTIONS: dict[str, SortDirection] = {d.value.lower(): d for d in SortDirection}


def _key(raw: object) -> str | None:
    if not isinstance(raw, str):
        return None
    return raw.strip().lower()


def resolve_sort_column(raw: object) -> SortColumn:
    key = _key(raw)
    if key is None:
        return DEFAULT_SORT_COLUMN
    return _COLUMNS.get(key, DEFAULT_SORT_COLUMN)


def resolve_sort_direction(raw: object) -> SortDirection:
    key = _key(raw)
    if key is None:
        return DEFAULT_SORT_DIRECTION
    return _DIRECTIONS.get(key, DEFAULT_SORT_DIRECTION)


def clamp_page(
    page_number: int | None, page_size: int | None, *, max_page_size: int | None = None
) -> tuple[int, int]:
    cap = max_page_size if max_page_size is not None else settings.max_page_size
    number = page_number if page_number is not None else 1
    size = page_size if page_size is not None else settings.default_page_size
    return max(1, number), min(max(1, size), max(1, cap))


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_search_pattern(term: str) -> str:
    return f"%{escape_like(term)}%"


def build_page_query(
    page_number: int | None = 1,
    page_size: int | None = None,
    search_term: str | None = "",
    sort_column: object = DEFAULT_SORT_COLUMN.value,
    sort_direction: object = DEFAULT_SORT_DIRECTION.value,
    *,
    max_page_size: int | None = None,
) -> PageQuery:
    number, size = clamp_page(page_number, page_size, max_page_size=max_page_size)
    term = search_term if isinstance(search_term, str) else ""

    offset = min((number - 1) * size, max(0, MAX_OFFSET_END - size))

    return PageQuery(
        offset=offset,
        limit=size,
        search_term=term,
        search_pattern=build_search_pattern(term),
        sort_column=resolve_sort_column(sort_column),
        sort_direction=resolve_sort_direction(sort_direction),
    )
