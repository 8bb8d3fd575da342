import pytest
from bookcatalog.services.catalog.sanitizer import (
    MAX_OFFSET_END,
    build_page_query,
    build_search_pattern,
    clamp_page,
    resolve_sort_column,
    resolve_sort_direction,
)
from bookcatalog.services.catalog.types import SortColumn, SortDirection


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Title", SortColumn.title),
        ("Author", SortColumn.author),
        ("ISBN", SortColumn.isbn),
        ("PublicationYear", SortColumn.publication_year),
        ("author", SortColumn.author),
        ("isbn", SortColumn.isbn),
        ("PUBLICATIONYEAR", SortColumn.publication_year),
        ("  Author  ", SortColumn.author),
    ],
)
def test_sort_column_whitelist_is_case_insensitive(raw, expected):
    assert resolve_sort_column(raw) is expected


@pytest.mark.parametrize(
    "raw",
    [
        "InvalidColumn",
        "",
        None,
        42,
        "Quantity",
        "Id",
        "publication_year",
        "Title; DROP TABLE books;--",
        "'; DROP TABLE Books;--",
        "[Title]",
        "Title DESC",
    ],
)
def test_unknown_sort_column_falls_back_to_title(raw):
    assert resolve_sort_column(raw) is SortColumn.title


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ASC", SortDirection.asc),
        ("asc", SortDirection.asc),
        ("DESC", SortDirection.desc),
        ("desc", SortDirection.desc),
        (" Desc ", SortDirection.desc),
    ],
)
def test_sort_direction_whitelist(raw, expected):
    assert resolve_sort_direction(raw) is expected


@pytest.mark.parametrize(
    "raw", ["Up", "", None, "descending", "DESC; DROP TABLE books", "'; DROP TABLE Books;--"]
)
def test_unknown_sort_direction_falls_back_to_asc(raw):
    assert resolve_sort_direction(raw) is SortDirection.asc


def test_offset_is_zero_based():
    q = build_page_query(3, 25, "", "Title", "ASC")
    assert q.offset == 50
    assert q.limit == 25


def test_offset_is_capped_to_bigint_range():
    q = build_page_query(10**30, 1000, "", "Title", "ASC", max_page_size=1000)
    assert q.limit == 1000
    assert q.offset + q.limit == MAX_OFFSET_END

    # Ordinary pages are untouched.
    assert build_page_query(10**6, 10).offset == (10**6 - 1) * 10


@pytest.mark.parametrize(
    "page_number, page_size, expected",
    [
        (0, 10, (1, 10)),
        (-5, 10, (1, 10)),
        (2, 0, (2, 1)),
        (2, -3, (2, 1)),
        (0, 0, (1, 1)),
        (1, 5000, (1, 1000)),
    ],
)
def test_non_positive_paging_is_clamped(page_number, page_size, expected):
    assert clamp_page(page_number, page_size, max_page_size=1000) == expected


def test_page_size_cap_is_configurable():
    q = build_page_query(1, 500, max_page_size=50)
    assert q.limit == 50


def test_missing_paging_uses_defaults():
    number, size = clamp_page(None, None, max_page_size=1000)
    assert number == 1
    assert size == 100


def test_search_pattern_wraps_term():
    assert build_search_pattern("King") == "%King%"
    assert build_search_pattern("") == "%%"


def test_search_pattern_escapes_like_metacharacters():
    assert build_search_pattern("100%") == "%100\\%%"
    assert build_search_pattern("a_b") == "%a\\_b%"
    assert build_search_pattern("c:\\x") == "%c:\\\\x%"


def test_search_term_is_kept_verbatim_as_data():
    payload = "'; DROP TABLE Books;--"
    q = build_page_query(1, 2, payload, "Title", "ASC")
    assert q.search_term == payload
    assert q.search_pattern == f"%{payload}%"


def test_none_search_term_means_no_filter():
    q = build_page_query(1, 10, None)
    assert q.search_term == ""
    assert not q.has_search
