import pytest
from bookcatalog.services.catalog.types import Book, BookDraft, CategoryDraft
from pydantic import ValidationError


def _draft(category_id: int, **overrides) -> BookDraft:
    fields = dict(
        title="A Time to Love and a Time to Die",
        author="Erich Maria Remarque",
        isbn="9780449213926",
        publication_year=1954,
        quantity=10,
        category_id=category_id,
    )
    fields.update(overrides)
    return BookDraft(**fields)


def test_get_all_books(catalog, seeded):
    books = catalog.get_all_books()
    assert len(books) == 4
    assert [b.id for b in books] == sorted(b.id for b in books)


def test_get_book_by_id_attaches_category(catalog, seeded):
    book = catalog.get_book_by_id(seeded["The Shining"])
    assert book is not None
    assert book.title == "The Shining"
    assert book.author == "Stephen King"
    assert book.category_name == "Fiction"


def test_get_missing_book_is_absent(catalog, seeded):
    assert catalog.get_book_by_id(999_999) is None


def test_add_then_get_round_trip(catalog, seeded):
    added = catalog.add_book(_draft(seeded["Fiction"]))

    fetched = catalog.get_book_by_id(added.id)
    assert fetched is not None
    assert Book.model_validate(fetched.model_dump(exclude={"category_name"})) == added
    assert added.isbn == "9780449213926"
    assert added.publication_year == 1954


def test_update_changes_exactly_the_updated_fields(catalog, seeded):
    before = catalog.get_book_by_id(seeded["It"])
    changed = Book.model_validate(
        {**before.model_dump(exclude={"category_name"}), "title": "Updated Book Title"}
    )

    assert catalog.update_book(changed) is True

    after = catalog.get_book_by_id(seeded["It"])
    assert after.title == "Updated Book Title"
    assert after.model_dump(exclude={"title"}) == before.model_dump(exclude={"title"})


def test_update_is_a_full_overwrite(catalog, seeded):
    replacement = Book(
        id=seeded["It"],
        title="It (Anniversary Edition)",
        author="S. King",
        isbn=None,
        publication_year=2016,
        quantity=0,
        category_id=seeded["Non-Fiction"],
    )
    assert catalog.update_book(replacement) is True

    after = catalog.get_book_by_id(seeded["It"])
    assert after.isbn is None
    assert after.quantity == 0
    assert after.category_name == "Non-Fiction"


def test_update_missing_book_reports_not_found(catalog, seeded):
    ghost = Book(id=999_999, **_draft(seeded["Fiction"]).model_dump())
    assert catalog.update_book(ghost) is False
    assert len(catalog.get_all_books()) == 4


def test_delete_then_get_is_absent(catalog, seeded):
    assert catalog.delete_book(seeded["It"]) is True
    assert catalog.get_book_by_id(seeded["It"]) is None
    assert len(catalog.get_all_books()) == 3


def test_delete_missing_book_reports_not_found(catalog, seeded):
    assert catalog.delete_book(999_999) is False


def test_ids_are_store_assigned(catalog, seeded):
    a = catalog.add_book(_draft(seeded["Fiction"]))
    b = catalog.add_book(_draft(seeded["Fiction"]))
    assert a.id != b.id


def test_dangling_category_reads_as_absent(catalog, seeded):
    orphan = catalog.add_book(_draft(seeded["Fiction"]))
    assert catalog.categories.delete_category(seeded["Fiction"]) is True

    book = catalog.get_book_by_id(orphan.id)
    assert book is not None
    assert book.category_name is None
    assert catalog.resolve_category_name(seeded["Fiction"]) is None


def test_categories_round_trip(catalog):
    created = catalog.add_category(CategoryDraft(name="History", description=None))
    assert [c.name for c in catalog.get_all_categories()] == ["History"]

    created.description = "World history"
    assert catalog.categories.update_category(created) is True
    assert catalog.categories.get_category(created.id).description == "World history"
    assert catalog.categories.delete_category(created.id) is True
    assert catalog.categories.delete_category(created.id) is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"title": "x" * 256},
        {"author": ""},
        {"isbn": "97804492139261"},
        {"quantity": -1},
    ],
)
def test_draft_enforces_field_limits(overrides):
    with pytest.raises(ValidationError):
        _draft(1, **overrides)


def test_category_draft_limits():
    with pytest.raises(ValidationError):
        CategoryDraft(name="")
    with pytest.raises(ValidationError):
        CategoryDraft(name="ok", description="d" * 501)
