import os

# Point the app's module-level engine at a throwaway database before import.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("CATALOG_STORE", "sql")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from bookcatalog.db.session import get_db
from bookcatalog.main import app
from bookcatalog.models import Base
from bookcatalog.services.catalog.memory_store import (
    InMemoryBookStore,
    InMemoryCatalog,
    InMemoryCategoryStore,
)
from bookcatalog.services.catalog.service import CatalogService
from bookcatalog.services.catalog.sql_store import SqlBookStore, SqlCategoryStore
from bookcatalog.services.catalog.types import BookDraft, CategoryDraft
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture(scope="session")
def engine():
    # Prefer a dedicated Postgres DB for realism.
    # Override at runtime: TEST_DATABASE_URL=... pytest
    url = os.getenv("TEST_DATABASE_URL")
    if url:
        eng = create_engine(url, pool_pre_ping=True)
    else:
        eng = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)


@pytest.fixture()
def db_session(engine):
    connection = engine.connect()
    tx = connection.begin()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=connection
    )
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        tx.rollback()
        connection.close()


@pytest.fixture(params=["sql", "memory"])
def catalog(request, db_session) -> CatalogService:
    """A CatalogService over each store variant."""
    if request.param == "sql":
        return CatalogService(SqlBookStore(db_session), SqlCategoryStore(db_session))
    mem = InMemoryCatalog()
    return CatalogService(InMemoryBookStore(mem), InMemoryCategoryStore(mem))


def seed_four_books(catalog: CatalogService) -> dict[str, int]:
    """Two Fiction and two Non-Fiction books; returns ids keyed by name/title."""
    fiction = catalog.add_category(
        CategoryDraft(name="Fiction", description="Fiction books")
    )
    non_fiction = catalog.add_category(
        CategoryDraft(name="Non-Fiction", description="Non-Fiction books")
    )

    ids = {"Fiction": fiction.id, "Non-Fiction": non_fiction.id}
    for title, author, isbn, year, qty, cat in [
        ("The Shining", "Stephen King", "9780307743657", 1977, 10, fiction.id),
        ("It", "Stephen King", "9781501142970", 1986, 5, fiction.id),
        (
            "Clean Code: A Handbook of Agile Software Craftsmanship",
            "Robert C. Martin",
            "9780132350884",
            2008,
            8,
            non_fiction.id,
        ),
        (
            "The Pragmatic Programmer: Your Journey to Mastery",
            "Andrew Hunt, David Thomas",
            "9780201616224",
            1999,
            6,
            non_fiction.id,
        ),
    ]:
        book = catalog.add_book(
            BookDraft(
                title=title,
                author=author,
                isbn=isbn,
                publication_year=year,
                quantity=qty,
                category_id=cat,
            )
        )
        ids[title] = book.id
    return ids


@pytest.fixture()
def seeded(catalog) -> dict[str, int]:
    return seed_four_books(catalog)


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
