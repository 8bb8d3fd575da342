from __future__ import annotations

import logging

from bookcatalog.services.catalog.service import CatalogService
from bookcatalog.services.catalog.types import BookDraft, CategoryDraft

logger = logging.getLogger(__name__)

DEMO_CATEGORIES: list[tuple[str, str]] = [
    ("Fiction", "Fiction books including classics, novels, and stories."),
    ("Non-Fiction", "Non-fictional works including biographies, memoirs, and history."),
    ("Business", "Books on business strategies, leadership, and entrepreneurship."),
    ("Science Fiction", "Books set in futuristic or scientific settings, including space exploration."),
    ("Biography", "Books detailing the lives and experiences of individuals."),
    ("History", "Books on world history, political events, and historical figures."),
]

# (title, author, category name, isbn, publication year, quantity)
DEMO_BOOKS: list[tuple[str, str, str, str, int, int]] = [
    ("1984", "George Orwell", "Fiction", "9780451524935", 1949, 15),
    ("To Kill a Mockingbird", "Harper Lee", "Fiction", "9780061120084", 1960, 12),
    ("The Catcher in the Rye", "J.D. Salinger", "Fiction", "9780316769488", 1951, 10),
    ("Pride and Prejudice", "Jane Austen", "Fiction", "9780141439518", 1813, 14),
    ("Brave New World", "Aldous Huxley", "Fiction", "9780060850524", 1932, 8),
    ("The Great Gatsby", "F. Scott Fitzgerald", "Fiction", "9780743273565", 1925, 9),
    ("Sapiens: A Brief History of Humankind", "Yuval Noah Harari", "Non-Fiction", "9780062316110", 2011, 20),
    ("Educated: A Memoir", "Tara Westover", "Non-Fiction", "9780399590504", 2018, 7),
    ("Becoming", "Michelle Obama", "Non-Fiction", "9781524763138", 2018, 5),
    ("The Power of Habit", "Charles Duhigg", "Non-Fiction", "9781400069286", 2012, 10),
    ("The Immortal Life of Henrietta Lacks", "Rebecca Skloot", "Non-Fiction", "9781400052189", 2010, 6),
    ("The Art of War", "Sun Tzu", "Non-Fiction", "9781590302255", -500, 13),
    ("The Lean Startup", "Eric Ries", "Business", "9780307887894", 2011, 9),
    ("The Intelligent Investor", "Benjamin Graham", "Business", "9780060555665", 1949, 6),
    ("Good to Great", "Jim Collins", "Business", "9780066620992", 2001, 8),
    ("Start with Why", "Simon Sinek", "Business", "9781591846444", 2009, 7),
    ("The Hard Thing About Hard Things", "Ben Horowitz", "Business", "9780062273208", 2014, 5),
    ("Dune", "Frank Herbert", "Science Fiction", "9780441013593", 1965, 10),
    ("Ender's Game", "Orson Scott Card", "Science Fiction", "9780812550702", 1985, 14),
    ("The Left Hand of Darkness", "Ursula K. Le Guin", "Science Fiction", "9780441478125", 1969, 9),
    ("Neuromancer", "William Gibson", "Science Fiction", "9780441569595", 1984, 5),
    ("Foundation", "Isaac Asimov", "Science Fiction", "9780553293357", 1951, 12),
    ("Steve Jobs", "Walter Isaacson", "Biography", "9781451648539", 2011, 6),
    ("The Diary of a Young Girl", "Anne Frank", "Biography", "9780553296983", 1947, 15),
    ("Long Walk to Freedom", "Nelson Mandela", "Biography", "9780316548182", 1994, 8),
    ("The History of the Ancient World", "Susan Wise Bauer", "History", "9780393059748", 2007, 7),
    ("The Guns of August", "Barbara Tuchman", "History", "9780345476095", 1962, 10),
    ("A People's History of the United States", "Howard Zinn", "History", "9780060838654", 1980, 13),
    ("The Hobbit", "J.R.R. Tolkien", "Fiction", "9780345339683", 1937, 18),
    ("The Lord of the Rings", "J.R.R. Tolkien", "Fiction", "9780544003415", 1954, 12),
]


def seed_demo_catalog(service: CatalogService) -> int:
    """Insert the demo categories and books into an empty catalog.

    Returns the number of books inserted (0 when the catalog already has data).
    """
    if service.get_all_categories() or service.books.list_books():
        logger.info("catalog not empty; skipping demo seed")
        return 0

    ids: dict[str, int] = {}
    for name, description in DEMO_CATEGORIES:
        ids[name] = service.add_category(
            CategoryDraft(name=name, description=description)
        ).id

    for title, author, category, isbn, year, quantity in DEMO_BOOKS:
        service.add_book(
            BookDraft(
                title=title,
                author=author,
                isbn=isbn,
                publication_year=year,
                quantity=quantity,
                category_id=ids[category],
            )
        )

    logger.info("seeded %s demo books", len(DEMO_BOOKS))
    return len(DEMO_BOOKS)
