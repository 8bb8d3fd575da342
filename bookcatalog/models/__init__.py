from bookcatalog.models.base import Base
from bookcatalog.models.book import BookRow
from bookcatalog.models.category import CategoryRow


__all__ = [
    "Base",
    "BookRow",
    "CategoryRow",
]
