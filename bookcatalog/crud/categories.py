from __future__ import annotations

from typing import Iterable

from bookcatalog.models.category import CategoryRow
from bookcatalog.services.catalog.types import CategoryDraft
from sqlalchemy import select
from sqlalchemy.orm import Session


def list_categories(db: Session) -> list[CategoryRow]:
    stmt = select(CategoryRow).order_by(CategoryRow.id.asc())
    return list(db.execute(stmt).scalars().all())


def get_category(db: Session, *, category_id: int) -> CategoryRow | None:
    return db.get(CategoryRow, category_id)


def get_categories(db: Session, *, category_ids: Iterable[int]) -> dict[int, CategoryRow]:
    """Load several categories in one round trip, keyed by id."""
    ids = sorted(set(category_ids))
    if not ids:
        return {}
    rows = db.execute(select(CategoryRow).where(CategoryRow.id.in_(ids))).scalars().all()
    return {row.id: row for row in rows}


def create_category(db: Session, *, draft: CategoryDraft) -> CategoryRow:
    row = CategoryRow(name=draft.name, description=draft.description)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_category(db: Session, *, category_id: int, draft: CategoryDraft) -> bool:
    row = db.get(CategoryRow, category_id)
    if row is None:
        return False

    row.name = draft.name
    row.description = draft.description
    db.commit()
    return True


def delete_category(db: Session, *, category_id: int) -> bool:
    """Delete a category. Its books keep their (now dangling) reference."""
    row = db.get(CategoryRow, category_id)
    if row is None:
        return False

    db.delete(row)
    db.commit()
    return True
