from __future__ import annotations

from bookcatalog.db.session import get_db
from bookcatalog.services.catalog.factory import build_catalog_service
from bookcatalog.services.catalog.service import CatalogService
from fastapi import Depends
from sqlalchemy.orm import Session


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return build_catalog_service(db)
