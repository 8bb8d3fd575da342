from __future__ import annotations

from bookcatalog.api.deps import get_catalog_service
from bookcatalog.schemas.categories import CategoryOut
from bookcatalog.services.catalog.service import CatalogService
from fastapi import APIRouter, Depends

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories", response_model=list[CategoryOut])
def list_categories(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.get_all_categories()
