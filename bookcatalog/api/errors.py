from __future__ import annotations

import logging

from bookcatalog.services.catalog.errors import CatalogUnavailableError
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

RETRY_AFTER_SECS = 5


async def catalog_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Catalog temporarily unavailable"},
        headers={"Retry-After": str(RETRY_AFTER_SECS)},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogUnavailableError, catalog_unavailable_handler)
