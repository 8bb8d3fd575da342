from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from bookcatalog.api.errors import install_error_handlers
from bookcatalog.api.router import api_router
from bookcatalog.core.config import settings
from bookcatalog.core.logging import configure_logging
from bookcatalog.core.otel import init_otel
from bookcatalog.db.session import SessionLocal, init_db
from bookcatalog.services.catalog.factory import build_catalog_service
from bookcatalog.services.catalog.seed import seed_demo_catalog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def _seed_if_enabled() -> None:
    if not settings.seed_demo_data:
        return
    db = SessionLocal()
    try:
        seed_demo_catalog(build_catalog_service(db))
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    if settings.catalog_store == "sql":
        init_db()
    _seed_if_enabled()
    logger.info("%s started (store=%s)", settings.api_name, settings.catalog_store)
    yield


app = FastAPI(title=settings.api_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)
app.include_router(api_router)

init_otel(app)
