from __future__ import annotations

from typing import Any, Generator

from bookcatalog.core.config import settings
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker


def _engine_kwargs(database_url: str, timeout_secs: float) -> dict[str, Any]:
    url = make_url(database_url)
    kwargs: dict[str, Any] = {"pool_pre_ping": True}

    if url.get_backend_name() == "sqlite":
        # sqlite waits this long on a locked database before raising
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": timeout_secs}
    else:
        kwargs["pool_timeout"] = timeout_secs
        if url.get_backend_name() == "postgresql":
            timeout_ms = int(timeout_secs * 1000)
            kwargs["connect_args"] = {"options": f"-c statement_timeout={timeout_ms}"}
    return kwargs


def build_engine(
    database_url: str | None = None, *, timeout_secs: float | None = None
) -> Engine:
    url = database_url or settings.database_url
    timeout = settings.query_timeout_secs if timeout_secs is None else timeout_secs
    return create_engine(url, **_engine_kwargs(url, timeout))


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None) -> None:
    """Create catalog tables that do not exist yet."""
    from bookcatalog.models import Base

    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
