from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# bookcatalog/core/config.py -> BASE_DIR == project root
BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", validation_alias="ENV")

    # Application
    api_name: str = Field(default="bookcatalog-api", validation_alias="API_NAME")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database
    database_url: str = Field(
        default="sqlite+pysqlite:///./bookcatalog.db",
        validation_alias="DATABASE_URL",
    )
    query_timeout_secs: float = Field(
        default=5.0, validation_alias="QUERY_TIMEOUT_SECS"
    )

    # Catalog
    catalog_store: Literal["sql", "memory"] = Field(
        default="sql", validation_alias="CATALOG_STORE"
    )
    default_page_size: int = Field(default=100, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=1000, validation_alias="MAX_PAGE_SIZE")
    seed_demo_data: bool = Field(default=False, validation_alias="SEED_DEMO_DATA")

    @field_validator("catalog_store", mode="before")
    @classmethod
    def normalize_catalog_store(cls, v: Any) -> str:
        if v is None:
            return "sql"
        if not isinstance(v, str):
            raise TypeError("CATALOG_STORE must be a string")
        s = v.strip().lower()
        if s not in {"sql", "memory"}:
            raise ValueError("CATALOG_STORE must be one of: sql, memory")
        return s

    @field_validator("max_page_size")
    @classmethod
    def positive_max_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_PAGE_SIZE must be at least 1")
        return v

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """
        Supported env formats:
          - JSON list: '["http://localhost:3000"]'
          - Comma-separated: 'http://localhost:3000, http://localhost:5173'
          - '*' wildcard
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if not isinstance(v, str):
            raise TypeError("cors_origins must be a string or list of strings")

        s = v.strip()
        if not s:
            return []
        if s == "*":
            return ["*"]

        if s.startswith("[") and s.endswith("]"):
            try:
                parsed = json.loads(s)
            except json.JSONDecodeError:
                s = s[1:-1]
            else:
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]

        parts = [p.strip().strip('"').strip("'") for p in s.split(",")]
        return [p for p in parts if p]

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_otlp_endpoint: str = Field(
        default="http://localhost:4318/v1/traces",
        validation_alias="OTEL_OTLP_ENDPOINT",
    )


settings = Settings()
