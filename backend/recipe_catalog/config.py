"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable by an environment variable of the same name
    - get_settings() is cached (lru_cache) — single instance per process
    - create_app() receives Settings explicitly; get_settings() is only its default
    - search_max_keywords is at least 1

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults target the docker-compose Postgres; tests override DATABASE_URL
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    """Recipe catalog settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://recipes:recipes@db:5432/recipes"
    database_pool_size: int = Field(20, ge=1)
    database_max_overflow: int = Field(10, ge=0)

    # Search
    search_max_keywords: int = Field(20, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Sync URLs (postgres://, sqlite://) rewritten to their async drivers."""
        if isinstance(v, str):
            for prefix, replacement in _ASYNC_SCHEMES.items():
                if v.startswith(prefix):
                    return replacement + v[len(prefix):]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
