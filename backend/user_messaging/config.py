"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the service's fixed constants (port 3000, user_messages.sqlite)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Single-connection pool by default: one store handle shared by all requests
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///user_messages.sqlite"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    database_pool_size: int = 1
    database_max_overflow: int = 0

    # Declared FKs are not enforced unless the pragma is switched on
    sqlite_foreign_keys: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    public_url: str = "http://localhost:3000"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
