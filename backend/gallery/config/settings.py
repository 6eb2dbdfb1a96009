"""
Application Settings using Pydantic Settings
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


ASYNC_DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "sqlite": "sqlite+aiosqlite",
}


def normalize_database_url(url: str) -> str:
    """Rewrite a plain connection string to use the async driver for its scheme."""
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    return f"{ASYNC_DRIVERS.get(scheme, scheme)}://{rest}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = Field(default="UI Component Gallery")
    APP_VERSION: str = Field(default="0.1.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Backend Server
    BACKEND_HOST: str = Field(default="localhost")
    BACKEND_PORT: int = Field(default=8000)

    # Catalog source: relational database or the static registry
    CATALOG_SOURCE: Literal["database", "static"] = Field(default="database")

    # Database
    DATABASE_URL: str | None = Field(default=None)
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_USER: str = Field(default="postgres")
    DB_PASSWORD: str = Field(default="postgres")
    DB_NAME: str = Field(default="component_gallery")

    @computed_field  # type: ignore[misc]
    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        """Async database URL, from DATABASE_URL or built from components."""
        if self.DATABASE_URL:
            return normalize_database_url(self.DATABASE_URL)
        return str(PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            path=self.DB_NAME,
        ))

    # Caller identification
    USER_HEADER: str = Field(default="X-User-Id")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")

    # CORS
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
