"""Configuration via pydantic-settings.

Values are read from environment variables (and an optional .env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SQLITE_ASYNC_PREFIX = "sqlite+aiosqlite:///"


class DatabaseSettings(BaseSettings):
    """Reference-data database connection settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field(
        default=f"{_SQLITE_ASYNC_PREFIX}data.db",
        description="Async SQLAlchemy URL, or a plain path to a SQLite file",
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements")

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Accept a bare file path (DATABASE_URL=data.db) as a SQLite database."""
        v = v.strip()
        if "://" not in v:
            return f"{_SQLITE_ASYNC_PREFIX}{v}"
        return v


class ReferenceDataSettings(BaseSettings):
    """Source files and lookup behaviour for nations and cities."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    nations_file: Path = Field(
        default=Path("gi_nazioni.json"),
        description="Nations export from gardainformatica.it",
    )
    cities_file: Path = Field(
        default=Path("gi_comuni.json"),
        description="Municipalities export from gardainformatica.it",
    )
    search_limit: int = Field(default=5, ge=1, description="Max rows returned by a name search")


class CompletionSettings(BaseSettings):
    """Where shell completion scripts are written."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    complete_dir: Path = Field(default=Path("complete"))
    load_script: Path = Field(default=Path("load"))
    prog_name: str = Field(default="codicefiscale")


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.db.database_url
        settings.reference.search_limit
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="WARNING")

    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    reference: ReferenceDataSettings = Field(default_factory=ReferenceDataSettings)
    completion: CompletionSettings = Field(default_factory=CompletionSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
