"""Configuration management for adminctl.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once per
process and is immutable afterwards.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables (prefixed with
    ``ADMINCTL_``) and .env files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADMINCTL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "adminctl"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./data/adminctl.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Default identity for `make-admin`
    admin_email: str = Field(
        default="user@example.com",
        description="Email of the account promoted by make-admin when --email is omitted",
    )
    admin_name: str = Field(
        default="Jane Doe",
        description="Display name used when make-admin creates the account",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure PostgreSQL URLs use the asyncpg driver."""
        if v and v.startswith("postgresql://"):
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("admin_email")
    @classmethod
    def normalize_admin_email(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
