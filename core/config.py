"""
Application configuration using Pydantic settings.

Usage:
    from core.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Production deployments should at least set:
        - DATABASE_URL (PostgreSQL)
        - CORS_ALLOWED_ORIGINS
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App settings
    app_name: str = Field(default="Attribute Service", validation_alias="APP_NAME")
    api_prefix: str = Field(default="", validation_alias="API_PREFIX")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Database
    database_url: str = Field(default="sqlite:///attributes.db", validation_alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, validation_alias="DB_MAX_OVERFLOW")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")

    # Pagination
    default_page_size: int = Field(default=20, ge=1, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, validation_alias="MAX_PAGE_SIZE")
    max_page: int = Field(default=1_000_000, ge=1, validation_alias="MAX_PAGE")

    # CORS
    cors_allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ALLOWED_ORIGINS")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown ones."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL '{v}'")
        return level

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def validate_production_config(self) -> tuple[List[str], List[str]]:
        """
        Validate configuration for production deployment.

        Returns:
            Tuple of (errors, warnings) - errors are fatal, warnings are advisory
        """
        errors = []
        warnings = []

        if self.database_url.startswith("sqlite"):
            warnings.append(
                "DATABASE_URL points at SQLite. Use PostgreSQL for concurrent writers."
            )
        if self.default_page_size > self.max_page_size:
            errors.append("DEFAULT_PAGE_SIZE cannot exceed MAX_PAGE_SIZE")
        if "localhost" in self.cors_allowed_origins:
            warnings.append("CORS_ALLOWED_ORIGINS still allows localhost")

        return errors, warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
