"""Centralized configuration for the movie catalog API.

Configuration strategy:
- CRITICAL settings (JWT secret): require explicit .env configuration.
  No default. Raises ValidationError if missing.
- INFRASTRUCTURE settings (logging, database pool, API ports): safe defaults,
  overridable via .env.

Usage:
    from moviedb.settings import settings

    settings.database.sync_url
    settings.security.jwt_algorithm
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moviedb.settings.api import APISettings, CORSSettings, SecuritySettings
from moviedb.settings.base import LoggingSettings, get_project_root
from moviedb.settings.database import DatabaseSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "DatabaseSettings",
    "APISettings",
    "SecuritySettings",
    "CORSSettings",
    "get_masked_settings",
    "get_project_root",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from moviedb.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


def get_masked_settings() -> dict[str, Any]:
    """Return settings dict with sensitive values masked.

    Returns:
        Configuration dictionary safe for logging.
    """
    config = settings.model_dump()
    mask = "***MASKED***"

    secrets = [
        ("database", "password"),
        ("database", "url"),
        ("security", "jwt_secret_key"),
    ]

    for section, key in secrets:
        if section in config and key in config[section] and config[section][key]:
            config[section][key] = mask

    return config
