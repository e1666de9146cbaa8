"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from qaboard.configs.api import ApiSettings
from qaboard.configs.base import BaseSettings
from qaboard.configs.client import ClientSettings
from qaboard.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    api: ApiSettings = ApiSettings()
    client: ClientSettings = ClientSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from qaboard.configs import get_settings
        settings = get_settings()
    """
    return Settings()
