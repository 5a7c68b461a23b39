"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from premier_guard.configs.base import BaseSettings
from premier_guard.configs.classifier import ClassifierSettings
from premier_guard.configs.seeding import SeedSettings
from premier_guard.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    seeding: SeedSettings = Field(default_factory=SeedSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from premier_guard.configs import get_settings
        settings = get_settings()
    """
    return Settings()
