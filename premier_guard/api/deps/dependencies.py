"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: premier_guard.configs, premier_guard.application, premier_guard.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from premier_guard.configs import Settings, get_settings
from premier_guard.application.classifier_service import TeamClassifier
from premier_guard.boundary.vdb.team_index_client import TeamIndexClient


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._index_client = None
        self._classifier = None

    @property
    def settings(self) -> Settings:
        """Settings the cached services are built from."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def index_client(self) -> TeamIndexClient:
        """Get cached team index client."""
        if self._index_client is None:
            self._index_client = TeamIndexClient(self.settings.vector_store)
        return self._index_client

    @property
    def classifier(self) -> TeamClassifier:
        """Get cached team classifier."""
        if self._classifier is None:
            self._classifier = TeamClassifier(
                settings=self.settings.classifier,
                index=self.index_client,
            )
        return self._classifier

    def clear(self) -> None:
        """Clear all cached instances."""
        self._index_client = None
        self._classifier = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_team_classifier() -> TeamClassifier:
    """
    Get team classifier instance.

    Returns:
        TeamClassifier: Classifier wired to the configured team index
    """
    return get_service_cache().classifier
