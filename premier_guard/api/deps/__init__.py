"""FastAPI dependency providers."""

from .dependencies import (
    get_service_cache,
    get_settings_dependency,
    get_team_classifier,
)

__all__ = ["get_service_cache", "get_settings_dependency", "get_team_classifier"]
