# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the resolved configuration.
# These are injected into route handlers using Depends() and can be replaced
# through app.dependency_overrides in tests.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_profiles, get_settings
from core.models.profile import ProfileState


def get_app_settings() -> Settings:
    """
    Get the application settings.

    Returns the settings resolved once at startup.
    """
    return get_settings()


def get_active_profiles() -> ProfileState:
    """Get the active and default profile names."""
    return get_profiles()


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ProfilesDep = Annotated[ProfileState, Depends(get_active_profiles)]
