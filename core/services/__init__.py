# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .config_service import ConfigService, PROFILE_CATALOG, lookup_profile

__all__ = [
    "ConfigService",
    "PROFILE_CATALOG",
    "lookup_profile",
]
