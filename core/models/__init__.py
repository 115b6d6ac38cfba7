# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the schemas shared by the service layer and the API:
# - profile.py: Active/default profile state and profile descriptors
# - config.py: Redacted configuration views (info, profile, health)
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Profile Models - Environment modes
# -----------------------------------------------------------------------------
from .profile import (
    DEFAULT_JWT_SECRET,
    DEV_PROFILE,
    ProfileDescriptor,
    ProfileState,
)

# -----------------------------------------------------------------------------
# Config View Models - /config responses
# -----------------------------------------------------------------------------
from .config import (
    CacheInfo,
    CheckStatus,
    ConfigHealthResponse,
    ConfigInfoResponse,
    CorsInfo,
    HealthVerdict,
    MonitoringInfo,
    ProfileInfoResponse,
    RateLimitingInfo,
)

__all__ = [
    # Profile
    "DEFAULT_JWT_SECRET",
    "DEV_PROFILE",
    "ProfileDescriptor",
    "ProfileState",
    # Config views
    "CacheInfo",
    "CheckStatus",
    "ConfigHealthResponse",
    "ConfigInfoResponse",
    "CorsInfo",
    "HealthVerdict",
    "MonitoringInfo",
    "ProfileInfoResponse",
    "RateLimitingInfo",
]
