# =============================================================================
# core/models/config.py - Configuration View Schemas
# =============================================================================
# Read-only projections of the resolved configuration returned by the
# /config endpoints. Fields are snake_case in Python and camelCase on the wire.
#
# These views are deliberately redacted: CORS origins, the JWT secret and the
# JWT expiration have no field here, so they cannot leak into a response.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Info View
# =============================================================================

class CorsInfo(CamelModel):
    """Non-sensitive CORS settings (origins are never exposed)."""
    allowed_methods: list[str]
    allowed_headers: list[str]
    allow_credentials: bool


class CacheInfo(CamelModel):
    enabled: bool
    ttl: int


class RateLimitingInfo(CamelModel):
    enabled: bool
    requests_per_minute: int


class MonitoringInfo(CamelModel):
    metrics_enabled: bool
    tracing_enabled: bool


class ConfigInfoResponse(CamelModel):
    """Application identity, profiles and non-sensitive settings groups."""
    name: str
    version: str
    description: str
    environment: str
    debug_mode: bool
    active_profiles: list[str]
    default_profiles: list[str]
    cors: CorsInfo
    cache: CacheInfo
    rate_limiting: RateLimitingInfo
    monitoring: MonitoringInfo


# =============================================================================
# Profile View
# =============================================================================

class ProfileInfoResponse(CamelModel):
    """
    Active profile information.

    primary_profile and description are set only when a profile is active;
    features only when the primary profile is a known one.
    """
    active_profiles: list[str]
    default_profiles: list[str]
    environment: str
    primary_profile: str | None = None
    description: str | None = None
    features: list[str] | None = None


# =============================================================================
# Health View
# =============================================================================

class CheckStatus(str, Enum):
    """Outcome of a single configuration check."""
    OK = "OK"
    MISSING = "MISSING"
    INSECURE = "INSECURE - Using default development secret"
    DEVELOPMENT = "OK - Development environment"


class HealthVerdict(str, Enum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"


class ConfigHealthResponse(CamelModel):
    """Per-check status plus the overall verdict."""
    name: CheckStatus = Field(..., description="Application name is set")
    version: CheckStatus = Field(..., description="Application version is set")
    jwt_secret: CheckStatus = Field(
        ...,
        description="JWT secret differs from the development default outside dev"
    )
    status: HealthVerdict

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthVerdict.HEALTHY
