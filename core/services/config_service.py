# =============================================================================
# core/services/config_service.py - Configuration Views and Health Check
# =============================================================================
# Derives the read-only views served under /config from the resolved Settings
# and the profile state. Every method is a pure function of its arguments;
# nothing here touches the environment or mutates settings.
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.models.config import (
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
from core.models.profile import DEFAULT_JWT_SECRET, ProfileDescriptor, ProfileState

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


# Known profiles; anything else is described as a custom environment
PROFILE_CATALOG: dict[str, ProfileDescriptor] = {
    "dev": ProfileDescriptor(
        description="Development environment with debugging enabled",
        features=("H2 Console", "Debug Logging", "All Actuator Endpoints"),
    ),
    "staging": ProfileDescriptor(
        description="Staging environment for testing",
        features=("PostgreSQL", "Moderate Logging", "Limited Actuator Endpoints"),
    ),
    "prod": ProfileDescriptor(
        description="Production environment with optimizations",
        features=("PostgreSQL", "Minimal Logging", "Security Hardened"),
    ),
}

CUSTOM_PROFILE = ProfileDescriptor(description="Custom environment configuration")


def lookup_profile(name: str) -> ProfileDescriptor:
    """Exact-match lookup in PROFILE_CATALOG, falling back to CUSTOM_PROFILE."""
    return PROFILE_CATALOG.get(name, CUSTOM_PROFILE)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ConfigService:
    """
    Service for the configuration endpoints.

    Provides a clean interface between API routes and the settings tree.
    """

    @staticmethod
    def build_info(settings: Settings, profiles: ProfileState) -> ConfigInfoResponse:
        """
        Build the redacted application info view.

        Args:
            settings: Resolved application settings
            profiles: Active and default profiles

        Returns:
            ConfigInfoResponse without CORS origins or JWT settings
        """
        return ConfigInfoResponse(
            name=settings.name,
            version=settings.version,
            description=settings.description,
            environment=settings.environment,
            debug_mode=settings.debug_mode,
            active_profiles=list(profiles.active),
            default_profiles=list(profiles.default),
            cors=CorsInfo(
                allowed_methods=list(settings.cors.allowed_methods),
                allowed_headers=list(settings.cors.allowed_headers),
                allow_credentials=settings.cors.allow_credentials,
            ),
            cache=CacheInfo(
                enabled=settings.cache.enabled,
                ttl=settings.cache.ttl,
            ),
            rate_limiting=RateLimitingInfo(
                enabled=settings.rate_limiting.enabled,
                requests_per_minute=settings.rate_limiting.requests_per_minute,
            ),
            monitoring=MonitoringInfo(
                metrics_enabled=settings.monitoring.metrics_enabled,
                tracing_enabled=settings.monitoring.tracing_enabled,
            ),
        )

    @staticmethod
    def describe_profile(settings: Settings, profiles: ProfileState) -> ProfileInfoResponse:
        """
        Describe the active profile.

        The description and feature list come from the primary profile only.
        With no active profile, only the profile names and environment are set.
        """
        primary = profiles.primary
        response = ProfileInfoResponse(
            active_profiles=list(profiles.active),
            default_profiles=list(profiles.default),
            environment=settings.environment,
        )
        if primary is None:
            return response

        descriptor = lookup_profile(primary)
        return response.model_copy(update={
            "primary_profile": primary,
            "description": descriptor.description,
            "features": list(descriptor.features) if descriptor.features is not None else None,
        })

    @staticmethod
    def check_health(settings: Settings, profiles: ProfileState) -> ConfigHealthResponse:
        """
        Verify that essential configuration is properly set.

        Checks:
        - name and version are non-blank (MISSING otherwise)
        - outside dev, the JWT secret is not the published default (INSECURE)

        With no active profile, or dev as the primary profile, the secret is
        always reported as OK - Development environment.

        Returns:
            ConfigHealthResponse: Per-check status and overall verdict.
            An UNHEALTHY verdict is data, not an error.
        """
        healthy = True

        name_status = CheckStatus.OK
        if _is_blank(settings.name):
            name_status = CheckStatus.MISSING
            healthy = False

        version_status = CheckStatus.OK
        if _is_blank(settings.version):
            version_status = CheckStatus.MISSING
            healthy = False

        if profiles.is_development:
            secret_status = CheckStatus.DEVELOPMENT
        elif settings.security.jwt.secret == DEFAULT_JWT_SECRET:
            secret_status = CheckStatus.INSECURE
            healthy = False
        else:
            secret_status = CheckStatus.OK

        if not healthy:
            logger.debug(
                f"Configuration unhealthy: name={name_status.value}, "
                f"version={version_status.value}, jwtSecret={secret_status.value}"
            )

        return ConfigHealthResponse(
            name=name_status,
            version=version_status,
            jwt_secret=secret_status,
            status=HealthVerdict.HEALTHY if healthy else HealthVerdict.UNHEALTHY,
        )
