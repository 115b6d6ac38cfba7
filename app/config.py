# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a Settings tree (identity, CORS, security, cache, rate limiting,
# monitoring) plus the active/default profile names.
#
# Usage:
#   from app.config import settings, profiles
#   print(settings.name, profiles.primary)
#
# Values are resolved once, lowest to highest precedence:
# 1. Hardcoded defaults below
# 2. Profile overrides (PROFILE_OVERRIDES) for each active profile, in order
# 3. .env file in project root (if exists)
# 4. System environment variables (APP_ prefix, "__" between nested groups)
#
# Example:
#   PROFILES_ACTIVE=prod
#   APP_SECURITY__JWT__SECRET=a-real-secret
#   APP_CORS__ALLOWED_ORIGINS='["https://*.example.com"]'
# =============================================================================

import logging
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from app.exceptions import ConfigurationError
from core.models.profile import DEFAULT_JWT_SECRET, ProfileState

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Groups
# =============================================================================

class CorsSettings(BaseModel):
    """Cross-origin policy inputs."""

    model_config = ConfigDict(frozen=True)

    allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed origin patterns (exact origins or wildcards)"
    )
    allowed_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        description="HTTP methods allowed for cross-origin requests"
    )
    allowed_headers: list[str] = Field(
        default=["*"],
        description="Request headers allowed for cross-origin requests"
    )
    allow_credentials: bool = Field(
        default=True,
        description="Whether browsers may send credentials cross-origin"
    )


class JwtSettings(BaseModel):
    """Token signing settings."""

    model_config = ConfigDict(frozen=True)

    secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        description="Secret key for signing tokens"
    )
    expiration: int = Field(
        default=86400,  # 24 hours
        description="Token lifetime in seconds"
    )


class SecuritySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    jwt: JwtSettings = Field(default_factory=JwtSettings)


class CacheSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    ttl: int = Field(
        default=300,  # 5 minutes
        description="Cache time-to-live in seconds"
    )


class RateLimitingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    requests_per_minute: int = 100


class MonitoringSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    metrics_enabled: bool = False
    tracing_enabled: bool = False


# =============================================================================
# Settings
# =============================================================================

class Settings(BaseSettings):
    """
    Application settings loaded from defaults, profile overrides and
    environment variables.

    Resolved once at startup and frozen afterwards. Name and version are not
    rejected when blank; the configuration health check reports them instead.
    """

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    name: str = Field(
        default="CS301 Backend Template",
        description="Application name"
    )

    version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    description: str = Field(
        default="A standardized FastAPI backend service template",
        description="Application description"
    )

    environment: str = Field(
        default="development",
        description="Current environment (development, staging, production)"
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    cors: CorsSettings = Field(default_factory=CorsSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    rate_limiting: RateLimitingSettings = Field(default_factory=RateLimitingSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        # APP_SECURITY__JWT__SECRET -> security.jwt.secret
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        # .env may carry variables for other tools
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init kwargs carry the profile overrides, so the environment must
        # come first to win over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


class ProfileSettings(BaseSettings):
    """
    Active and default profile names.

    Both are comma-separated strings, e.g. PROFILES_ACTIVE="prod,eu".
    """

    PROFILES_ACTIVE: str = Field(
        default="",
        description="Active profiles (comma-separated), first one is primary"
    )

    PROFILES_DEFAULT: str = Field(
        default="default",
        description="Profiles reported when none are active (comma-separated)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=True,
    )

    def to_state(self) -> ProfileState:
        return ProfileState(
            active=_split_names(self.PROFILES_ACTIVE),
            default=_split_names(self.PROFILES_DEFAULT),
        )


def _split_names(raw: str) -> tuple[str, ...]:
    """"dev, eu" -> ("dev", "eu"); blanks are dropped."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


# =============================================================================
# Profile Overrides
# =============================================================================

PROFILE_OVERRIDES: dict[str, dict[str, Any]] = {
    "dev": {
        "debug_mode": True,
    },
    "staging": {
        "environment": "staging",
        "monitoring": {"metrics_enabled": True},
    },
    "prod": {
        "environment": "production",
        "cache": {"enabled": True},
        "rate_limiting": {"enabled": True},
        "monitoring": {"metrics_enabled": True, "tracing_enabled": True},
    },
}


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def profile_overrides(active_profiles: tuple[str, ...] | list[str]) -> dict[str, Any]:
    """
    Collect the overrides for the given profiles.

    Profiles are applied in order, so later profiles win on conflicting keys.
    Unknown profiles contribute nothing.
    """
    overrides: dict[str, Any] = {}
    for profile in active_profiles:
        overrides = _deep_merge(overrides, PROFILE_OVERRIDES.get(profile, {}))
    return overrides


def resolve_settings(
    active_profiles: tuple[str, ...] | list[str] = (),
    env_file: str | None = ".env",
) -> Settings:
    """
    Build the Settings tree for the given active profiles.

    Args:
        active_profiles: Active profile names, primary first
        env_file: .env path to read, or None to skip it

    Returns:
        Settings: Fully populated, frozen settings

    Raises:
        ConfigurationError: If an environment value cannot be bound
    """
    overrides = profile_overrides(active_profiles)
    logger.debug(f"Resolving settings for profiles {list(active_profiles)}: {overrides}")

    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e) from e


@lru_cache
def get_profiles() -> ProfileState:
    """
    Get cached profile state.

    Returns:
        ProfileState: Active and default profile names
    """
    try:
        return ProfileSettings().to_state()
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e) from e


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance for the active profiles.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return resolve_settings(get_profiles().active)


# Global instances for easy importing
# Usage: from app.config import settings, profiles
profiles = get_profiles()
settings = get_settings()
