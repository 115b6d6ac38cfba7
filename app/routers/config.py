# =============================================================================
# app/routers/config.py - Configuration Endpoints
# =============================================================================
# Read-only views of the externalized configuration (non-sensitive values only).
# All endpoints return 200; an UNHEALTHY configuration is reported in the body.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ProfilesDep, SettingsDep
from core.models.config import (
    ConfigHealthResponse,
    ConfigInfoResponse,
    ProfileInfoResponse,
)
from core.services.config_service import ConfigService

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/info", response_model=ConfigInfoResponse)
async def get_application_info(settings: SettingsDep, profiles: ProfilesDep):
    """
    Get application information.

    Returns identity, active profiles and non-sensitive settings.
    CORS origins and the JWT secret are never included.
    """
    return ConfigService.build_info(settings, profiles)


@router.get(
    "/profile",
    response_model=ProfileInfoResponse,
    response_model_exclude_none=True,
)
async def get_profile_info(settings: SettingsDep, profiles: ProfilesDep):
    """
    Get active profile.

    Returns the active/default profiles and, when a profile is active,
    a description of the primary one.
    """
    return ConfigService.describe_profile(settings, profiles)


@router.get("/health", response_model=ConfigHealthResponse)
async def get_config_health(settings: SettingsDep, profiles: ProfilesDep):
    """
    Configuration health check.

    Verifies that essential configuration is properly set.
    """
    return ConfigService.check_health(settings, profiles)
