# =============================================================================
# tests/test_config_service.py - Configuration View Tests
# =============================================================================
# Tests for core/services/config_service.py:
#   - Redacted info projection
#   - Profile description lookup
#   - Configuration health check
#   - Importing core without resolving settings
#
# Run with: pytest tests/test_config_service.py -v
# =============================================================================

import os
import subprocess
import sys
from pathlib import Path

import pytest

from app.config import DEFAULT_JWT_SECRET
from core.models.config import CheckStatus, HealthVerdict
from core.services.config_service import (
    CUSTOM_PROFILE,
    PROFILE_CATALOG,
    ConfigService,
    lookup_profile,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def with_overrides(settings, **updates):
    """Copy settings, replacing top-level fields or whole groups."""
    return settings.model_copy(update=updates)


def with_secret(settings, secret):
    jwt = settings.security.jwt.model_copy(update={"secret": secret})
    security = settings.security.model_copy(update={"jwt": jwt})
    return with_overrides(settings, security=security)


# =============================================================================
# Info
# =============================================================================

class TestBuildInfo:

    def test_top_level_keys(self, default_settings, make_profiles):
        info = ConfigService.build_info(default_settings, make_profiles("dev"))
        body = info.model_dump(by_alias=True)

        assert set(body) == {
            "name", "version", "description", "environment", "debugMode",
            "activeProfiles", "defaultProfiles",
            "cors", "cache", "rateLimiting", "monitoring",
        }

    def test_sub_groups(self, default_settings, no_profiles):
        body = ConfigService.build_info(default_settings, no_profiles).model_dump(by_alias=True)

        assert body["cors"] == {
            "allowedMethods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allowedHeaders": ["*"],
            "allowCredentials": True,
        }
        assert body["cache"] == {"enabled": False, "ttl": 300}
        assert body["rateLimiting"] == {"enabled": False, "requestsPerMinute": 100}
        assert body["monitoring"] == {"metricsEnabled": False, "tracingEnabled": False}

    def test_never_exposes_origins_or_secret(self, make_settings, clean_env, make_profiles):
        clean_env.setenv("APP_CORS__ALLOWED_ORIGINS", '["https://secret-partner.example.com"]')
        clean_env.setenv("APP_SECURITY__JWT__SECRET", "super-secret-value")
        settings = make_settings("prod")

        info = ConfigService.build_info(settings, make_profiles("prod"))
        dumped = info.model_dump_json(by_alias=True)

        assert "allowedOrigins" not in info.model_dump(by_alias=True)["cors"]
        assert "security" not in info.model_dump(by_alias=True)
        assert "secret-partner.example.com" not in dumped
        assert "super-secret-value" not in dumped

    def test_profiles_are_reported(self, default_settings, make_profiles):
        info = ConfigService.build_info(default_settings, make_profiles("staging", "eu"))

        assert info.active_profiles == ["staging", "eu"]
        assert info.default_profiles == ["default"]


# =============================================================================
# Profile Description
# =============================================================================

class TestDescribeProfile:

    def test_staging(self, default_settings, make_profiles):
        info = ConfigService.describe_profile(default_settings, make_profiles("staging"))

        assert info.primary_profile == "staging"
        assert info.description == "Staging environment for testing"
        assert info.features == ["PostgreSQL", "Moderate Logging", "Limited Actuator Endpoints"]

    @pytest.mark.parametrize("profile,description,features", [
        ("dev", "Development environment with debugging enabled",
         ["H2 Console", "Debug Logging", "All Actuator Endpoints"]),
        ("prod", "Production environment with optimizations",
         ["PostgreSQL", "Minimal Logging", "Security Hardened"]),
    ])
    def test_known_profiles(self, default_settings, make_profiles, profile, description, features):
        info = ConfigService.describe_profile(default_settings, make_profiles(profile))

        assert info.description == description
        assert info.features == features

    def test_custom_profile_has_no_features(self, default_settings, make_profiles):
        info = ConfigService.describe_profile(default_settings, make_profiles("qa"))
        body = info.model_dump(by_alias=True, exclude_none=True)

        assert body["description"] == "Custom environment configuration"
        assert body["primaryProfile"] == "qa"
        assert "features" not in body

    def test_lookup_is_exact_match(self):
        assert lookup_profile("Dev") is CUSTOM_PROFILE
        assert lookup_profile("prod ") is CUSTOM_PROFILE
        assert lookup_profile("prod") is PROFILE_CATALOG["prod"]

    def test_only_primary_profile_is_described(self, default_settings, make_profiles):
        info = ConfigService.describe_profile(default_settings, make_profiles("qa", "prod"))

        assert info.description == "Custom environment configuration"

    def test_no_active_profile(self, default_settings, no_profiles):
        body = ConfigService.describe_profile(default_settings, no_profiles).model_dump(
            by_alias=True, exclude_none=True
        )

        assert body == {
            "activeProfiles": [],
            "defaultProfiles": ["default"],
            "environment": "development",
        }


# =============================================================================
# Health Check
# =============================================================================

class TestCheckHealth:

    def test_defaults_are_healthy_without_profile(self, default_settings, no_profiles):
        health = ConfigService.check_health(default_settings, no_profiles)

        assert health.name == CheckStatus.OK
        assert health.version == CheckStatus.OK
        assert health.jwt_secret == "OK - Development environment"
        assert health.status == HealthVerdict.HEALTHY

    @pytest.mark.parametrize("profile", ["prod", "staging", "qa"])
    def test_default_secret_is_insecure_outside_dev(self, default_settings, make_profiles, profile):
        health = ConfigService.check_health(default_settings, make_profiles(profile))

        assert health.jwt_secret.value.startswith("INSECURE")
        assert health.status == "UNHEALTHY"
        assert not health.is_healthy

    def test_custom_secret_is_ok_outside_dev(self, default_settings, make_profiles):
        settings = with_secret(default_settings, "a-real-secret")

        health = ConfigService.check_health(settings, make_profiles("prod"))

        assert health.jwt_secret == CheckStatus.OK
        assert health.status == HealthVerdict.HEALTHY

    def test_secret_comparison_is_exact(self, default_settings, make_profiles):
        settings = with_secret(default_settings, DEFAULT_JWT_SECRET + " ")

        health = ConfigService.check_health(settings, make_profiles("prod"))

        assert health.jwt_secret == CheckStatus.OK

    @pytest.mark.parametrize("secret", [DEFAULT_JWT_SECRET, "anything", ""])
    def test_dev_ignores_secret(self, default_settings, make_profiles, secret):
        settings = with_secret(default_settings, secret)

        health = ConfigService.check_health(settings, make_profiles("dev", "prod"))

        assert health.jwt_secret == CheckStatus.DEVELOPMENT
        assert health.status == HealthVerdict.HEALTHY

    @pytest.mark.parametrize("field", ["name", "version"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_identity_is_missing(self, default_settings, no_profiles, field, value):
        settings = with_overrides(default_settings, **{field: value})

        health = ConfigService.check_health(settings, no_profiles)

        assert getattr(health, field) == CheckStatus.MISSING
        assert health.status == HealthVerdict.UNHEALTHY

    def test_empty_name_from_environment_is_missing(self, make_settings, clean_env, make_profiles):
        clean_env.setenv("APP_NAME", "")
        clean_env.setenv("APP_SECURITY__JWT__SECRET", "a-real-secret")
        settings = make_settings("prod")

        health = ConfigService.check_health(settings, make_profiles("prod"))

        assert health.name == CheckStatus.MISSING
        assert health.version == CheckStatus.OK
        assert health.status == HealthVerdict.UNHEALTHY

    def test_all_failures_reported_together(self, default_settings, make_profiles):
        settings = with_overrides(default_settings, name="", version="")

        body = ConfigService.check_health(settings, make_profiles("prod")).model_dump(
            by_alias=True, mode="json"
        )

        assert body == {
            "name": "MISSING",
            "version": "MISSING",
            "jwtSecret": "INSECURE - Using default development secret",
            "status": "UNHEALTHY",
        }


# =============================================================================
# Import Isolation
# =============================================================================

class TestImportIsolation:

    def test_service_imports_without_resolving_settings(self):
        # A broken environment must not break importing the core package
        env = {**os.environ, "APP_CACHE__TTL": "lots"}
        code = (
            "import sys\n"
            "import core.services.config_service\n"
            "assert 'app.config' not in sys.modules, 'app.config was imported'\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr

    def test_default_secret_is_shared(self):
        from app.config import DEFAULT_JWT_SECRET as settings_secret
        from core.models.profile import DEFAULT_JWT_SECRET as core_secret

        assert settings_secret is core_secret
