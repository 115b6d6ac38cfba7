# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides settings/profile fixtures that ignore the developer's .env
# - Provides a TestClient with injectable settings and profiles
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("PROFILES_ACTIVE", "dev")

import pytest
from fastapi.testclient import TestClient

from app.config import resolve_settings
from app.dependencies import get_active_profiles, get_app_settings
from app.main import app
from core.models.profile import ProfileState


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove APP_* and PROFILES_* variables so only defaults apply."""
    for key in list(os.environ):
        if key.upper().startswith(("APP_", "PROFILES_")):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def default_settings(clean_env):
    """Settings built from defaults only (no profile, no .env)."""
    return resolve_settings((), env_file=None)


@pytest.fixture
def make_settings(clean_env):
    """Factory building settings for the given profiles, ignoring .env."""
    def _make(*active_profiles: str):
        return resolve_settings(active_profiles, env_file=None)
    return _make


@pytest.fixture
def no_profiles():
    return ProfileState(active=(), default=("default",))


@pytest.fixture
def make_profiles():
    """Factory for ProfileState with the given active profiles."""
    def _make(*active: str):
        return ProfileState(active=active, default=("default",))
    return _make


@pytest.fixture
def make_client():
    """
    Factory for a TestClient serving the given settings and profiles.

    Dependency overrides are cleared after the test.
    """
    def _make(settings, profiles):
        app.dependency_overrides[get_app_settings] = lambda: settings
        app.dependency_overrides[get_active_profiles] = lambda: profiles
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
