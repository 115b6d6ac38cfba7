# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - config.py: Configuration info, profile and health endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import config

__all__ = [
    "config",
]
