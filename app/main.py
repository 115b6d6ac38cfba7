# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the backend template API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   PROFILES_ACTIVE=dev uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings, profiles
from app.cors import build_cors_policy, install_cors
from app.routers import config
from core.services.config_service import ConfigService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug_mode else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

cors_policy = build_cors_policy(settings.cors)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: report the resolved configuration and warn if it is unhealthy.
    """
    logger.info(
        f"Starting {settings.name} {settings.version} in {settings.environment} mode "
        f"(active profiles: {list(profiles.active) or list(profiles.default)})"
    )
    logger.info(f"CORS origins for {cors_policy.path_pattern}: {list(cors_policy.allowed_origin_patterns)}")

    health = ConfigService.check_health(settings, profiles)
    if not health.is_healthy:
        logger.warning(
            f"Configuration is UNHEALTHY: name={health.name.value}, "
            f"version={health.version.value}, jwtSecret={health.jwt_secret.value}"
        )

    yield

    logger.info(f"Shutting down {settings.name}")


# Create FastAPI application
app = FastAPI(
    title="CS301 Backend API",
    description="""
## Backend Service Template

Exposes the externalized configuration of the service (non-sensitive values only).

### Configuration

Settings are resolved once at startup from defaults, the active profile
(`PROFILES_ACTIVE`) and `APP_*` environment variables, e.g.:

```bash
PROFILES_ACTIVE=prod \\
APP_SECURITY__JWT__SECRET=change-me \\
APP_CORS__ALLOWED_ORIGINS='["https://*.example.com"]' \\
uvicorn app.main:app
```
""",
    version=settings.version or "1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Configuration",
            "description": "Configuration management endpoints",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - one policy for every path
install_cors(app, cors_policy)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Configuration endpoints
app.include_router(
    config.router,
    prefix="/config",
    tags=["Configuration"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": settings.name,
        "version": settings.version,
        "docs": "/docs",
        "config": {
            "info": "/config/info",
            "profile": "/config/profile",
            "health": "/config/health",
        },
    }
