# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the logic behind the HTTP layer:
# - models/: Pydantic schemas for profiles and configuration views
# - services/: Info projection, profile description and health check
#
# Services are pure functions of the resolved settings and profile state,
# which keeps them testable without an HTTP client.
# =============================================================================
