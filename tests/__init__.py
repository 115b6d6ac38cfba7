# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the backend template:
# - test_config.py: Settings defaults, profile overrides, environment binding
# - test_config_service.py: Info projection, profile description, health check
# - test_cors.py: CORS policy and middleware
# - test_config_routes.py: /config endpoints through the FastAPI app
#
# Run tests with: pytest
# =============================================================================
