# =============================================================================
# app/exceptions.py - Custom Exceptions
# =============================================================================
# Exceptions raised by the configuration layer.
# Errors carry a machine-readable code and, where possible, a suggestion on how
# to fix them.
#
# Note: the configuration health verdict is NOT an error. An UNHEALTHY
# configuration is reported in a 200 response body by /config/health.
# =============================================================================

from typing import Any

from pydantic import ValidationError


class BackendTemplateException(Exception):
    """
    Base exception for the backend template API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "BACKEND_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(BackendTemplateException):
    """Raised when environment values cannot be bound to the settings tree."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            status_code=500,
            suggestion="Check the APP_* and PROFILES_* environment variables and the .env file",
            details={"fields": fields} if fields else None,
        )
        self.fields = fields or []

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        """Summarize a pydantic ValidationError by its offending field paths."""
        fields = [
            ".".join(str(part) for part in item["loc"])
            for item in error.errors()
        ]
        return cls(
            message=f"Invalid configuration: {error.error_count()} value(s) failed to bind",
            fields=fields,
        )

