# =============================================================================
# app/cors.py - CORS Policy
# =============================================================================
# Maps the CORS settings group onto a policy for every path ("/**") and
# installs it as Starlette's CORSMiddleware.
#
# Origin patterns accept:
#   "http://localhost:3000"        exact origin
#   "*"                            any origin
#   "https://*.example.com"        wildcard segment
#   "https://api.example.com:[*]"  any port (or a list, e.g. ":[8080,8081]")
# =============================================================================

import logging
import re
from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import CorsSettings

logger = logging.getLogger(__name__)

ALL_PATHS = "/**"

_PORT_LIST = re.compile(r"^(?P<base>.+):\[(?P<ports>[^\]]+)\]$")


@dataclass(frozen=True)
class CorsPolicy:
    """CORS allow-list applied to one path scope."""
    allowed_origin_patterns: tuple[str, ...]
    allowed_methods: tuple[str, ...]
    allowed_headers: tuple[str, ...]
    allow_credentials: bool
    path_pattern: str = ALL_PATHS

    @property
    def allow_any_origin(self) -> bool:
        return "*" in self.allowed_origin_patterns

    @property
    def exact_origins(self) -> list[str]:
        """Origins that need no pattern matching."""
        if self.allow_any_origin:
            return ["*"]
        return [p for p in self.allowed_origin_patterns if not _is_pattern(p)]

    @property
    def origin_regex(self) -> str | None:
        """Single regex covering every wildcard pattern, or None if there are none."""
        if self.allow_any_origin:
            return None
        patterns = [p for p in self.allowed_origin_patterns if _is_pattern(p)]
        if not patterns:
            return None
        return "|".join(f"(?:{origin_pattern_to_regex(p)})" for p in patterns)


def _is_pattern(origin: str) -> bool:
    return "*" in origin or _PORT_LIST.match(origin) is not None


def origin_pattern_to_regex(pattern: str) -> str:
    """
    Translate one origin pattern into a regex for a full-string match.

    Example: "https://*.example.com:[8080,8081]"
        -> r"https://.*\\.example\\.com:(8080|8081)"
    """
    base = pattern
    port_regex = ""

    match = _PORT_LIST.match(pattern)
    if match:
        base = match.group("base")
        ports = match.group("ports").strip()
        if ports == "*":
            port_regex = r"(:\d+)?"
        else:
            port_regex = ":(" + "|".join(
                re.escape(port.strip()) for port in ports.split(",") if port.strip()
            ) + ")"

    return ".*".join(re.escape(part) for part in base.split("*")) + port_regex


def build_cors_policy(cors: CorsSettings) -> CorsPolicy:
    """Copy the CORS settings group into a policy for all paths."""
    return CorsPolicy(
        allowed_origin_patterns=tuple(cors.allowed_origins),
        allowed_methods=tuple(cors.allowed_methods),
        allowed_headers=tuple(cors.allowed_headers),
        allow_credentials=cors.allow_credentials,
    )


def install_cors(app: FastAPI, policy: CorsPolicy) -> None:
    """
    Register CORSMiddleware for the policy.

    Starlette middleware wraps the whole app, which covers the "/**" scope.
    """
    logger.debug(
        f"Installing CORS policy for {policy.path_pattern}: "
        f"origins={policy.exact_origins} regex={policy.origin_regex}"
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=policy.exact_origins,
        allow_origin_regex=policy.origin_regex,
        allow_methods=list(policy.allowed_methods),
        allow_headers=list(policy.allowed_headers),
        allow_credentials=policy.allow_credentials,
    )
