# =============================================================================
# core/models/profile.py - Profile State
# =============================================================================
# A profile is a named environment mode (dev, staging, prod, ...) that selects
# configuration overrides. The first active profile is the "primary" one and
# drives the profile description and the secret check.
# =============================================================================

from dataclasses import dataclass, field

# Profile whose primary status relaxes the secret check
DEV_PROFILE = "dev"

# Published placeholder secret; must never survive outside the dev profile
DEFAULT_JWT_SECRET = "dev-secret-key-change-in-production"


@dataclass(frozen=True)
class ProfileState:
    """
    Active and default profile names, resolved once at startup.

    Attributes:
        active: Active profiles in priority order (may be empty)
        default: Profiles reported when none are active
    """
    active: tuple[str, ...] = ()
    default: tuple[str, ...] = field(default=("default",))

    @property
    def primary(self) -> str | None:
        """First active profile, or None when no profile is active."""
        return self.active[0] if self.active else None

    @property
    def is_development(self) -> bool:
        """True when no profile is active or the primary one is dev."""
        return self.primary is None or self.primary == DEV_PROFILE


@dataclass(frozen=True)
class ProfileDescriptor:
    """Human-readable description and feature list of a known profile."""
    description: str
    features: tuple[str, ...] | None = None
