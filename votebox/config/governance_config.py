"""Governance rule configuration.

Legal constants that vary by jurisdiction, with environment variable
overrides. Invalid values fall back to the default; out-of-range values
are clamped.

Environment Variables:
- MAX_PROXIES_PER_GRANTEE: Incoming proxies one member may hold (default: 2, min: 1, max: 10)
- DEFAULT_QUORUM_PERCENTAGE: Quorum when a meeting sets none (default: 50, min: 0, max: 100)
- ENVIRONMENT: 'production' selects JSON logs (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# Default maximum of incoming proxies per grantee
DEFAULT_MAX_PROXIES_PER_GRANTEE = 2
MIN_PROXIES_PER_GRANTEE = 1
MAX_PROXIES_PER_GRANTEE_CEILING = 10

# Default quorum for meetings without an explicit requirement
DEFAULT_QUORUM_PERCENTAGE = 50.0
MIN_QUORUM_PERCENTAGE = 0.0
MAX_QUORUM_PERCENTAGE = 100.0


@dataclass(frozen=True)
class GovernanceConfig:
    """Configuration for proxy limits and quorum defaults.

    Attributes:
        max_proxies_per_grantee: Legal maximum of active incoming proxies.
        default_quorum_percentage: Quorum applied when none is given.
        environment: Deployment environment name.
    """

    max_proxies_per_grantee: int = DEFAULT_MAX_PROXIES_PER_GRANTEE
    default_quorum_percentage: float = DEFAULT_QUORUM_PERCENTAGE
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not (
            MIN_PROXIES_PER_GRANTEE
            <= self.max_proxies_per_grantee
            <= MAX_PROXIES_PER_GRANTEE_CEILING
        ):
            raise ValueError(
                f"max_proxies_per_grantee must be between {MIN_PROXIES_PER_GRANTEE} "
                f"and {MAX_PROXIES_PER_GRANTEE_CEILING}, "
                f"got {self.max_proxies_per_grantee}"
            )
        if not (
            MIN_QUORUM_PERCENTAGE
            <= self.default_quorum_percentage
            <= MAX_QUORUM_PERCENTAGE
        ):
            raise ValueError(
                f"default_quorum_percentage must be between {MIN_QUORUM_PERCENTAGE} "
                f"and {MAX_QUORUM_PERCENTAGE}, got {self.default_quorum_percentage}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> GovernanceConfig:
        """Create config from environment variables with defaults.

        Returns:
            GovernanceConfig with clamped values.
        """
        max_proxies = _get_int_env(
            "MAX_PROXIES_PER_GRANTEE",
            DEFAULT_MAX_PROXIES_PER_GRANTEE,
        )
        max_proxies = max(
            MIN_PROXIES_PER_GRANTEE,
            min(max_proxies, MAX_PROXIES_PER_GRANTEE_CEILING),
        )

        quorum = _get_float_env(
            "DEFAULT_QUORUM_PERCENTAGE",
            DEFAULT_QUORUM_PERCENTAGE,
        )
        if quorum != quorum:  # NaN
            quorum = DEFAULT_QUORUM_PERCENTAGE
        quorum = max(MIN_QUORUM_PERCENTAGE, min(quorum, MAX_QUORUM_PERCENTAGE))

        return cls(
            max_proxies_per_grantee=max_proxies,
            default_quorum_percentage=quorum,
            environment=os.environ.get("ENVIRONMENT", "development"),
        )


DEFAULT_GOVERNANCE_CONFIG = GovernanceConfig()

# Stricter limit used by tests for the grantee cap
SINGLE_PROXY_GOVERNANCE_CONFIG = GovernanceConfig(max_proxies_per_grantee=1)
