"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from votebox.config import GovernanceConfig
from votebox.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: GovernanceConfig | None = None) -> None:
    """Configure structlog for the configured environment."""
    config = config or GovernanceConfig.from_environment()
    _configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
