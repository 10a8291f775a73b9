"""Observability infrastructure: structlog configuration and log context.

Usage:
    from votebox.infrastructure.observability import (
        configure_structlog,
        meeting_context,
        set_correlation_id,
    )

    configure_structlog(environment="production")
"""

from votebox.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    get_meeting_context,
    meeting_context,
    set_correlation_id,
)
from votebox.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
)

__all__: list[str] = [
    "build_processors",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_meeting_context",
    "meeting_context",
    "set_correlation_id",
]
