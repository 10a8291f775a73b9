"""
Infrastructure layer - Adapters for VoteBox.

This layer contains:
- In-memory repositories and notifier (stubs)
- System clock adapter
- structlog configuration and log context (observability)
- Prometheus collectors (monitoring)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

from votebox.infrastructure.adapters import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority"]
