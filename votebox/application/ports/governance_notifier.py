"""Governance notifier port.

The realtime collaborator receives events only after the core has
accepted an operation. The core never pushes to clients itself.
"""

from __future__ import annotations

from typing import Protocol, Union

from votebox.domain.events.governance import (
    ProxyCreatedEvent,
    ProxyRevokedEvent,
    ScheduleWinnerSelectedEvent,
    VoteCastEvent,
)

GovernanceEvent = Union[
    VoteCastEvent,
    ProxyCreatedEvent,
    ProxyRevokedEvent,
    ScheduleWinnerSelectedEvent,
]


class GovernanceNotifierProtocol(Protocol):
    """Sink for accepted governance events."""

    async def publish(self, event: GovernanceEvent) -> None:
        """Publish an event to subscribers.

        Args:
            event: The accepted event payload.
        """
        ...
