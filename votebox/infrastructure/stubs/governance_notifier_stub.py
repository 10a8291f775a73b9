"""In-memory stub for GovernanceNotifierProtocol.

Records published events so tests can assert what was announced and in
which order.
"""

from __future__ import annotations

from votebox.application.ports.governance_notifier import GovernanceEvent


class GovernanceNotifierStub:
    """Collects published governance events."""

    def __init__(self) -> None:
        self.events: list[GovernanceEvent] = []

    async def publish(self, event: GovernanceEvent) -> None:
        self.events.append(event)

    def events_of_type(self, event_type: str) -> list[GovernanceEvent]:
        return [e for e in self.events if e.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()
