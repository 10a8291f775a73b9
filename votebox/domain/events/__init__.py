"""Domain events for VoteBox."""

from votebox.domain.events.governance import (
    GOVERNANCE_EVENT_SCHEMA_VERSION,
    PROXY_CREATED_EVENT_TYPE,
    PROXY_REVOKED_EVENT_TYPE,
    SCHEDULE_WINNER_SELECTED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    ProxyCreatedEvent,
    ProxyRevokedEvent,
    ScheduleWinnerSelectedEvent,
    VoteCastEvent,
)

__all__ = [
    "GOVERNANCE_EVENT_SCHEMA_VERSION",
    "PROXY_CREATED_EVENT_TYPE",
    "PROXY_REVOKED_EVENT_TYPE",
    "SCHEDULE_WINNER_SELECTED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "ProxyCreatedEvent",
    "ProxyRevokedEvent",
    "ScheduleWinnerSelectedEvent",
    "VoteCastEvent",
]
