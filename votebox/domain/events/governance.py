"""Governance event payloads.

Events are emitted to the realtime collaborator only after the core has
accepted an operation; nothing is published for rejected input.

- VoteCastEvent: a vote was recorded for an agenda item
- ProxyCreatedEvent: a delegation was registered
- ProxyRevokedEvent: a delegation's window was closed
- ScheduleWinnerSelectedEvent: a meeting time was chosen
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

VOTE_CAST_EVENT_TYPE: str = "governance.vote.cast"
PROXY_CREATED_EVENT_TYPE: str = "governance.proxy.created"
PROXY_REVOKED_EVENT_TYPE: str = "governance.proxy.revoked"
SCHEDULE_WINNER_SELECTED_EVENT_TYPE: str = "governance.schedule.winner_selected"

# Schema version for governance events
GOVERNANCE_EVENT_SCHEMA_VERSION: str = "1.0.0"


def _opt(value: UUID | None) -> str | None:
    return str(value) if value is not None else None


@dataclass(frozen=True, eq=True)
class VoteCastEvent:
    """Payload published after a vote is recorded.

    Attributes:
        vote_id: The recorded vote.
        agenda_item_id: The agenda item voted on.
        member_id: The member who cast the vote.
        value: The ballot choice as stored.
        weight: Weight applied to the vote.
        cast_at: When the vote was recorded (UTC).
        is_proxy: True if cast on behalf of another member.
        proxy_for_id: The represented member for proxy votes.
        live_result: Recalculated tally after this vote.
    """

    vote_id: UUID
    agenda_item_id: UUID
    member_id: UUID
    value: str
    weight: float
    cast_at: datetime
    is_proxy: bool = False
    proxy_for_id: UUID | None = None
    live_result: dict[str, Any] = field(default_factory=dict)

    event_type: str = field(default=VOTE_CAST_EVENT_TYPE, init=False)

    def signable_content(self) -> bytes:
        """Return canonical bytes for audit trails.

        Returns:
            UTF-8 encoded JSON with sorted keys.
        """
        content: dict[str, Any] = {
            "agenda_item_id": str(self.agenda_item_id),
            "cast_at": self.cast_at.isoformat(),
            "is_proxy": self.is_proxy,
            "member_id": str(self.member_id),
            "proxy_for_id": _opt(self.proxy_for_id),
            "value": self.value,
            "vote_id": str(self.vote_id),
            "weight": self.weight,
        }
        return json.dumps(content, sort_keys=True).encode("utf-8")

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "vote_id": str(self.vote_id),
            "agenda_item_id": str(self.agenda_item_id),
            "member_id": str(self.member_id),
            "value": self.value,
            "weight": self.weight,
            "cast_at": self.cast_at.isoformat(),
            "is_proxy": self.is_proxy,
            "proxy_for_id": _opt(self.proxy_for_id),
            "live_result": dict(self.live_result),
            "schema_version": GOVERNANCE_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class ProxyCreatedEvent:
    """Payload published after a proxy is registered."""

    proxy_id: UUID
    org_id: UUID
    grantor_id: UUID
    grantee_id: UUID
    meeting_id: UUID | None
    created_at: datetime

    event_type: str = field(default=PROXY_CREATED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "proxy_id": str(self.proxy_id),
            "org_id": str(self.org_id),
            "grantor_id": str(self.grantor_id),
            "grantee_id": str(self.grantee_id),
            "meeting_id": _opt(self.meeting_id),
            "created_at": self.created_at.isoformat(),
            "schema_version": GOVERNANCE_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class ProxyRevokedEvent:
    """Payload published after a proxy's validity window is closed.

    Attributes:
        proxy_id: The revoked proxy.
        org_id: Organization of the proxy.
        grantor_id: The member who had delegated.
        grantee_id: The member who lost the delegation.
        revoked_at: When the revocation took effect (UTC).
    """

    proxy_id: UUID
    org_id: UUID
    grantor_id: UUID
    grantee_id: UUID
    revoked_at: datetime

    event_type: str = field(default=PROXY_REVOKED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "proxy_id": str(self.proxy_id),
            "org_id": str(self.org_id),
            "grantor_id": str(self.grantor_id),
            "grantee_id": str(self.grantee_id),
            "revoked_at": self.revoked_at.isoformat(),
            "schema_version": GOVERNANCE_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class ScheduleWinnerSelectedEvent:
    """Payload published after a meeting time is selected."""

    meeting_id: UUID
    option_id: UUID
    starts_at: datetime
    selected_at: datetime
    previous_option_id: UUID | None = None

    event_type: str = field(default=SCHEDULE_WINNER_SELECTED_EVENT_TYPE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "meeting_id": str(self.meeting_id),
            "option_id": str(self.option_id),
            "starts_at": self.starts_at.isoformat(),
            "selected_at": self.selected_at.isoformat(),
            "previous_option_id": _opt(self.previous_option_id),
            "schema_version": GOVERNANCE_EVENT_SCHEMA_VERSION,
        }
