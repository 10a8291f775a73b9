"""Unit tests for governance event payloads."""

import json
from datetime import datetime, timezone
from uuid import uuid4

from votebox.domain.events import (
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

NOW = datetime(2026, 3, 14, 18, 0, 0, tzinfo=timezone.utc)


def test_vote_cast_event_payload() -> None:
    grantor = uuid4()
    event = VoteCastEvent(
        vote_id=uuid4(),
        agenda_item_id=uuid4(),
        member_id=uuid4(),
        value="yes",
        weight=25.0,
        cast_at=NOW,
        is_proxy=True,
        proxy_for_id=grantor,
        live_result={"yes": 25.0, "passed": True},
    )

    data = event.to_dict()

    assert data["event_type"] == VOTE_CAST_EVENT_TYPE
    assert data["proxy_for_id"] == str(grantor)
    assert data["live_result"] == {"yes": 25.0, "passed": True}
    assert data["schema_version"] == GOVERNANCE_EVENT_SCHEMA_VERSION


def test_vote_cast_signable_content_is_canonical() -> None:
    event = VoteCastEvent(
        vote_id=uuid4(),
        agenda_item_id=uuid4(),
        member_id=uuid4(),
        value="no",
        weight=10.0,
        cast_at=NOW,
    )
    content = event.signable_content()
    decoded = json.loads(content)

    assert list(decoded) == sorted(decoded)
    assert "live_result" not in decoded
    assert content == event.signable_content()


def test_proxy_events() -> None:
    proxy_id, org, grantor, grantee = uuid4(), uuid4(), uuid4(), uuid4()
    created = ProxyCreatedEvent(
        proxy_id=proxy_id,
        org_id=org,
        grantor_id=grantor,
        grantee_id=grantee,
        meeting_id=None,
        created_at=NOW,
    )
    revoked = ProxyRevokedEvent(
        proxy_id=proxy_id,
        org_id=org,
        grantor_id=grantor,
        grantee_id=grantee,
        revoked_at=NOW,
    )

    assert created.to_dict()["event_type"] == PROXY_CREATED_EVENT_TYPE
    assert created.to_dict()["meeting_id"] is None
    assert revoked.to_dict()["event_type"] == PROXY_REVOKED_EVENT_TYPE
    assert revoked.to_dict()["revoked_at"] == NOW.isoformat()


def test_schedule_winner_event() -> None:
    previous = uuid4()
    event = ScheduleWinnerSelectedEvent(
        meeting_id=uuid4(),
        option_id=uuid4(),
        starts_at=NOW,
        selected_at=NOW,
        previous_option_id=previous,
    )
    data = event.to_dict()
    assert data["event_type"] == SCHEDULE_WINNER_SELECTED_EVENT_TYPE
    assert data["previous_option_id"] == str(previous)
