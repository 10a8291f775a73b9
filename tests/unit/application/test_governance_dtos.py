"""Unit tests for governance input models."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from votebox.application.dtos.governance import (
    CastScheduleVoteInput,
    CreateProxyInput,
    SubmitVoteInput,
)
from votebox.domain.models.schedule import ScheduleVoteValue
from votebox.domain.models.vote import RequiredMajority, VoteType, VoteValue

NOW = datetime(2026, 3, 14, 18, 0, 0, tzinfo=timezone.utc)


class TestCreateProxyInput:
    def test_defaults(self) -> None:
        request = CreateProxyInput(org_id=uuid4(), grantor_id=uuid4(), grantee_id=uuid4())
        assert request.meeting_id is None
        assert request.valid_from is None

    def test_naive_datetime_rejected(self) -> None:
        with pytest.raises(ValidationError, match="timezone-aware"):
            CreateProxyInput(
                org_id=uuid4(),
                grantor_id=uuid4(),
                grantee_id=uuid4(),
                valid_from=datetime(2026, 3, 14, 18, 0, 0),
            )

    def test_window_order(self) -> None:
        with pytest.raises(ValidationError, match="valid_until"):
            CreateProxyInput(
                org_id=uuid4(),
                grantor_id=uuid4(),
                grantee_id=uuid4(),
                valid_from=NOW,
                valid_until=NOW - timedelta(days=1),
            )

    def test_frozen(self) -> None:
        request = CreateProxyInput(org_id=uuid4(), grantor_id=uuid4(), grantee_id=uuid4())
        with pytest.raises(ValidationError):
            request.meeting_id = uuid4()  # type: ignore[misc]


class TestSubmitVoteInput:
    def test_parses_named_value(self) -> None:
        request = SubmitVoteInput(agenda_item_id=uuid4(), member_id=uuid4(), vote="no")
        assert request.value is VoteValue.NO
        assert not request.is_proxy
        assert request.vote_type is VoteType.YES_NO_ABSTAIN
        assert request.required_majority is RequiredMajority.SIMPLE

    def test_option_label_passes_through(self) -> None:
        request = SubmitVoteInput(agenda_item_id=uuid4(), member_id=uuid4(), vote="Plan B")
        assert request.value == "Plan B"

    def test_empty_vote_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SubmitVoteInput(agenda_item_id=uuid4(), member_id=uuid4(), vote="")

    def test_proxy_flag(self) -> None:
        request = SubmitVoteInput(
            agenda_item_id=uuid4(),
            member_id=uuid4(),
            vote="yes",
            meeting_id=uuid4(),
            proxy_for_id=uuid4(),
        )
        assert request.is_proxy

    def test_proxy_vote_requires_meeting(self) -> None:
        with pytest.raises(ValidationError, match="proxy votes must name the meeting"):
            SubmitVoteInput(
                agenda_item_id=uuid4(), member_id=uuid4(), vote="yes", proxy_for_id=uuid4()
            )

    def test_enum_strings_coerced(self) -> None:
        request = SubmitVoteInput(
            agenda_item_id=uuid4(),
            member_id=uuid4(),
            vote="yes",
            vote_type="yes_no",
            required_majority="unanimous",
        )
        assert request.vote_type is VoteType.YES_NO
        assert request.required_majority is RequiredMajority.UNANIMOUS


def test_schedule_vote_value_validated() -> None:
    request = CastScheduleVoteInput(option_id=uuid4(), member_id=uuid4(), value="maybe")
    assert request.value is ScheduleVoteValue.MAYBE

    with pytest.raises(ValidationError):
        CastScheduleVoteInput(option_id=uuid4(), member_id=uuid4(), value="perhaps")
