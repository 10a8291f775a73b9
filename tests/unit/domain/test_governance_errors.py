"""Unit tests for governance error serialization."""

from datetime import datetime, timezone
from uuid import uuid4

from votebox.domain.errors import (
    AttendanceNotFoundError,
    CircularProxyError,
    DuplicateGrantorProxyError,
    DuplicateVoteError,
    GranteeLimitExceededError,
    IneligibleVoterError,
    InvalidVoteValueError,
    MemberNotFoundError,
    ProxyError,
    ProxyNotFoundError,
    ProxyVoteNotAuthorizedError,
    ScheduleOptionNotFoundError,
    SelfDelegationError,
    VoteError,
)
from votebox.domain.exceptions import (
    GovernanceNotFoundError,
    GovernanceValidationError,
    VoteBoxError,
)


def test_validation_errors_share_hierarchy() -> None:
    for error in (
        SelfDelegationError(uuid4()),
        CircularProxyError(uuid4(), uuid4(), uuid4()),
        GranteeLimitExceededError(uuid4(), 2, 2),
    ):
        assert isinstance(error, ProxyError)
        assert isinstance(error, GovernanceValidationError)
        assert isinstance(error, VoteBoxError)

    for error in (
        DuplicateVoteError(uuid4(), uuid4()),
        IneligibleVoterError(uuid4()),
        InvalidVoteValueError("maybe", "yes_no"),
        ProxyVoteNotAuthorizedError(uuid4(), uuid4()),
    ):
        assert isinstance(error, VoteError)


def test_not_found_errors_are_distinct() -> None:
    for error in (
        ProxyNotFoundError(uuid4()),
        MemberNotFoundError(uuid4()),
        ScheduleOptionNotFoundError(uuid4()),
        AttendanceNotFoundError(uuid4(), uuid4()),
    ):
        assert isinstance(error, GovernanceNotFoundError)
        assert not isinstance(error, GovernanceValidationError)
        assert error.to_dict()["status"] == 404


def test_duplicate_vote_problem_details() -> None:
    item, member, existing = uuid4(), uuid4(), uuid4()
    cast_at = datetime(2026, 3, 14, 18, 5, tzinfo=timezone.utc)

    data = DuplicateVoteError(item, member, existing, cast_at).to_dict()

    assert data["type"] == "urn:votebox:vote:duplicate"
    assert data["status"] == 409
    assert data["existing_vote_id"] == str(existing)
    assert data["cast_at"] == cast_at.isoformat()
    assert str(member) in data["detail"]


def test_duplicate_grantor_problem_details() -> None:
    grantor, existing = uuid4(), uuid4()
    data = DuplicateGrantorProxyError(grantor, None, existing).to_dict()

    assert data["title"] == "Duplicate Grantor Proxy"
    assert data["meeting_id"] is None
    assert "general scope" in data["detail"]


def test_grantee_limit_problem_details() -> None:
    data = GranteeLimitExceededError(uuid4(), 2, 2).to_dict()
    assert data["active_count"] == 2
    assert data["limit"] == 2


def test_invalid_vote_value_defaults_to_422() -> None:
    assert InvalidVoteValueError("maybe", "yes_no").to_dict()["status"] == 422
