"""Ballot errors.

Constraints:
- One vote per (agenda item, represented member), never overwritten
- Proxy votes require an active proxy from the represented member
- Observers and inactive members cannot vote
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from votebox.domain.exceptions import GovernanceValidationError


class VoteError(GovernanceValidationError):
    """Base error for ballot validation failures."""

    pass


class DuplicateVoteError(VoteError):
    """Raised when a member already has a vote recorded for the agenda item.

    The existing vote is left untouched; votes are never merged or revised.

    Attributes:
        agenda_item_id: The agenda item being voted on.
        member_id: The represented member who already voted.
        existing_vote_id: The vote already on record (if known).
        cast_at: When the existing vote was recorded (if known).
    """

    error_type = "urn:votebox:vote:duplicate"
    title = "Duplicate Vote"
    status = 409

    def __init__(
        self,
        agenda_item_id: UUID,
        member_id: UUID,
        existing_vote_id: UUID | None = None,
        cast_at: datetime | None = None,
    ) -> None:
        self.agenda_item_id = agenda_item_id
        self.member_id = member_id
        self.existing_vote_id = existing_vote_id
        self.cast_at = cast_at
        super().__init__(
            f"Member {member_id} already voted on agenda item {agenda_item_id}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["agenda_item_id"] = str(self.agenda_item_id)
        result["member_id"] = str(self.member_id)
        if self.existing_vote_id is not None:
            result["existing_vote_id"] = str(self.existing_vote_id)
        if self.cast_at is not None:
            result["cast_at"] = self.cast_at.isoformat()
        return result


class ProxyVoteNotAuthorizedError(VoteError):
    """Raised when a proxy vote is cast without an active proxy.

    Attributes:
        voter_id: The member casting the vote.
        proxy_for_id: The member the vote was cast for.
    """

    error_type = "urn:votebox:vote:proxy-not-authorized"
    title = "Proxy Vote Not Authorized"
    status = 403

    def __init__(self, voter_id: UUID, proxy_for_id: UUID) -> None:
        self.voter_id = voter_id
        self.proxy_for_id = proxy_for_id
        super().__init__(
            f"Member {voter_id} holds no active proxy from {proxy_for_id}"
        )


class IneligibleVoterError(VoteError):
    """Raised when an inactive member or an observer tries to vote.

    Attributes:
        member_id: The ineligible member.
    """

    error_type = "urn:votebox:vote:ineligible"
    title = "Ineligible Voter"
    status = 403

    def __init__(self, member_id: UUID) -> None:
        self.member_id = member_id
        super().__init__(f"Member {member_id} is not an eligible voter")


class InvalidVoteValueError(VoteError):
    """Raised when a ballot value is not allowed for the agenda item's ballot type.

    Attributes:
        value: The rejected value.
        vote_type: The ballot type of the agenda item.
    """

    error_type = "urn:votebox:vote:invalid-value"
    title = "Invalid Vote Value"

    def __init__(self, value: str, vote_type: str) -> None:
        self.value = value
        self.vote_type = vote_type
        super().__init__(f"Vote value {value!r} is not allowed on a {vote_type} ballot")
