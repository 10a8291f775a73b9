"""Governance input models.

Pydantic models for the raw input the UI collaborator supplies. They
check shape only (required fields, types, ranges); governance rules are
applied by the services.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from votebox.domain.models.schedule import ScheduleVoteValue
from votebox.domain.models.vote import (
    RequiredMajority,
    VoteType,
    VoteValue,
    parse_vote_value,
)


class CreateProxyInput(BaseModel):
    """Request to delegate a member's vote.

    Attributes:
        org_id: Organization of both members.
        grantor_id: Member delegating their vote.
        grantee_id: Member receiving the delegation.
        meeting_id: Meeting scope (None for a general proxy).
        valid_from: Start of validity (defaults to now).
        valid_until: Inclusive end of validity (None for open-ended).
        document_ref: Reference to an uploaded proxy document.
    """

    model_config = ConfigDict(frozen=True)

    org_id: UUID
    grantor_id: UUID
    grantee_id: UUID
    meeting_id: UUID | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    document_ref: str | None = Field(default=None, max_length=1024)

    @field_validator("valid_from", "valid_until")
    @classmethod
    def require_timezone(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            raise ValueError("datetimes must be timezone-aware")
        return v

    @model_validator(mode="after")
    def check_window(self) -> CreateProxyInput:
        if (
            self.valid_from is not None
            and self.valid_until is not None
            and self.valid_until < self.valid_from
        ):
            raise ValueError("valid_until must not be before valid_from")
        return self


class SubmitVoteInput(BaseModel):
    """A ballot submitted for an agenda item.

    ``vote`` is a yes/no/abstain value or, for multiple-choice ballots,
    the label of the chosen option.
    """

    model_config = ConfigDict(frozen=True)

    agenda_item_id: UUID
    member_id: UUID
    vote: str = Field(..., min_length=1, max_length=200)
    meeting_id: UUID | None = None
    proxy_for_id: UUID | None = None
    vote_type: VoteType = VoteType.YES_NO_ABSTAIN
    required_majority: RequiredMajority = RequiredMajority.SIMPLE

    @model_validator(mode="after")
    def require_meeting_for_proxy(self) -> SubmitVoteInput:
        if self.proxy_for_id is not None and self.meeting_id is None:
            raise ValueError("proxy votes must name the meeting")
        return self

    @property
    def value(self) -> VoteValue | str:
        return parse_vote_value(self.vote)

    @property
    def is_proxy(self) -> bool:
        return self.proxy_for_id is not None


class CastScheduleVoteInput(BaseModel):
    """A member's availability answer for a candidate time."""

    model_config = ConfigDict(frozen=True)

    option_id: UUID
    member_id: UUID
    value: ScheduleVoteValue
    comment: str | None = Field(default=None, max_length=500)
