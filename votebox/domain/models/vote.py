"""Ballot vote domain models.

Vote values form a closed enumeration for yes/no and yes/no/abstain
ballots. Multiple-choice ballots carry a free-form option label which
is tallied separately from the three named buckets.

Constraints:
- One vote per (agenda item, represented member)
- A proxy vote names the member it is cast for
- The weight is the one resolved at cast time
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class VoteValue(str, Enum):
    """Named ballot choices."""

    YES = "yes"
    NO = "no"
    ABSTAIN = "abstain"


class VoteType(str, Enum):
    """Ballot shape of an agenda item."""

    YES_NO = "yes_no"
    YES_NO_ABSTAIN = "yes_no_abstain"
    MULTIPLE_CHOICE = "multiple_choice"

    def accepts(self, value: VoteValue | str) -> bool:
        """Check whether ``value`` is a legal choice for this ballot shape.

        Multiple-choice ballots accept any non-empty label.
        """
        if self == VoteType.MULTIPLE_CHOICE:
            return isinstance(value, VoteValue) or bool(value)
        if not isinstance(value, VoteValue):
            return False
        if self == VoteType.YES_NO:
            return value in (VoteValue.YES, VoteValue.NO)
        return True


class RequiredMajority(str, Enum):
    """Threshold function deciding pass/fail of a weighted ballot.

    Values:
        SIMPLE: yes > no (a tie fails)
        TWO_THIRDS: yes >= 2/3 of yes + no + abstain
        UNANIMOUS: no == 0 and yes > 0
    """

    SIMPLE = "simple"
    TWO_THIRDS = "two_thirds"
    UNANIMOUS = "unanimous"


def parse_vote_value(raw: str) -> VoteValue | str:
    """Map a raw ballot string onto VoteValue when it names one.

    Unknown strings are returned unchanged as multiple-choice labels.
    """
    try:
        return VoteValue(raw)
    except ValueError:
        return raw


@dataclass(frozen=True, eq=True)
class Vote:
    """A weighted vote recorded for an agenda item.

    Attributes:
        vote_id: Unique identifier of the vote.
        agenda_item_id: The agenda item voted on.
        member_id: The member who cast the vote.
        value: VoteValue, or an option label on multiple-choice ballots.
        weight: Weight applied at cast time.
        cast_at: When the vote was recorded (UTC).
        is_proxy: True if cast on behalf of another member.
        proxy_for_id: The member represented by a proxy vote.
    """

    vote_id: UUID
    agenda_item_id: UUID
    member_id: UUID
    value: VoteValue | str
    weight: float
    cast_at: datetime
    is_proxy: bool = False
    proxy_for_id: UUID | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate vote invariants.

        Raises:
            ValueError: If any field validation fails.
        """
        if self.weight < 0:
            raise ValueError(f"weight must be >= 0, got {self.weight}")
        if self.cast_at.tzinfo is None:
            raise ValueError("cast_at must be timezone-aware (UTC)")
        if self.is_proxy and self.proxy_for_id is None:
            raise ValueError("proxy votes must name proxy_for_id")
        if not self.is_proxy and self.proxy_for_id is not None:
            raise ValueError("proxy_for_id is only allowed on proxy votes")
        if self.proxy_for_id == self.member_id:
            raise ValueError("a member cannot cast a proxy vote for themself")

    @property
    def represented_member_id(self) -> UUID:
        """The member whose ballot this vote is.

        The grantor for proxy votes, the voter otherwise.
        """
        if self.proxy_for_id is not None:
            return self.proxy_for_id
        return self.member_id

    @property
    def ballot_key(self) -> tuple[UUID, UUID]:
        """Uniqueness key: (agenda item, represented member)."""
        return (self.agenda_item_id, self.represented_member_id)

    def to_dict(self) -> dict[str, Any]:
        value = self.value.value if isinstance(self.value, VoteValue) else self.value
        return {
            "vote_id": str(self.vote_id),
            "agenda_item_id": str(self.agenda_item_id),
            "member_id": str(self.member_id),
            "vote": value,
            "weight": self.weight,
            "is_proxy": self.is_proxy,
            "proxy_for_id": str(self.proxy_for_id) if self.proxy_for_id else None,
            "cast_at": self.cast_at.isoformat(),
        }


@dataclass(frozen=True, eq=True)
class VoteResult:
    """Weighted tally of an agenda item.

    Attributes:
        yes: Weight voting yes.
        no: Weight voting no.
        abstain: Weight abstaining.
        total_votes: Number of vote records counted.
        total_weight: yes + no + abstain.
        passed: Whether the required majority was met.
        required_majority: The rule that was applied.
        option_weights: Weight per free-form option as (label, weight)
            pairs in first-seen order (multiple choice).
    """

    yes: float
    no: float
    abstain: float
    total_votes: int
    total_weight: float
    passed: bool
    required_majority: RequiredMajority = RequiredMajority.SIMPLE
    option_weights: tuple[tuple[str, float], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Persisted shape read by the minutes collaborator."""
        return {
            "yes": self.yes,
            "no": self.no,
            "abstain": self.abstain,
            "total_votes": self.total_votes,
            "total_weight": self.total_weight,
            "passed": self.passed,
        }
