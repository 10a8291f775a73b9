"""Meeting scheduling domain models.

Scheduling preferences are unweighted: each member counts as one unit
regardless of governance weight.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class ScheduleVoteValue(str, Enum):
    """Ternary availability answer for a candidate time."""

    YES = "yes"
    MAYBE = "maybe"
    NO = "no"


# Points per answer when scoring a candidate time
SCHEDULE_SCORE_POINTS: dict[ScheduleVoteValue, int] = {
    ScheduleVoteValue.YES: 2,
    ScheduleVoteValue.MAYBE: 1,
    ScheduleVoteValue.NO: -1,
}


@dataclass(frozen=True, eq=True)
class ScheduleVote:
    """A member's answer for one candidate time."""

    option_id: UUID
    member_id: UUID
    value: ScheduleVoteValue
    comment: str | None = field(default=None)


@dataclass(frozen=True, eq=True)
class ScheduleVoteSummary:
    """Answer counts and score for one candidate time."""

    yes: int = 0
    maybe: int = 0
    no: int = 0
    total: int = 0
    score: int = 0


@dataclass(frozen=True, eq=True)
class ScheduleOption:
    """A candidate meeting time.

    Attributes:
        option_id: Unique identifier of the option.
        meeting_id: The meeting being scheduled.
        starts_at: Candidate start time (UTC).
        duration_minutes: Planned length.
        is_winner: Whether this option was selected.
        votes: Answers recorded for this option.
    """

    option_id: UUID
    meeting_id: UUID
    starts_at: datetime
    duration_minutes: int = 60
    is_winner: bool = False
    votes: tuple[ScheduleVote, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be positive, got {self.duration_minutes}"
            )
        if self.starts_at.tzinfo is None:
            raise ValueError("starts_at must be timezone-aware (UTC)")

    def with_winner(self, is_winner: bool) -> ScheduleOption:
        return replace(self, is_winner=is_winner)

    def with_votes(self, votes: tuple[ScheduleVote, ...]) -> ScheduleOption:
        return replace(self, votes=votes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "option_id": str(self.option_id),
            "meeting_id": str(self.meeting_id),
            "starts_at": self.starts_at.isoformat(),
            "duration_minutes": self.duration_minutes,
            "is_winner": self.is_winner,
        }
