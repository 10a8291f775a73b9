"""Domain models for VoteBox.

Contains value objects and domain models that represent
core governance concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from votebox.domain.models.attendance import Attendance, AttendanceType
from votebox.domain.models.member import Member, MemberRole
from votebox.domain.models.proxy import (
    Proxy,
    ProxyRepresentation,
    ProxyStats,
    ProxyValidationResult,
)
from votebox.domain.models.quorum import AttendanceStats, QuorumResult
from votebox.domain.models.schedule import (
    ScheduleOption,
    ScheduleVote,
    ScheduleVoteSummary,
    ScheduleVoteValue,
)
from votebox.domain.models.vote import (
    RequiredMajority,
    Vote,
    VoteResult,
    VoteType,
    VoteValue,
)

__all__: list[str] = [
    "Attendance",
    "AttendanceStats",
    "AttendanceType",
    "Member",
    "MemberRole",
    "Proxy",
    "ProxyRepresentation",
    "ProxyStats",
    "ProxyValidationResult",
    "QuorumResult",
    "RequiredMajority",
    "ScheduleOption",
    "ScheduleVote",
    "ScheduleVoteSummary",
    "ScheduleVoteValue",
    "Vote",
    "VoteResult",
    "VoteType",
    "VoteValue",
]
