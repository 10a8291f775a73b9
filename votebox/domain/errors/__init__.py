"""Domain errors for VoteBox.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from VoteBoxError.
"""

from votebox.domain.errors.attendance import AttendanceNotFoundError
from votebox.domain.errors.member import MemberNotFoundError
from votebox.domain.errors.proxy import (
    CircularProxyError,
    DuplicateGrantorProxyError,
    GranteeLimitExceededError,
    ProxyError,
    ProxyNotFoundError,
    SelfDelegationError,
)
from votebox.domain.errors.schedule import ScheduleOptionNotFoundError
from votebox.domain.errors.vote import (
    DuplicateVoteError,
    IneligibleVoterError,
    InvalidVoteValueError,
    ProxyVoteNotAuthorizedError,
    VoteError,
)

__all__: list[str] = [
    "AttendanceNotFoundError",
    "CircularProxyError",
    "DuplicateGrantorProxyError",
    "DuplicateVoteError",
    "GranteeLimitExceededError",
    "IneligibleVoterError",
    "InvalidVoteValueError",
    "MemberNotFoundError",
    "ProxyError",
    "ProxyNotFoundError",
    "ProxyVoteNotAuthorizedError",
    "ScheduleOptionNotFoundError",
    "SelfDelegationError",
    "VoteError",
]
