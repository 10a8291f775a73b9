"""In-memory stubs for VoteBox ports.

Used by tests and by the default bootstrap wiring. Each stub enforces
the uniqueness rules a database constraint would.
"""

from votebox.infrastructure.stubs.attendance_repository_stub import (
    AttendanceRepositoryStub,
)
from votebox.infrastructure.stubs.governance_notifier_stub import (
    GovernanceNotifierStub,
)
from votebox.infrastructure.stubs.member_repository_stub import MemberRepositoryStub
from votebox.infrastructure.stubs.proxy_repository_stub import ProxyRepositoryStub
from votebox.infrastructure.stubs.schedule_repository_stub import (
    ScheduleRepositoryStub,
)
from votebox.infrastructure.stubs.vote_repository_stub import VoteRepositoryStub

__all__ = [
    "AttendanceRepositoryStub",
    "GovernanceNotifierStub",
    "MemberRepositoryStub",
    "ProxyRepositoryStub",
    "ScheduleRepositoryStub",
    "VoteRepositoryStub",
]
