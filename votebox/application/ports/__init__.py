"""Application ports for VoteBox.

Ports are the interfaces the governance services depend on. Storage,
realtime notification, metrics and the clock are collaborators behind
these protocols.
"""

from votebox.application.ports.attendance_repository import (
    AttendanceRepositoryProtocol,
)
from votebox.application.ports.governance_metrics import GovernanceMetricsProtocol
from votebox.application.ports.governance_notifier import (
    GovernanceEvent,
    GovernanceNotifierProtocol,
)
from votebox.application.ports.member_repository import MemberRepositoryProtocol
from votebox.application.ports.proxy_repository import ProxyRepositoryProtocol
from votebox.application.ports.schedule_repository import ScheduleRepositoryProtocol
from votebox.application.ports.time_authority import TimeAuthorityProtocol
from votebox.application.ports.vote_repository import VoteRepositoryProtocol

__all__ = [
    "AttendanceRepositoryProtocol",
    "GovernanceEvent",
    "GovernanceMetricsProtocol",
    "GovernanceNotifierProtocol",
    "MemberRepositoryProtocol",
    "ProxyRepositoryProtocol",
    "ScheduleRepositoryProtocol",
    "TimeAuthorityProtocol",
    "VoteRepositoryProtocol",
]
