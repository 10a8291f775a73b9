"""Application services for VoteBox.

Services orchestrate the pure domain calculations over the ports:
they read snapshots, run the rules, persist, then notify.
"""

from votebox.application.services.attendance_service import AttendanceService
from votebox.application.services.proxy_registry_service import ProxyRegistryService
from votebox.application.services.quorum_service import QuorumService
from votebox.application.services.schedule_service import ScheduleService
from votebox.application.services.vote_submission_service import (
    VoteSubmissionResult,
    VoteSubmissionService,
)

__all__ = [
    "AttendanceService",
    "ProxyRegistryService",
    "QuorumService",
    "ScheduleService",
    "VoteSubmissionResult",
    "VoteSubmissionService",
]
