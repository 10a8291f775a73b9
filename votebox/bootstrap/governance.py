"""Bootstrap wiring for governance services.

Repositories default to the in-memory stubs. Tests swap in their own
instances with the ``set_*`` functions and clear everything with
``reset_governance_dependencies``.
"""

from __future__ import annotations

from votebox.application.ports.attendance_repository import (
    AttendanceRepositoryProtocol,
)
from votebox.application.ports.governance_metrics import GovernanceMetricsProtocol
from votebox.application.ports.governance_notifier import GovernanceNotifierProtocol
from votebox.application.ports.member_repository import MemberRepositoryProtocol
from votebox.application.ports.proxy_repository import ProxyRepositoryProtocol
from votebox.application.ports.schedule_repository import ScheduleRepositoryProtocol
from votebox.application.ports.time_authority import TimeAuthorityProtocol
from votebox.application.ports.vote_repository import VoteRepositoryProtocol
from votebox.application.services import (
    AttendanceService,
    ProxyRegistryService,
    QuorumService,
    ScheduleService,
    VoteSubmissionService,
)
from votebox.config import GovernanceConfig
from votebox.infrastructure.adapters import SystemTimeAuthority
from votebox.infrastructure.monitoring import get_governance_metrics_collector
from votebox.infrastructure.stubs import (
    AttendanceRepositoryStub,
    GovernanceNotifierStub,
    MemberRepositoryStub,
    ProxyRepositoryStub,
    ScheduleRepositoryStub,
    VoteRepositoryStub,
)

_config: GovernanceConfig | None = None
_time_authority: TimeAuthorityProtocol | None = None
_metrics: GovernanceMetricsProtocol | None = None
_notifier: GovernanceNotifierProtocol | None = None
_member_repository: MemberRepositoryProtocol | None = None
_proxy_repository: ProxyRepositoryProtocol | None = None
_attendance_repository: AttendanceRepositoryProtocol | None = None
_vote_repository: VoteRepositoryProtocol | None = None
_schedule_repository: ScheduleRepositoryProtocol | None = None


def get_governance_config() -> GovernanceConfig:
    """Get governance config, read from the environment on first use."""
    global _config
    if _config is None:
        _config = GovernanceConfig.from_environment()
    return _config


def get_time_authority() -> TimeAuthorityProtocol:
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def get_governance_metrics() -> GovernanceMetricsProtocol:
    global _metrics
    if _metrics is None:
        _metrics = get_governance_metrics_collector()
    return _metrics


def get_governance_notifier() -> GovernanceNotifierProtocol:
    global _notifier
    if _notifier is None:
        _notifier = GovernanceNotifierStub()
    return _notifier


def get_member_repository() -> MemberRepositoryProtocol:
    global _member_repository
    if _member_repository is None:
        _member_repository = MemberRepositoryStub()
    return _member_repository


def get_proxy_repository() -> ProxyRepositoryProtocol:
    global _proxy_repository
    if _proxy_repository is None:
        _proxy_repository = ProxyRepositoryStub()
    return _proxy_repository


def get_attendance_repository() -> AttendanceRepositoryProtocol:
    global _attendance_repository
    if _attendance_repository is None:
        _attendance_repository = AttendanceRepositoryStub()
    return _attendance_repository


def get_vote_repository() -> VoteRepositoryProtocol:
    global _vote_repository
    if _vote_repository is None:
        _vote_repository = VoteRepositoryStub()
    return _vote_repository


def get_schedule_repository() -> ScheduleRepositoryProtocol:
    global _schedule_repository
    if _schedule_repository is None:
        _schedule_repository = ScheduleRepositoryStub()
    return _schedule_repository


def get_proxy_registry_service() -> ProxyRegistryService:
    """Build a proxy registry over the current dependencies."""
    return ProxyRegistryService(
        proxy_repo=get_proxy_repository(),
        member_repo=get_member_repository(),
        time_authority=get_time_authority(),
        notifier=get_governance_notifier(),
        metrics=get_governance_metrics(),
        max_proxies_per_grantee=get_governance_config().max_proxies_per_grantee,
    )


def get_quorum_service() -> QuorumService:
    return QuorumService(
        member_repo=get_member_repository(),
        attendance_repo=get_attendance_repository(),
        proxy_repo=get_proxy_repository(),
        time_authority=get_time_authority(),
        metrics=get_governance_metrics(),
        default_quorum_percentage=get_governance_config().default_quorum_percentage,
    )


def get_vote_submission_service() -> VoteSubmissionService:
    return VoteSubmissionService(
        vote_repo=get_vote_repository(),
        member_repo=get_member_repository(),
        proxy_repo=get_proxy_repository(),
        time_authority=get_time_authority(),
        notifier=get_governance_notifier(),
        metrics=get_governance_metrics(),
    )


def get_attendance_service() -> AttendanceService:
    return AttendanceService(
        attendance_repo=get_attendance_repository(),
        member_repo=get_member_repository(),
        time_authority=get_time_authority(),
    )


def get_schedule_service() -> ScheduleService:
    return ScheduleService(
        schedule_repo=get_schedule_repository(),
        time_authority=get_time_authority(),
        notifier=get_governance_notifier(),
    )


def reset_governance_dependencies() -> None:
    """Reset all singleton instances for testing."""
    global _config
    global _time_authority
    global _metrics
    global _notifier
    global _member_repository
    global _proxy_repository
    global _attendance_repository
    global _vote_repository
    global _schedule_repository

    _config = None
    _time_authority = None
    _metrics = None
    _notifier = None
    _member_repository = None
    _proxy_repository = None
    _attendance_repository = None
    _vote_repository = None
    _schedule_repository = None


def set_governance_config(config: GovernanceConfig) -> None:
    global _config
    _config = config


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom clock for testing."""
    global _time_authority
    _time_authority = time_authority


def set_governance_metrics(metrics: GovernanceMetricsProtocol) -> None:
    global _metrics
    _metrics = metrics


def set_governance_notifier(notifier: GovernanceNotifierProtocol) -> None:
    global _notifier
    _notifier = notifier


def set_member_repository(repo: MemberRepositoryProtocol) -> None:
    """Set custom member repository for testing."""
    global _member_repository
    _member_repository = repo


def set_proxy_repository(repo: ProxyRepositoryProtocol) -> None:
    """Set custom proxy repository for testing."""
    global _proxy_repository
    _proxy_repository = repo


def set_attendance_repository(repo: AttendanceRepositoryProtocol) -> None:
    global _attendance_repository
    _attendance_repository = repo


def set_vote_repository(repo: VoteRepositoryProtocol) -> None:
    global _vote_repository
    _vote_repository = repo


def set_schedule_repository(repo: ScheduleRepositoryProtocol) -> None:
    global _schedule_repository
    _schedule_repository = repo
