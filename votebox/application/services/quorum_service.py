"""Quorum service.

Reads members, attendance and proxies for a meeting and evaluates
weighted quorum. The three reads are issued back to back against the
same repositories; callers that need a strictly atomic snapshot must
provide repositories that read from one transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from votebox.domain.errors import MemberNotFoundError
from votebox.domain.models.attendance import present_member_ids
from votebox.domain.models.member import eligible_weights
from votebox.domain.models.quorum import AttendanceStats, QuorumResult
from votebox.domain.services.quorum_evaluator import (
    DEFAULT_QUORUM_PERCENTAGE,
    attendance_stats,
    compute_quorum,
)
from votebox.domain.services.weight_resolver import quorum_effective_weight

if TYPE_CHECKING:
    from votebox.application.ports.attendance_repository import (
        AttendanceRepositoryProtocol,
    )
    from votebox.application.ports.governance_metrics import (
        GovernanceMetricsProtocol,
    )
    from votebox.application.ports.member_repository import MemberRepositoryProtocol
    from votebox.application.ports.proxy_repository import ProxyRepositoryProtocol
    from votebox.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)


class QuorumService:
    """Evaluates weighted quorum for meetings.

    Example:
        >>> service = QuorumService(member_repo, attendance_repo, proxy_repo, time)
        >>> result = await service.evaluate_meeting(org_id, meeting_id)
        >>> result.to_dict()["quorum_reached"]
    """

    def __init__(
        self,
        member_repo: MemberRepositoryProtocol,
        attendance_repo: AttendanceRepositoryProtocol,
        proxy_repo: ProxyRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        metrics: GovernanceMetricsProtocol | None = None,
        default_quorum_percentage: float = DEFAULT_QUORUM_PERCENTAGE,
    ) -> None:
        self._member_repo = member_repo
        self._attendance_repo = attendance_repo
        self._proxy_repo = proxy_repo
        self._time = time_authority
        self._metrics = metrics
        self._default_quorum = default_quorum_percentage
        self._log = logger.bind(component="quorum")

    async def evaluate_meeting(
        self,
        org_id: UUID,
        meeting_id: UUID,
        required_percentage: float | None = None,
    ) -> QuorumResult:
        """Evaluate quorum for a meeting.

        Args:
            org_id: Organization holding the meeting.
            meeting_id: The meeting.
            required_percentage: Threshold; the configured default when None.

        Returns:
            QuorumResult including delegated weight.
        """
        members = await self._member_repo.list_by_org(org_id)
        attendance = await self._attendance_repo.list_for_meeting(meeting_id)
        proxies = await self._proxy_repo.list_by_org(org_id)
        required = (
            self._default_quorum if required_percentage is None else required_percentage
        )

        result = compute_quorum(
            members,
            attendance,
            proxies,
            required,
            meeting_id=meeting_id,
            now=self._time.utcnow(),
        )
        self._log.info(
            "quorum_evaluated",
            org_id=str(org_id),
            meeting_id=str(meeting_id),
            percentage=result.percentage,
            reached=result.reached,
            proxy_weight=result.proxy_weight,
        )
        if self._metrics is not None:
            self._metrics.record_quorum_evaluation(result.reached, result.percentage)
        return result

    async def attendance_stats(self, org_id: UUID, meeting_id: UUID) -> AttendanceStats:
        """Raw presence totals without delegated weight."""
        members = await self._member_repo.list_by_org(org_id)
        attendance = await self._attendance_repo.list_for_meeting(meeting_id)
        return attendance_stats(attendance, members)

    async def member_effective_weight(self, member_id: UUID, meeting_id: UUID) -> float:
        """Presence-gated weight a member contributes to quorum.

        Raises:
            MemberNotFoundError: If the member does not exist.
        """
        member = await self._member_repo.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)

        members = await self._member_repo.list_by_org(member.org_id)
        attendance = await self._attendance_repo.list_for_meeting(meeting_id)
        proxies = await self._proxy_repo.list_by_org(member.org_id)
        weights = eligible_weights(members)

        return quorum_effective_weight(
            member_id,
            weights.get(member_id, 0.0),
            meeting_id,
            proxies,
            present_member_ids(attendance),
            weights,
            now=self._time.utcnow(),
        )
