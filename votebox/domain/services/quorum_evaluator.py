"""Weighted quorum evaluation.

Quorum is the weighted share of eligible members present, counting
delegated weight when the grantee is present and the grantor is not.
Each proxy record is judged on its own grantor/grantee pair, and an
absent grantor adds their weight at most once. Without a meeting the
general scope spans every meeting, where one grantor may hold several
meeting-specific proxies.

Degenerate input (no eligible members, zero total weight) yields 0%
and never reaches quorum.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime
from uuid import UUID

from votebox.domain.models.attendance import Attendance, present_member_ids
from votebox.domain.models.member import Member, eligible_members
from votebox.domain.models.proxy import Proxy
from votebox.domain.models.quorum import AttendanceStats, QuorumResult
from votebox.domain.services.proxy_scope import proxies_in_scope

# Quorum applied when an organization configures none
DEFAULT_QUORUM_PERCENTAGE: float = 50.0


def _percentage(part: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return part / total * 100


def compute_quorum(
    members: Sequence[Member],
    attendance: Iterable[Attendance],
    proxies: Iterable[Proxy],
    required_percentage: float,
    meeting_id: UUID | None = None,
    now: datetime | None = None,
) -> QuorumResult:
    """Evaluate quorum for a meeting snapshot.

    Args:
        members: Organization members.
        attendance: Attendance rows of the meeting.
        proxies: Proxy records; narrowed to the meeting's scope, and to
            records active at ``now`` when ``now`` is given.
        required_percentage: Quorum threshold (0-100).
        meeting_id: The meeting evaluated.
        now: Optional reference time for proxy activity.

    Returns:
        QuorumResult for the snapshot.
    """
    eligible = eligible_members(members)
    weights = {m.member_id: m.weight for m in eligible}

    total_weight = math.fsum(weights.values())
    present_ids = {
        mid for mid in present_member_ids(list(attendance)) if mid in weights
    }
    present_weight = math.fsum(weights[mid] for mid in present_ids)

    delegated: list[float] = []
    counted: set[UUID] = set()
    for proxy in proxies_in_scope(proxies, meeting_id, now):
        if proxy.grantor_id in counted:
            continue
        if proxy.grantee_id in present_ids and proxy.grantor_id not in present_ids:
            counted.add(proxy.grantor_id)
            delegated.append(weights.get(proxy.grantor_id, 0.0))
    proxy_weight = math.fsum(delegated)

    effective = present_weight + proxy_weight
    percentage = _percentage(effective, total_weight)

    return QuorumResult(
        total_weight=total_weight,
        present_weight=present_weight,
        proxy_weight=proxy_weight,
        effective_present_weight=effective,
        percentage=percentage,
        reached=total_weight > 0 and percentage >= required_percentage,
        present_count=len(present_ids),
        total_count=len(eligible),
        required_percentage=required_percentage,
    )


def attendance_stats(
    attendance: Iterable[Attendance],
    members: Sequence[Member],
) -> AttendanceStats:
    """Raw presence totals without delegated weight.

    The check-in weight snapshot is used when one was recorded.
    """
    eligible = {m.member_id: m for m in eligible_members(members)}
    snapshots: dict[UUID, float] = {}
    for row in attendance:
        member = eligible.get(row.member_id)
        if member is None or not row.is_present:
            continue
        if row.weight_at_checkin is not None:
            snapshots[row.member_id] = row.weight_at_checkin
        else:
            snapshots[row.member_id] = member.weight

    total_weight = math.fsum(m.weight for m in eligible.values())
    present_weight = math.fsum(snapshots.values())
    return AttendanceStats(
        total_members=len(eligible),
        present_members=len(snapshots),
        present_weight=present_weight,
        total_weight=total_weight,
        percentage=_percentage(present_weight, total_weight),
    )
