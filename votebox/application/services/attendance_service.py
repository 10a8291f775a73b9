"""Meeting attendance service.

Check-in records a weight snapshot; checking in again after leaving
replaces the row and clears the check-out. A member counts as present
while checked in and not checked out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from votebox.domain.errors import AttendanceNotFoundError, MemberNotFoundError
from votebox.domain.models.attendance import Attendance, AttendanceType

if TYPE_CHECKING:
    from votebox.application.ports.attendance_repository import (
        AttendanceRepositoryProtocol,
    )
    from votebox.application.ports.member_repository import MemberRepositoryProtocol
    from votebox.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)


class AttendanceService:
    """Records check-ins and check-outs for meetings."""

    def __init__(
        self,
        attendance_repo: AttendanceRepositoryProtocol,
        member_repo: MemberRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._attendance_repo = attendance_repo
        self._member_repo = member_repo
        self._time = time_authority
        self._log = logger.bind(component="attendance")

    async def check_in(
        self,
        meeting_id: UUID,
        member_id: UUID,
        attendance_type: AttendanceType = AttendanceType.IN_PERSON,
    ) -> Attendance:
        """Check a member in to a meeting.

        Raises:
            MemberNotFoundError: If the member does not exist.
        """
        member = await self._member_repo.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)

        attendance = Attendance(
            meeting_id=meeting_id,
            member_id=member_id,
            checked_in_at=self._time.utcnow(),
            attendance_type=attendance_type,
            weight_at_checkin=member.weight,
        )
        await self._attendance_repo.upsert(attendance)
        self._log.info(
            "member_checked_in",
            meeting_id=str(meeting_id),
            member_id=str(member_id),
            attendance_type=attendance_type.value,
        )
        return attendance

    async def check_out(self, meeting_id: UUID, member_id: UUID) -> Attendance:
        """Check a member out of a meeting.

        Checking out twice keeps the first check-out time.

        Raises:
            AttendanceNotFoundError: If the member never checked in.
        """
        current = await self._attendance_repo.get(meeting_id, member_id)
        if current is None:
            raise AttendanceNotFoundError(meeting_id, member_id)
        if not current.is_present:
            return current

        updated = current.with_checkout(self._time.utcnow())
        await self._attendance_repo.upsert(updated)
        self._log.info(
            "member_checked_out",
            meeting_id=str(meeting_id),
            member_id=str(member_id),
        )
        return updated

    async def list_attendance(self, meeting_id: UUID) -> list[Attendance]:
        return await self._attendance_repo.list_for_meeting(meeting_id)
