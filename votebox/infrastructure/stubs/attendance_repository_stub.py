"""In-memory stub for AttendanceRepositoryProtocol.

Rows are keyed by (meeting_id, member_id), matching the unique
constraint of the attendance table.
"""

from __future__ import annotations

from uuid import UUID

from votebox.domain.models.attendance import Attendance


class AttendanceRepositoryStub:
    """In-memory implementation of AttendanceRepositoryProtocol."""

    def __init__(self) -> None:
        self._rows: dict[tuple[UUID, UUID], Attendance] = {}

    async def get(self, meeting_id: UUID, member_id: UUID) -> Attendance | None:
        return self._rows.get((meeting_id, member_id))

    async def upsert(self, attendance: Attendance) -> None:
        self._rows[(attendance.meeting_id, attendance.member_id)] = attendance

    async def list_for_meeting(self, meeting_id: UUID) -> list[Attendance]:
        return [a for (mid, _), a in self._rows.items() if mid == meeting_id]
