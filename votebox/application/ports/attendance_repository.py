"""Attendance repository port.

One attendance row exists per (meeting, member). Checking in again
replaces the row.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from votebox.domain.models.attendance import Attendance


class AttendanceRepositoryProtocol(Protocol):
    """Storage for meeting check-ins."""

    async def get(self, meeting_id: UUID, member_id: UUID) -> Attendance | None:
        """Get a member's attendance row for a meeting."""
        ...

    async def upsert(self, attendance: Attendance) -> None:
        """Insert or replace the row keyed by (meeting_id, member_id)."""
        ...

    async def list_for_meeting(self, meeting_id: UUID) -> list[Attendance]:
        """All attendance rows of a meeting, checked out or not."""
        ...
