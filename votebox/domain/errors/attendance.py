"""Attendance errors."""

from __future__ import annotations

from uuid import UUID

from votebox.domain.exceptions import GovernanceNotFoundError


class AttendanceNotFoundError(GovernanceNotFoundError):
    """Raised when checking out a member who never checked in.

    Attributes:
        meeting_id: The meeting.
        member_id: The member without an attendance row.
    """

    error_type = "urn:votebox:attendance:not-found"
    title = "Attendance Not Found"

    def __init__(self, meeting_id: UUID, member_id: UUID) -> None:
        self.meeting_id = meeting_id
        self.member_id = member_id
        super().__init__(
            f"Member {member_id} has not checked in to meeting {meeting_id}"
        )
