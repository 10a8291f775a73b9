"""Attendance domain model.

A member is present for a computation iff an attendance row exists
for the meeting with no check-out timestamp. The same definition is
used by weight resolution and quorum evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class AttendanceType(str, Enum):
    """How the member attends the meeting."""

    IN_PERSON = "in_person"
    ONLINE = "online"
    PROXY = "proxy"


@dataclass(frozen=True, eq=True)
class Attendance:
    """A member's check-in record for a meeting.

    Attributes:
        meeting_id: The meeting attended.
        member_id: The attending member.
        checked_in_at: When the member checked in (UTC).
        attendance_type: In person, online, or via proxy.
        checked_out_at: When the member left (None while present).
        weight_at_checkin: Weight snapshot taken at check-in.
    """

    meeting_id: UUID
    member_id: UUID
    checked_in_at: datetime
    attendance_type: AttendanceType = AttendanceType.IN_PERSON
    checked_out_at: datetime | None = field(default=None)
    weight_at_checkin: float | None = field(default=None)

    def __post_init__(self) -> None:
        if self.checked_in_at.tzinfo is None:
            raise ValueError("checked_in_at must be timezone-aware (UTC)")
        if self.checked_out_at is not None and self.checked_out_at < self.checked_in_at:
            raise ValueError("checked_out_at cannot precede checked_in_at")

    @property
    def is_present(self) -> bool:
        """Checked in and not yet checked out."""
        return self.checked_out_at is None

    def with_checkout(self, at: datetime) -> Attendance:
        """Return a copy checked out at ``at``."""
        return replace(self, checked_out_at=at)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meeting_id": str(self.meeting_id),
            "member_id": str(self.member_id),
            "checked_in_at": self.checked_in_at.isoformat(),
            "checked_out_at": (
                self.checked_out_at.isoformat() if self.checked_out_at else None
            ),
            "attendance_type": self.attendance_type.value,
            "weight_at_checkin": self.weight_at_checkin,
        }


def present_member_ids(attendance: list[Attendance] | tuple[Attendance, ...]) -> set[UUID]:
    """Collect ids of members checked in and not checked out."""
    return {a.member_id for a in attendance if a.is_present}
