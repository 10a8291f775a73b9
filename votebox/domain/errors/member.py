"""Member lookup errors."""

from __future__ import annotations

from uuid import UUID

from votebox.domain.exceptions import GovernanceNotFoundError


class MemberNotFoundError(GovernanceNotFoundError):
    """Raised when a member id does not exist in the organization.

    Attributes:
        member_id: The unknown member id.
    """

    error_type = "urn:votebox:member:not-found"
    title = "Member Not Found"

    def __init__(self, member_id: UUID) -> None:
        self.member_id = member_id
        super().__init__(f"Member not found: {member_id}")
