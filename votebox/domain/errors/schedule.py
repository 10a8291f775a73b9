"""Meeting scheduling errors."""

from __future__ import annotations

from uuid import UUID

from votebox.domain.exceptions import GovernanceNotFoundError


class ScheduleOptionNotFoundError(GovernanceNotFoundError):
    """Raised when a schedule option id does not exist.

    Attributes:
        option_id: The unknown option id.
    """

    error_type = "urn:votebox:schedule:option-not-found"
    title = "Schedule Option Not Found"

    def __init__(self, option_id: UUID) -> None:
        self.option_id = option_id
        super().__init__(f"Schedule option not found: {option_id}")
