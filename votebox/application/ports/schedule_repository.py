"""Schedule repository port.

Candidate meeting times and the answers recorded for them. Winner
selection is a single call so storage can clear the previous winner and
mark the new one atomically.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from votebox.domain.models.schedule import ScheduleOption, ScheduleVote


class ScheduleRepositoryProtocol(Protocol):
    """Storage for scheduling options and answers."""

    async def save_option(self, option: ScheduleOption) -> None:
        """Insert a candidate time."""
        ...

    async def get_option(self, option_id: UUID) -> ScheduleOption | None:
        """Get an option with its answers, or None if unknown."""
        ...

    async def list_options(self, meeting_id: UUID) -> list[ScheduleOption]:
        """Options of a meeting with their answers, in creation order."""
        ...

    async def upsert_vote(self, vote: ScheduleVote) -> None:
        """Insert or replace the answer keyed by (option_id, member_id)."""
        ...

    async def delete_vote(self, option_id: UUID, member_id: UUID) -> bool:
        """Remove an answer. Returns False if there was none."""
        ...

    async def set_winner(self, meeting_id: UUID, option_id: UUID) -> UUID | None:
        """Atomically clear the meeting's winner flags and mark ``option_id``.

        Returns:
            The previously selected option id, if any.
        """
        ...
