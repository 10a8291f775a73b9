"""Vote repository port.

Votes are append-only. The storage layer enforces one vote per
(agenda item, represented member) and rejects a second insert rather
than overwriting the first.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from votebox.domain.models.vote import Vote


class VoteRepositoryProtocol(Protocol):
    """Storage for weighted ballot votes."""

    async def save(self, vote: Vote) -> None:
        """Insert a vote.

        Raises:
            DuplicateVoteError: If the represented member already voted
                on the agenda item. The stored vote is left untouched.
        """
        ...

    async def get_for_member(
        self, agenda_item_id: UUID, represented_member_id: UUID
    ) -> Vote | None:
        """Get the vote recorded for a member on an agenda item."""
        ...

    async def list_for_agenda_item(self, agenda_item_id: UUID) -> list[Vote]:
        """All votes of an agenda item in insertion order."""
        ...
