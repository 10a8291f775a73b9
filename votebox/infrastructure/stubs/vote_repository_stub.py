"""In-memory stub for VoteRepositoryProtocol.

Simulates the unique constraint on (agenda_item_id, represented member):
a second insert raises DuplicateVoteError and the stored vote is kept.
"""

from __future__ import annotations

from uuid import UUID

from votebox.domain.errors import DuplicateVoteError
from votebox.domain.models.vote import Vote


class VoteRepositoryStub:
    """In-memory implementation of VoteRepositoryProtocol."""

    def __init__(self) -> None:
        # Key: (agenda_item_id, represented_member_id)
        self._votes: dict[tuple[UUID, UUID], Vote] = {}

    async def save(self, vote: Vote) -> None:
        key = vote.ballot_key
        existing = self._votes.get(key)
        if existing is not None:
            raise DuplicateVoteError(
                agenda_item_id=vote.agenda_item_id,
                member_id=vote.represented_member_id,
                existing_vote_id=existing.vote_id,
                cast_at=existing.cast_at,
            )
        self._votes[key] = vote

    async def get_for_member(
        self, agenda_item_id: UUID, represented_member_id: UUID
    ) -> Vote | None:
        return self._votes.get((agenda_item_id, represented_member_id))

    async def list_for_agenda_item(self, agenda_item_id: UUID) -> list[Vote]:
        return [v for v in self._votes.values() if v.agenda_item_id == agenda_item_id]

    def count(self) -> int:
        return len(self._votes)
