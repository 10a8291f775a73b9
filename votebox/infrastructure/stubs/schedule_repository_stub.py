"""In-memory stub for ScheduleRepositoryProtocol.

Answers are keyed by (option_id, member_id) so a second answer replaces
the first. ``set_winner`` clears and sets the flag in one step.
"""

from __future__ import annotations

from uuid import UUID

from votebox.domain.models.schedule import ScheduleOption, ScheduleVote


class ScheduleRepositoryStub:
    """In-memory implementation of ScheduleRepositoryProtocol."""

    def __init__(self) -> None:
        self._options: dict[UUID, ScheduleOption] = {}
        self._votes: dict[tuple[UUID, UUID], ScheduleVote] = {}

    async def save_option(self, option: ScheduleOption) -> None:
        if option.option_id in self._options:
            raise ValueError(f"Schedule option {option.option_id} already exists")
        self._options[option.option_id] = option.with_votes(())

    async def get_option(self, option_id: UUID) -> ScheduleOption | None:
        option = self._options.get(option_id)
        if option is None:
            return None
        return self._with_votes(option)

    async def list_options(self, meeting_id: UUID) -> list[ScheduleOption]:
        return [
            self._with_votes(o)
            for o in self._options.values()
            if o.meeting_id == meeting_id
        ]

    async def upsert_vote(self, vote: ScheduleVote) -> None:
        self._votes[(vote.option_id, vote.member_id)] = vote

    async def delete_vote(self, option_id: UUID, member_id: UUID) -> bool:
        return self._votes.pop((option_id, member_id), None) is not None

    async def set_winner(self, meeting_id: UUID, option_id: UUID) -> UUID | None:
        previous: UUID | None = None
        for oid, option in self._options.items():
            if option.meeting_id != meeting_id:
                continue
            if option.is_winner:
                previous = oid
            self._options[oid] = option.with_winner(oid == option_id)
        return previous

    def winners(self, meeting_id: UUID) -> list[UUID]:
        """Ids of options flagged as winner for a meeting."""
        return [
            oid
            for oid, o in self._options.items()
            if o.meeting_id == meeting_id and o.is_winner
        ]

    def _with_votes(self, option: ScheduleOption) -> ScheduleOption:
        votes = tuple(
            v for (oid, _), v in self._votes.items() if oid == option.option_id
        )
        return option.with_votes(votes)
