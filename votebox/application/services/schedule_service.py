"""Meeting scheduling service.

Members answer yes/maybe/no for candidate times and may revise their
answers. Picking the winner is a separate administrative action that
leaves exactly one selected option per meeting.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from votebox.domain.errors import ScheduleOptionNotFoundError
from votebox.domain.events import ScheduleWinnerSelectedEvent
from votebox.domain.models.schedule import (
    ScheduleOption,
    ScheduleVote,
    ScheduleVoteSummary,
)
from votebox.domain.services.schedule_consensus import calculate_winner, rank_options

if TYPE_CHECKING:
    from votebox.application.dtos.governance import CastScheduleVoteInput
    from votebox.application.ports.governance_notifier import (
        GovernanceNotifierProtocol,
    )
    from votebox.application.ports.schedule_repository import (
        ScheduleRepositoryProtocol,
    )
    from votebox.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)


class ScheduleService:
    """Collects scheduling answers and selects a meeting time."""

    def __init__(
        self,
        schedule_repo: ScheduleRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        notifier: GovernanceNotifierProtocol | None = None,
    ) -> None:
        self._schedule_repo = schedule_repo
        self._time = time_authority
        self._notifier = notifier
        self._log = logger.bind(component="schedule")

    async def add_option(
        self,
        meeting_id: UUID,
        starts_at: datetime,
        duration_minutes: int = 60,
    ) -> ScheduleOption:
        """Propose a candidate time for a meeting."""
        option = ScheduleOption(
            option_id=uuid4(),
            meeting_id=meeting_id,
            starts_at=starts_at,
            duration_minutes=duration_minutes,
        )
        await self._schedule_repo.save_option(option)
        self._log.info(
            "schedule_option_added",
            meeting_id=str(meeting_id),
            option_id=str(option.option_id),
        )
        return option

    async def cast_schedule_vote(self, request: CastScheduleVoteInput) -> ScheduleVote:
        """Record or revise a member's answer for a candidate time.

        Raises:
            ScheduleOptionNotFoundError: If the option does not exist.
        """
        await self._require_option(request.option_id)
        vote = ScheduleVote(
            option_id=request.option_id,
            member_id=request.member_id,
            value=request.value,
            comment=request.comment,
        )
        await self._schedule_repo.upsert_vote(vote)
        self._log.debug(
            "schedule_vote_cast",
            option_id=str(request.option_id),
            member_id=str(request.member_id),
            value=request.value.value,
        )
        return vote

    async def remove_schedule_vote(self, option_id: UUID, member_id: UUID) -> bool:
        """Withdraw a member's answer. Returns False if there was none."""
        return await self._schedule_repo.delete_vote(option_id, member_id)

    async def summaries(
        self, meeting_id: UUID
    ) -> list[tuple[ScheduleOption, ScheduleVoteSummary]]:
        """Options of a meeting with their scores, best first."""
        options = await self._schedule_repo.list_options(meeting_id)
        return rank_options(options)

    async def calculate_winner(self, meeting_id: UUID) -> ScheduleOption | None:
        """The best candidate time, or None when the meeting has no options."""
        options = await self._schedule_repo.list_options(meeting_id)
        return calculate_winner(options)

    async def select_winner(self, option_id: UUID) -> ScheduleOption:
        """Mark an option as the meeting's time, clearing any previous winner.

        Selecting the current winner again changes nothing.

        Raises:
            ScheduleOptionNotFoundError: If the option does not exist.
        """
        option = await self._require_option(option_id)
        previous = await self._schedule_repo.set_winner(option.meeting_id, option_id)
        selected = option.with_winner(True)

        self._log.info(
            "schedule_winner_selected",
            meeting_id=str(option.meeting_id),
            option_id=str(option_id),
            previous_option_id=str(previous) if previous else None,
        )
        if self._notifier is not None and previous != option_id:
            await self._notifier.publish(
                ScheduleWinnerSelectedEvent(
                    meeting_id=option.meeting_id,
                    option_id=option_id,
                    starts_at=option.starts_at,
                    selected_at=self._time.utcnow(),
                    previous_option_id=previous,
                )
            )
        return selected

    async def _require_option(self, option_id: UUID) -> ScheduleOption:
        option = await self._schedule_repo.get_option(option_id)
        if option is None:
            self._log.warning("schedule_option_not_found", option_id=str(option_id))
            raise ScheduleOptionNotFoundError(option_id)
        return option
