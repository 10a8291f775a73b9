"""Vote submission service.

Records weighted votes for agenda items and returns the live result.

Flow:
1. Voter must be an eligible member
2. Proxy votes need an active proxy from the represented member to the
   voter, and carry the represented member's weight
3. One vote per (agenda item, represented member); a second attempt is
   rejected and the first vote stays as recorded
4. Persist, then publish the vote-cast event with the recalculated tally
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from votebox.domain.errors import (
    DuplicateVoteError,
    IneligibleVoterError,
    InvalidVoteValueError,
    MemberNotFoundError,
    ProxyVoteNotAuthorizedError,
)
from votebox.domain.events import VoteCastEvent
from votebox.domain.models.member import Member
from votebox.domain.models.vote import RequiredMajority, Vote, VoteResult, VoteValue
from votebox.domain.services.proxy_scope import active_proxies_for_grantee
from votebox.domain.services.vote_tally import tally

if TYPE_CHECKING:
    from votebox.application.dtos.governance import SubmitVoteInput
    from votebox.application.ports.governance_metrics import (
        GovernanceMetricsProtocol,
    )
    from votebox.application.ports.governance_notifier import (
        GovernanceNotifierProtocol,
    )
    from votebox.application.ports.member_repository import MemberRepositoryProtocol
    from votebox.application.ports.proxy_repository import ProxyRepositoryProtocol
    from votebox.application.ports.time_authority import TimeAuthorityProtocol
    from votebox.application.ports.vote_repository import VoteRepositoryProtocol

logger = get_logger(__name__)


@dataclass(frozen=True)
class VoteSubmissionResult:
    """A recorded vote and the tally after it."""

    vote: Vote
    live_result: VoteResult


class VoteSubmissionService:
    """Submits weighted votes, including votes cast under a proxy."""

    def __init__(
        self,
        vote_repo: VoteRepositoryProtocol,
        member_repo: MemberRepositoryProtocol,
        proxy_repo: ProxyRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        notifier: GovernanceNotifierProtocol | None = None,
        metrics: GovernanceMetricsProtocol | None = None,
    ) -> None:
        self._vote_repo = vote_repo
        self._member_repo = member_repo
        self._proxy_repo = proxy_repo
        self._time = time_authority
        self._notifier = notifier
        self._metrics = metrics
        self._log = logger.bind(component="vote_submission")

    async def submit_vote(self, request: SubmitVoteInput) -> VoteSubmissionResult:
        """Record a vote.

        Args:
            request: The submitted ballot.

        Returns:
            The recorded vote and the recalculated tally.

        Raises:
            MemberNotFoundError: Voter or represented member is unknown.
            IneligibleVoterError: Voter or represented member is inactive
                or an observer.
            InvalidVoteValueError: Value not allowed for the ballot type.
            ProxyVoteNotAuthorizedError: No active proxy for a proxy vote.
            DuplicateVoteError: The represented member already voted.
        """
        log = self._log.bind(
            agenda_item_id=str(request.agenda_item_id),
            member_id=str(request.member_id),
            proxy_for_id=str(request.proxy_for_id) if request.proxy_for_id else None,
        )
        now = self._time.utcnow()

        value = request.value
        if not request.vote_type.accepts(value):
            raise InvalidVoteValueError(request.vote, request.vote_type.value)

        voter = await self._eligible_member(request.member_id)
        weight = voter.weight
        if request.proxy_for_id is not None:
            grantor = await self._eligible_member(request.proxy_for_id)
            proxies = await self._proxy_repo.list_for_member(voter.member_id)
            authorized = [
                p
                for p in active_proxies_for_grantee(
                    proxies, voter.member_id, request.meeting_id, now
                )
                if p.grantor_id == grantor.member_id
            ]
            if not authorized:
                log.warning("proxy_vote_not_authorized")
                raise ProxyVoteNotAuthorizedError(voter.member_id, grantor.member_id)
            weight = grantor.weight

        represented = request.proxy_for_id or request.member_id
        existing = await self._vote_repo.get_for_member(request.agenda_item_id, represented)
        if existing is not None:
            log.warning("duplicate_vote_rejected", existing_vote_id=str(existing.vote_id))
            if self._metrics is not None:
                self._metrics.record_duplicate_vote()
            raise DuplicateVoteError(
                agenda_item_id=request.agenda_item_id,
                member_id=represented,
                existing_vote_id=existing.vote_id,
                cast_at=existing.cast_at,
            )

        vote = Vote(
            vote_id=uuid4(),
            agenda_item_id=request.agenda_item_id,
            member_id=request.member_id,
            value=value,
            weight=weight,
            cast_at=now,
            is_proxy=request.is_proxy,
            proxy_for_id=request.proxy_for_id,
        )
        await self._vote_repo.save(vote)
        log.info("vote_cast", vote_id=str(vote.vote_id), weight=weight)
        if self._metrics is not None:
            self._metrics.record_vote_cast(vote.is_proxy)

        live_result = await self.calculate_result(
            request.agenda_item_id, request.required_majority
        )
        if self._notifier is not None:
            await self._notifier.publish(
                VoteCastEvent(
                    vote_id=vote.vote_id,
                    agenda_item_id=vote.agenda_item_id,
                    member_id=vote.member_id,
                    value=value.value if isinstance(value, VoteValue) else value,
                    weight=vote.weight,
                    cast_at=vote.cast_at,
                    is_proxy=vote.is_proxy,
                    proxy_for_id=vote.proxy_for_id,
                    live_result=live_result.to_dict(),
                )
            )
        return VoteSubmissionResult(vote=vote, live_result=live_result)

    async def has_voted(self, agenda_item_id: UUID, member_id: UUID) -> bool:
        """Check whether a member's ballot (own or by proxy) is recorded."""
        vote = await self._vote_repo.get_for_member(agenda_item_id, member_id)
        return vote is not None

    async def calculate_result(
        self,
        agenda_item_id: UUID,
        required_majority: RequiredMajority = RequiredMajority.SIMPLE,
    ) -> VoteResult:
        """Tally the votes recorded for an agenda item."""
        votes = await self._vote_repo.list_for_agenda_item(agenda_item_id)
        return tally(votes, required_majority)

    async def _eligible_member(self, member_id: UUID) -> Member:
        member = await self._member_repo.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        if not member.is_eligible_voter:
            self._log.warning("ineligible_voter_rejected", member_id=str(member_id))
            raise IneligibleVoterError(member_id)
        return member
