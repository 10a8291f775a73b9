"""Proxy registry service.

Creates, revokes and deletes proxy delegations over the proxy
repository, and answers the delegation queries used by quorum and
voting.

Flow for creation:
1. Take a snapshot of the organization's proxies
2. Run the pure creation rules against it
3. Persist
4. Notify the realtime collaborator

Notification happens only after persistence succeeds. Rule violations
are logged and re-raised to the caller; there are no retries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from votebox.domain.errors import MemberNotFoundError, ProxyNotFoundError
from votebox.domain.events import ProxyCreatedEvent, ProxyRevokedEvent
from votebox.domain.exceptions import GovernanceValidationError
from votebox.domain.models.member import Member, eligible_weights
from votebox.domain.models.proxy import (
    Proxy,
    ProxyRepresentation,
    ProxyStats,
    ProxyValidationResult,
)
from votebox.domain.services.proxy_rules import (
    DEFAULT_MAX_PROXIES_PER_GRANTEE,
    can_grant,
    can_receive,
    validate_new_proxy,
)
from votebox.domain.services.proxy_scope import (
    active_proxies_for_grantee,
    active_proxies_for_grantor,
    newest_first,
    proxies_in_scope,
)
from votebox.domain.services.weight_resolver import casting_weight

if TYPE_CHECKING:
    from votebox.application.dtos.governance import CreateProxyInput
    from votebox.application.ports.governance_metrics import (
        GovernanceMetricsProtocol,
    )
    from votebox.application.ports.governance_notifier import (
        GovernanceNotifierProtocol,
    )
    from votebox.application.ports.member_repository import MemberRepositoryProtocol
    from votebox.application.ports.proxy_repository import ProxyRepositoryProtocol
    from votebox.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)

# Reasons reported by validate_proxy
REASON_NOT_FOUND = "not_found"
REASON_NOT_YET_VALID = "not_yet_valid"
REASON_EXPIRED = "expired"
REASON_REVOKED = "revoked"


class ProxyRegistryService:
    """Manages proxy delegations for organizations.

    Example:
        >>> service = ProxyRegistryService(
        ...     proxy_repo=proxy_repo,
        ...     member_repo=member_repo,
        ...     time_authority=time_authority,
        ... )
        >>> proxy = await service.create_proxy(CreateProxyInput(...))
    """

    def __init__(
        self,
        proxy_repo: ProxyRepositoryProtocol,
        member_repo: MemberRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        notifier: GovernanceNotifierProtocol | None = None,
        metrics: GovernanceMetricsProtocol | None = None,
        max_proxies_per_grantee: int = DEFAULT_MAX_PROXIES_PER_GRANTEE,
    ) -> None:
        """Initialize the registry.

        Args:
            proxy_repo: Storage for proxies.
            member_repo: Read access to members (for weights).
            time_authority: Clock for validity windows.
            notifier: Optional realtime collaborator.
            metrics: Optional metrics sink.
            max_proxies_per_grantee: Legal maximum of incoming proxies.
        """
        self._proxy_repo = proxy_repo
        self._member_repo = member_repo
        self._time = time_authority
        self._notifier = notifier
        self._metrics = metrics
        self._max_per_grantee = max_proxies_per_grantee
        self._log = logger.bind(component="proxy_registry")

    @property
    def max_proxies_per_grantee(self) -> int:
        return self._max_per_grantee

    async def create_proxy(self, request: CreateProxyInput) -> Proxy:
        """Validate and persist a new proxy.

        Args:
            request: The delegation request.

        Returns:
            The persisted proxy.

        Raises:
            SelfDelegationError: grantor and grantee are the same member.
            DuplicateGrantorProxyError: grantor already delegates in scope.
            GranteeLimitExceededError: grantee is at the legal maximum.
            CircularProxyError: grantee already delegates to grantor.
        """
        log = self._log.bind(
            org_id=str(request.org_id),
            grantor_id=str(request.grantor_id),
            grantee_id=str(request.grantee_id),
            meeting_id=str(request.meeting_id) if request.meeting_id else None,
        )
        now = self._time.utcnow()

        existing = await self._proxy_repo.list_by_org(request.org_id)
        try:
            validate_new_proxy(
                existing,
                grantor_id=request.grantor_id,
                grantee_id=request.grantee_id,
                meeting_id=request.meeting_id,
                now=now,
                max_per_grantee=self._max_per_grantee,
            )
        except GovernanceValidationError as e:
            log.warning("proxy_rejected", reason=e.title, detail=str(e))
            if self._metrics is not None:
                self._metrics.record_proxy_rejected(e.title)
            raise

        proxy = Proxy(
            proxy_id=uuid4(),
            org_id=request.org_id,
            grantor_id=request.grantor_id,
            grantee_id=request.grantee_id,
            meeting_id=request.meeting_id,
            valid_from=request.valid_from or now,
            valid_until=request.valid_until,
            document_ref=request.document_ref,
            created_at=now,
        )
        await self._proxy_repo.save(proxy)
        log.info("proxy_created", proxy_id=str(proxy.proxy_id))

        if self._metrics is not None:
            self._metrics.record_proxy_created("general" if proxy.is_general else "meeting")
        if self._notifier is not None:
            await self._notifier.publish(
                ProxyCreatedEvent(
                    proxy_id=proxy.proxy_id,
                    org_id=proxy.org_id,
                    grantor_id=proxy.grantor_id,
                    grantee_id=proxy.grantee_id,
                    meeting_id=proxy.meeting_id,
                    created_at=now,
                )
            )
        return proxy

    async def revoke_proxy(self, proxy_id: UUID) -> Proxy:
        """Close a proxy's validity window at the current time.

        An already revoked proxy is returned unchanged, keeping its first
        revocation time.

        Raises:
            ProxyNotFoundError: If the proxy does not exist.
        """
        proxy = await self._require(proxy_id)
        if proxy.is_revoked:
            self._log.debug("proxy_already_revoked", proxy_id=str(proxy_id))
            return proxy
        now = self._time.utcnow()
        revoked = proxy.with_revocation(now)
        await self._proxy_repo.update(revoked)

        self._log.info(
            "proxy_revoked",
            proxy_id=str(proxy_id),
            org_id=str(proxy.org_id),
        )
        if self._metrics is not None:
            self._metrics.record_proxy_revoked()
        if self._notifier is not None:
            await self._notifier.publish(
                ProxyRevokedEvent(
                    proxy_id=revoked.proxy_id,
                    org_id=revoked.org_id,
                    grantor_id=revoked.grantor_id,
                    grantee_id=revoked.grantee_id,
                    revoked_at=now,
                )
            )
        return revoked

    async def delete_proxy(self, proxy_id: UUID) -> None:
        """Hard-delete a proxy regardless of its state.

        Raises:
            ProxyNotFoundError: If the proxy does not exist.
        """
        removed = await self._proxy_repo.delete(proxy_id)
        if not removed:
            self._log.warning("proxy_delete_unknown", proxy_id=str(proxy_id))
            raise ProxyNotFoundError(proxy_id)
        self._log.info("proxy_deleted", proxy_id=str(proxy_id))

    async def attach_document(self, proxy_id: UUID, document_ref: str | None) -> Proxy:
        """Set or clear the supporting document reference of a proxy."""
        proxy = await self._require(proxy_id)
        updated = proxy.with_document(document_ref)
        await self._proxy_repo.update(updated)
        self._log.info(
            "proxy_document_attached",
            proxy_id=str(proxy_id),
            has_document=document_ref is not None,
        )
        return updated

    async def active_proxies_for_grantee(
        self, member_id: UUID, meeting_id: UUID | None
    ) -> list[Proxy]:
        """Active incoming proxies of a member in the meeting's scope, newest first."""
        proxies = await self._proxy_repo.list_for_member(member_id)
        return newest_first(
            active_proxies_for_grantee(proxies, member_id, meeting_id, self._time.utcnow())
        )

    async def active_proxies_for_grantor(
        self, member_id: UUID, meeting_id: UUID | None
    ) -> list[Proxy]:
        """Active outgoing proxies of a member in the meeting's scope, newest first."""
        proxies = await self._proxy_repo.list_for_member(member_id)
        return newest_first(
            active_proxies_for_grantor(proxies, member_id, meeting_id, self._time.utcnow())
        )

    async def list_org_proxies(
        self,
        org_id: UUID,
        meeting_id: UUID | None = None,
        include_inactive: bool = False,
    ) -> list[Proxy]:
        """Proxies of an organization, newest first.

        Args:
            org_id: The organization.
            meeting_id: Narrow to the meeting's scope when given.
            include_inactive: Keep expired, revoked and future proxies.
        """
        proxies = await self._proxy_repo.list_by_org(org_id)
        now = None if include_inactive else self._time.utcnow()
        return newest_first(proxies_in_scope(proxies, meeting_id, now))

    async def validate_proxy(self, proxy_id: UUID) -> ProxyValidationResult:
        """Check whether a stored proxy is usable right now."""
        proxy = await self._proxy_repo.get(proxy_id)
        if proxy is None:
            return ProxyValidationResult.invalid(REASON_NOT_FOUND)

        now = self._time.utcnow()
        if proxy.is_revoked:
            return ProxyValidationResult.invalid(REASON_REVOKED)
        if proxy.valid_from > now:
            return ProxyValidationResult.invalid(REASON_NOT_YET_VALID)
        if proxy.valid_until is not None and proxy.valid_until < now:
            return ProxyValidationResult.invalid(REASON_EXPIRED)
        return ProxyValidationResult.ok()

    async def can_grant_proxy(self, member_id: UUID, meeting_id: UUID | None) -> bool:
        proxies = await self._proxy_repo.list_for_member(member_id)
        return can_grant(proxies, member_id, meeting_id, self._time.utcnow())

    async def can_receive_proxy(self, member_id: UUID, meeting_id: UUID | None) -> bool:
        proxies = await self._proxy_repo.list_for_member(member_id)
        return can_receive(
            proxies,
            member_id,
            meeting_id,
            self._time.utcnow(),
            max_per_grantee=self._max_per_grantee,
        )

    async def proxy_stats(self, member_id: UUID, meeting_id: UUID | None) -> ProxyStats:
        """Delegation totals for a member.

        ``total_weight`` is the member's casting weight: own weight plus
        every active incoming grantor weight.

        Raises:
            MemberNotFoundError: If the member does not exist.
        """
        member = await self._require_member(member_id)
        proxies = await self._proxy_repo.list_for_member(member_id)
        now = self._time.utcnow()
        members = await self._member_repo.list_by_org(member.org_id)

        granted = active_proxies_for_grantor(proxies, member_id, meeting_id, now)
        received = active_proxies_for_grantee(proxies, member_id, meeting_id, now)
        own = member.weight if member.is_eligible_voter else 0.0
        return ProxyStats(
            total_granted=len(granted),
            total_received=len(received),
            total_weight=casting_weight(
                member_id, own, meeting_id, received, eligible_weights(members)
            ),
        )

    async def proxy_representation(
        self, org_id: UUID, meeting_id: UUID | None
    ) -> dict[UUID, list[ProxyRepresentation]]:
        """Who represents whom for a meeting, keyed by grantee."""
        proxies = await self._proxy_repo.list_by_org(org_id)
        members = {m.member_id: m for m in await self._member_repo.list_by_org(org_id)}

        representation: dict[UUID, list[ProxyRepresentation]] = {}
        for proxy in proxies_in_scope(proxies, meeting_id, self._time.utcnow()):
            grantor = members.get(proxy.grantor_id)
            if grantor is None or proxy.grantee_id not in members:
                continue
            representation.setdefault(proxy.grantee_id, []).append(
                ProxyRepresentation(
                    proxy_id=proxy.proxy_id,
                    grantor_id=proxy.grantor_id,
                    grantee_id=proxy.grantee_id,
                    weight=grantor.weight if grantor.is_eligible_voter else 0.0,
                )
            )
        return representation

    async def represented_members(
        self, member_id: UUID, meeting_id: UUID | None
    ) -> list[Member]:
        """Grantors a member currently represents."""
        incoming = await self.active_proxies_for_grantee(member_id, meeting_id)
        represented: list[Member] = []
        for proxy in incoming:
            grantor = await self._member_repo.get(proxy.grantor_id)
            if grantor is not None:
                represented.append(grantor)
        return represented

    async def represented_by(
        self, member_id: UUID, meeting_id: UUID | None
    ) -> UUID | None:
        """The grantee currently representing a member, if any."""
        outgoing = await self.active_proxies_for_grantor(member_id, meeting_id)
        if not outgoing:
            return None
        return outgoing[0].grantee_id

    async def _require(self, proxy_id: UUID) -> Proxy:
        proxy = await self._proxy_repo.get(proxy_id)
        if proxy is None:
            self._log.warning("proxy_not_found", proxy_id=str(proxy_id))
            raise ProxyNotFoundError(proxy_id)
        return proxy

    async def _require_member(self, member_id: UUID) -> Member:
        member = await self._member_repo.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member
