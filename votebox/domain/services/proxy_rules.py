"""Proxy creation rules.

Legal constraints checked before a proxy is persisted, in this order:

1. No self-delegation
2. At most one active outgoing proxy per grantor in overlapping scopes
3. At most ``max_per_grantee`` active incoming proxies per grantee
   in the requested scope
4. No circular pair: the grantee must not hold an active proxy to
   the grantor, in any scope

The checks run against a consistent snapshot of the organization's
proxies. Serializing concurrent creations is the storage layer's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

import structlog

from votebox.domain.errors.proxy import (
    CircularProxyError,
    DuplicateGrantorProxyError,
    GranteeLimitExceededError,
    SelfDelegationError,
)
from votebox.domain.models.proxy import Proxy
from votebox.domain.services.proxy_scope import (
    active_proxies_for_grantee,
    active_proxies_for_grantor,
)

logger = structlog.get_logger()

# Legal maximum of active incoming proxies per grantee
DEFAULT_MAX_PROXIES_PER_GRANTEE: int = 2


def validate_new_proxy(
    existing: Sequence[Proxy],
    grantor_id: UUID,
    grantee_id: UUID,
    meeting_id: UUID | None,
    now: datetime,
    max_per_grantee: int = DEFAULT_MAX_PROXIES_PER_GRANTEE,
) -> None:
    """Check that a new proxy may be created.

    Args:
        existing: Snapshot of the organization's proxy records.
        grantor_id: Member delegating their vote.
        grantee_id: Member receiving the delegation.
        meeting_id: Requested scope (None for a general proxy).
        now: Reference time for "active".
        max_per_grantee: Legal maximum of incoming proxies.

    Raises:
        SelfDelegationError: grantor and grantee are the same member.
        DuplicateGrantorProxyError: grantor already delegates in an
            overlapping scope.
        GranteeLimitExceededError: grantee is at the legal maximum.
        CircularProxyError: grantee already delegates to grantor.
    """
    if grantor_id == grantee_id:
        raise SelfDelegationError(grantor_id)

    outgoing = active_proxies_for_grantor(existing, grantor_id, meeting_id, now)
    if outgoing:
        logger.debug(
            "proxy_rejected_duplicate_grantor",
            grantor_id=str(grantor_id),
            existing_proxy_id=str(outgoing[0].proxy_id),
        )
        raise DuplicateGrantorProxyError(
            grantor_id=grantor_id,
            meeting_id=meeting_id,
            existing_proxy_id=outgoing[0].proxy_id,
        )

    incoming = active_proxies_for_grantee(existing, grantee_id, meeting_id, now)
    if len(incoming) >= max_per_grantee:
        raise GranteeLimitExceededError(
            grantee_id=grantee_id,
            active_count=len(incoming),
            limit=max_per_grantee,
        )

    for proxy in existing:
        if (
            proxy.grantor_id == grantee_id
            and proxy.grantee_id == grantor_id
            and proxy.is_active_at(now)
        ):
            raise CircularProxyError(
                grantor_id=grantor_id,
                grantee_id=grantee_id,
                reverse_proxy_id=proxy.proxy_id,
            )


def can_grant(
    existing: Sequence[Proxy],
    member_id: UUID,
    meeting_id: UUID | None,
    now: datetime,
) -> bool:
    """Check whether a member has no active outgoing proxy in scope."""
    return not active_proxies_for_grantor(existing, member_id, meeting_id, now)


def can_receive(
    existing: Sequence[Proxy],
    member_id: UUID,
    meeting_id: UUID | None,
    now: datetime,
    max_per_grantee: int = DEFAULT_MAX_PROXIES_PER_GRANTEE,
) -> bool:
    """Check whether a member is below the incoming proxy limit in scope."""
    incoming = active_proxies_for_grantee(existing, member_id, meeting_id, now)
    return len(incoming) < max_per_grantee
