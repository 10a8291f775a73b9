"""Effective weight resolution.

Two explicit call sites:

- ``quorum_effective_weight``: presence-gated. A proxy adds the grantor's
  weight only while the grantor is absent; a present grantor votes for
  themself.
- ``casting_weight``: unconditional. Everything a grantee may cast when
  voting on behalf of absent grantors.

Each grantor counts once even when several of their proxies fall in
scope. Grantors missing from ``member_weights`` (inactive members, observers)
contribute nothing.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from uuid import UUID

from votebox.domain.models.proxy import Proxy
from votebox.domain.services.proxy_scope import proxies_in_scope


def _incoming(
    member_id: UUID,
    meeting_id: UUID | None,
    proxies: Iterable[Proxy],
    now: datetime | None,
) -> list[Proxy]:
    seen: set[UUID] = set()
    incoming: list[Proxy] = []
    for p in proxies_in_scope(proxies, meeting_id, now):
        if p.grantee_id == member_id and p.grantor_id not in seen:
            seen.add(p.grantor_id)
            incoming.append(p)
    return incoming


def quorum_effective_weight(
    member_id: UUID,
    own_weight: float,
    meeting_id: UUID | None,
    proxies: Iterable[Proxy],
    present_member_ids: set[UUID] | frozenset[UUID],
    member_weights: Mapping[UUID, float],
    now: datetime | None = None,
) -> float:
    """Own weight plus the weight of absent grantors.

    Args:
        member_id: The grantee whose weight is resolved.
        own_weight: The member's own weight.
        meeting_id: Meeting scope (None for the general scope).
        proxies: Proxies for the meeting; filtered to active ones when
            ``now`` is given.
        present_member_ids: Members checked in and not checked out.
        member_weights: Weights of eligible members.
        now: Optional reference time for activity filtering.

    Returns:
        The presence-gated effective weight.
    """
    delegated = [
        member_weights.get(p.grantor_id, 0.0)
        for p in _incoming(member_id, meeting_id, proxies, now)
        if p.grantor_id not in present_member_ids
    ]
    return math.fsum([own_weight, *delegated])


def casting_weight(
    member_id: UUID,
    own_weight: float,
    meeting_id: UUID | None,
    proxies: Iterable[Proxy],
    member_weights: Mapping[UUID, float],
    now: datetime | None = None,
) -> float:
    """Own weight plus every active incoming proxy weight."""
    delegated = [
        member_weights.get(p.grantor_id, 0.0)
        for p in _incoming(member_id, meeting_id, proxies, now)
    ]
    return math.fsum([own_weight, *delegated])
