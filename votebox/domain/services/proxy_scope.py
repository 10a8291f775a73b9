"""Proxy scope resolution.

One definition of "proxies that apply to meeting M" shared by proxy
creation, weight resolution and quorum evaluation:

- meeting M: proxies scoped to M plus general proxies
- no meeting (general scope): every proxy, since a general proxy
  overlaps whatever meeting-specific proxy the member holds

A grantor never holds two concurrently active proxies in overlapping
scopes (creation rejects it), so results for one meeting need no
deduplication. The general scope can hold several meeting-specific
proxies of one grantor; weight accounting counts such a grantor once.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from votebox.domain.models.proxy import Proxy


def applies_to(proxy: Proxy, meeting_id: UUID | None) -> bool:
    """Check whether ``proxy`` falls in the scope of ``meeting_id``."""
    if meeting_id is None or proxy.meeting_id is None:
        return True
    return proxy.meeting_id == meeting_id


def proxies_in_scope(
    proxies: Iterable[Proxy],
    meeting_id: UUID | None,
    now: datetime | None = None,
) -> list[Proxy]:
    """Filter proxies to the scope of a meeting, keeping input order.

    Args:
        proxies: Snapshot of proxy records.
        meeting_id: The meeting (None for the general scope).
        now: When given, only proxies active at ``now`` are kept.

    Returns:
        The proxies in scope (and active, when ``now`` is given).
    """
    return [
        p
        for p in proxies
        if applies_to(p, meeting_id) and (now is None or p.is_active_at(now))
    ]


def active_proxies_for_grantee(
    proxies: Iterable[Proxy],
    member_id: UUID,
    meeting_id: UUID | None,
    now: datetime,
) -> list[Proxy]:
    """Active incoming proxies of ``member_id`` in the meeting's scope."""
    return [
        p
        for p in proxies_in_scope(proxies, meeting_id, now)
        if p.grantee_id == member_id
    ]


def active_proxies_for_grantor(
    proxies: Iterable[Proxy],
    member_id: UUID,
    meeting_id: UUID | None,
    now: datetime,
) -> list[Proxy]:
    """Active outgoing proxies of ``member_id`` in the meeting's scope."""
    return [
        p
        for p in proxies_in_scope(proxies, meeting_id, now)
        if p.grantor_id == member_id
    ]


def newest_first(proxies: Iterable[Proxy]) -> list[Proxy]:
    """Order proxies by creation (falling back to valid_from), newest first."""
    return sorted(
        proxies,
        key=lambda p: p.created_at or p.valid_from,
        reverse=True,
    )
