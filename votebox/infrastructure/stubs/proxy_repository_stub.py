"""In-memory stub for ProxyRepositoryProtocol.

Keeps proxies in insertion order keyed by id. Not thread-safe; use
separate instances for concurrent tests.
"""

from __future__ import annotations

from uuid import UUID

from votebox.domain.errors import ProxyNotFoundError
from votebox.domain.models.proxy import Proxy


class ProxyRepositoryStub:
    """In-memory implementation of ProxyRepositoryProtocol."""

    def __init__(self) -> None:
        self._proxies: dict[UUID, Proxy] = {}

    async def save(self, proxy: Proxy) -> None:
        if proxy.proxy_id in self._proxies:
            raise ValueError(f"Proxy {proxy.proxy_id} already exists")
        self._proxies[proxy.proxy_id] = proxy

    async def update(self, proxy: Proxy) -> None:
        if proxy.proxy_id not in self._proxies:
            raise ProxyNotFoundError(proxy.proxy_id)
        self._proxies[proxy.proxy_id] = proxy

    async def get(self, proxy_id: UUID) -> Proxy | None:
        return self._proxies.get(proxy_id)

    async def delete(self, proxy_id: UUID) -> bool:
        return self._proxies.pop(proxy_id, None) is not None

    async def list_by_org(self, org_id: UUID) -> list[Proxy]:
        return [p for p in self._proxies.values() if p.org_id == org_id]

    async def list_for_member(self, member_id: UUID) -> list[Proxy]:
        return [
            p
            for p in self._proxies.values()
            if p.grantor_id == member_id or p.grantee_id == member_id
        ]

    def clear(self) -> None:
        """Remove all proxies (for test isolation)."""
        self._proxies.clear()
