"""Proxy repository port.

Storage for proxy records. Implementations must serialize concurrent
writes for the same grantor (unique constraint or single-writer
transaction); the registry's rule checks assume a consistent snapshot.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from votebox.domain.models.proxy import Proxy


class ProxyRepositoryProtocol(Protocol):
    """Repository protocol for proxy delegations."""

    async def save(self, proxy: Proxy) -> None:
        """Insert a new proxy.

        Args:
            proxy: The proxy to persist.

        Raises:
            ValueError: If a proxy with the same id already exists.
        """
        ...

    async def update(self, proxy: Proxy) -> None:
        """Replace a stored proxy (revocation or document change).

        Raises:
            ProxyNotFoundError: If the proxy does not exist.
        """
        ...

    async def get(self, proxy_id: UUID) -> Proxy | None:
        """Get a proxy by id, or None if it does not exist."""
        ...

    async def delete(self, proxy_id: UUID) -> bool:
        """Hard-delete a proxy.

        Returns:
            True if a record was removed, False if none existed.
        """
        ...

    async def list_by_org(self, org_id: UUID) -> list[Proxy]:
        """All proxy records of an organization, active or not."""
        ...

    async def list_for_member(self, member_id: UUID) -> list[Proxy]:
        """All proxy records where the member is grantor or grantee."""
        ...
