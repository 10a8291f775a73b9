"""Member repository port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from votebox.domain.models.member import Member


class MemberRepositoryProtocol(Protocol):
    """Read access to organization members."""

    async def get(self, member_id: UUID) -> Member | None:
        """Get a member by id, or None if unknown."""
        ...

    async def list_by_org(self, org_id: UUID) -> list[Member]:
        """All members of an organization, including observers and inactive ones."""
        ...
