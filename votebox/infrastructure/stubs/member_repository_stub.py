"""In-memory stub for MemberRepositoryProtocol."""

from __future__ import annotations

from uuid import UUID

from votebox.domain.models.member import Member


class MemberRepositoryStub:
    """In-memory member directory.

    Tests seed members with ``add_member``; weights can be changed
    between meetings by adding the member again.
    """

    def __init__(self, members: list[Member] | None = None) -> None:
        self._members: dict[UUID, Member] = {}
        for member in members or []:
            self.add_member(member)

    def add_member(self, member: Member) -> None:
        self._members[member.member_id] = member

    async def get(self, member_id: UUID) -> Member | None:
        return self._members.get(member_id)

    async def list_by_org(self, org_id: UUID) -> list[Member]:
        return [m for m in self._members.values() if m.org_id == org_id]
