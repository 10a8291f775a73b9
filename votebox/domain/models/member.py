"""Member domain model.

A Member is a participant of an organization carrying a numeric voting
weight (typically an ownership share). Weight is fixed for a single
calculation pass but may change between meetings (ownership transfer).

Constraints:
- Weight is never negative
- Observers and inactive members are excluded from quorum, vote and
  weight computations
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID


class MemberRole(str, Enum):
    """Role of a member within the organization.

    Only OBSERVER is excluded from governance computations; the
    other roles vote with their own weight.
    """

    ADMIN = "admin"
    CHAIR = "chair"
    SECRETARY = "secretary"
    VOTER = "voter"
    OBSERVER = "observer"


@dataclass(frozen=True, eq=True)
class Member:
    """A weighted participant of an organization.

    Attributes:
        member_id: Unique identifier of the member.
        org_id: Organization the member belongs to.
        weight: Voting weight (>= 0), e.g. an ownership percentage.
        role: Role within the organization.
        is_active: Inactive members do not count anywhere.
        name: Optional display name (used by minutes rendering).
    """

    member_id: UUID
    org_id: UUID
    weight: float
    role: MemberRole = MemberRole.VOTER
    is_active: bool = True
    name: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate member invariants.

        Raises:
            ValueError: If weight is negative.
        """
        if self.weight < 0:
            raise ValueError(f"weight must be >= 0, got {self.weight}")

    @property
    def is_eligible_voter(self) -> bool:
        """Check whether the member takes part in governance computations.

        Returns:
            True if active and not an observer.
        """
        return self.is_active and self.role != MemberRole.OBSERVER

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for event payloads and minutes.

        Returns:
            Dictionary representation.
        """
        return {
            "member_id": str(self.member_id),
            "org_id": str(self.org_id),
            "weight": self.weight,
            "role": self.role.value,
            "is_active": self.is_active,
            "name": self.name,
        }


def eligible_members(members: list[Member] | tuple[Member, ...]) -> list[Member]:
    """Filter members down to eligible voters, preserving order."""
    return [m for m in members if m.is_eligible_voter]


def eligible_weights(members: list[Member] | tuple[Member, ...]) -> dict[UUID, float]:
    """Map eligible member ids to their weights."""
    return {m.member_id: m.weight for m in members if m.is_eligible_voter}
