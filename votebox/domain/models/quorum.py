"""Quorum result domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=True)
class QuorumResult:
    """Weighted presence of a meeting compared to its required quorum.

    Attributes:
        total_weight: Sum of eligible member weights.
        present_weight: Weight of eligible members physically present.
        proxy_weight: Weight of absent grantors represented by present grantees.
        effective_present_weight: present_weight + proxy_weight.
        percentage: effective_present_weight / total_weight * 100 (0 if no weight).
        reached: percentage >= required_percentage.
        present_count: Number of eligible members present.
        total_count: Number of eligible members.
        required_percentage: The threshold applied.
    """

    total_weight: float
    present_weight: float
    proxy_weight: float
    effective_present_weight: float
    percentage: float
    reached: bool
    present_count: int
    total_count: int
    required_percentage: float

    def to_dict(self) -> dict[str, Any]:
        """Persisted shape read by the minutes collaborator.

        Returns:
            Dictionary with the stored field names.
        """
        return {
            "total_weight": self.total_weight,
            "present_weight": self.present_weight,
            "quorum_percentage": self.percentage,
            "quorum_reached": self.reached,
            "present_members": self.present_count,
            "total_members": self.total_count,
            "proxy_weight": self.proxy_weight,
            "effective_present_weight": self.effective_present_weight,
        }


@dataclass(frozen=True, eq=True)
class AttendanceStats:
    """Raw attendance totals without proxy weight.

    Present weight uses the weight snapshot taken at check-in when one
    was recorded, otherwise the member's current weight.
    """

    total_members: int
    present_members: int
    present_weight: float
    total_weight: float
    percentage: float
