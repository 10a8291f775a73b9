"""Governance metrics port."""

from __future__ import annotations

from typing import Protocol


class GovernanceMetricsProtocol(Protocol):
    """Optional metrics sink for governance operations."""

    def record_proxy_created(self, scope: str) -> None:
        """Count a created proxy ("general" or "meeting")."""
        ...

    def record_proxy_rejected(self, reason: str) -> None:
        """Count a rejected proxy by error title."""
        ...

    def record_proxy_revoked(self) -> None:
        """Count a revoked proxy."""
        ...

    def record_vote_cast(self, is_proxy: bool) -> None:
        """Count a recorded vote."""
        ...

    def record_duplicate_vote(self) -> None:
        """Count a rejected duplicate vote."""
        ...

    def record_quorum_evaluation(self, reached: bool, percentage: float) -> None:
        """Count a quorum evaluation and track the last percentage."""
        ...
