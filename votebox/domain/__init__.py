"""
Domain layer - Pure governance rules for VoteBox.

This layer contains:
- Domain models (Member, Proxy, Attendance, Vote, ScheduleOption)
- Domain events (vote cast, proxy created/revoked, winner selected)
- Domain services (pure calculations over explicit snapshots)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib imports and structlog are allowed.
"""

from votebox.domain.exceptions import (
    GovernanceNotFoundError,
    GovernanceValidationError,
    VoteBoxError,
)

__all__: list[str] = [
    "VoteBoxError",
    "GovernanceValidationError",
    "GovernanceNotFoundError",
]
