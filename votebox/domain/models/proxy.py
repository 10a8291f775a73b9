"""Proxy (delegation) domain model.

A Proxy lets a grantor's weight be exercised by a grantee. A proxy is
either general (valid across all meetings) or scoped to one meeting,
and is valid inside a time window.

Constraints:
- grantor_id != grantee_id
- valid_until, when set, is not before valid_from
- Immutable except for the validity window (revocation) and the
  supporting document reference
- Revocation closes the window at "now"; a revoked proxy is inactive
  from that instant on
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True, eq=True)
class Proxy:
    """A delegation of voting weight from grantor to grantee.

    Attributes:
        proxy_id: Unique identifier for this proxy.
        org_id: Organization the proxy belongs to.
        grantor_id: Member delegating their vote.
        grantee_id: Member receiving the delegated vote.
        valid_from: Start of validity (UTC timezone-aware).
        meeting_id: Meeting the proxy is scoped to (None = general).
        valid_until: End of validity, inclusive (None = open-ended).
        document_ref: Optional reference to the signed proxy document.
        revoked_at: When the proxy was revoked (None if never revoked).
        created_at: When the proxy was recorded (None if unknown).
    """

    proxy_id: UUID
    org_id: UUID
    grantor_id: UUID
    grantee_id: UUID
    valid_from: datetime
    meeting_id: UUID | None = field(default=None)
    valid_until: datetime | None = field(default=None)
    document_ref: str | None = field(default=None)
    revoked_at: datetime | None = field(default=None)
    created_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate proxy invariants.

        Raises:
            ValueError: If any field validation fails.
        """
        if self.grantor_id == self.grantee_id:
            raise ValueError("grantor_id and grantee_id must differ")

        if self.valid_from.tzinfo is None:
            raise ValueError("valid_from must be timezone-aware (UTC)")

        if self.valid_until is not None:
            if self.valid_until.tzinfo is None:
                raise ValueError("valid_until must be timezone-aware (UTC)")
            if self.valid_until < self.valid_from:
                raise ValueError(
                    f"valid_until ({self.valid_until.isoformat()}) is before "
                    f"valid_from ({self.valid_from.isoformat()})"
                )

    @property
    def is_general(self) -> bool:
        """Check if the proxy covers every meeting."""
        return self.meeting_id is None

    @property
    def is_revoked(self) -> bool:
        """Check if the proxy was revoked."""
        return self.revoked_at is not None

    def is_active_at(self, now: datetime) -> bool:
        """Check if the proxy is time-valid and not revoked at ``now``.

        Args:
            now: The reference time (UTC timezone-aware).

        Returns:
            True if valid_from <= now <= valid_until (open-ended when
            valid_until is None) and the proxy was not revoked.
        """
        if self.revoked_at is not None:
            return False
        if self.valid_from > now:
            return False
        return self.valid_until is None or self.valid_until >= now

    def with_revocation(self, now: datetime) -> Proxy:
        """Return a copy whose validity window is closed at ``now``.

        A window that already ended before ``now`` keeps its end.

        Args:
            now: The revocation time.

        Returns:
            Revoked copy of the proxy.
        """
        valid_until = now
        if self.valid_until is not None and self.valid_until < now:
            valid_until = self.valid_until
        if valid_until < self.valid_from:
            valid_until = self.valid_from
        return replace(self, valid_until=valid_until, revoked_at=now)

    def with_document(self, document_ref: str | None) -> Proxy:
        """Return a copy carrying a new supporting document reference."""
        return replace(self, document_ref=document_ref)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for events.

        Returns:
            Dictionary representation suitable for event payloads.
        """
        return {
            "proxy_id": str(self.proxy_id),
            "org_id": str(self.org_id),
            "grantor_id": str(self.grantor_id),
            "grantee_id": str(self.grantee_id),
            "meeting_id": str(self.meeting_id) if self.meeting_id else None,
            "valid_from": self.valid_from.isoformat(),
            "valid_until": self.valid_until.isoformat() if self.valid_until else None,
            "document_ref": self.document_ref,
            "revoked_at": self.revoked_at.isoformat() if self.revoked_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True, eq=True)
class ProxyValidationResult:
    """Outcome of checking whether a stored proxy is currently usable.

    Attributes:
        valid: True if the proxy is active now.
        reason: Why the proxy is not usable (None when valid).
    """

    valid: bool
    reason: str | None = field(default=None)

    @classmethod
    def ok(cls) -> ProxyValidationResult:
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: str) -> ProxyValidationResult:
        return cls(valid=False, reason=reason)


@dataclass(frozen=True, eq=True)
class ProxyStats:
    """Delegation totals for one member.

    Attributes:
        total_granted: Active outgoing proxies in scope.
        total_received: Active incoming proxies in scope.
        total_weight: Own weight plus all incoming grantor weights.
    """

    total_granted: int
    total_received: int
    total_weight: float


@dataclass(frozen=True, eq=True)
class ProxyRepresentation:
    """One grantor represented by a grantee for a meeting."""

    proxy_id: UUID
    grantor_id: UUID
    grantee_id: UUID
    weight: float
