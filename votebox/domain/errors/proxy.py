"""Proxy delegation errors.

This module provides exception classes for proxy creation and lookup
failures. Validation errors are raised before anything is persisted;
not-found errors are raised for revoke/delete/attach on unknown ids.

Constraints:
- A member cannot delegate to themself
- A grantor holds at most one active proxy per overlapping scope
- A grantee holds at most the legal maximum of active incoming proxies
- Two members cannot delegate to each other at the same time
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from votebox.domain.exceptions import GovernanceNotFoundError, GovernanceValidationError


class ProxyError(GovernanceValidationError):
    """Base error for proxy validation failures."""

    pass


class SelfDelegationError(ProxyError):
    """Raised when a member tries to grant a proxy to themself.

    Attributes:
        member_id: The member acting as both grantor and grantee.
    """

    error_type = "urn:votebox:proxy:self-delegation"
    title = "Self Delegation"

    def __init__(self, member_id: UUID) -> None:
        self.member_id = member_id
        super().__init__(f"Member {member_id} cannot grant a proxy to themself")


class DuplicateGrantorProxyError(ProxyError):
    """Raised when the grantor already has an active proxy in an overlapping scope.

    Attributes:
        grantor_id: The member trying to delegate again.
        meeting_id: The requested scope (None for general).
        existing_proxy_id: The active proxy that blocks creation.
    """

    error_type = "urn:votebox:proxy:duplicate-grantor"
    title = "Duplicate Grantor Proxy"
    status = 409

    def __init__(
        self,
        grantor_id: UUID,
        meeting_id: UUID | None,
        existing_proxy_id: UUID,
    ) -> None:
        self.grantor_id = grantor_id
        self.meeting_id = meeting_id
        self.existing_proxy_id = existing_proxy_id
        scope = f"meeting {meeting_id}" if meeting_id else "general scope"
        super().__init__(
            f"Member {grantor_id} already has active proxy "
            f"{existing_proxy_id} covering {scope}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["grantor_id"] = str(self.grantor_id)
        result["meeting_id"] = str(self.meeting_id) if self.meeting_id else None
        result["existing_proxy_id"] = str(self.existing_proxy_id)
        return result


class GranteeLimitExceededError(ProxyError):
    """Raised when the grantee already holds the maximum number of proxies.

    Attributes:
        grantee_id: The member who cannot receive another proxy.
        active_count: Active incoming proxies in scope.
        limit: The legal maximum.
    """

    error_type = "urn:votebox:proxy:grantee-limit"
    title = "Grantee Limit Exceeded"
    status = 409

    def __init__(self, grantee_id: UUID, active_count: int, limit: int) -> None:
        self.grantee_id = grantee_id
        self.active_count = active_count
        self.limit = limit
        super().__init__(
            f"Member {grantee_id} already holds {active_count} active proxies "
            f"(maximum {limit})"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["grantee_id"] = str(self.grantee_id)
        result["active_count"] = self.active_count
        result["limit"] = self.limit
        return result


class CircularProxyError(ProxyError):
    """Raised when the grantee already delegates to the grantor.

    Attributes:
        grantor_id: The member trying to delegate.
        grantee_id: The member who already delegates back.
        reverse_proxy_id: The active proxy in the opposite direction.
    """

    error_type = "urn:votebox:proxy:circular"
    title = "Circular Proxy"
    status = 409

    def __init__(
        self, grantor_id: UUID, grantee_id: UUID, reverse_proxy_id: UUID
    ) -> None:
        self.grantor_id = grantor_id
        self.grantee_id = grantee_id
        self.reverse_proxy_id = reverse_proxy_id
        super().__init__(
            f"Member {grantee_id} already delegates to {grantor_id} "
            f"(proxy {reverse_proxy_id})"
        )


class ProxyNotFoundError(GovernanceNotFoundError):
    """Raised when a proxy id does not exist.

    Attributes:
        proxy_id: The unknown proxy id.
    """

    error_type = "urn:votebox:proxy:not-found"
    title = "Proxy Not Found"

    def __init__(self, proxy_id: UUID) -> None:
        self.proxy_id = proxy_id
        super().__init__(f"Proxy not found: {proxy_id}")
