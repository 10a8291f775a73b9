"""Base exception classes for the VoteBox domain layer."""

from typing import Any


class VoteBoxError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)


class GovernanceValidationError(VoteBoxError):
    """Raised when input violates a governance rule.

    Validation errors are deterministic: retrying with the same input
    fails the same way. The caller must change the input.

    Subclasses set ``error_type`` and ``title`` for problem-details output.
    """

    error_type: str = "urn:votebox:validation"
    title: str = "Governance Rule Violation"
    status: int = 422

    def to_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details.

        Returns:
            Dictionary with type, title, status and detail.
        """
        return {
            "type": self.error_type,
            "title": self.title,
            "status": self.status,
            "detail": str(self),
        }


class GovernanceNotFoundError(VoteBoxError):
    """Raised when an operation references a record that does not exist.

    Kept distinct from GovernanceValidationError so callers can tell a
    bad request apart from a stale reference.
    """

    error_type: str = "urn:votebox:not-found"
    title: str = "Not Found"
    status: int = 404

    def to_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details.

        Returns:
            Dictionary with type, title, status and detail.
        """
        return {
            "type": self.error_type,
            "title": self.title,
            "status": self.status,
            "detail": str(self),
        }
