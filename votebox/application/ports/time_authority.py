"""Time authority port.

Services that need "now" inject a TimeAuthorityProtocol instead of
reading the host clock directly, so that proxy validity windows and
vote timestamps are deterministic under test.

For production use SystemTimeAuthority from
votebox/infrastructure/adapters/system_time_authority.py; for tests use
FakeTimeAuthority from tests/helpers/fake_time_authority.py.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for the clock.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.utcnow()
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC recommended)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time.

        Returns:
            Current timezone-aware datetime in UTC.
        """
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock value in seconds.

        Only differences between values are meaningful.
        """
        ...
