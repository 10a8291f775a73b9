"""FakeTimeAuthority - controllable clock for deterministic tests.

Proxy validity windows, revocation instants and vote timestamps all
depend on "now"; tests freeze it and move it explicitly.

    >>> fake_time = FakeTimeAuthority(frozen_at=datetime(2026, 3, 14, 18, 0, tzinfo=timezone.utc))
    >>> fake_time.advance(seconds=3600)
    >>> fake_time.now().hour
    19
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from votebox.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FAKE_TIME = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Clock that only moves when told to.

    Args:
        frozen_at: Initial time (naive values are taken as UTC).
        start_monotonic: Initial monotonic value.
    """

    def __init__(
        self,
        frozen_at: datetime | None = None,
        *,
        start_monotonic: float = 0.0,
    ) -> None:
        frozen_at = frozen_at or DEFAULT_FAKE_TIME
        if frozen_at.tzinfo is None:
            frozen_at = frozen_at.replace(tzinfo=timezone.utc)
        self._current_time = frozen_at
        self._monotonic_base = start_monotonic
        self._monotonic_advances = 0.0

    def now(self) -> datetime:
        return self._current_time

    def utcnow(self) -> datetime:
        return self._current_time

    def monotonic(self) -> float:
        return self._monotonic_base + self._monotonic_advances

    def advance(
        self,
        seconds: float | int | None = None,
        delta: timedelta | None = None,
    ) -> None:
        """Move time forward.

        Raises:
            ValueError: If no amount is given or the amount is negative.
        """
        if delta is not None:
            advance_seconds = delta.total_seconds()
        elif seconds is not None:
            advance_seconds = float(seconds)
        else:
            raise ValueError("Must provide either 'seconds' or 'delta' argument")

        if advance_seconds < 0:
            raise ValueError(
                f"Cannot advance time backwards. Got {advance_seconds} seconds. "
                "Use set_time() for explicit time changes."
            )
        self._current_time += timedelta(seconds=advance_seconds)
        self._monotonic_advances += advance_seconds

    def set_time(self, dt: datetime) -> None:
        """Jump to ``dt`` without touching the monotonic clock."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        self._current_time = dt

    def __repr__(self) -> str:
        return (
            f"FakeTimeAuthority(current_time={self._current_time.isoformat()}, "
            f"monotonic={self.monotonic():.3f})"
        )
