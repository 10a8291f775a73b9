"""Unit tests for the system clock adapter."""

from datetime import timezone

from votebox.infrastructure.adapters import SystemTimeAuthority


def test_returns_utc() -> None:
    clock = SystemTimeAuthority()
    assert clock.now().tzinfo == timezone.utc
    assert clock.utcnow().tzinfo == timezone.utc


def test_monotonic_does_not_go_backwards() -> None:
    clock = SystemTimeAuthority()
    first = clock.monotonic()
    assert clock.monotonic() >= first
