"""Infrastructure adapters."""

from votebox.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__ = ["SystemTimeAuthority"]
