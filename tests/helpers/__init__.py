"""Test helpers for VoteBox.

- FakeTimeAuthority: controllable clock
- factories: builders for members, proxies, attendance and votes
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority"]
