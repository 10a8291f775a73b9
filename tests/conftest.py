"""
Pytest configuration and shared fixtures for VoteBox tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async port mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from tests.helpers.fake_time_authority import FakeTimeAuthority
from votebox.infrastructure.stubs import (
    AttendanceRepositoryStub,
    GovernanceNotifierStub,
    MemberRepositoryStub,
    ProxyRepositoryStub,
    ScheduleRepositoryStub,
    VoteRepositoryStub,
)

MEETING_START = datetime(2026, 3, 14, 18, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from votebox import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at the start of a meeting."""
    return FakeTimeAuthority(frozen_at=MEETING_START)


@pytest.fixture
def org_id() -> UUID:
    return uuid4()


@pytest.fixture
def meeting_id() -> UUID:
    return uuid4()


@pytest.fixture
def member_repo() -> MemberRepositoryStub:
    return MemberRepositoryStub()


@pytest.fixture
def proxy_repo() -> ProxyRepositoryStub:
    return ProxyRepositoryStub()


@pytest.fixture
def attendance_repo() -> AttendanceRepositoryStub:
    return AttendanceRepositoryStub()


@pytest.fixture
def vote_repo() -> VoteRepositoryStub:
    return VoteRepositoryStub()


@pytest.fixture
def schedule_repo() -> ScheduleRepositoryStub:
    return ScheduleRepositoryStub()


@pytest.fixture
def notifier() -> GovernanceNotifierStub:
    return GovernanceNotifierStub()
