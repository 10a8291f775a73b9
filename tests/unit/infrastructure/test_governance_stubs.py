"""Unit tests for the in-memory governance repositories."""

from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from tests.helpers.factories import BASE_TIME, make_member, make_option, make_proxy, make_vote
from votebox.domain.errors import DuplicateVoteError, ProxyNotFoundError
from votebox.domain.events import ProxyRevokedEvent
from votebox.domain.models.attendance import Attendance
from votebox.domain.models.schedule import ScheduleVote, ScheduleVoteValue
from votebox.domain.models.vote import VoteValue
from votebox.infrastructure.stubs import (
    AttendanceRepositoryStub,
    GovernanceNotifierStub,
    MemberRepositoryStub,
    ProxyRepositoryStub,
    ScheduleRepositoryStub,
    VoteRepositoryStub,
)


class TestProxyRepositoryStub:
    async def test_save_get_and_list(self) -> None:
        repo = ProxyRepositoryStub()
        org, a, b = uuid4(), uuid4(), uuid4()
        proxy = make_proxy(org, a, b)

        await repo.save(proxy)

        assert await repo.get(proxy.proxy_id) == proxy
        assert await repo.list_by_org(org) == [proxy]
        assert await repo.list_for_member(a) == [proxy]
        assert await repo.list_for_member(b) == [proxy]
        assert await repo.list_for_member(uuid4()) == []

    async def test_save_twice_rejected(self) -> None:
        repo = ProxyRepositoryStub()
        proxy = make_proxy(uuid4(), uuid4(), uuid4())
        await repo.save(proxy)
        with pytest.raises(ValueError, match="already exists"):
            await repo.save(proxy)

    async def test_update_unknown(self) -> None:
        with pytest.raises(ProxyNotFoundError):
            await ProxyRepositoryStub().update(make_proxy(uuid4(), uuid4(), uuid4()))

    async def test_delete_and_clear(self) -> None:
        repo = ProxyRepositoryStub()
        proxy = make_proxy(uuid4(), uuid4(), uuid4())
        await repo.save(proxy)

        assert await repo.delete(proxy.proxy_id)
        assert not await repo.delete(proxy.proxy_id)

        await repo.save(proxy)
        repo.clear()
        assert await repo.get(proxy.proxy_id) is None


class TestVoteRepositoryStub:
    async def test_unique_per_represented_member(self) -> None:
        repo = VoteRepositoryStub()
        item, grantor = uuid4(), uuid4()
        direct = make_vote(item, VoteValue.YES, 10.0, member_id=grantor)
        proxied = make_vote(item, VoteValue.NO, 10.0, proxy_for_id=grantor)
        await repo.save(direct)

        with pytest.raises(DuplicateVoteError) as exc_info:
            await repo.save(proxied)

        assert exc_info.value.existing_vote_id == direct.vote_id
        assert await repo.get_for_member(item, grantor) == direct
        assert repo.count() == 1

    async def test_list_for_agenda_item(self) -> None:
        repo = VoteRepositoryStub()
        item = uuid4()
        await repo.save(make_vote(item, VoteValue.YES, 1.0))
        await repo.save(make_vote(uuid4(), VoteValue.YES, 1.0))
        assert len(await repo.list_for_agenda_item(item)) == 1


async def test_member_repository_stub() -> None:
    org = uuid4()
    member = make_member(org)
    repo = MemberRepositoryStub([member, make_member(uuid4())])

    assert await repo.get(member.member_id) == member
    assert await repo.list_by_org(org) == [member]


async def test_attendance_repository_upserts() -> None:
    repo = AttendanceRepositoryStub()
    meeting, member = uuid4(), uuid4()
    row = Attendance(meeting_id=meeting, member_id=member, checked_in_at=BASE_TIME)
    await repo.upsert(row)
    await repo.upsert(row.with_checkout(BASE_TIME + timedelta(minutes=5)))

    rows = await repo.list_for_meeting(meeting)
    assert len(rows) == 1
    assert not rows[0].is_present
    assert await repo.get(meeting, uuid4()) is None


class TestScheduleRepositoryStub:
    async def test_votes_attached_to_options(self) -> None:
        repo = ScheduleRepositoryStub()
        option = make_option(uuid4())
        await repo.save_option(option)
        member = uuid4()

        await repo.upsert_vote(ScheduleVote(option.option_id, member, ScheduleVoteValue.NO))
        await repo.upsert_vote(ScheduleVote(option.option_id, member, ScheduleVoteValue.YES))

        stored = await repo.get_option(option.option_id)
        assert stored is not None
        assert [v.value for v in stored.votes] == [ScheduleVoteValue.YES]

    async def test_set_winner_returns_previous(self) -> None:
        repo = ScheduleRepositoryStub()
        meeting = uuid4()
        first, second = make_option(meeting), make_option(meeting, offset_days=1)
        other_meeting = make_option(uuid4())
        for option in (first, second, other_meeting):
            await repo.save_option(option)
        await repo.set_winner(other_meeting.meeting_id, other_meeting.option_id)

        assert await repo.set_winner(meeting, first.option_id) is None
        assert await repo.set_winner(meeting, second.option_id) == first.option_id
        assert repo.winners(meeting) == [second.option_id]
        assert repo.winners(other_meeting.meeting_id) == [other_meeting.option_id]


async def test_notifier_stub_records_events() -> None:
    notifier = GovernanceNotifierStub()
    event = ProxyRevokedEvent(
        proxy_id=uuid4(),
        org_id=uuid4(),
        grantor_id=uuid4(),
        grantee_id=uuid4(),
        revoked_at=BASE_TIME,
    )
    await notifier.publish(event)

    assert notifier.events_of_type(event.event_type) == [event]
    notifier.clear()
    assert notifier.events == []
