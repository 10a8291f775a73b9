"""Unit tests for proxy scope resolution and creation rules."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tests.helpers.factories import BASE_TIME, make_proxy
from votebox.domain.errors.proxy import (
    CircularProxyError,
    DuplicateGrantorProxyError,
    GranteeLimitExceededError,
    SelfDelegationError,
)
from votebox.domain.services.proxy_rules import (
    can_grant,
    can_receive,
    validate_new_proxy,
)
from votebox.domain.services.proxy_scope import (
    active_proxies_for_grantee,
    newest_first,
    proxies_in_scope,
)

NOW = BASE_TIME


class TestProxyScope:
    def test_meeting_scope_includes_general_proxies(self) -> None:
        org, meeting, other = uuid4(), uuid4(), uuid4()
        general = make_proxy(org, uuid4(), uuid4())
        scoped = make_proxy(org, uuid4(), uuid4(), meeting_id=meeting)
        elsewhere = make_proxy(org, uuid4(), uuid4(), meeting_id=other)

        assert proxies_in_scope([general, scoped, elsewhere], meeting) == [general, scoped]

    def test_general_scope_includes_every_proxy(self) -> None:
        org = uuid4()
        proxies = [
            make_proxy(org, uuid4(), uuid4()),
            make_proxy(org, uuid4(), uuid4(), meeting_id=uuid4()),
        ]
        assert proxies_in_scope(proxies, None) == proxies

    def test_now_filters_inactive(self) -> None:
        org = uuid4()
        active = make_proxy(org, uuid4(), uuid4())
        revoked = make_proxy(org, uuid4(), uuid4()).with_revocation(NOW)
        future = make_proxy(org, uuid4(), uuid4(), valid_from=NOW + timedelta(days=1))

        assert proxies_in_scope([active, revoked, future], None, NOW) == [active]

    def test_active_for_grantee(self) -> None:
        org, grantee = uuid4(), uuid4()
        mine = make_proxy(org, uuid4(), grantee)
        theirs = make_proxy(org, uuid4(), uuid4())
        assert active_proxies_for_grantee([mine, theirs], grantee, None, NOW) == [mine]

    def test_newest_first_orders_by_creation(self) -> None:
        org = uuid4()
        older = make_proxy(org, uuid4(), uuid4(), valid_from=NOW - timedelta(days=5))
        newer = make_proxy(org, uuid4(), uuid4(), valid_from=NOW - timedelta(days=1))
        assert newest_first([older, newer]) == [newer, older]


class TestValidateNewProxy:
    def test_self_delegation(self) -> None:
        member = uuid4()
        with pytest.raises(SelfDelegationError):
            validate_new_proxy([], member, member, None, NOW)

    def test_duplicate_grantor_same_meeting(self) -> None:
        org, meeting, grantor = uuid4(), uuid4(), uuid4()
        existing = [make_proxy(org, grantor, uuid4(), meeting_id=meeting)]

        with pytest.raises(DuplicateGrantorProxyError) as exc_info:
            validate_new_proxy(existing, grantor, uuid4(), meeting, NOW)

        assert exc_info.value.existing_proxy_id == existing[0].proxy_id

    def test_general_proxy_blocks_meeting_proxy(self) -> None:
        org, grantor = uuid4(), uuid4()
        existing = [make_proxy(org, grantor, uuid4())]
        with pytest.raises(DuplicateGrantorProxyError):
            validate_new_proxy(existing, grantor, uuid4(), uuid4(), NOW)

    def test_meeting_proxy_blocks_general_proxy(self) -> None:
        org, grantor = uuid4(), uuid4()
        existing = [make_proxy(org, grantor, uuid4(), meeting_id=uuid4())]
        with pytest.raises(DuplicateGrantorProxyError):
            validate_new_proxy(existing, grantor, uuid4(), None, NOW)

    def test_proxies_for_different_meetings_do_not_overlap(self) -> None:
        org, grantor = uuid4(), uuid4()
        existing = [make_proxy(org, grantor, uuid4(), meeting_id=uuid4())]
        validate_new_proxy(existing, grantor, uuid4(), uuid4(), NOW)

    def test_revoked_proxy_does_not_block(self) -> None:
        org, grantor = uuid4(), uuid4()
        existing = [make_proxy(org, grantor, uuid4()).with_revocation(NOW)]
        validate_new_proxy(existing, grantor, uuid4(), None, NOW)

    def test_grantee_limit(self) -> None:
        org, grantee = uuid4(), uuid4()
        existing = [make_proxy(org, uuid4(), grantee), make_proxy(org, uuid4(), grantee)]

        with pytest.raises(GranteeLimitExceededError) as exc_info:
            validate_new_proxy(existing, uuid4(), grantee, None, NOW)

        assert exc_info.value.active_count == 2
        assert exc_info.value.limit == 2

    def test_configurable_grantee_limit(self) -> None:
        org, grantee = uuid4(), uuid4()
        existing = [make_proxy(org, uuid4(), grantee)]
        with pytest.raises(GranteeLimitExceededError):
            validate_new_proxy(existing, uuid4(), grantee, None, NOW, max_per_grantee=1)

    def test_circular_pair(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        existing = [make_proxy(org, b, a)]
        with pytest.raises(CircularProxyError):
            validate_new_proxy(existing, a, b, None, NOW)

    def test_circular_check_ignores_scope(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        existing = [make_proxy(org, b, a, meeting_id=uuid4())]
        with pytest.raises(CircularProxyError):
            validate_new_proxy(existing, a, b, uuid4(), NOW)

    def test_duplicate_checked_before_limit(self) -> None:
        org, grantor, grantee = uuid4(), uuid4(), uuid4()
        existing = [
            make_proxy(org, grantor, uuid4()),
            make_proxy(org, uuid4(), grantee),
            make_proxy(org, uuid4(), grantee),
        ]
        with pytest.raises(DuplicateGrantorProxyError):
            validate_new_proxy(existing, grantor, grantee, None, NOW)


def test_can_grant_and_receive() -> None:
    org, grantor, grantee = uuid4(), uuid4(), uuid4()
    existing = [make_proxy(org, grantor, grantee)]

    assert not can_grant(existing, grantor, None, NOW)
    assert can_grant(existing, grantee, None, NOW)
    assert can_receive(existing, grantee, None, NOW)
    assert not can_receive(existing, grantee, None, NOW, max_per_grantee=1)
