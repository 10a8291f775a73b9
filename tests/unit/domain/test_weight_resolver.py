"""Unit tests for effective weight resolution."""

from uuid import uuid4

from tests.helpers.factories import BASE_TIME, make_proxy
from votebox.domain.services.weight_resolver import (
    casting_weight,
    quorum_effective_weight,
)


class TestQuorumEffectiveWeight:
    def test_absent_grantor_adds_weight(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [make_proxy(org, b, a)]
        weights = {a: 25.0, b: 25.0}

        weight = quorum_effective_weight(a, 25.0, None, proxies, {a}, weights)

        assert weight == 50.0

    def test_present_grantor_adds_nothing(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [make_proxy(org, b, a)]
        weights = {a: 25.0, b: 25.0}

        assert quorum_effective_weight(a, 25.0, None, proxies, {a, b}, weights) == 25.0

    def test_ineligible_grantor_adds_nothing(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [make_proxy(org, b, a)]
        assert quorum_effective_weight(a, 25.0, None, proxies, {a}, {a: 25.0}) == 25.0

    def test_proxy_for_other_meeting_ignored(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [make_proxy(org, b, a, meeting_id=uuid4())]
        weights = {a: 25.0, b: 25.0}
        assert quorum_effective_weight(a, 25.0, uuid4(), proxies, {a}, weights) == 25.0

    def test_grantor_with_several_meeting_proxies_counts_once(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [
            make_proxy(org, b, a, meeting_id=uuid4()),
            make_proxy(org, b, a, meeting_id=uuid4()),
        ]
        weights = {a: 25.0, b: 25.0}

        assert quorum_effective_weight(a, 25.0, None, proxies, {a}, weights) == 50.0
        assert casting_weight(a, 25.0, None, proxies, weights) == 50.0

    def test_revoked_proxy_ignored_with_reference_time(self) -> None:
        org, a, b = uuid4(), uuid4(), uuid4()
        proxies = [make_proxy(org, b, a).with_revocation(BASE_TIME)]
        weights = {a: 25.0, b: 25.0}

        weight = quorum_effective_weight(
            a, 25.0, None, proxies, {a}, weights, now=BASE_TIME
        )

        assert weight == 25.0


def test_casting_weight_ignores_presence() -> None:
    org, a, b, c = uuid4(), uuid4(), uuid4(), uuid4()
    proxies = [make_proxy(org, b, a), make_proxy(org, c, a)]
    weights = {a: 10.0, b: 20.0, c: 30.0}

    assert casting_weight(a, 10.0, None, proxies, weights) == 60.0
