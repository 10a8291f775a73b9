"""Governance metrics for Prometheus exposition.

Counters for proxy lifecycle, votes and quorum evaluations, plus a
gauge holding the last evaluated quorum percentage. Each collector owns
its registry so tests can create isolated instances.
"""

from __future__ import annotations

import os
import threading

from prometheus_client import CollectorRegistry, Counter, Gauge

_metrics_lock = threading.Lock()


class GovernanceMetricsCollector:
    """Prometheus implementation of GovernanceMetricsProtocol.

    Attributes:
        proxies_created_total: Created proxies by scope.
        proxies_rejected_total: Rejected proxy requests by reason.
        proxies_revoked_total: Revoked proxies.
        votes_cast_total: Recorded votes, direct or proxy.
        duplicate_votes_total: Rejected second votes.
        quorum_evaluations_total: Quorum evaluations by outcome.
        quorum_percentage: Percentage of the last evaluation.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")

        self.proxies_created_total = Counter(
            name="votebox_proxies_created_total",
            documentation="Proxies created, by scope",
            labelnames=["scope", "environment"],
            registry=self._registry,
        )
        self.proxies_rejected_total = Counter(
            name="votebox_proxies_rejected_total",
            documentation="Proxy requests rejected by a governance rule",
            labelnames=["reason", "environment"],
            registry=self._registry,
        )
        self.proxies_revoked_total = Counter(
            name="votebox_proxies_revoked_total",
            documentation="Proxies revoked",
            labelnames=["environment"],
            registry=self._registry,
        )
        self.votes_cast_total = Counter(
            name="votebox_votes_cast_total",
            documentation="Votes recorded, by kind",
            labelnames=["kind", "environment"],
            registry=self._registry,
        )
        self.duplicate_votes_total = Counter(
            name="votebox_duplicate_votes_total",
            documentation="Second votes rejected for an agenda item",
            labelnames=["environment"],
            registry=self._registry,
        )
        self.quorum_evaluations_total = Counter(
            name="votebox_quorum_evaluations_total",
            documentation="Quorum evaluations, by outcome",
            labelnames=["outcome", "environment"],
            registry=self._registry,
        )
        self.quorum_percentage = Gauge(
            name="votebox_quorum_percentage",
            documentation="Effective present weight percentage of the last evaluation",
            labelnames=["environment"],
            registry=self._registry,
        )

    def record_proxy_created(self, scope: str) -> None:
        if scope not in ("general", "meeting"):
            raise ValueError(f"Invalid scope '{scope}'. Must be 'general' or 'meeting'.")
        self.proxies_created_total.labels(
            scope=scope, environment=self._environment
        ).inc()

    def record_proxy_rejected(self, reason: str) -> None:
        self.proxies_rejected_total.labels(
            reason=reason, environment=self._environment
        ).inc()

    def record_proxy_revoked(self) -> None:
        self.proxies_revoked_total.labels(environment=self._environment).inc()

    def record_vote_cast(self, is_proxy: bool) -> None:
        self.votes_cast_total.labels(
            kind="proxy" if is_proxy else "direct",
            environment=self._environment,
        ).inc()

    def record_duplicate_vote(self) -> None:
        self.duplicate_votes_total.labels(environment=self._environment).inc()

    def record_quorum_evaluation(self, reached: bool, percentage: float) -> None:
        """Count an evaluation and remember its percentage.

        Args:
            reached: Whether quorum was reached.
            percentage: Effective present weight percentage.
        """
        self.quorum_evaluations_total.labels(
            outcome="reached" if reached else "not_reached",
            environment=self._environment,
        ).inc()
        self.quorum_percentage.labels(environment=self._environment).set(percentage)

    def get_registry(self) -> CollectorRegistry:
        return self._registry


_governance_metrics_collector: GovernanceMetricsCollector | None = None


def get_governance_metrics_collector() -> GovernanceMetricsCollector:
    """Get the singleton collector (thread-safe, double-checked locking)."""
    global _governance_metrics_collector
    if _governance_metrics_collector is None:
        with _metrics_lock:
            if _governance_metrics_collector is None:
                _governance_metrics_collector = GovernanceMetricsCollector()
    return _governance_metrics_collector


def reset_governance_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _governance_metrics_collector
    with _metrics_lock:
        _governance_metrics_collector = None
