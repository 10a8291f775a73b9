"""Prometheus metrics for governance operations."""

from votebox.infrastructure.monitoring.governance_metrics import (
    GovernanceMetricsCollector,
    get_governance_metrics_collector,
    reset_governance_metrics_collector,
)

__all__ = [
    "GovernanceMetricsCollector",
    "get_governance_metrics_collector",
    "reset_governance_metrics_collector",
]
