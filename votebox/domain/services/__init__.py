"""Domain services for VoteBox.

Pure calculations over explicit snapshots. Domain services must not
depend on infrastructure and never touch storage.

Available services:
- proxy_scope: which proxies apply to a meeting
- proxy_rules: legal checks for new proxies
- weight_resolver: presence-gated and casting weights
- quorum_evaluator: weighted quorum and attendance totals
- vote_tally: weighted ballots under majority rules
- schedule_consensus: meeting time scoring and selection
"""

from votebox.domain.services.proxy_rules import (
    DEFAULT_MAX_PROXIES_PER_GRANTEE,
    can_grant,
    can_receive,
    validate_new_proxy,
)
from votebox.domain.services.proxy_scope import (
    active_proxies_for_grantee,
    active_proxies_for_grantor,
    proxies_in_scope,
)
from votebox.domain.services.quorum_evaluator import (
    DEFAULT_QUORUM_PERCENTAGE,
    attendance_stats,
    compute_quorum,
)
from votebox.domain.services.schedule_consensus import (
    calculate_winner,
    rank_options,
    summarize,
)
from votebox.domain.services.vote_tally import majority_passed, tally
from votebox.domain.services.weight_resolver import (
    casting_weight,
    quorum_effective_weight,
)

__all__ = [
    "DEFAULT_MAX_PROXIES_PER_GRANTEE",
    "DEFAULT_QUORUM_PERCENTAGE",
    "active_proxies_for_grantee",
    "active_proxies_for_grantor",
    "attendance_stats",
    "calculate_winner",
    "can_grant",
    "can_receive",
    "casting_weight",
    "compute_quorum",
    "majority_passed",
    "proxies_in_scope",
    "quorum_effective_weight",
    "rank_options",
    "summarize",
    "tally",
    "validate_new_proxy",
]
