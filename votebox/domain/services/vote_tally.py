"""Weighted vote tally.

Weights are summed per named bucket (yes, no, abstain). Free-form
option labels from multiple-choice ballots are reported per option and
kept out of the named buckets. ``total_weight`` is yes + no + abstain.

Majority rules (no tolerance):
- simple: yes > no, a tie fails
- two_thirds: yes >= 2/3 of total_weight
- unanimous: no == 0 and yes > 0, abstentions do not block
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from votebox.domain.models.vote import RequiredMajority, Vote, VoteResult, VoteValue


def majority_passed(
    required_majority: RequiredMajority,
    yes: float,
    no: float,
    total_weight: float,
) -> bool:
    """Apply a majority rule to bucket weights."""
    if required_majority == RequiredMajority.SIMPLE:
        return yes > no
    if required_majority == RequiredMajority.TWO_THIRDS:
        # 3*yes >= 2*total avoids the rounding of total * 2/3
        return 3 * yes >= 2 * total_weight
    if required_majority == RequiredMajority.UNANIMOUS:
        return no == 0 and yes > 0
    raise ValueError(f"Unknown majority rule: {required_majority!r}")


def tally(
    votes: Iterable[Vote],
    required_majority: RequiredMajority = RequiredMajority.SIMPLE,
) -> VoteResult:
    """Aggregate weighted votes and decide pass/fail.

    Args:
        votes: Vote records of one agenda item.
        required_majority: The rule to apply.

    Returns:
        VoteResult with bucket weights and the outcome.
    """
    buckets: dict[VoteValue, list[float]] = {v: [] for v in VoteValue}
    options: dict[str, list[float]] = {}
    count = 0

    for vote in votes:
        count += 1
        if isinstance(vote.value, VoteValue):
            buckets[vote.value].append(vote.weight)
        else:
            options.setdefault(vote.value, []).append(vote.weight)

    yes = math.fsum(buckets[VoteValue.YES])
    no = math.fsum(buckets[VoteValue.NO])
    abstain = math.fsum(buckets[VoteValue.ABSTAIN])
    total_weight = math.fsum([yes, no, abstain])

    return VoteResult(
        yes=yes,
        no=no,
        abstain=abstain,
        total_votes=count,
        total_weight=total_weight,
        passed=majority_passed(required_majority, yes, no, total_weight),
        required_majority=required_majority,
        option_weights=tuple((label, math.fsum(w)) for label, w in options.items()),
    )
