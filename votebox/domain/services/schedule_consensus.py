"""Meeting time consensus.

Candidate times are scored from unweighted yes/maybe/no answers
(yes=2, maybe=1, no=-1). The winner has the highest score, then the
most yes answers, then the fewest no answers; remaining ties go to the
option seen first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from votebox.domain.models.schedule import (
    SCHEDULE_SCORE_POINTS,
    ScheduleOption,
    ScheduleVote,
    ScheduleVoteSummary,
    ScheduleVoteValue,
)


def summarize(votes: Iterable[ScheduleVote]) -> ScheduleVoteSummary:
    """Count answers and score one candidate time."""
    counts = {value: 0 for value in ScheduleVoteValue}
    for vote in votes:
        counts[vote.value] += 1

    return ScheduleVoteSummary(
        yes=counts[ScheduleVoteValue.YES],
        maybe=counts[ScheduleVoteValue.MAYBE],
        no=counts[ScheduleVoteValue.NO],
        total=sum(counts.values()),
        score=sum(SCHEDULE_SCORE_POINTS[v] * n for v, n in counts.items()),
    )


def rank_options(
    options: Sequence[ScheduleOption],
) -> list[tuple[ScheduleOption, ScheduleVoteSummary]]:
    """Order options best first.

    ``sorted`` is stable, so equal options keep their input order and
    repeated calls on the same input give the same ranking.
    """
    summarized = [(option, summarize(option.votes)) for option in options]
    return sorted(summarized, key=lambda pair: (-pair[1].score, -pair[1].yes, pair[1].no))


def calculate_winner(options: Sequence[ScheduleOption]) -> ScheduleOption | None:
    """Pick the best candidate time, or None when there are no options."""
    ranked = rank_options(options)
    if not ranked:
        return None
    return ranked[0][0]
