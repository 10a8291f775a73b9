"""Input models for the application layer."""

from votebox.application.dtos.governance import (
    CastScheduleVoteInput,
    CreateProxyInput,
    SubmitVoteInput,
)

__all__ = [
    "CastScheduleVoteInput",
    "CreateProxyInput",
    "SubmitVoteInput",
]
