"""Correlation and meeting context for log entries.

A correlation id ties together the log lines of one governance
operation (a proxy creation, a vote submission). The meeting context
adds org and meeting ids to every entry emitted while a meeting is
being processed. Both live in contextvars, so they follow async tasks.

Usage:
    with meeting_context(org_id, meeting_id):
        set_correlation_id(generate_correlation_id())
        await quorum_service.evaluate_meeting(org_id, meeting_id)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import UUID, uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_meeting_context: ContextVar[dict[str, str]] = ContextVar("meeting_context", default={})


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Current correlation id, or an empty string when none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def meeting_context(org_id: UUID, meeting_id: UUID | None = None) -> Iterator[None]:
    """Bind org and meeting ids to log entries inside the block."""
    context = {"org_id": str(org_id)}
    if meeting_id is not None:
        context["meeting_id"] = str(meeting_id)
    token = _meeting_context.set(context)
    try:
        yield
    finally:
        _meeting_context.reset(token)


def get_meeting_context() -> dict[str, str]:
    return dict(_meeting_context.get())


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation id and meeting context.

    Values already bound on the logger win over the context.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with context fields added.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    for key, value in _meeting_context.get().items():
        event_dict.setdefault(key, value)
    return event_dict
