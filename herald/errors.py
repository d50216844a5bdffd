"""
Herald — Errors
Typed exceptions raised by the event registry.
"""

from __future__ import annotations


class HeraldError(Exception):
    """Base error class for Herald."""

    def __init__(self, message: str, event: str | None = None):
        super().__init__(message)
        self.message = message
        self.event = event


class UnknownEventError(HeraldError, KeyError):
    """The event name was never registered."""

    def __init__(self, event: str):
        super().__init__(f"Unknown event: {event!r}", event)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class MaxListenersExceededError(HeraldError):
    """Registration refused: the event already holds max_listeners listeners."""

    def __init__(self, event: str, limit: int):
        super().__init__(f"Max listeners ({limit}) reached for event {event!r}", event)
        self.limit = limit
