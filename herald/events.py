"""
Herald — Default registry
Process-wide EventRegistry with module-level shortcuts.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from .listener import ListenerCallback
from .registry import EventRegistry

logger = logging.getLogger("herald.events")

_default: EventRegistry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> EventRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = EventRegistry()
                logger.debug("Default registry created")
    return _default


def on(event: str, handler: ListenerCallback) -> None:
    """Register a handler for an event type."""
    get_default_registry().on(event, handler)


def once(event: str, handler: ListenerCallback) -> None:
    """Register a handler for the next emission of an event type."""
    get_default_registry().once(event, handler)


def emit(event: str, data: Any = None) -> None:
    """Emit an event to all registered handlers."""
    get_default_registry().emit(event, data)


def remove_all_listeners(event: str) -> bool:
    return get_default_registry().remove_all_listeners(event)


def clear() -> None:
    """Remove all handlers (for testing)."""
    get_default_registry().clear()
