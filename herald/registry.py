"""
Herald — Event Registry
Named events, ordered listeners, synchronous dispatch.

Usage:
    from herald import EventRegistry

    emitter = EventRegistry()
    emitter.set_max_listeners(10)
    emitter.on("message", lambda name, data: print(name, data))
    emitter.emit("message", {"text": "hello"})
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from . import config
from .errors import MaxListenersExceededError, UnknownEventError
from .listener import EventEntry, Listener, ListenerCallback, ListenerKind
from .models import EventSummary, RegistrySnapshot

logger = logging.getLogger("herald.registry")


def _check_limit(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"max_listeners must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"max_listeners must be >= 0, got {value}")
    return value


class EventRegistry:
    """
    In-process publish/subscribe registry.

    Every operation runs under a single re-entrant lock, so registration and
    dispatch never interleave across threads while listeners remain free to
    call back into the registry from inside emit().

    Args:
        max_listeners: Per-event listener cap shared by all events; 0 = uncapped
            (default: config.DEFAULT_MAX_LISTENERS)
        copy_payload: Give each listener its own deep copy of the payload
            (default: config.COPY_PAYLOAD)
    """

    def __init__(self, max_listeners: int | None = None, copy_payload: bool | None = None):
        if max_listeners is None:
            max_listeners = config.DEFAULT_MAX_LISTENERS
        self._max_listeners = _check_limit(max_listeners)
        self._copy_payload = config.COPY_PAYLOAD if copy_payload is None else copy_payload
        self._events: dict[str, list[Listener]] = {name: [] for name in config.RESERVED_EVENTS}
        self._lock = threading.RLock()

    # ── Configuration ────────────────────────────────────────────────────────

    def set_max_listeners(self, max_listeners: int) -> None:
        """Set the cap for all events. Existing listeners above the cap are kept."""
        with self._lock:
            self._max_listeners = _check_limit(max_listeners)

    def get_max_listeners(self) -> int:
        return self._max_listeners

    # ── Registration ─────────────────────────────────────────────────────────

    def on(self, name: str, callback: ListenerCallback) -> None:
        """Register a listener called on every emit of `name`."""
        self._add(name, callback, ListenerKind.PERSISTENT)

    def once(self, name: str, callback: ListenerCallback) -> None:
        """Register a listener called on the next emit of `name` only."""
        self._add(name, callback, ListenerKind.ONCE)

    def _add(self, name: str, callback: ListenerCallback, kind: ListenerKind) -> None:
        if not callable(callback):
            raise TypeError("event listener must be callable")
        with self._lock:
            listeners = self._events.get(name, [])
            if self._max_listeners and len(listeners) >= self._max_listeners:
                logger.warning("Max listeners (%d) reached for %s", self._max_listeners, name)
                raise MaxListenersExceededError(name, self._max_listeners)
            listeners.append(Listener(kind, callback))
            # Entry only comes into existence once the registration succeeds
            self._events.setdefault(name, listeners)
            logger.debug("Registered %s listener on %s (%d total)", kind.value, name, len(listeners))

    def remove_all_listeners(self, name: str) -> bool:
        """Drop every listener of `name`. Returns False if the event is unknown."""
        with self._lock:
            listeners = self._events.get(name)
            if listeners is None:
                return False
            # In place: an emit in progress sees the removal
            listeners.clear()
            logger.debug("Removed all listeners from %s", name)
            return True

    def clear(self) -> None:
        """Reset to the freshly constructed state (for testing)."""
        with self._lock:
            for listeners in self._events.values():
                listeners.clear()
            self._events = {name: [] for name in config.RESERVED_EVENTS}

    # ── Introspection ────────────────────────────────────────────────────────

    def list_events(self) -> list[EventEntry]:
        with self._lock:
            return [EventEntry(name, tuple(listeners)) for name, listeners in self._events.items()]

    def list_event_names(self) -> list[str]:
        with self._lock:
            return list(self._events)

    def list_listeners(self, name: str) -> tuple[Listener, ...]:
        """Listeners of `name` in dispatch order. Raises UnknownEventError if never registered."""
        with self._lock:
            listeners = self._events.get(name)
            if listeners is None:
                raise UnknownEventError(name)
            return tuple(listeners)

    def has_event(self, name: str) -> bool:
        with self._lock:
            return name in self._events

    def listener_count(self, name: str) -> int:
        with self._lock:
            return len(self._events.get(name, ()))

    def snapshot(self) -> RegistrySnapshot:
        """Summary of the cap and per-event listener counts."""
        with self._lock:
            return RegistrySnapshot(
                max_listeners=self._max_listeners,
                events=[
                    EventSummary(
                        name=name,
                        listeners=len(listeners),
                        once_listeners=sum(1 for x in listeners if x.once),
                    )
                    for name, listeners in self._events.items()
                ],
            )

    # ── Dispatch ─────────────────────────────────────────────────────────────

    def emit(self, name: str, payload: Any = None) -> None:
        """
        Call every listener of `name` with (name, payload), in registration order.

        Dispatch walks the listeners present when emit() began. Listeners added
        meanwhile wait for the next emit; listeners removed meanwhile are skipped.
        Once-listeners leave the live list before they are called.

        Raises:
            UnknownEventError: `name` was never registered. Nothing is called.
            Whatever copy.deepcopy raises when copy_payload is on. Nothing is
            called or removed.
        """
        with self._lock:
            live = self._events.get(name)
            if live is None:
                raise UnknownEventError(name)
            pending = list(live)
            # Copy up front: a payload that cannot be copied fails the emit before any change
            if self._copy_payload:
                payloads = [copy.deepcopy(payload) for _ in pending]
            else:
                payloads = [payload] * len(pending)
            logger.debug("Emitting %s to %d listeners", name, len(pending))

            for listener, data in zip(pending, payloads):
                if listener not in live:
                    continue
                if listener.once:
                    live.remove(listener)
                try:
                    listener.callback(name, data)
                except Exception:
                    logger.exception("Event listener error for %s", name)

    def __repr__(self) -> str:
        return f"<EventRegistry events={len(self._events)} max_listeners={self._max_listeners}>"
