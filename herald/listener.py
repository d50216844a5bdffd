"""
Herald — Listener records
Data model shared by the registry and its introspection views.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

ListenerCallback = Callable[[str, Any], None]


class ListenerKind(str, Enum):
    PERSISTENT = "on"
    ONCE = "once"


@dataclass(frozen=True, eq=False)
class Listener:
    """A registered callback and its firing mode. Compared by identity."""

    kind: ListenerKind
    callback: ListenerCallback

    @property
    def once(self) -> bool:
        return self.kind is ListenerKind.ONCE


@dataclass(frozen=True)
class EventEntry:
    """Read-only view of an event and the listeners recorded under it."""

    name: str
    listeners: tuple[Listener, ...] = ()

    def __len__(self) -> int:
        return len(self.listeners)
