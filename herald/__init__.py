# Herald package

from .config import VERSION as __version__
from .errors import HeraldError, MaxListenersExceededError, UnknownEventError
from .events import get_default_registry
from .listener import EventEntry, Listener, ListenerCallback, ListenerKind
from .models import EventSummary, RegistrySnapshot
from .registry import EventRegistry

__all__ = [
    "__version__",
    "EventRegistry",
    "EventEntry",
    "Listener",
    "ListenerCallback",
    "ListenerKind",
    "EventSummary",
    "RegistrySnapshot",
    "HeraldError",
    "UnknownEventError",
    "MaxListenersExceededError",
    "get_default_registry",
]
