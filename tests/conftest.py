import pytest

from herald import EventRegistry, events


@pytest.fixture(autouse=True)
def _reset_default_registry():
    """Reset the process-wide registry between tests."""
    events.clear()
    yield
    events.clear()


@pytest.fixture
def registry():
    return EventRegistry(max_listeners=10, copy_payload=False)


@pytest.fixture
def recorder():
    """Listener factory that appends (tag, event, payload) to a shared list."""
    calls: list[tuple] = []

    def make(tag):
        def listener(event, data):
            calls.append((tag, event, data))
        return listener

    make.calls = calls
    return make
