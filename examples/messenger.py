"""
Basic usage of Herald.

Demonstrates how to:
- Create a registry and cap its listeners
- Register persistent and one-shot listeners
- Emit events with arbitrary payloads
- Inspect registered events

Prerequisites:
    pip install herald-events
"""

from herald import EventRegistry, MaxListenersExceededError


def main() -> None:
    emitter = EventRegistry()

    # At most 10 listeners per event (0 = uncapped)
    emitter.set_max_listeners(10)

    # -- Listeners -------------------------------------------------------------
    emitter.on("message", lambda name, data: print(f"Emitted: {name} {data!r}"))
    emitter.once("message", lambda name, data: print(f"First message only: {data['text']}"))

    # -- Emit ------------------------------------------------------------------
    emitter.emit("message", {"text": "1"})
    emitter.emit("message", {"text": "2"})

    # -- Cap -------------------------------------------------------------------
    emitter.set_max_listeners(1)
    try:
        emitter.on("message", lambda name, data: None)
    except MaxListenersExceededError as exc:
        print(f"Refused: {exc}")

    # -- Introspection ---------------------------------------------------------
    print("Events:", emitter.list_event_names())
    print(emitter.snapshot().model_dump_json(indent=2))


if __name__ == "__main__":
    main()
