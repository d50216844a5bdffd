"""
Herald — Centralized configuration
All environment variables and constants in a single place.
"""

import os

# ── Listener cap ──────────────────────────────────────────────────────────────

# 0 = uncapped
DEFAULT_MAX_LISTENERS = int(os.getenv("HERALD_MAX_LISTENERS", "10"))

# ── Dispatch ──────────────────────────────────────────────────────────────────

# Hand each listener its own deep copy of the payload
COPY_PAYLOAD = os.getenv("HERALD_COPY_PAYLOAD", "0") == "1"

# ── Reserved events ───────────────────────────────────────────────────────────

NEW_LISTENER = "newListener"
REMOVE_LISTENER = "removeListener"
RESERVED_EVENTS = (NEW_LISTENER, REMOVE_LISTENER)

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "0.1.0"
