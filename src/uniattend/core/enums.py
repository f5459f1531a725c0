from __future__ import annotations

from enum import Enum


class ConcurrencyPolicy(str, Enum):
    """How the server serializes whole-store read-modify-write cycles."""

    SERIALIZED = "serialized"
    LAST_WRITE_WINS = "last_write_wins"


class ClientState(str, Enum):
    """Lifecycle of the client-side store."""

    LOADING = "LOADING"
    READY = "READY"
