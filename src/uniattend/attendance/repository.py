from __future__ import annotations

from typing import Protocol

from .model import AttendanceStore


class AttendanceRepository(Protocol):
    """Whole-document persistence for the attendance store."""

    def load(self) -> AttendanceStore:
        """Return the persisted store, or an empty mapping if there is none yet."""

        raise NotImplementedError

    def save(self, store: AttendanceStore) -> None:
        """Replace the persisted store.

        Raises StorageError when the write fails.
        """

        raise NotImplementedError
