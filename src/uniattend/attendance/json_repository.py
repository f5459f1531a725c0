from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..core.exceptions import StorageError
from .model import AttendanceStore
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class JsonFileAttendanceRepository(AttendanceRepository):
    """Stores the full attendance store as one pretty-printed JSON document."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AttendanceStore:
        if not self._path.exists():
            return {}

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # Unreadable data is treated as "no data yet".
            logger.warning("Could not read attendance file %s: %s", self._path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring attendance file %s: top-level value is not an object", self._path)
            return {}
        return data

    def save(self, store: AttendanceStore) -> None:
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(store, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except OSError as e:
            logger.error("Failed to write attendance file %s: %s", self._path, e)
            if tmp_name:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StorageError("Failed to save attendance data") from e
