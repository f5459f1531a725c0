from __future__ import annotations

from typing import Any

from ..core.exceptions import ImportFormatError, ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def require_store_document(value: Any) -> dict:
    """Accept any non-null JSON object as an attendance store.

    No schema validation beyond "is an object" is performed.
    """

    if not isinstance(value, dict):
        raise ImportFormatError("Attendance data must be a JSON object")
    return value
