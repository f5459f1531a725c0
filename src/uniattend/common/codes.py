from __future__ import annotations

from typing import Any

from ..core.constants import MAX_CODE_LENGTH, UNSET_CODE


def normalize_code(raw: Any) -> str:
    """Uppercase and clip an attendance code. ``None`` becomes the unset code."""
    if raw is None:
        return UNSET_CODE
    return str(raw).upper()[:MAX_CODE_LENGTH]


def is_unset(code: Any) -> bool:
    return code is None or code == UNSET_CODE
