"""Backup and restore of the shared store through the HTTP API.

Unlike the interactive client store, these never fall back to an empty store:
a backup tool must not write ``{}`` over a good file or report a restore the
server never received.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

import requests

from ..common.validators import require_store_document
from ..core.exceptions import ImportFormatError
from .client import AttendanceApiClient

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def export_backup(api: AttendanceApiClient, out_file: Union[str, Path]) -> int:
    out_file = Path(out_file)
    try:
        store = api.fetch_all()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error("Export aborted, could not fetch attendance from server: %s", e)
        return EXIT_FAILED

    out_file.write_text(json.dumps(store, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Exported %d weeks to %s", len(store), out_file)
    return EXIT_OK


def import_backup(api: AttendanceApiClient, in_file: Union[str, Path]) -> int:
    in_file = Path(in_file)
    try:
        document = json.loads(in_file.read_text(encoding="utf-8"))
        store = require_store_document(document)
    except (OSError, ValueError, ImportFormatError) as e:
        logger.error("Import aborted, %s is not a valid attendance backup: %s", in_file, e)
        return EXIT_FAILED

    try:
        api.replace_all(store)
    except requests.exceptions.RequestException as e:
        logger.error("Import aborted, server did not accept the backup: %s", e)
        return EXIT_FAILED

    logger.info("Imported %d weeks from %s", len(store), in_file)
    return EXIT_OK
