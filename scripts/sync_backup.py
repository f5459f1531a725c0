"""Export or import the shared attendance store through the HTTP API.

Usage:
    python scripts/sync_backup.py export [FILE]
    python scripts/sync_backup.py import FILE

Exits non-zero when the server cannot be reached or the file is invalid; an
existing export file is left untouched in that case.
"""

from __future__ import annotations

import importlib
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from uniattend.common.logging import configure_logging
from uniattend.core.constants import EXPORT_FILENAME_PREFIX
from uniattend.sync.backup import EXIT_OK, export_backup, import_backup
from uniattend.sync.client import AttendanceApiClient


def main(argv: list[str]) -> int:
    if not argv or argv[0] not in {"export", "import"} or (argv[0] == "import" and len(argv) < 2):
        print(__doc__)
        return 2

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    api = AttendanceApiClient(settings.API_BASE_URL, timeout=settings.SYNC_TIMEOUT_SECONDS)

    try:
        if argv[0] == "export":
            default_name = f"{EXPORT_FILENAME_PREFIX}{date.today().strftime('%Y-%m-%d')}.json"
            out_file = Path(argv[1]) if len(argv) > 1 else Path(default_name)
            rc = export_backup(api, out_file)
            if rc == EXIT_OK:
                print(f"OK: Exported to {out_file}")
            else:
                print("Error: export failed, nothing was written.")
            return rc

        rc = import_backup(api, argv[1])
        if rc == EXIT_OK:
            print("OK: Attendance codes imported and synced.")
        else:
            print("Error: import failed, the server was not updated.")
        return rc
    finally:
        api.close()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
