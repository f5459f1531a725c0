import os
import tempfile
from pathlib import Path

DEBUG = False
TESTING = True
PORT = 3000
LOG_LEVEL = "WARNING"

# Tests normally override this with a per-test tmp_path file
DATA_FILE = os.getenv("DATA_FILE", str(Path(tempfile.gettempdir()) / "uniattend-test.json"))
CONCURRENCY_POLICY = "serialized"

WEEK_COUNT = 15
FIRST_WEEK_START = "2025-11-03"

API_BASE_URL = "http://localhost:3000"
SYNC_DEBOUNCE_SECONDS = 0.05
SYNC_TIMEOUT_SECONDS = 2.0
