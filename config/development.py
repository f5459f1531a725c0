import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

DEBUG = True
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Single JSON document holding the whole attendance store
DATA_FILE = os.getenv("DATA_FILE", str(BASE_DIR / "attendance.json"))

# 'serialized' (lock around every read-modify-write) or 'last_write_wins'
CONCURRENCY_POLICY = os.getenv("CONCURRENCY_POLICY", "serialized")

WEEK_COUNT = int(os.getenv("WEEK_COUNT", "15"))
FIRST_WEEK_START = os.getenv("FIRST_WEEK_START", "2025-11-03")

# Client side
API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}")
SYNC_DEBOUNCE_SECONDS = float(os.getenv("SYNC_DEBOUNCE_SECONDS", "0.4"))
SYNC_TIMEOUT_SECONDS = float(os.getenv("SYNC_TIMEOUT_SECONDS", "10"))
