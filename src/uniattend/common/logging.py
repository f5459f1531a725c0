from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _AppHandler(logging.StreamHandler):
    """Marker type so re-configuration replaces only our own handler."""


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger for the whole process."""
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove a handler from a previous call to avoid duplicated lines on app re-creation.
    for existing in list(root_logger.handlers):
        if isinstance(existing, _AppHandler):
            root_logger.removeHandler(existing)

    handler = _AppHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Werkzeug request lines are noisy below INFO.
    logging.getLogger("werkzeug").setLevel(max(log_level, logging.INFO))
