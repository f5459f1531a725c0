from __future__ import annotations

import importlib
import logging
from datetime import date
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging
from .container import build_container
from .core.constants import DEFAULT_FIRST_WEEK_START, DEFAULT_WEEK_COUNT
from .core.enums import ConcurrencyPolicy
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

SETTING_KEYS = (
    "DEBUG",
    "TESTING",
    "PORT",
    "LOG_LEVEL",
    "DATA_FILE",
    "CONCURRENCY_POLICY",
    "WEEK_COUNT",
    "FIRST_WEEK_START",
)


def _as_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def create_app(settings_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for key in SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    if settings_overrides:
        app.config.update(settings_overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    container = build_container(
        data_file=app.config["DATA_FILE"],
        concurrency_policy=app.config.get("CONCURRENCY_POLICY", ConcurrencyPolicy.SERIALIZED),
        week_count=int(app.config.get("WEEK_COUNT", DEFAULT_WEEK_COUNT)),
        first_week_start=_as_date(app.config.get("FIRST_WEEK_START", DEFAULT_FIRST_WEEK_START)),
    )
    app.extensions["uniattend"] = container

    register_attendance(app, container)
    register_schedules(app, container)

    logger.info(
        "UniAttend ready: settings=%s storage=%s policy=%s",
        settings_module,
        container.attendance_repo.path,
        container.attendance_service.policy.value,
    )
    return app
