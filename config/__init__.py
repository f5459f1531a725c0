import os

SETTINGS_MODULES = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
    "development": "config.development",
    "dev": "config.development",
}


def get_settings_module(env: str = None) -> str:
    """Settings module for ``env`` (default: ``APP_ENV``); unknown names fall back to development."""
    name = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return SETTINGS_MODULES.get(name, "config.development")
