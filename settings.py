"""Client settings read from a JSON file.

The file is optional. Without one every option falls back to the defaults
in config.py; settings.example.json lists what can be set. Point
JOBBOARD_SETTINGS at a file to use something other than ./settings.json
next to this module.
"""

import json
import logging
import os
import threading

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "settings.json")

_settings = None
_lock = threading.Lock()


def settings_path() -> str:
    return os.environ.get("JOBBOARD_SETTINGS") or SETTINGS_PATH


def get_settings(path: str | None = None) -> dict:
    """Cached settings dict, read on first access. Empty when no file exists."""
    global _settings
    with _lock:
        if _settings is None:
            _settings = _read(path or settings_path())
        return _settings


def _read(path: str) -> dict:
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info(f"No settings file at {path}, using defaults")
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must hold a JSON object")
    return data


def reload_settings():
    """Clear the cached settings so the next get_settings() re-reads from disk."""
    global _settings
    with _lock:
        _settings = None
