"""Configuration derived from settings.json. Module-level exports."""

import logging
import os
from urllib.parse import urlparse

from settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:4000"


def _load():
    """Load all config values from the current settings."""
    global API_BASE_URL, REQUEST_TIMEOUT
    global DEFAULT_JOB_TYPE, DEFAULT_SALARY

    _s = get_settings()
    API_BASE_URL = _resolve_base_url(
        os.environ.get("JOBBOARD_API_URL") or _s.get("api_base_url", DEFAULT_API_BASE_URL)
    )
    REQUEST_TIMEOUT = _s.get("request_timeout", 30)
    defaults = _s.get("form_defaults", {})
    DEFAULT_JOB_TYPE = defaults.get("type", "Full-Time")
    DEFAULT_SALARY = defaults.get("salary", 4500)


def _resolve_base_url(raw: str) -> str:
    parsed = urlparse(raw)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        logger.warning(
            f"API base URL '{raw}' is not an http(s) address, "
            f"falling back to {DEFAULT_API_BASE_URL}"
        )
        return DEFAULT_API_BASE_URL
    return raw.rstrip("/")


# Initial load
_load()


def reload():
    """Re-read settings.json and refresh all module-level constants."""
    _load()
