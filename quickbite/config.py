"""Runtime configuration defaults for the backend connection and logging."""

from __future__ import annotations

import os

from loguru import logger


def env_float(name: str, default: float) -> float:
    """Read a float override from the environment, keeping the default if it is malformed."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("ignoring malformed {}={!r}, using {}", name, raw, default)
        return default


API_BASE_URL = os.environ.get("QUICKBITE_BACKEND_URL", "http://localhost:8000")
REQUEST_TIMEOUT_SECONDS = env_float("QUICKBITE_REQUEST_TIMEOUT", 10.0)

# The terminal belongs to the TUI, so logs only go to a file.
LOG_PATH = os.environ.get("QUICKBITE_LOG_PATH", "/tmp/quickbite-debug.log")
LOG_LEVEL = os.environ.get("QUICKBITE_LOG_LEVEL", "DEBUG")
