"""Loguru logging configuration.

Call setup_logging() once at startup. Other modules do
`from loguru import logger` and log normally.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from quickbite.config import LOG_LEVEL, LOG_PATH


def setup_logging(level: str = LOG_LEVEL, path: str = LOG_PATH) -> None:
    """Send logs to a rotating file only; stderr would draw over the TUI."""
    logger.remove()

    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level=level,
        rotation="5 MB",
        retention=3,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
