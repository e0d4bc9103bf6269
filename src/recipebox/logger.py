"""Diagnostics logging for recipebox.

The interactive transcript goes through :mod:`recipebox.terminal`; loguru only
carries diagnostics, to stderr at WARNING unless configured otherwise.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger as _logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = "WARNING"

_STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {message}"

_logger.configure(extra={"component": "recipebox"})


def configure_logging(level: str = DEFAULT_LEVEL, file: Optional[str] = None) -> None:
    _logger.remove()
    _logger.add(sys.stderr, level=normalize_level(level), format=_STDERR_FORMAT)
    if file:
        _logger.add(file, level="DEBUG", format=_FILE_FORMAT, encoding="utf-8")


def get_logger(component: str):
    """Return the shared logger bound to a component name."""
    return _logger.bind(component=component)


def normalize_level(value: object) -> str:
    text = str(value or "").strip().upper()
    if text in LOG_LEVELS:
        return text
    return DEFAULT_LEVEL


# Replace loguru's default DEBUG sink until the CLI applies the configured level.
configure_logging()
