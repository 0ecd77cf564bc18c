"""
Logger
Structured logging for the plugin catalog.

Every component logs through a named child of ``plugin-catalog`` so the
builder, the HTTP server and the MCP server can be filtered separately.
Fields passed in ``extra`` are appended to the line as ``key=value`` pairs.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "plugin-catalog"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def _format_fields(extra: Optional[dict]) -> str:
    if not extra:
        return ""
    return " " + " ".join(f"{key}={value}" for key, value in extra.items())


class Logger:
    """Named logger writing to stderr, with key=value context fields."""

    def __init__(self, component: Optional[str] = None, level: Optional[str] = None):
        name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(level))

        # Handler lives on the root catalog logger; children propagate to it
        root = logging.getLogger(ROOT_LOGGER_NAME)
        if not root.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)

    @property
    def name(self) -> str:
        return self.logger.name

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message + _format_fields(extra))

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message + _format_fields(extra))

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message + _format_fields(extra))

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message + _format_fields(extra))
