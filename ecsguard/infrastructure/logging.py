"""
Centralized Logging

Architectural Intent:
- Structured JSON or human-readable logging for the "ecsguard" logger tree
- The level and format come from EcsGuardConfig (log_level, log_json), which
  the file and ECSGUARD_LOG_* environment variables populate
- CLI flags (--verbose, --debug) override the configured level only
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Optional, TextIO

from ecsguard.infrastructure.config import EcsGuardConfig

LOGGER_NAME = "ecsguard"
HUMAN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Resolve a level name such as "debug" or "INFO" to its numeric value."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Install a single handler on the ecsguard logger and return it.

    Args:
        level: Logging level applied to the logger and its handler.
        json_format: Emit JSONFormatter records instead of HUMAN_FORMAT lines.
        stream: Destination, stderr by default.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(HUMAN_FORMAT))
    package_logger.addHandler(handler)
    return package_logger


def configure_logging_from_config(
    config: EcsGuardConfig,
    level_override: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure logging from config.log_level and config.log_json.

    An unknown log_level name falls back to WARNING. level_override, when
    given, wins over the configured level but keeps the configured format.
    """
    level = level_override if level_override is not None else level_from_name(config.log_level)
    return configure_logging(level=level, json_format=config.log_json, stream=stream)
