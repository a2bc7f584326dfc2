"""Structlog-based logging for the kinship engine.

Rules for this package:
- Library code logs through structlog only; no print() outside the CLI.
- Log lines are JSON on stderr; stdout belongs to CLI output (tables, --json).
- Query logs are DEBUG (`kinship.query`), tree loading is INFO, skipped
  records are WARNING.

The level comes from KINSHIP_LOG_LEVEL at import time. The CLI calls
``configure_logging`` again once a .env file has been loaded.
"""
from __future__ import annotations

from typing import Literal

import logging
import sys

import structlog

from .config import CONFIG

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "INFO") -> None:
    logging.basicConfig(format="%(message)s", level=getattr(logging, level))
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "kinship_engine"):
    return structlog.get_logger(name)


# Initialize default config
configure_logging(CONFIG.log_level)
