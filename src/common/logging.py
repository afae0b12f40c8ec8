"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging
import sys

import structlog

from src.common.constants import LOG_LEVEL


def configure_structlog(level: str = LOG_LEVEL) -> None:
    """Configure structlog for human-readable output on stderr.

    Call once at process startup. Stdout is left for the report itself.
    Unknown level names fall back to ``INFO``.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
