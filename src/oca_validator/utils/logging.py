"""
Logging setup for the validator.

Every event is written to stderr. Stdout belongs to the validation
report, which must stay parseable when ``--json`` is given.
"""

import logging
import sys
from typing import Any

import structlog


def _renderer(json_output: bool) -> list[structlog.types.Processor]:
    if json_output:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Route validator log events to stderr.

    Safe to call more than once: the stdlib handler is replaced and
    loggers are not cached, so a later call takes effect for loggers
    that modules created at import time.

    Args:
        level: Minimum level name, e.g. "WARNING".
        json_output: Emit one JSON object per event instead of
            coloured console lines.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Bind fields to every event logged inside a ``with`` block.

    The CLI binds the schema and data paths for the duration of one
    validation run:

        with log_context(schema="person.yaml", data="record.json"):
            validator.validate_text(table, text)
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
