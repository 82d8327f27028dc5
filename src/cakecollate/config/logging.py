"""structlog configuration for cakecollate.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): structured JSON lines to stderr

Rejected user input ends up in debug events, so long values are clipped
before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

MAX_LOGGED_INPUT = 120


def clip_input(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: shorten an ``input`` field past MAX_LOGGED_INPUT chars."""
    raw = event_dict.get("input")
    if isinstance(raw, str) and len(raw) > MAX_LOGGED_INPUT:
        event_dict["input"] = raw[:MAX_LOGGED_INPUT] + "..."
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and route all records to one handler.

    Args:
        verbose: Enable DEBUG output for ``cakecollate`` loggers.
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Destination stream (default: stderr).
    """
    out = stream or sys.stderr
    app_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        clip_input,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("cakecollate").setLevel(app_level)
