"""Structured logging via structlog.

Configured once per process: by `create_app()` for the HTTP server and by
the CLI before an analysis runs. Library modules simply call
`structlog.get_logger(__name__)` and log events with keyword context.

Renderer selection:
  debug=True   `ConsoleRenderer` with colours for local development.
  debug=False  `JSONRenderer` for machine-parseable logs in production.

The `request_id` field is injected into every log line from
`ssrcheck.core.middleware._request_id_var`, so anything logged while a
request is being served carries its ID automatically.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from ssrcheck.core.middleware import get_request_id


def _inject_request_id(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject request_id from the ContextVar."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_structlog(
    debug: bool = True,
    *,
    level: int | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the process lifetime.

    `level` overrides the default threshold (DEBUG when debugging, INFO
    otherwise). `stream` defaults to stdout; the CLI passes stderr so the
    report it prints stays separate from log output.
    Calling multiple times is safe.
    """
    if level is None:
        level = logging.DEBUG if debug else logging.INFO
    if stream is None:
        stream = sys.stdout

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_request_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # Bridge stdlib logging so httpx and uvicorn output lands on the same stream.
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=level,
    )
