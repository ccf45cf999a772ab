"""Sentry SDK integration for the SSR check server.

`send_default_pii` stays off and a `before_send` hook redacts any event
field whose key looks sensitive. /check-repo accepts a GitHub token as a
query parameter, so the request query string is scrubbed as well.
No-op when SENTRY_DSN is empty.
"""

from __future__ import annotations

from typing import Any

import sentry_sdk
import structlog
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.httpx import HttpxIntegration

logger = structlog.get_logger(__name__)

_SENSITIVE_KEYS = frozenset({"token", "githubtoken", "secret", "password", "dsn"})


def _scrub_secrets(event: dict[str, Any], hint: Any) -> dict[str, Any]:
    """Sentry before_send hook: redact values for sensitive keys."""
    _scrub_dict(event.get("extra", {}))
    request = event.get("request", {})
    request_data = request.get("data", {})
    if isinstance(request_data, dict):
        _scrub_dict(request_data)
    if request.get("query_string"):
        request["query_string"] = _scrub_query_string(request["query_string"])
    return event


def _scrub_dict(d: dict[str, Any]) -> None:
    """Recursively redact sensitive values in-place."""
    for key in list(d.keys()):
        if any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
            d[key] = "[REDACTED]"
        elif isinstance(d[key], dict):
            _scrub_dict(d[key])


def _scrub_query_string(query: str) -> str:
    parts = []
    for pair in query.split("&"):
        key, sep, _ = pair.partition("=")
        if sep and any(sensitive in key.lower() for sensitive in _SENSITIVE_KEYS):
            parts.append(f"{key}=[REDACTED]")
        else:
            parts.append(pair)
    return "&".join(parts)


def init_sentry(dsn: str, environment: str = "development") -> None:
    """Initialise the Sentry SDK, or do nothing when `dsn` is blank."""
    if not dsn or not dsn.strip():
        logger.debug("sentry_disabled")
        return

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[
            FastApiIntegration(),
            HttpxIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,
        before_send=_scrub_secrets,
    )
    logger.info("sentry_initialised", environment=environment)
