"""
srp_token_client.observability.logging

Logging setup for token client processes.

Responsibilities:
- Route `structlog` events through stdlib logging as one JSON object per line.
- Hand out named bound loggers.
- Tag every event of an authentication attempt with its `attempt_id`.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str) -> None:
    """
    One-time process setup; the CLI calls this before the first attempt.
    Secrets never reach these processors: callers only log event names and error types.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    # Attempt context first, JSON rendering last.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _service_field(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _service_field(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def attempt_context(*, username: str) -> Iterator[str]:
    # Each asyncio task runs in its own context copy, so concurrent attempts don't mix ids.
    attempt_id = str(uuid.uuid4())
    tokens = structlog.contextvars.bind_contextvars(attempt_id=attempt_id, username=username)
    try:
        yield attempt_id
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


# --- Module Notes -----------------------------------------------------------
# Logs go to stderr so the CLI can keep stdout for the token JSON.
