"""
Structured JSON logging: timestamp, level, event_type, owner.

structlog with ISO timestamps and consistent keys for aggregation. The first
positional argument of every log call is the event type, e.g.
    logger.info("coin_input_split", coin_type=..., amount=...)

Besides stdlib and structlog only config.env is imported (it imports no
logging), so any module can import get_logger without circular imports.
Loggers are resolved lazily on every call, so configure_structlog() also
reaches module-level loggers created at import time.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from backend_giverep.config.env import load_giverep_env


def _level_from_env() -> int:
    name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    return getattr(logging, name, logging.INFO)


def _format_from_env() -> str:
    return (os.getenv("LOG_FORMAT") or "json").strip().lower()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep a human message alongside."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(level: int | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog processors and output.

    Args:
        level: stdlib logging level; defaults to LOG_LEVEL from env.
        fmt: "json" for production output, anything else for the
            colored console renderer. Defaults to LOG_FORMAT from env.
    """
    # LOG_LEVEL / LOG_FORMAT may come from .env only
    load_giverep_env()
    level = _level_from_env() if level is None else level
    fmt = _format_from_env() if fmt is None else fmt.strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structured logger bound to the module name."""
    return structlog.get_logger(name, logger=name)


def bind_owner(name: str, owner: str) -> structlog.BoundLogger:
    """Return a module logger with a shortened owner address bound to every call."""
    short = owner if len(owner) <= 14 else f"{owner[:8]}...{owner[-4:]}"
    return get_logger(name).bind(owner=short)
