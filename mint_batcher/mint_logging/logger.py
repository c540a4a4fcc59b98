"""
structlog setup for mint runs.

Every line carries timestamp, level and the event name; per-wallet lines also
carry wallet_id. LOG_FORMAT=json renames "event" to "event_type" so log
aggregators get one flat record per line; the default console renderer is for
the interactive CLI.

Imports nothing from mint_batcher, so any module can import it first.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").strip().lower()


def _rename_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def configure_structlog(
    log_format: str | None = None,
    level: int | None = None,
    stream: IO[str] | None = None,
) -> None:
    """
    (Re)configure structlog. Loggers obtained before the call keep the old
    configuration once they have logged.

    log_format: "json" or "console" (default LOG_FORMAT).
    stream: output stream (default sys.stderr, so stdout stays free for tool output).
    """
    fmt = (log_format or LOG_FORMAT).strip().lower()
    out = stream or sys.stderr
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.format_exc_info,
    ]
    if fmt == "json":
        processors += [_rename_event, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=out.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level or LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """Module logger; pass the event name first, e.g. logger.info("mint_succeeded", wallet_id=..., digest=...)."""
    return structlog.get_logger(name).bind(logger=name)


def bind_wallet(wallet_id: str) -> structlog.BoundLogger:
    return get_logger("mint_batcher").bind(wallet_id=wallet_id)
