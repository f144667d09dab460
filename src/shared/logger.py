"""
Structured logging for every layer.

Log lines go to stdout as JSON (default) or plain text, selected with
LOG_FORMAT=json|text. LOG_LEVEL sets the root level. Request-scoped fields
(session_id, ticker, tool) are carried in a context variable and attached to
every record emitted while they are bound.
"""

from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone

_CONFIGURED = False

_DEFAULT_SERVICE = "financial-research-agent"
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_LOG_FORMAT = "json"

_CONTEXT_KEYS = ("session_id", "ticker", "tool")

_REDACT_KEYS = {"apikey", "api_key", "authorization", "secret", "token"}

_LOG_CONTEXT: contextvars.ContextVar[dict[str, str] | None] = contextvars.ContextVar(
    "log_context",
    default=None,
)


def sanitize_for_logging(value: object, *, key: str | None = None) -> object:
    if key is not None and key.strip().lower().replace("-", "_") in _REDACT_KEYS:
        return "[REDACTED]"
    if isinstance(value, Mapping):
        return {
            str(raw_key): sanitize_for_logging(raw_value, key=str(raw_key))
            for raw_key, raw_value in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [sanitize_for_logging(item) for item in value]
    return value


def get_log_context() -> dict[str, str]:
    current = _LOG_CONTEXT.get()
    return dict(current) if current else {}


@contextmanager
def log_context(**fields: str | None) -> Iterator[None]:
    merged = get_log_context()
    for key, value in fields.items():
        if value is not None and value.strip():
            merged[key] = value.strip()
    token = _LOG_CONTEXT.set(merged)
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def _format_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).isoformat()


class _JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": _format_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "service": _DEFAULT_SERVICE,
            "message": record.getMessage(),
        }
        for key in _CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value:
                payload[key] = value
        event = getattr(record, "event", None)
        if event:
            payload["event"] = event
        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = sanitize_for_logging(fields)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, sort_keys=True, default=str)


class _TextLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        parts = [
            _format_timestamp(record.created),
            record.levelname,
            record.name,
            record.getMessage(),
        ]
        event = getattr(record, "event", None)
        if event:
            parts.append(f"event={event}")
        for key in _CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value:
                parts.append(f"{key}={value}")
        fields = getattr(record, "fields", None)
        if fields:
            encoded = json.dumps(
                sanitize_for_logging(fields), ensure_ascii=True, sort_keys=True, default=str
            )
            parts.append(f"fields={encoded}")
        if record.exc_info:
            parts.append(f"exception={self.formatException(record.exc_info)}")
        return " ".join(parts)


class _LogContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        context = get_log_context()
        for key in _CONTEXT_KEYS:
            setattr(record, key, context.get(key))
        return True


def _resolve_log_level() -> int:
    level_name = os.getenv("LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    resolved = getattr(logging, level_name, logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def _resolve_formatter() -> logging.Formatter:
    mode = os.getenv("LOG_FORMAT", _DEFAULT_LOG_FORMAT).strip().lower()
    if mode == "text":
        return _TextLogFormatter()
    return _JsonLogFormatter()


def configure_logging() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(_resolve_formatter())
    handler.addFilter(_LogContextFilter())

    root = logging.getLogger()
    root.setLevel(_resolve_log_level())
    if not root.handlers:
        root.addHandler(handler)
    else:
        for existing in root.handlers:
            existing.addFilter(_LogContextFilter())
    # httpx logs full request URLs at INFO, which include the provider credential.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)


def log_event(
    logger: logging.Logger,
    *,
    event: str,
    message: str,
    level: int = logging.INFO,
    fields: Mapping[str, object] | None = None,
) -> None:
    extra: dict[str, object] = {"event": event}
    if fields is not None:
        extra["fields"] = sanitize_for_logging(fields)
    logger.log(level, message, extra=extra)
