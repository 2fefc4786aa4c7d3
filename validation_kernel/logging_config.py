"""
Structured JSON logging for the validation kernel.

Every record is written as one JSON object. Fields bound with
``LogContext.bind`` (the field being matched, the configuration file being
loaded) are merged into every record emitted inside the ``with`` block.
"""

__all__ = [
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, str] = MappingProxyType({})

_context: ContextVar[Mapping[str, str]] = ContextVar("log_context", default=_EMPTY)


class LogContext:
    """Async-safe, per-thread log fields scoped to a ``with`` block."""

    @staticmethod
    @contextmanager
    def bind(**fields: str | None) -> Iterator[Mapping[str, str]]:
        """Add fields for the duration of the block; None values are skipped."""
        merged = dict(_context.get())
        merged.update({k: v for k, v in fields.items() if v is not None})
        token = _context.set(MappingProxyType(merged))
        try:
            yield _context.get()
        finally:
            _context.reset(token)

    @staticmethod
    def get_all() -> dict[str, str]:
        return dict(_context.get())

    @staticmethod
    def clear() -> None:
        _context.set(_EMPTY)


_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context.get(),
        }
        payload.update(
            (k, v) for k, v in vars(record).items()
            if k not in _STDLIB_KEYS and k not in payload
        )

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            # ValidationKernelError subclasses carry a code and structured fields
            if hasattr(exc, "code"):
                payload["exc_code"] = exc.code
            payload.update(
                (f"exc_{k}", v) for k, v in vars(exc).items() if not k.startswith("_")
            )
            payload["traceback"] = self.formatException(record.exc_info)

        # Decimal, UUID and similar values are written as their str()
        return json.dumps(payload, default=str)


_LOGGER_PREFIX = "validation_kernel"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the validation_kernel namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a JSON handler to the validation_kernel logger (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
    h.setFormatter(StructuredFormatter())
    root_logger.addHandler(h)


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
