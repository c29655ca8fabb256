"""Package-wide logger and the switch for tracing how requests are matched."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol


class LoggerLike(Protocol):
    """The minimal logging interface the package relies on."""

    def info(self, msg: str, *args: Any) -> Any: ...


_logger: Optional[LoggerLike] = logging.getLogger("restwire")
_trace_logger: Optional[LoggerLike] = _logger
_tracing = False


def set_logger(custom_logger: LoggerLike) -> None:
    """Replace the package logger."""
    global _logger
    _logger = custom_logger


def get_logger() -> Optional[LoggerLike]:
    """Return the package logger."""
    return _logger


def trace_logger(logger: Optional[LoggerLike]) -> None:
    """Use ``logger`` for trace output; tracing is on only if a logger is given."""
    global _trace_logger
    _trace_logger = logger
    enable_tracing(logger is not None)


def enable_tracing(enabled: bool) -> None:
    """Switch trace logging on or off."""
    global _tracing
    _tracing = bool(enabled)


def is_tracing() -> bool:
    """Tell whether trace logging is on."""
    return _tracing


def trace(message: str, *args: Any) -> None:
    """Log a %-style message on the trace logger when tracing is on."""
    if _tracing and _trace_logger is not None:
        _trace_logger.info(message, *args)


def _current_trace_logger() -> Optional[LoggerLike]:
    return _trace_logger