"""The response handed to route functions, and a writer that records what it gets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence

from restwire import tracing

PRETTY_PRINT_RESPONSES = True

_STATUS_OK = 200
_STATUS_INTERNAL_SERVER_ERROR = 500


def _log_trace(message: str, *args: Any) -> None:
    if tracing.is_tracing():
        logger = tracing._current_trace_logger()
        if logger is not None:
            logger.info(message, *args)


def _canonical_key(name: str) -> str:
    """Return the canonical form of a header name, e.g. ``content-type`` -> ``Content-Type``."""
    return "-".join(part.capitalize() for part in name.split("-"))


class ResponseWriter(Protocol):
    """What a Response needs from the writer underneath it."""

    headers: dict[str, list[str]]

    def write_header(self, status: int) -> None: ...

    def write(self, data: bytes) -> int: ...


@dataclass
class RecordingWriter:
    """A response writer that keeps the status, headers and body it receives."""

    code: int = _STATUS_OK
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: bytearray = field(default_factory=bytearray)
    wrote_header: bool = False
    flushed: bool = False

    def write_header(self, status: int) -> None:
        """Record the status; only the first call has an effect."""
        if not 100 <= status <= 999:
            raise ValueError(f"invalid WriteHeader code {status}")
        if self.wrote_header:
            return
        self.code = status
        self.wrote_header = True

    def write(self, data: bytes) -> int:
        """Append ``data`` to the body, writing status 200 first if none was written."""
        if not self.wrote_header:
            self.write_header(_STATUS_OK)
        self.body.extend(data)
        return len(data)

    def flush(self) -> None:
        """Mark the writer as flushed, writing status 200 first if none was written."""
        if not self.wrote_header:
            self.write_header(_STATUS_OK)
        self.flushed = True


class Response:
    """Wraps a response writer, remembering the status, the bytes written and the error."""

    def __init__(
        self,
        writer: ResponseWriter,
        request_accept: str = "",
        route_produces: Optional[Sequence[str]] = None,
        pretty_print: Optional[bool] = None,
    ) -> None:
        self.writer = writer
        self.request_accept = request_accept
        self.route_produces: list[str] = list(route_produces or [])
        self.pretty_print = PRETTY_PRINT_RESPONSES if pretty_print is None else pretty_print
        self._status_code = _STATUS_OK
        self._content_length = 0
        self._error: Optional[BaseException] = None

    def internal_server_error(self) -> "Response":
        """Write status 500."""
        self.write_header(_STATUS_INTERNAL_SERVER_ERROR)
        return self

    def add_header(self, header: str, value: str) -> "Response":
        """Add a value to a response header."""
        self.writer.headers.setdefault(_canonical_key(header), []).append(value)
        return self

    def set_request_accepts(self, mime: str) -> None:
        """Tell the response which media types the request accepts."""
        self.request_accept = mime

    def write_error(self, http_status: int, err: Optional[BaseException]) -> None:
        """Write the status and the text of ``err`` (which may be None)."""
        self._error = err
        self.write_error_string(http_status, "" if err is None else str(err))

    def write_error_string(self, http_status: int, error_reason: str) -> None:
        """Write an error status and its reason as the body."""
        if self._error is None:
            self._error = Exception(error_reason)
        self.write_header(http_status)
        self.write(error_reason.encode("utf-8"))

    def flush(self) -> None:
        """Flush the underlying writer if it supports flushing."""
        flush = getattr(self.writer, "flush", None)
        if callable(flush):
            flush()
        else:
            _log_trace("ResponseWriter %r doesn't support Flush", self)

    def write_header(self, http_status: int) -> None:
        """Write the status and remember it."""
        self._status_code = http_status
        self.writer.write_header(http_status)

    def status_code(self) -> int:
        """Return the status written, 200 if none was."""
        return self._status_code or _STATUS_OK

    def write(self, data: bytes) -> int:
        """Write body bytes and count them."""
        written = self.writer.write(data)
        self._content_length += written
        return written

    def content_length(self) -> int:
        """Return the number of body bytes written through this response."""
        return self._content_length

    def error(self) -> Optional[BaseException]:
        """Return the error recorded by write_error or write_error_string."""
        return self._error

    def __repr__(self) -> str:
        return f"Response(status={self.status_code()}, accept={self.request_accept!r})"


__all__: list[Any] = ["PRETTY_PRINT_RESPONSES", "RecordingWriter", "Response", "ResponseWriter"]