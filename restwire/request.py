"""Incoming HTTP requests and the wrapper handed to route functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from urllib.parse import parse_qs, unquote, urlsplit

from restwire.route import Route, RouteAccessor

_FORM_URLENCODED = "application/x-www-form-urlencoded"
_METHODS_WITH_FORM_BODY = frozenset({"POST", "PUT", "PATCH"})


@dataclass
class HttpRequest:
    """A plain HTTP request: method, URL, headers and body."""

    method: str = "GET"
    url: str = "/"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Union[bytes, str] = b""
    content_length: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")
        self.headers = dict(self.headers)
        if self.content_length is None:
            self.content_length = len(self.body)

    @property
    def path(self) -> str:
        """The unescaped path of the URL."""
        return unquote(urlsplit(self.url).path)

    @property
    def query(self) -> str:
        """The raw query string of the URL."""
        return urlsplit(self.url).query

    def header(self, name: str) -> str:
        """Return the header value for ``name`` (any case), or an empty string."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return ""


class Request:
    """Wraps an HttpRequest with path parameters, attributes and the matched route."""

    def __init__(self, http_request: HttpRequest) -> None:
        self.http_request = http_request
        self._path_parameters: dict[str, str] = {}
        self._attributes: dict[str, Any] = {}
        self._selected_route: Optional[Route] = None
        self._post_form: Optional[dict[str, list[str]]] = None

    def _bind_route(self, route: Optional[Route], path_parameters: Mapping[str, str]) -> None:
        self._selected_route = route
        self._path_parameters = dict(path_parameters)

    def path_parameter(self, name: str) -> str:
        """Return the value of a path parameter, or an empty string."""
        return self._path_parameters.get(name, "")

    def path_parameters(self) -> dict[str, str]:
        return self._path_parameters

    def _query(self) -> dict[str, list[str]]:
        return parse_qs(self.http_request.query, keep_blank_values=True)

    def query_parameter(self, name: str) -> str:
        """Return the first query value for ``name``, or an empty string."""
        values = self._query().get(name)
        return values[0] if values else ""

    def query_parameters(self, name: str) -> list[str]:
        """Return all query values for ``name``."""
        return self._query().get(name, [])

    def _parse_post_form(self) -> dict[str, list[str]]:
        if self._post_form is None:
            form: dict[str, list[str]] = {}
            request = self.http_request
            if request.method in _METHODS_WITH_FORM_BODY:
                content_type = request.header("Content-Type").split(";", 1)[0].strip().lower()
                if content_type == _FORM_URLENCODED:
                    try:
                        text = request.body.decode("utf-8")
                    except UnicodeDecodeError as exc:
                        raise ValueError(f"form body is not valid UTF-8: {exc}") from exc
                    form = parse_qs(text, keep_blank_values=True)
            self._post_form = form
        return self._post_form

    def body_parameter(self, name: str) -> str:
        """Return the first url-encoded body value for ``name``, or an empty string.

        Raises ValueError if the body cannot be decoded.
        """
        values = self._parse_post_form().get(name)
        return values[0] if values else ""

    def header_parameter(self, name: str) -> str:
        return self.http_request.header(name)

    def set_attribute(self, name: str, value: Any) -> None:
        """Add or replace a request-scoped attribute."""
        self._attributes[name] = value

    def attribute(self, name: str) -> Any:
        """Return a request-scoped attribute, or None if absent."""
        return self._attributes.get(name)

    def selected_route_path(self) -> str:
        """Return the full path template of the matched route, or an empty string."""
        return self._selected_route.path if self._selected_route is not None else ""

    def selected_route(self) -> Optional[RouteAccessor]:
        """Return a read-only view of the matched route, or None."""
        if self._selected_route is None:
            return None
        return RouteAccessor(self._selected_route)