"""Routes binding an HTTP method and path to a function, and read-only views of them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional

from restwire.parameter import Parameter
from restwire.path_expression import PathExpression, tokenize_path

MIME_OCTET = "application/octet-stream"

_DEFAULT_METHODS_WITHOUT_CONTENT_TYPE = frozenset({"GET", "HEAD", "OPTIONS", "DELETE", "TRACE"})
_CUSTOM_VERB = re.compile(r":([A-Za-z]+)\Z")

RouteFunction = Callable[[Any, Any], None]
RouteCondition = Callable[[Any], bool]


def _has_custom_verb(token: str) -> bool:
    return _CUSTOM_VERB.search(token) is not None


def _remove_custom_verb(text: str) -> str:
    return _CUSTOM_VERB.sub("", text)


def _media_types(header_value: str) -> Iterator[str]:
    """Yield the bare media types of a comma separated header value.

    An empty piece after a trailing comma is not yielded, but an empty
    header value yields one empty media type.
    """
    pieces = header_value.split(",")
    if len(pieces) > 1 and pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece.split(";", 1)[0].strip(" ")


@dataclass(eq=False)
class Route:
    """Binds an HTTP method, path and media types to a route function."""

    method: str = ""
    path: str = ""
    produces: list[str] = field(default_factory=list)
    consumes: list[str] = field(default_factory=list)
    function: Optional[RouteFunction] = None
    filters: list[Callable[..., Any]] = field(default_factory=list)
    conditions: list[RouteCondition] = field(default_factory=list)
    relative_path: str = ""
    path_expr: Optional[PathExpression] = None
    doc: str = ""
    notes: str = ""
    operation: str = ""
    parameter_docs: list[Parameter] = field(default_factory=list)
    response_errors: dict[int, Any] = field(default_factory=dict)
    default_response: Any = None
    read_sample: Any = None
    write_sample: Any = None
    metadata: dict[str, Any] = field(default_factory=dict)
    deprecated: bool = False
    content_encoding_enabled: Optional[bool] = None
    allowed_methods_without_content_type: list[str] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)
    path_parts: list[str] = field(init=False, default_factory=list)
    has_custom_verb: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.path_parts = tokenize_path(self.path)
        self.has_custom_verb = _has_custom_verb(self.path)

    def matches_accept(self, mime_types_with_quality: str) -> bool:
        """Tell whether this route can produce one of the accepted media types."""
        for mime_type in _media_types(mime_types_with_quality):
            if mime_type == "*/*":
                return True
            if any(each == "*/*" or each == mime_type for each in self.produces):
                return True
        return False

    def matches_content_type(self, mime_types: str) -> bool:
        """Tell whether this route can consume content of the given media type(s)."""
        if not self.consumes:
            return True
        if not mime_types:
            if self.allowed_methods_without_content_type:
                if self.method in self.allowed_methods_without_content_type:
                    return True
            elif self.method in _DEFAULT_METHODS_WITHOUT_CONTENT_TYPE:
                return True
            mime_types = MIME_OCTET
        for mime_type in _media_types(mime_types):
            if any(each == "*/*" or each == mime_type for each in self.consumes):
                return True
        return False

    def enable_content_encoding(self, enabled: bool) -> None:
        """Override the container's choice of compressing this route's responses."""
        self.content_encoding_enabled = enabled

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


def copy_map(mapping: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Copy a mapping, copying nested dictionaries as well."""
    if not mapping:
        return {}
    return {
        key: copy_map(value) if isinstance(value, dict) else value
        for key, value in mapping.items()
    }


class RouteAccessor:
    """Read-only access to a route."""

    def __init__(self, route: Route) -> None:
        self._route = route

    def method(self) -> str:
        return self._route.method

    def consumes(self) -> list[str]:
        return list(self._route.consumes)

    def path(self) -> str:
        return self._route.path

    def doc(self) -> str:
        return self._route.doc

    def notes(self) -> str:
        return self._route.notes

    def operation(self) -> str:
        return self._route.operation

    def parameter_docs(self) -> list[Parameter]:
        return list(self._route.parameter_docs)

    def metadata(self) -> dict[str, Any]:
        """Return a copy of the route's metadata."""
        return copy_map(self._route.metadata)

    def deprecated(self) -> bool:
        return self._route.deprecated