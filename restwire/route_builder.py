"""Fluent construction of Routes and the documentation of their responses."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from restwire import tracing
from restwire.parameter import Parameter, body_parameter
from restwire.path_expression import PathExpression
from restwire.route import Route, RouteCondition, RouteFunction

TypeNameHandler = Callable[[Any], str]

_anonymous_counter = itertools.count(1)
_anonymous_lock = threading.Lock()


@dataclass
class Items:
    """A simple schema describing the values of a response header."""

    type: str = ""
    format: str = ""
    items: Optional["Items"] = None
    collection_format: str = ""
    default: Any = None


@dataclass
class Header:
    """A documented response header."""

    items: Optional[Items] = None
    description: str = ""


@dataclass
class ResponseError:
    """A documented response; not necessarily an error."""

    code: int = 0
    message: str = ""
    model: Any = None
    headers: dict[str, Header] = field(default_factory=dict)
    is_default: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def add_extension(self, key: str, value: Any) -> None:
        """Add or update an extension property."""
        self.extensions[key] = value


def _clean(path: str) -> str:
    rooted = path.startswith("/")
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not rooted:
                stack.append("..")
            continue
        stack.append(part)
    joined = "/".join(stack)
    if rooted:
        return "/" + joined
    return joined or "."


def concat_path(path1: str, path2: str) -> str:
    """Join two URL paths with a slash and clean the result; empty parts are skipped."""
    parts = [each for each in (path1, path2) if each]
    if not parts:
        return ""
    return _clean("/".join(parts))


def name_of_function(function: Callable[..., Any]) -> str:
    """Return a short name of ``function`` for documentation.

    Anonymous functions get the names func1, func2, ... in order of asking.
    """
    name = getattr(function, "__name__", None) or type(function).__name__
    if name == "<lambda>":
        with _anonymous_lock:
            return f"func{next(_anonymous_counter)}"
    return name


def reflect_type_name(sample: Any) -> str:
    """Return the type name of ``sample``, qualified by its module's last component."""
    kind = type(sample)
    module = kind.__module__
    if module == "builtins":
        return kind.__qualname__
    return f"{module.rsplit('.', 1)[-1]}.{kind.__qualname__}"


class RouteBuilder:
    """Collects the details of a Route; its setters return the builder."""

    def __init__(self) -> None:
        self._root_path = ""
        self._current_path = ""
        self._produces: list[str] = []
        self._consumes: list[str] = []
        self._http_method = ""
        self._function: Optional[RouteFunction] = None
        self._filters: list[Callable[..., Any]] = []
        self._conditions: list[RouteCondition] = []
        self._allowed_methods_without_content_type: list[str] = []
        self._type_name_handle_func: Optional[TypeNameHandler] = None
        self._doc = ""
        self._notes = ""
        self._operation = ""
        self._read_sample: Any = None
        self._write_sample: Any = None
        self._parameters: list[Parameter] = []
        self._error_map: dict[int, ResponseError] = {}
        self._default_response: Optional[ResponseError] = None
        self._metadata: dict[str, Any] = {}
        self._extensions: dict[str, Any] = {}
        self._deprecated = False
        self._content_encoding_enabled: Optional[bool] = None

    def do(self, *args: Callable[["RouteBuilder"], Any]) -> "RouteBuilder":
        """Call each function with this builder."""
        for each in args:
            each(self)
        return self

    def to(self, function: RouteFunction) -> "RouteBuilder":
        """Bind the route to the function that handles matched requests. Required."""
        self._function = function
        return self

    def method(self, method: str) -> "RouteBuilder":
        """Set the HTTP method to match. Required."""
        self._http_method = method
        return self

    def produces(self, *args: str) -> "RouteBuilder":
        self._produces = list(args)
        return self

    def consumes(self, *args: str) -> "RouteBuilder":
        self._consumes = list(args)
        return self

    def path(self, sub_path: str) -> "RouteBuilder":
        """Set the URL path relative to the service root path."""
        self._current_path = sub_path
        return self

    def doc(self, documentation: str) -> "RouteBuilder":
        self._doc = documentation
        return self

    def notes(self, notes: str) -> "RouteBuilder":
        self._notes = notes
        return self

    def reads(self, sample: Any, description: str = "") -> "RouteBuilder":
        """Document the request payload by adding a required body parameter."""
        handler = self._type_name_handle_func or reflect_type_name
        type_name = handler(sample)
        self._read_sample = sample
        self.param(body_parameter("body", description).data_type(type_name))
        return self

    def parameter_named(self, name: str) -> Optional[Parameter]:
        """Return the parameter with ``name``, or None if there is none."""
        for each in self._parameters:
            if each.data().name == name:
                return each
        return None

    def writes(self, sample: Any) -> "RouteBuilder":
        self._write_sample = sample
        return self

    def param(self, parameter: Parameter) -> "RouteBuilder":
        """Add a parameter; duplicates are not checked."""
        self._parameters.append(parameter)
        return self

    def operation(self, name: str) -> "RouteBuilder":
        """Set the operation name; by default it is the name of the route function."""
        self._operation = name
        return self

    def returns_error(self, code: int, message: str, model: Any) -> "RouteBuilder":
        """Deprecated form of returns."""
        logger = tracing.get_logger()
        if logger is not None:
            logger.info("ReturnsError is deprecated, use Returns instead.")
        return self.returns(code, message, model)

    def returns(self, code: int, message: str, model: Any) -> "RouteBuilder":
        """Document a response that can be expected for ``code``."""
        self._error_map[code] = ResponseError(code=code, message=message, model=model)
        return self

    def returns_with_headers(
        self, code: int, message: str, model: Any, headers: dict[str, Header]
    ) -> "RouteBuilder":
        """Document a response together with its headers."""
        self.returns(code, message, model)
        self._error_map[code].headers = headers
        return self

    def default_returns(self, message: str, model: Any) -> "RouteBuilder":
        self._default_response = ResponseError(message=message, model=model)
        return self

    def metadata(self, key: str, value: Any) -> "RouteBuilder":
        self._metadata[key] = value
        return self

    def add_extension(self, key: str, value: Any) -> "RouteBuilder":
        self._extensions[key] = value
        return self

    def deprecate(self) -> "RouteBuilder":
        self._deprecated = True
        return self

    def allowed_methods_without_content_type(self, methods: Sequence[str]) -> "RouteBuilder":
        """Override which methods match a request without a Content-Type."""
        self._allowed_methods_without_content_type = list(methods)
        return self

    def filter(self, filter_function: Callable[..., Any]) -> "RouteBuilder":
        self._filters.append(filter_function)
        return self

    def if_(self, condition: RouteCondition) -> "RouteBuilder":
        """Add a condition on the HTTP request that must hold for the route to match."""
        self._conditions.append(condition)
        return self

    def content_encoding_enabled(self, enabled: bool) -> "RouteBuilder":
        self._content_encoding_enabled = enabled
        return self

    def _service_path(self, path: str) -> "RouteBuilder":
        self._root_path = path
        return self

    def _type_name_handler(self, handler: Optional[TypeNameHandler]) -> "RouteBuilder":
        self._type_name_handle_func = handler
        return self

    def _copy_defaults(
        self, root_produces: Sequence[str], root_consumes: Sequence[str]
    ) -> None:
        if not self._produces:
            self._produces = list(root_produces)
        if not self._consumes:
            self._consumes = list(root_consumes)

    def build(self) -> Route:
        """Create the Route; raise ValueError for an invalid path or a missing function."""
        path_expr = PathExpression.from_template(self._current_path)
        if self._function is None:
            raise ValueError(f"no function specified for route: {self._current_path}")
        operation_name = self._operation or name_of_function(self._function)
        return Route(
            method=self._http_method,
            path=concat_path(self._root_path, self._current_path),
            produces=list(self._produces),
            consumes=list(self._consumes),
            function=self._function,
            filters=list(self._filters),
            conditions=list(self._conditions),
            relative_path=self._current_path,
            path_expr=path_expr,
            doc=self._doc,
            notes=self._notes,
            operation=operation_name,
            parameter_docs=list(self._parameters),
            response_errors=dict(self._error_map),
            default_response=self._default_response,
            read_sample=self._read_sample,
            write_sample=self._write_sample,
            metadata=dict(self._metadata),
            deprecated=self._deprecated,
            content_encoding_enabled=self._content_encoding_enabled,
            allowed_methods_without_content_type=list(
                self._allowed_methods_without_content_type
            ),
            extensions=dict(self._extensions),
        )