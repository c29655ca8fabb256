"""Web services: a root path and the ordered routes beneath it."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from restwire import parameter as _parameters
from restwire.parameter import Parameter
from restwire.path_expression import PathExpression
from restwire.route import Route
from restwire.route_builder import RouteBuilder, TypeNameHandler


class WebService:
    """Holds routes that bind an HTTP method and URL path to a function."""

    def __init__(self) -> None:
        self._root_path = ""
        self.path_expr: Optional[PathExpression] = None
        self._routes: list[Route] = []
        self._produces: list[str] = []
        self._consumes: list[str] = []
        self._path_parameters: list[Parameter] = []
        self._filters: list[Callable[..., Any]] = []
        self._documentation = ""
        self._api_version = ""
        self._type_name_handle_func: Optional[TypeNameHandler] = None
        self._dynamic_routes = False
        self._routes_lock = threading.RLock()

    def set_dynamic_routes(self, enable: bool) -> None:
        """Allow or forbid removing routes while serving."""
        self._dynamic_routes = enable

    def type_name_handler(self, handler: TypeNameHandler) -> "WebService":
        """Set the function that names the types of sample objects in documentation."""
        self._type_name_handle_func = handler
        return self

    def api_version(self, api_version: str) -> "WebService":
        self._api_version = api_version
        return self

    def version(self) -> str:
        return self._api_version

    def path(self, root: str) -> "WebService":
        """Set the root path template; an empty path means "/".

        Raises ValueError if the path does not compile.
        """
        self._root_path = root or "/"
        self.path_expr = PathExpression.from_template(self._root_path)
        return self

    def param(self, parameter: Parameter) -> "WebService":
        """Document a parameter used in the root path."""
        self._path_parameters.append(parameter)
        return self

    def path_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.path_parameter(name, description)

    def query_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.query_parameter(name, description)

    def body_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.body_parameter(name, description)

    def header_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.header_parameter(name, description)

    def form_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.form_parameter(name, description)

    def multi_part_form_parameter(self, name: str, description: str) -> Parameter:
        return _parameters.multi_part_form_parameter(name, description)

    def route(self, builder: RouteBuilder) -> "WebService":
        """Build a route, using this service's media types as defaults, and append it."""
        with self._routes_lock:
            builder._copy_defaults(self._produces, self._consumes)
            self._routes.append(builder.build())
        return self

    def remove_route(self, path: str, method: str) -> None:
        """Remove every route with this full path and method.

        Raises RuntimeError unless dynamic routes are enabled.
        """
        if not self._dynamic_routes:
            raise RuntimeError("dynamic routes are not enabled.")
        with self._routes_lock:
            self._routes = [
                each
                for each in self._routes
                if not (each.method == method and each.path == path)
            ]

    def method(self, http_method: str) -> RouteBuilder:
        """Start a route builder for ``http_method`` under this service's root."""
        return (
            RouteBuilder()
            ._type_name_handler(self._type_name_handle_func)
            ._service_path(self._root_path)
            .method(http_method)
        )

    def produces(self, *args: str) -> "WebService":
        self._produces = list(args)
        return self

    def consumes(self, *args: str) -> "WebService":
        self._consumes = list(args)
        return self

    def routes(self) -> list[Route]:
        """Return the routes; a copy when dynamic routes are enabled."""
        if not self._dynamic_routes:
            return self._routes
        with self._routes_lock:
            return list(self._routes)

    def root_path(self) -> str:
        return self._root_path

    def path_parameters(self) -> list[Parameter]:
        return self._path_parameters

    @property
    def filters(self) -> list[Callable[..., Any]]:
        """The filters applied to all routes of this service."""
        return self._filters

    def filter(self, filter_function: Callable[..., Any]) -> "WebService":
        """Append a filter applied to all routes of this service."""
        self._filters.append(filter_function)
        return self

    def doc(self, plain_text: str) -> "WebService":
        self._documentation = plain_text
        return self

    def documentation(self) -> str:
        return self._documentation

    def _shortcut(self, http_method: str, sub_path: str) -> RouteBuilder:
        return self.method(http_method).path(sub_path)

    def head(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("HEAD", sub_path)

    def get(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("GET", sub_path)

    def post(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("POST", sub_path)

    def put(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("PUT", sub_path)

    def patch(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("PATCH", sub_path)

    def delete(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("DELETE", sub_path)

    def options(self, sub_path: str) -> RouteBuilder:
        return self._shortcut("OPTIONS", sub_path)