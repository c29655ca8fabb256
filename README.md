# restwire

Building blocks for RESTful web services: describe services and routes
with a fluent builder, compile path templates, extract path parameters,
decide whether a route can serve a request's media types, and wrap
requests and responses for route functions.

## Installation

```
pip install restwire
```

## Describing a service

```python
from restwire.web_service import WebService

def find_user(request, response):
    user_id = request.path_parameter("user-id")
    response.write(f"user {user_id}".encode())

ws = WebService().path("/users").produces("application/json")
ws.route(
    ws.get("/{user-id}")
    .to(find_user)
    .doc("get a user")
    .param(ws.path_parameter("user-id", "identifier of the user"))
)

route = ws.routes()[0]
print(route)            # GET /users/{user-id}
print(route.operation)  # find_user
```

`WebService` offers `get`, `post`, `put`, `patch`, `delete`, `head`,
`options` and `method(...)`, each returning a `RouteBuilder` rooted at the
service path. Routes take the service's `produces` and `consumes` types
unless they set their own. `RouteBuilder.build()` raises `ValueError` when
no function was given or the path does not compile.

Routes can be removed at run time once dynamic routes are switched on;
otherwise `remove_route` raises `RuntimeError`:

```python
ws.set_dynamic_routes(True)
ws.remove_route("/users/{user-id}", "GET")
```

`RouteBuilder` also documents a route: `reads`, `writes`, `returns`,
`returns_with_headers`, `default_returns`, `metadata`, `add_extension`,
`deprecate`, `if_` (conditions on the request), `filter` and
`allowed_methods_without_content_type`.

## Parameters

`restwire.parameter` provides `path_parameter`, `query_parameter`,
`body_parameter`, `header_parameter`, `form_parameter` and
`multi_part_form_parameter`. Each returns a `Parameter` whose setters
(`required`, `data_type`, `possible_values`, `minimum`, `collection_format`,
...) return the parameter itself; `data()` returns a copy of its
`ParameterData`.

## Path templates

Templates use `{name}` for a single segment, `{name:regex}` for a custom
expression and `{name:*}` for the rest of the path.

```python
from restwire.path_expression import PathExpression

expr = PathExpression.from_template("/a/{b}/c/")
print(expr.source)       # ^/a/([^/]+?)/c(/.*)?$
print(expr.var_names)    # ('b',)
```

`DefaultPathProcessor` extracts values segment by segment:

```python
from restwire.path_processor import DefaultPathProcessor

DefaultPathProcessor().extract_parameters(route, ws, "/users/42")
# {'user-id': '42'}
```

## Media types

`restwire.mime.sorted_mimes` orders an `Accept` header by quality factor,
keeping the order of equal qualities and dropping entries whose quality
cannot be parsed. `Route.matches_accept` and `Route.matches_content_type`
tell whether a route can produce or consume the given types.

## Requests and responses

```python
from restwire.request import HttpRequest, Request
from restwire.response import RecordingWriter, Response

request = Request(HttpRequest(method="GET", url="/search?q=foo&q=bar"))
request.query_parameter("q")    # 'foo'
request.query_parameters("q")   # ['foo', 'bar']

writer = RecordingWriter()
response = Response(writer)
response.write_error_string(404, "Invalid")
writer.code, bytes(writer.body), response.content_length()
# (404, b'Invalid', 7)
```

`Request.body_parameter` reads url-encoded form bodies of POST, PUT and
PATCH requests; `set_attribute` / `attribute` hold request-scoped values.

## Tracing

`restwire.tracing` holds the package logger (`set_logger`, `get_logger`)
and a trace switch (`enable_tracing`, `trace_logger`, `is_tracing`,
`trace`). `Response.flush` traces when its writer cannot flush, and
`sorted_mimes` reports unparsable qualities on the trace logger.

## What this package does not do

It does not select a web service and route for an incoming request, and
it has no error type carrying an HTTP status. It has no server or
container that dispatches requests, runs filters or compresses responses,
and it does not read or write entities as JSON or XML. Path parameters are
extracted with `DefaultPathProcessor` once you know the route.

## Running the tests

```
pip install -e ".[test]"
pytest
```