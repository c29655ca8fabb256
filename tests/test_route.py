from restwire.parameter import path_parameter
from restwire.path_expression import tokenize_path
from restwire.route import Route, RouteAccessor, copy_map


def test_matches_accept_plain_text_when_produced_last():
    r = Route(produces=["application/json", "text/plain"])
    assert r.matches_accept("text/plain")


def test_matches_accept_star():
    r = Route(produces=["application/xml"])
    assert r.matches_accept("*/*")


def test_matches_accept_ie():
    r = Route(produces=["application/xml"])
    assert r.matches_accept("text/html, application/xhtml+xml, */*")


def test_matches_accept_xml():
    r = Route(produces=["application/xml"])
    assert not r.matches_accept("application/json")
    assert r.matches_accept("application/xml")


def test_matches_accept_any():
    r = Route(produces=["*/*"])
    assert r.matches_accept("application/json")
    assert r.matches_accept("application/xml")


def test_matches_accept_ignores_quality():
    r = Route(produces=["application/json"])
    assert r.matches_accept("text/html;q=0.9, application/json;q=0.5")


def test_matches_content_type_xml():
    r = Route(consumes=["application/xml"])
    assert not r.matches_content_type("application/json")
    assert r.matches_content_type("application/xml")


def test_matches_content_type_charset_information():
    r = Route(consumes=["application/json"])
    assert r.matches_content_type("application/json; charset=UTF-8")


def test_matches_content_type_without_consumes():
    r = Route(method="POST")
    assert r.matches_content_type("anything/else")


def test_missing_content_type_allowed_for_idempotent_methods():
    assert Route(method="GET", consumes=["application/json"]).matches_content_type("")
    assert Route(method="DELETE", consumes=["application/json"]).matches_content_type("")


def test_missing_content_type_rejected_for_post():
    r = Route(method="POST", consumes=["application/json"])
    assert not r.matches_content_type("")


def test_missing_content_type_falls_back_to_octet_stream():
    r = Route(method="POST", consumes=["application/octet-stream"])
    assert r.matches_content_type("")


def test_allowed_methods_without_content_type_override():
    r = Route(
        method="GET",
        consumes=["application/json"],
        allowed_methods_without_content_type=["POST"],
    )
    assert not r.matches_content_type("")
    post = Route(
        method="POST",
        consumes=["application/json"],
        allowed_methods_without_content_type=["POST"],
    )
    assert post.matches_content_type("")


def test_tokenize_path():
    assert tokenize_path("/") == []


def test_route_path_parts_and_custom_verb():
    r = Route(path="/users:init")
    assert r.path_parts == ["users:init"]
    assert r.has_custom_verb is True
    assert Route(path="/users/{id}").has_custom_verb is False


def test_route_str():
    assert str(Route(method="GET", path="/a/b")) == "GET /a/b"


def test_enable_content_encoding():
    r = Route()
    assert r.content_encoding_enabled is None
    r.enable_content_encoding(False)
    assert r.content_encoding_enabled is False


def test_copy_map_copies_nested_dicts():
    original = {"a": 1, "nested": {"b": 2}}
    copied = copy_map(original)
    assert copied == original
    copied["nested"]["b"] = 3
    assert original["nested"]["b"] == 2


def test_copy_map_of_none_is_empty():
    assert copy_map(None) == {}


def test_route_accessor_reads_route():
    param = path_parameter("id", "identifier")
    r = Route(
        method="GET",
        path="/items/{id}",
        consumes=["application/json"],
        doc="doc",
        notes="notes",
        operation="getItem",
        parameter_docs=[param],
        metadata={"k": {"v": 1}},
        deprecated=True,
    )
    accessor = RouteAccessor(r)
    assert accessor.method() == "GET"
    assert accessor.path() == "/items/{id}"
    assert accessor.doc() == "doc"
    assert accessor.notes() == "notes"
    assert accessor.operation() == "getItem"
    assert accessor.deprecated() is True
    assert accessor.parameter_docs() == [param]
    assert accessor.consumes() == ["application/json"]


def test_route_accessor_returns_copies():
    r = Route(consumes=["application/json"], metadata={"k": {"v": 1}})
    accessor = RouteAccessor(r)
    accessor.consumes().append("text/plain")
    accessor.metadata()["k"]["v"] = 2
    assert r.consumes == ["application/json"]
    assert r.metadata == {"k": {"v": 1}}