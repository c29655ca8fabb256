"""Compilation of URL path templates into regular expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

_META_CHARACTERS = frozenset("\\.+*?()|[]{}^$")


def _quote_meta(text: str) -> str:
    return "".join("\\" + char if char in _META_CHARACTERS else char for char in text)


def tokenize_path(path: str) -> list[str]:
    """Split a URL path on slashes, ignoring leading slashes."""
    if path == "/":
        return []
    return path.lstrip("/").split("/")


class TemplateExpression(NamedTuple):
    """The result of converting a path template."""

    expression: str
    literal_count: int
    var_names: list[str]
    var_count: int
    tokens: list[str]


def template_to_regular_expression(template: str) -> TemplateExpression:
    """Convert a path template such as ``/a/{b}`` into a regular expression."""
    parts = ["^"]
    literal_count = 0
    var_names: list[str] = []
    tokens = tokenize_path(template)
    for each in tokens:
        if not each:
            continue
        parts.append("/")
        if each.startswith("{"):
            colon = each.find(":")
            if colon != -1:
                name = each[1:colon].strip()
                param_expr = each[colon + 1 : len(each) - 1].strip()
                parts.append("(.*)" if param_expr == "*" else f"({param_expr})")
            else:
                name = each[1 : len(each) - 1].strip()
                parts.append("([^/]+?)")
            var_names.append(name)
        else:
            literal_count += len(each.encode("utf-8"))
            parts.append(_quote_meta(each))
    expression = "".join(parts).rstrip("/") + "(/.*)?$"
    return TemplateExpression(expression, literal_count, var_names, len(var_names), tokens)


@dataclass(frozen=True)
class PathExpression:
    """A compiled path template used to match request paths."""

    literal_count: int
    var_names: tuple[str, ...]
    var_count: int
    matcher: re.Pattern
    source: str
    tokens: tuple[str, ...]

    @classmethod
    def from_template(cls, path: str) -> "PathExpression":
        """Compile ``path``; raise ValueError if its expression is invalid."""
        converted = template_to_regular_expression(path)
        try:
            compiled = re.compile(converted.expression)
        except re.error as exc:
            raise ValueError(f"invalid path {path!r}: {exc}") from exc
        return cls(
            converted.literal_count,
            tuple(converted.var_names),
            converted.var_count,
            compiled,
            converted.expression,
            tuple(converted.tokens),
        )