"""Extraction of path parameter values by matching path segments."""

from __future__ import annotations

from typing import Any, Optional

from restwire.path_expression import tokenize_path
from restwire.route import Route, _has_custom_verb, _remove_custom_verb


def untokenize_path(offset: int, parts: list[str]) -> str:
    """Join the parts from ``offset`` on back into a path with slashes."""
    return "/".join(parts[offset:])


class DefaultPathProcessor:
    """Extracts path parameters by comparing route and URL segments one by one."""

    def extract_parameters(
        self, route: Route, web_service: Optional[Any], url_path: str
    ) -> dict[str, str]:
        url_parts = tokenize_path(url_path)
        parameters: dict[str, str] = {}
        for index, key in enumerate(route.path_parts):
            value = url_parts[index] if index < len(url_parts) else ""
            if route.has_custom_verb and _has_custom_verb(key):
                key = _remove_custom_verb(key)
                value = _remove_custom_verb(value)
            if "{" not in key:
                continue
            colon = key.find(":")
            if colon != -1:
                pattern = key[colon + 1 : len(key) - 1]
                name = key[1:colon]
                if pattern == "*":
                    parameters[name] = untokenize_path(index, url_parts)
                    break
                parameters[name] = value
            else:
                start = key.index("{")
                end_key = key.index("}")
                suffix_length = len(key) - end_key - 1
                end_value = len(value) - suffix_length
                parameters[key[start + 1 : end_key]] = (
                    value[start:end_value] if end_value >= start else ""
                )
        return parameters