"""Documentation of request parameters."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Optional, Union


class ParameterKind(IntEnum):
    """Where in a request a parameter is found."""

    PATH = 0
    QUERY = 1
    BODY = 2
    HEADER = 3
    FORM = 4
    MULTI_PART_FORM = 5


class CollectionFormat(str, Enum):
    """How the values of an array parameter are separated."""

    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParameterData:
    """The state of a Parameter."""

    name: str = ""
    description: str = ""
    data_type: str = ""
    data_format: str = ""
    kind: ParameterKind = ParameterKind.PATH
    required: bool = False
    allowable_values: dict[str, str] = field(default_factory=dict)
    possible_values: list[str] = field(default_factory=list)
    allow_multiple: bool = False
    allow_empty_value: bool = False
    default_value: str = ""
    collection_format: str = ""
    pattern: str = ""
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    unique_items: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    def add_extension(self, key: str, value: Any) -> None:
        """Add or update an extension property."""
        self.extensions[key] = value


class Parameter:
    """A documented request parameter; its setters return the parameter."""

    def __init__(self, name: str = "", description: str = "") -> None:
        self._data = ParameterData(name=name, description=description)

    def data(self) -> ParameterData:
        """Return a copy of the parameter's state."""
        return dataclasses.replace(self._data)

    def kind(self) -> ParameterKind:
        return self._data.kind

    def required(self, required: bool) -> "Parameter":
        self._data.required = required
        return self

    def allow_multiple(self, multiple: bool) -> "Parameter":
        self._data.allow_multiple = multiple
        return self

    def add_extension(self, key: str, value: Any) -> "Parameter":
        self._data.add_extension(key, value)
        return self

    def allow_empty_value(self, allow: bool) -> "Parameter":
        self._data.allow_empty_value = allow
        return self

    def allowable_values(self, values: dict[str, str]) -> "Parameter":
        """Set the allowable values; possible values become them in key order."""
        self._data.allowable_values = values
        self._data.possible_values = [values[key] for key in sorted(values)]
        return self

    def possible_values(self, values: list[str]) -> "Parameter":
        self._data.possible_values = values
        return self

    def data_type(self, type_name: str) -> "Parameter":
        self._data.data_type = type_name
        return self

    def data_format(self, format_name: str) -> "Parameter":
        self._data.data_format = format_name
        return self

    def default_value(self, value: str) -> "Parameter":
        self._data.default_value = value
        return self

    def description(self, doc: str) -> "Parameter":
        self._data.description = doc
        return self

    def collection_format(self, collection_format: Union[CollectionFormat, str]) -> "Parameter":
        self._data.collection_format = str(collection_format)
        return self

    def pattern(self, pattern: str) -> "Parameter":
        self._data.pattern = pattern
        return self

    def minimum(self, minimum: float) -> "Parameter":
        self._data.minimum = minimum
        return self

    def maximum(self, maximum: float) -> "Parameter":
        self._data.maximum = maximum
        return self

    def min_length(self, min_length: int) -> "Parameter":
        self._data.min_length = min_length
        return self

    def max_length(self, max_length: int) -> "Parameter":
        self._data.max_length = max_length
        return self

    def min_items(self, min_items: int) -> "Parameter":
        self._data.min_items = min_items
        return self

    def max_items(self, max_items: int) -> "Parameter":
        self._data.max_items = max_items
        return self

    def unique_items(self, unique_items: bool) -> "Parameter":
        self._data.unique_items = unique_items
        return self

    def __repr__(self) -> str:
        return f"Parameter({self._data!r})"


def _make(name: str, description: str, kind: ParameterKind, **values: Any) -> Parameter:
    parameter = Parameter(name, description)
    parameter._data.kind = kind
    for key, value in values.items():
        setattr(parameter._data, key, value)
    return parameter


def path_parameter(name: str, description: str) -> Parameter:
    """A required string path parameter."""
    return _make(name, description, ParameterKind.PATH, required=True, data_type="string")


def query_parameter(name: str, description: str) -> Parameter:
    """An optional string query parameter in csv collection format."""
    return _make(
        name,
        description,
        ParameterKind.QUERY,
        required=False,
        data_type="string",
        collection_format=CollectionFormat.CSV.value,
    )


def body_parameter(name: str, description: str) -> Parameter:
    """A required body parameter without a data type."""
    return _make(name, description, ParameterKind.BODY, required=True)


def header_parameter(name: str, description: str) -> Parameter:
    """An optional string header parameter."""
    return _make(name, description, ParameterKind.HEADER, required=False, data_type="string")


def form_parameter(name: str, description: str) -> Parameter:
    """An optional string url-encoded form parameter."""
    return _make(name, description, ParameterKind.FORM, required=False, data_type="string")


def multi_part_form_parameter(name: str, description: str) -> Parameter:
    """An optional string multipart form parameter."""
    return _make(
        name, description, ParameterKind.MULTI_PART_FORM, required=False, data_type="string"
    )