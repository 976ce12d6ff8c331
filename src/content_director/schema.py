"""Schema nodes: a closed tree of string, object and array constraints.

Nodes are frozen dataclasses and their field mappings are read-only views,
so a schema built once can be shared by any number of validation calls.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

# Checks a node may attach a custom catalog message to
STRING_CHECKS = frozenset({"min", "max", "pattern", "enum"})
ARRAY_CHECKS = frozenset({"length"})


def _check_bound(name: str, value: Optional[int]) -> None:
    if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


def _freeze_messages(
    node: object, messages: Optional[Mapping[str, str]], allowed: frozenset
) -> None:
    messages = dict(messages or {})
    unknown = set(messages) - allowed
    if unknown:
        raise ValueError(f"Unknown message checks: {sorted(unknown)}. Must be one of {sorted(allowed)}")
    object.__setattr__(node, "messages", MappingProxyType(messages))


@dataclass(frozen=True)
class StringConstraint:
    """A string with optional length bounds, full-match pattern and allowed values"""

    min_len: Optional[int] = None
    max_len: Optional[int] = None
    pattern: Optional[Union[str, re.Pattern]] = None
    enum_values: Optional[tuple[str, ...]] = None
    optional: bool = False
    messages: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        _check_bound("min_len", self.min_len)
        _check_bound("max_len", self.max_len)
        if self.min_len is not None and self.max_len is not None and self.min_len > self.max_len:
            raise ValueError(f"min_len ({self.min_len}) must not exceed max_len ({self.max_len})")
        if self.pattern is not None and not isinstance(self.pattern, re.Pattern):
            object.__setattr__(self, "pattern", re.compile(self.pattern))
        if self.enum_values is not None:
            if isinstance(self.enum_values, str):
                raise ValueError(f"enum_values must be a collection of strings, got {self.enum_values!r}")
            values = tuple(self.enum_values)
            if not values:
                raise ValueError("enum_values must not be empty")
            object.__setattr__(self, "enum_values", values)
        _freeze_messages(self, self.messages, STRING_CHECKS)


@dataclass(frozen=True)
class ObjectConstraint:
    """A record whose declared fields are validated in declaration order"""

    fields: Mapping[str, "SchemaNode"]
    optional: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


@dataclass(frozen=True)
class ArrayConstraint:
    """A sequence of items sharing one schema, optionally of fixed length"""

    item_schema: "SchemaNode"
    exact_length: Optional[int] = None
    optional: bool = False
    messages: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        _check_bound("exact_length", self.exact_length)
        _freeze_messages(self, self.messages, ARRAY_CHECKS)


SchemaNode = Union[StringConstraint, ObjectConstraint, ArrayConstraint]
