# Constraint primitives
# Atomic, stateless checks shared by the structural validator

import re
from collections.abc import Collection, Mapping, Sequence
from typing import Any, NamedTuple, Optional

from content_director.state import ErrorKind


class Failure(NamedTuple):
    """A violated constraint before it is located and rendered"""

    kind: ErrorKind
    message_id: str
    params: dict[str, Any]


def type_name(value: Any) -> str:
    """Return the JSON-style type name of ``value`` for type mismatch messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def string_length(
    value: str,
    min_len: Optional[int] = None,
    max_len: Optional[int] = None,
) -> Optional[Failure]:
    """Check ``min_len <= len(value) <= max_len``; an omitted bound is unbounded."""
    if min_len is not None and len(value) < min_len:
        return Failure(ErrorKind.LENGTH_VIOLATION, "too_short", {"min_len": min_len})
    if max_len is not None and len(value) > max_len:
        return Failure(ErrorKind.LENGTH_VIOLATION, "too_long", {"max_len": max_len})
    return None


def pattern(value: str, regex: re.Pattern) -> Optional[Failure]:
    """The whole string must match ``regex``."""
    if regex.fullmatch(value) is None:
        return Failure(ErrorKind.PATTERN_VIOLATION, "invalid_pattern", {"pattern": regex.pattern})
    return None


def enum_membership(value: Any, allowed: Sequence[str]) -> Optional[Failure]:
    if value not in allowed:
        expected = " | ".join(f"'{option}'" for option in allowed)
        return Failure(
            ErrorKind.ENUM_VIOLATION,
            "invalid_enum",
            {"expected": expected, "received": value},
        )
    return None


def exact_length(collection: Collection, n: int) -> Optional[Failure]:
    if len(collection) != n:
        return Failure(
            ErrorKind.CARDINALITY_VIOLATION,
            "wrong_length",
            {"expected": n, "received": len(collection)},
        )
    return None


def numeric_range(
    value: float,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> Optional[Failure]:
    """Check ``minimum <= value <= maximum``; an omitted bound is unbounded."""
    if minimum is not None and value < minimum:
        return Failure(ErrorKind.RANGE_VIOLATION, "below_minimum", {"minimum": minimum})
    if maximum is not None and value > maximum:
        return Failure(ErrorKind.RANGE_VIOLATION, "above_maximum", {"maximum": maximum})
    return None
