# Violation and ValidationResult definitions
# Data structures produced by a single validation pass

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

PathSegment = Union[str, int]


class ErrorKind(str, Enum):
    """Kinds of constraint failure a validation pass can report"""

    TYPE_MISMATCH = "type_mismatch"
    LENGTH_VIOLATION = "length_violation"
    PATTERN_VIOLATION = "pattern_violation"
    ENUM_VIOLATION = "enum_violation"
    CARDINALITY_VIOLATION = "cardinality_violation"
    RANGE_VIOLATION = "range_violation"


@dataclass(frozen=True)
class Violation:
    """A single located constraint failure"""

    path: tuple[PathSegment, ...]
    kind: ErrorKind
    message: str

    @property
    def dotted_path(self) -> str:
        """Path segments joined with '.', array indices included as segments."""
        return ".".join(str(segment) for segment in self.path)


@dataclass
class ValidationResult:
    """Validation result

    On success ``value`` holds the typed entity and ``violations`` is empty.
    On failure ``value`` is None and ``violations`` lists every problem found.
    """

    passed: bool
    value: Any = None
    violations: list[Violation] = field(default_factory=list)


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of a standalone single-field check"""

    valid: bool
    error: Optional[str] = None  # user-facing message, set only when invalid
