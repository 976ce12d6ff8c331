# Structural validator and input checks
# Layer 1: Schema validation (recursive walk over a schema tree)
# Layer 2: Standalone checks for raw user input

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel

from content_director.config import settings
from content_director.constraints import (
    Failure,
    enum_membership,
    exact_length,
    pattern,
    string_length,
    type_name,
)
from content_director.entities import ContentPlan, DirectorOutput
from content_director.messages import PREFIX_SEPARATORS, check_locale, render
from content_director.schema import ArrayConstraint, ObjectConstraint, SchemaNode, StringConstraint
from content_director.schemas import CONTENT_PLAN_SCHEMA, DIRECTOR_OUTPUT_SCHEMA
from content_director.state import ErrorKind, FieldCheck, PathSegment, ValidationResult, Violation

logger = logging.getLogger(__name__)

MAX_PRODUCT_NAME_LENGTH = 100
MAX_BRAND_CONTEXT_LENGTH = 5000
MAX_REF_COPY_LENGTH = 10000

# Marks a declared field whose key is absent from the input
_MISSING = object()

# Generic message id -> check name a node may override it for
_CHECK_NAMES = {
    "too_short": "min",
    "too_long": "max",
    "invalid_pattern": "pattern",
    "invalid_enum": "enum",
    "wrong_length": "length",
}


class ValidationError(Exception):
    """Entity failed schema validation

    ``str(error)`` is the prefixed, multi-line report; ``violations`` keeps
    the located failures for callers that want them as data.
    """

    def __init__(self, prefix: str, violations: list[Violation], locale: str = "en"):
        self.prefix = prefix
        self.violations = list(violations)
        self.report = format_violations(self.violations)
        super().__init__(f"{prefix}{PREFIX_SEPARATORS[check_locale(locale)]}{self.report}")


def _resolve_locale(locale: Optional[str]) -> str:
    return check_locale(locale or settings.locale)


# ===== Layer 1: Structural validator =====


def _locate(
    failure: Failure,
    node_messages: Mapping[str, str],
    path: tuple[PathSegment, ...],
    locale: str,
) -> Violation:
    """Attach path and rendered message, preferring the node's custom message."""
    message_id = node_messages.get(_CHECK_NAMES[failure.message_id], failure.message_id)
    return Violation(path, failure.kind, render(message_id, locale, **failure.params))


def _type_mismatch(expected: str, value: Any, path: tuple[PathSegment, ...], locale: str) -> Violation:
    message = render("invalid_type", locale, expected=expected, received=type_name(value))
    return Violation(path, ErrorKind.TYPE_MISMATCH, message)


def _walk_string(
    schema: StringConstraint,
    value: Any,
    path: tuple[PathSegment, ...],
    locale: str,
    out: list[Violation],
) -> None:
    if not isinstance(value, str):
        out.append(_type_mismatch("string", value, path, locale))
        return

    failures = [string_length(value, schema.min_len, schema.max_len)]
    if schema.pattern is not None:
        failures.append(pattern(value, schema.pattern))
    if schema.enum_values is not None:
        failures.append(enum_membership(value, schema.enum_values))

    for failure in failures:
        if failure is not None:
            out.append(_locate(failure, schema.messages, path, locale))


def _walk_object(
    schema: ObjectConstraint,
    value: Any,
    path: tuple[PathSegment, ...],
    locale: str,
    out: list[Violation],
) -> None:
    if not isinstance(value, Mapping):
        out.append(_type_mismatch("object", value, path, locale))
        return

    # Undeclared keys are ignored
    for field_name, field_schema in schema.fields.items():
        _walk(field_schema, value.get(field_name, _MISSING), path + (field_name,), locale, out)


def _walk_array(
    schema: ArrayConstraint,
    value: Any,
    path: tuple[PathSegment, ...],
    locale: str,
    out: list[Violation],
) -> None:
    if not isinstance(value, (list, tuple)):
        out.append(_type_mismatch("array", value, path, locale))
        return

    if schema.exact_length is not None:
        failure = exact_length(value, schema.exact_length)
        if failure is not None:
            # Wrong size: report the array once and skip its items
            out.append(_locate(failure, schema.messages, path, locale))
            return

    for index, item in enumerate(value):
        _walk(schema.item_schema, item, path + (index,), locale, out)


def _walk(
    schema: SchemaNode,
    value: Any,
    path: tuple[PathSegment, ...],
    locale: str,
    out: list[Violation],
) -> None:
    if value is _MISSING:
        if not schema.optional:
            out.append(Violation(path, ErrorKind.TYPE_MISMATCH, render("required", locale)))
        return

    if isinstance(schema, StringConstraint):
        _walk_string(schema, value, path, locale, out)
    elif isinstance(schema, ObjectConstraint):
        _walk_object(schema, value, path, locale, out)
    elif isinstance(schema, ArrayConstraint):
        _walk_array(schema, value, path, locale, out)
    else:
        raise TypeError(f"Unsupported schema node: {type(schema).__name__}")


def validate(
    schema: SchemaNode,
    value: Any,
    path: tuple[PathSegment, ...] = (),
    locale: Optional[str] = None,
) -> list[Violation]:
    """Collect every violation of ``schema`` in ``value``, in document order.

    Args:
        schema: Root schema node
        value: Untrusted, already-deserialized input (dicts, lists, scalars)
        path: Location of ``value`` inside an enclosing document
        locale: Message language; defaults to ``settings.locale``

    Returns:
        List of violations, empty when ``value`` conforms
    """
    violations: list[Violation] = []
    _walk(schema, value, tuple(path), _resolve_locale(locale), violations)
    return violations


def validate_entity(
    schema: SchemaNode,
    raw: Any,
    entity_type: Optional[type[BaseModel]] = None,
    locale: Optional[str] = None,
) -> ValidationResult:
    """Validate ``raw`` from the root and build the typed entity on success.

    A pydantic model passed as ``raw`` is dumped first, so a validated entity
    always re-validates against its own schema. Nothing is built from a
    failing input.
    """
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(exclude_none=True)

    violations = validate(schema, raw, locale=locale)
    if violations:
        return ValidationResult(passed=False, violations=violations)

    value = entity_type.model_validate(raw) if entity_type is not None else raw
    return ValidationResult(passed=True, value=value)


def format_violations(violations: list[Violation]) -> str:
    """One ``"<dotted.path>: <message>"`` line per violation, in order found."""
    if not violations:
        raise ValueError("format_violations needs at least one violation")
    return "\n".join(f"{v.dotted_path}: {v.message}" for v in violations)


def _validate_or_raise(
    schema: SchemaNode,
    raw: Any,
    entity_type: type[BaseModel],
    prefix_id: str,
    locale: Optional[str],
) -> Any:
    locale = _resolve_locale(locale)
    entity = entity_type.__name__
    result = validate_entity(schema, raw, entity_type=entity_type, locale=locale)

    if not result.passed:
        logger.warning(
            "%s failed validation with %d violation(s)",
            entity,
            len(result.violations),
            extra={"entity": entity, "violation_count": len(result.violations)},
        )
        raise ValidationError(render(prefix_id, locale), result.violations, locale=locale)

    logger.debug("%s passed validation", entity, extra={"entity": entity})
    return result.value


def validate_director_output(raw: Any, locale: Optional[str] = None) -> DirectorOutput:
    """Validate a director response and return it as a DirectorOutput

    Raises:
        ValidationError: If ``raw`` does not conform; the message lists every violation
    """
    return _validate_or_raise(
        DIRECTOR_OUTPUT_SCHEMA, raw, DirectorOutput, "director_output_failed", locale
    )


def validate_content_plan(raw: Any, locale: Optional[str] = None) -> ContentPlan:
    """Validate a content-plan response and return it as a ContentPlan

    Raises:
        ValidationError: If ``raw`` does not conform; the message lists every violation
    """
    return _validate_or_raise(CONTENT_PLAN_SCHEMA, raw, ContentPlan, "content_plan_failed", locale)


# ===== Layer 2: User input checks =====


def validate_product_name(name: str, locale: Optional[str] = None) -> FieldCheck:
    """Product name must be non-blank and at most 100 characters"""
    locale = _resolve_locale(locale)
    if not name or not name.strip():
        return FieldCheck(valid=False, error=render("product_name_empty", locale))
    if len(name) > MAX_PRODUCT_NAME_LENGTH:
        return FieldCheck(
            valid=False,
            error=render("product_name_too_long", locale, limit=MAX_PRODUCT_NAME_LENGTH),
        )
    return FieldCheck(valid=True)


def validate_brand_context(text: str, locale: Optional[str] = None) -> FieldCheck:
    if len(text) > MAX_BRAND_CONTEXT_LENGTH:
        return FieldCheck(
            valid=False,
            error=render("brand_context_too_long", _resolve_locale(locale), limit=MAX_BRAND_CONTEXT_LENGTH),
        )
    return FieldCheck(valid=True)


def validate_ref_copy(text: str, locale: Optional[str] = None) -> FieldCheck:
    if len(text) > MAX_REF_COPY_LENGTH:
        return FieldCheck(
            valid=False,
            error=render("ref_copy_too_long", _resolve_locale(locale), limit=MAX_REF_COPY_LENGTH),
        )
    return FieldCheck(valid=True)
