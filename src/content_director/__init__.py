"""Schema validation for director and content-plan model replies."""

from content_director.entities import (
    ContentItem,
    ContentPlan,
    DirectorOutput,
    MarketingRoute,
    ProductAnalysis,
    PromptData,
)
from content_director.state import ErrorKind, FieldCheck, ValidationResult, Violation
from content_director.validators import (
    ValidationError,
    format_violations,
    validate,
    validate_brand_context,
    validate_content_plan,
    validate_director_output,
    validate_entity,
    validate_product_name,
    validate_ref_copy,
)

__all__ = [
    "ContentItem",
    "ContentPlan",
    "DirectorOutput",
    "ErrorKind",
    "FieldCheck",
    "MarketingRoute",
    "ProductAnalysis",
    "PromptData",
    "ValidationError",
    "ValidationResult",
    "Violation",
    "format_violations",
    "validate",
    "validate_brand_context",
    "validate_content_plan",
    "validate_director_output",
    "validate_entity",
    "validate_product_name",
    "validate_ref_copy",
]
