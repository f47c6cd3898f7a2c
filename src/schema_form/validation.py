"""
Field validation rules.

Pure checks of a single value against its field spec. The engine decides
where the resulting messages are stored.
"""

import logging
import re

from schema_form.models.schema import FormFieldSpec, FormSchemaModel

logger = logging.getLogger("schema-form")

REQUIRED_MESSAGE = "This field is required"
INVALID_FORMAT_MESSAGE = "Invalid format"


def _matches(pattern: str, value: str) -> bool:
    """Search semantics: the pattern may match anywhere unless anchored."""
    try:
        return re.search(pattern, value) is not None
    except re.error as e:
        logger.warning(f"Invalid validation pattern {pattern!r}: {e}")
        return False


def _text_length(value: str) -> int:
    """Length in UTF-16 code units, as browsers count input length."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def check_field(field: FormFieldSpec, value: str) -> str:
    """
    Validate one value against its field.

    Rules run in a fixed order and a later failure overwrites an earlier
    one: pattern, then minLength, then maxLength. Numeric min/max are
    declared in schemas but not evaluated.

    Args:
        field: The field spec the value belongs to.
        value: Current value, "" when the field is empty.

    Returns:
        The error message, or "" when the value is valid.
    """
    if field.required and not value:
        return REQUIRED_MESSAGE

    rule = field.validation
    if rule is None:
        return ""

    error = ""
    if rule.pattern and not _matches(rule.pattern, value):
        error = rule.message or INVALID_FORMAT_MESSAGE
    if rule.min_length and _text_length(value) < rule.min_length:
        error = f"Minimum length is {rule.min_length}"
    if rule.max_length and _text_length(value) > rule.max_length:
        error = f"Maximum length is {rule.max_length}"
    return error


def collect_required_errors(form_schema: FormSchemaModel, values: dict[str, str]) -> dict[str, str]:
    """Map every required field left empty to the required message."""
    errors: dict[str, str] = {}
    for field in form_schema.fields:
        if field.required and not values.get(field.id, ""):
            errors[field.id] = REQUIRED_MESSAGE
    return errors
