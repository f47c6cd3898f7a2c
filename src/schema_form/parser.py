"""
Schema parser.

Turns raw schema text from the editor into a typed ``FormSchemaModel``.
Only the minimal shape is enforced here: a non-empty ``formTitle`` and a
``fields`` array. Field contents are passed through as declared.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from schema_form.models.results import (
    INVALID_SCHEMA_MESSAGE,
    SchemaParseError,
    SchemaParseResult,
)
from schema_form.models.schema import FormSchemaModel

logger = logging.getLogger("schema-form")


def _has_required_shape(data: Any) -> bool:
    """Check for a non-empty text or numeric title and an array of fields."""
    if not isinstance(data, dict):
        return False
    title = data.get("formTitle")
    if isinstance(title, bool) or not isinstance(title, (str, int, float)):
        return False
    return bool(title) and isinstance(data.get("fields"), list)


def _format_validation_error(error: ValidationError) -> str:
    """Collapse pydantic errors into a single line per problem."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def parse_schema(text: str | None) -> SchemaParseResult:
    """
    Parse schema text into a form schema model.

    Args:
        text: Raw JSON text as typed, pasted or uploaded by the user.

    Returns:
        SchemaParseResult that is empty for blank text, carries an error
        for malformed or incomplete schemas, and carries the model otherwise.

    Example:
        >>> result = parse_schema('{"formTitle": "Contact", "fields": []}')
        >>> result.form_schema.title
        'Contact'
    """
    if text is None or not text.strip():
        return SchemaParseResult()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Schema is not valid JSON: {e}")
        return SchemaParseResult(error=SchemaParseError(kind="syntax", message=str(e)))

    if not _has_required_shape(data):
        logger.debug("Schema is missing formTitle or fields array")
        return SchemaParseResult(
            error=SchemaParseError(kind="shape", message=INVALID_SCHEMA_MESSAGE)
        )

    try:
        form_schema = FormSchemaModel.model_validate(data)
    except ValidationError as e:
        message = _format_validation_error(e)
        logger.debug(f"Schema fields rejected: {message}")
        return SchemaParseResult(error=SchemaParseError(kind="field", message=message))

    logger.debug(f"Parsed schema '{form_schema.title}' with {len(form_schema.fields)} fields")
    return SchemaParseResult(form_schema=form_schema)
