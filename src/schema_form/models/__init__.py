"""
Data models for Schema Form.

This module contains Pydantic models for:
- The form schema (fields, options, validation rules)
- Parse and submit results
"""

from schema_form.models.schema import (
    FieldOption,
    FieldType,
    FieldValidationRule,
    FormFieldSpec,
    FormSchemaModel,
)
from schema_form.models.results import (
    INVALID_SCHEMA_MESSAGE,
    SchemaParseError,
    SchemaParseResult,
    SubmitOutcome,
    SubmitStatus,
)

__all__ = [
    # Schema
    "FieldOption",
    "FieldType",
    "FieldValidationRule",
    "FormFieldSpec",
    "FormSchemaModel",
    # Results
    "INVALID_SCHEMA_MESSAGE",
    "SchemaParseError",
    "SchemaParseResult",
    "SubmitOutcome",
    "SubmitStatus",
]
