"""
Result models for schema parsing and form submission.

Parsing and submitting never raise for bad input; the outcome is
returned as data so callers can branch without exception handling.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from schema_form.models.schema import FormSchemaModel


INVALID_SCHEMA_MESSAGE = 'Invalid schema format. Must include "formTitle" and "fields" array.'


class SchemaParseError(BaseModel):
    """Why a schema text was rejected."""

    kind: Literal["syntax", "shape", "field"] = Field(
        ..., description="syntax: not JSON, shape: missing title/fields, field: bad field entry"
    )
    message: str = Field(..., description="Human-readable error message")


class SchemaParseResult(BaseModel):
    """
    Outcome of parsing schema text.

    Exactly one of three states:
    - empty: no schema and no error (blank editor)
    - valid: ``form_schema`` is set
    - invalid: ``error`` is set
    """

    form_schema: FormSchemaModel | None = Field(default=None, description="Parsed schema")
    error: SchemaParseError | None = Field(default=None, description="Parse failure")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.form_schema is None and self.error is None

    @property
    def is_valid(self) -> bool:
        return self.form_schema is not None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None


class SubmitStatus(str, Enum):
    """How a submit attempt ended."""

    SUBMITTED = "submitted"
    REJECTED = "rejected"
    BUSY = "busy"
    NO_SCHEMA = "no_schema"
    DISCARDED = "discarded"


class SubmitOutcome(BaseModel):
    """Result of a submit attempt."""

    status: SubmitStatus = Field(..., description="Submit result")
    errors: dict[str, str] = Field(
        default_factory=dict, description="Required-field violations that blocked the submit"
    )

    @property
    def accepted(self) -> bool:
        return self.status == SubmitStatus.SUBMITTED

    @property
    def error_count(self) -> int:
        return len(self.errors)
