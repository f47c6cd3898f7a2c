"""
Form schema models.

These models mirror the JSON shape users paste into the schema editor.
Keys on the wire are camelCase (``formTitle``, ``minLength``); the Python
attributes are snake_case and both spellings are accepted on input.
All models are frozen: a parsed schema is never edited in place, it is
replaced wholesale.
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictBool


class FieldType(str, Enum):
    """Field types a schema may declare."""

    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    SELECT = "select"
    TEXTAREA = "textarea"
    RADIO = "radio"

    @classmethod
    def lookup(cls, value: str | None) -> "FieldType | None":
        """Return the matching member, or None for unrecognized types."""
        try:
            return cls(value)
        except ValueError:
            return None


class FieldOption(BaseModel):
    """A (value, label) choice for select and radio fields."""

    value: str = Field(..., description="Submitted value")
    label: str = Field(..., description="Displayed label")

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}


class FieldValidationRule(BaseModel):
    """Declarative validation attached to a single field."""

    pattern: str | None = Field(default=None, description="Regex the value must match")
    message: str | None = Field(default=None, description="Message shown on pattern mismatch")
    min_length: int | None = Field(default=None, alias="minLength", description="Minimum string length")
    max_length: int | None = Field(default=None, alias="maxLength", description="Maximum string length")
    # Declared by schemas but never evaluated
    minimum: float | None = Field(default=None, alias="min", description="Minimum numeric value")
    maximum: float | None = Field(default=None, alias="max", description="Maximum numeric value")

    model_config = {"frozen": True, "populate_by_name": True}


class FormFieldSpec(BaseModel):
    """Schema for a single form field."""

    id: str = Field(default="", description="Key into the value and error maps")
    type: str = Field(default="text", description="text, number, email, select, textarea or radio")
    label: str = Field(default="", description="Human-readable label")
    # JSON true/false only; strings such as "false" are rejected
    required: StrictBool = Field(default=False, description="Whether the field must be filled")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    options: tuple[FieldOption, ...] | None = Field(
        default=None,
        description="Ordered choices for select and radio fields",
    )
    validation: FieldValidationRule | None = Field(default=None, description="Validation rule")

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}

    @property
    def field_type(self) -> FieldType | None:
        """The declared type as an enum member, None if unrecognized."""
        return FieldType.lookup(self.type)


class FormSchemaModel(BaseModel):
    """
    A parsed form schema.

    Field order is render order. Ids are expected to be unique; when they
    are not, lookups resolve to the first field with the id and the value
    map simply holds one entry for it.
    """

    title: str = Field(..., alias="formTitle", min_length=1, description="Form title")
    description: str | None = Field(default=None, alias="formDescription", description="Form description")
    fields: tuple[FormFieldSpec, ...] = Field(..., description="Ordered form fields")

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}

    def field_ids(self) -> list[str]:
        """Ids of all fields in render order."""
        return [field.id for field in self.fields]

    def get_field(self, field_id: str) -> FormFieldSpec | None:
        """Find the first field with the given id."""
        for field in self.fields:
            if field.id == field_id:
                return field
        return None
