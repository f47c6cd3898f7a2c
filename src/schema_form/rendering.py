"""
Control selection for form fields.

Each field type maps to one control kind with its own builder. Types the
schema format does not know fall back to a single-line input that keeps
the declared type string as its HTML input type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from schema_form.models.schema import FieldType, FormFieldSpec, FormSchemaModel


SELECT_PLACEHOLDER = "Select an option"
REQUIRED_MARKER = "*"


class ControlKind(str, Enum):
    """Input control families."""

    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"


@dataclass(frozen=True)
class ControlSpec:
    """Everything a UI layer needs to draw one field."""

    field_id: str
    kind: ControlKind
    label: str
    required: bool = False
    value: str = ""
    error: str = ""
    input_type: str = "text"
    placeholder: str | None = None
    # (label, value) pairs in display order
    choices: tuple[tuple[str, str], ...] = ()

    @property
    def display_label(self) -> str:
        if self.required:
            return f"{self.label} {REQUIRED_MARKER}"
        return self.label

    @property
    def choice_values(self) -> list[str]:
        return [value for _, value in self.choices]


def _option_choices(field: FormFieldSpec) -> tuple[tuple[str, str], ...]:
    return tuple((option.label, option.value) for option in field.options or ())


def _input_control(field: FormFieldSpec, value: str, error: str) -> ControlSpec:
    return ControlSpec(
        field_id=field.id,
        kind=ControlKind.INPUT,
        label=field.label,
        required=field.required,
        value=value,
        error=error,
        input_type=field.type or FieldType.TEXT.value,
        placeholder=field.placeholder,
    )


def _textarea_control(field: FormFieldSpec, value: str, error: str) -> ControlSpec:
    return ControlSpec(
        field_id=field.id,
        kind=ControlKind.TEXTAREA,
        label=field.label,
        required=field.required,
        value=value,
        error=error,
        placeholder=field.placeholder,
    )


def _select_control(field: FormFieldSpec, value: str, error: str) -> ControlSpec:
    return ControlSpec(
        field_id=field.id,
        kind=ControlKind.SELECT,
        label=field.label,
        required=field.required,
        value=value,
        error=error,
        choices=((SELECT_PLACEHOLDER, ""),) + _option_choices(field),
    )


def _radio_control(field: FormFieldSpec, value: str, error: str) -> ControlSpec:
    return ControlSpec(
        field_id=field.id,
        kind=ControlKind.RADIO,
        label=field.label,
        required=field.required,
        value=value,
        error=error,
        choices=_option_choices(field),
    )


_BUILDERS: dict[FieldType, Callable[[FormFieldSpec, str, str], ControlSpec]] = {
    FieldType.TEXTAREA: _textarea_control,
    FieldType.SELECT: _select_control,
    FieldType.RADIO: _radio_control,
}


def describe_control(field: FormFieldSpec, value: str = "", error: str = "") -> ControlSpec:
    """Build the control for a field with its current value and error."""
    builder = _BUILDERS.get(field.field_type, _input_control)
    return builder(field, value, error)


def describe_form(
    form_schema: FormSchemaModel,
    values: dict[str, str] | None = None,
    errors: dict[str, str] | None = None,
) -> list[ControlSpec]:
    """Build controls for every field in render order."""
    values = values or {}
    errors = errors or {}
    return [
        describe_control(field, values.get(field.id, ""), errors.get(field.id, ""))
        for field in form_schema.fields
    ]
