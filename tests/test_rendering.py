"""Tests for control selection."""

from schema_form.models.schema import FormFieldSpec, FormSchemaModel
from schema_form.rendering import (
    SELECT_PLACEHOLDER,
    ControlKind,
    describe_control,
    describe_form,
)


def make_field(type_: str, **extra) -> FormFieldSpec:
    return FormFieldSpec.model_validate({"id": "f", "type": type_, "label": "Field", **extra})


OPTIONS = [
    {"value": "red", "label": "Red"},
    {"value": "blue", "label": "Blue"},
]


class TestDescribeControl:
    """Tests for per-type controls."""

    def test_text(self):
        """Test text fields render as single-line inputs."""
        control = describe_control(make_field("text", placeholder="Type here"))
        assert control.kind == ControlKind.INPUT
        assert control.input_type == "text"
        assert control.placeholder == "Type here"

    def test_number_and_email(self):
        """Test number and email keep their input type."""
        assert describe_control(make_field("number")).input_type == "number"
        assert describe_control(make_field("email")).input_type == "email"

    def test_textarea(self):
        """Test textarea fields."""
        control = describe_control(make_field("textarea", placeholder="Long text"))
        assert control.kind == ControlKind.TEXTAREA
        assert control.placeholder == "Long text"

    def test_select(self):
        """Test select fields get a leading empty choice."""
        control = describe_control(make_field("select", options=OPTIONS))
        assert control.kind == ControlKind.SELECT
        assert control.choices[0] == (SELECT_PLACEHOLDER, "")
        assert control.choice_values == ["", "red", "blue"]

    def test_select_without_options(self):
        """Test a select with no options offers only the empty choice."""
        control = describe_control(make_field("select"))
        assert control.choices == ((SELECT_PLACEHOLDER, ""),)

    def test_radio(self):
        """Test radio fields list options in order."""
        control = describe_control(make_field("radio", options=OPTIONS), value="blue")
        assert control.kind == ControlKind.RADIO
        assert control.choices == (("Red", "red"), ("Blue", "blue"))
        assert control.value == "blue"

    def test_unknown_type_falls_back(self):
        """Test unknown types render as an input with the declared type."""
        control = describe_control(make_field("date"))
        assert control.kind == ControlKind.INPUT
        assert control.input_type == "date"

    def test_required_label(self):
        """Test required fields are marked."""
        control = describe_control(make_field("text", required=True))
        assert control.display_label == "Field *"
        assert describe_control(make_field("text")).display_label == "Field"


class TestDescribeForm:
    """Tests for whole-form rendering."""

    def test_order_values_and_errors(self):
        """Test controls follow field order and carry state."""
        schema = FormSchemaModel.model_validate({
            "formTitle": "T",
            "fields": [
                {"id": "b", "type": "text", "label": "B"},
                {"id": "a", "type": "radio", "label": "A", "options": OPTIONS},
            ],
        })
        controls = describe_form(schema, {"b": "hello"}, {"a": "This field is required"})
        assert [c.field_id for c in controls] == ["b", "a"]
        assert controls[0].value == "hello"
        assert controls[0].error == ""
        assert controls[1].error == "This field is required"
