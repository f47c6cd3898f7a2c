"""Tests for the schema parser."""

import json

import pytest

from schema_form.models.results import INVALID_SCHEMA_MESSAGE
from schema_form.parser import parse_schema


CONTACT_SCHEMA = {
    "formTitle": "Contact",
    "fields": [
        {"id": "email", "type": "email", "label": "Email", "required": True},
    ],
}


class TestEmptyText:
    """Tests for blank schema text."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t ", None])
    def test_no_schema_no_error(self, text):
        """Test blank text yields neither a schema nor an error."""
        result = parse_schema(text)
        assert result.is_empty
        assert result.form_schema is None
        assert result.error is None


class TestSyntaxErrors:
    """Tests for text that is not JSON."""

    def test_decoder_message_is_kept(self):
        """Test the JSON decoder message is surfaced."""
        text = '{"formTitle": "Contact",'
        with pytest.raises(json.JSONDecodeError) as expected:
            json.loads(text)

        result = parse_schema(text)
        assert result.error.kind == "syntax"
        assert result.error.message == str(expected.value)
        assert result.form_schema is None


class TestShapeErrors:
    """Tests for JSON missing the title or field list."""

    @pytest.mark.parametrize(
        "data",
        [
            {"fields": []},
            {"formTitle": "Contact"},
            {"formTitle": "", "fields": []},
            {"formTitle": None, "fields": []},
            {"formTitle": True, "fields": []},
            {"formTitle": ["Contact"], "fields": []},
            {"formTitle": {"text": "Contact"}, "fields": []},
            {"formTitle": "Contact", "fields": {"id": "x"}},
            {"formTitle": "Contact", "fields": "email"},
            [],
            "Contact",
            42,
            None,
        ],
    )
    def test_fixed_message(self, data):
        """Test incomplete schemas get the fixed message."""
        result = parse_schema(json.dumps(data))
        assert result.error.kind == "shape"
        assert result.error_message == INVALID_SCHEMA_MESSAGE
        assert result.form_schema is None


class TestValidSchemas:
    """Tests for well-formed schemas."""

    def test_contact_schema(self):
        """Test title and fields are preserved."""
        result = parse_schema(json.dumps(CONTACT_SCHEMA))
        assert result.is_valid
        assert result.error is None
        assert result.form_schema.title == "Contact"
        assert result.form_schema.field_ids() == ["email"]
        assert result.form_schema.fields[0].required is True

    def test_field_order_preserved(self):
        """Test field count and order match the text."""
        ids = ["z", "a", "m", "b"]
        data = {
            "formTitle": "Order",
            "fields": [{"id": i, "type": "text", "label": i.upper()} for i in ids],
        }
        result = parse_schema(json.dumps(data))
        assert result.form_schema.field_ids() == ids

    def test_empty_field_list(self):
        """Test a schema with no fields is valid."""
        result = parse_schema('{"formTitle": "Nothing", "fields": []}')
        assert result.is_valid
        assert result.form_schema.fields == ()

    def test_numeric_title(self):
        """Test a numeric title is accepted as text."""
        result = parse_schema('{"formTitle": 42, "fields": []}')
        assert result.is_valid
        assert result.form_schema.title == "42"

    def test_fields_passed_through(self):
        """Test ids, types and options are not normalized."""
        data = {
            "formTitle": "Raw",
            "formDescription": "As typed",
            "fields": [
                {"id": " Spaced Id ", "type": "date", "label": "When"},
                {
                    "id": "pick",
                    "type": "radio",
                    "label": "Pick",
                    "options": [{"value": "b", "label": "B"}, {"value": "a", "label": "A"}],
                },
            ],
        }
        result = parse_schema(json.dumps(data))
        first, second = result.form_schema.fields
        assert first.id == " Spaced Id "
        assert first.type == "date"
        assert first.field_type is None
        assert [o.value for o in second.options] == ["b", "a"]
        assert result.form_schema.description == "As typed"

    def test_validation_rules(self):
        """Test validation rules are read from camelCase keys."""
        data = {
            "formTitle": "Rules",
            "fields": [
                {
                    "id": "code",
                    "type": "text",
                    "label": "Code",
                    "validation": {"pattern": "^[A-Z]+$", "message": "Caps", "minLength": 5},
                },
            ],
        }
        rule = parse_schema(json.dumps(data)).form_schema.fields[0].validation
        assert rule.pattern == "^[A-Z]+$"
        assert rule.message == "Caps"
        assert rule.min_length == 5

    def test_duplicate_ids_do_not_crash(self):
        """Test duplicate ids are accepted."""
        data = {
            "formTitle": "Dupes",
            "fields": [
                {"id": "a", "type": "text", "label": "A"},
                {"id": "a", "type": "email", "label": "A again"},
            ],
        }
        result = parse_schema(json.dumps(data))
        assert len(result.form_schema.fields) == 2


class TestFieldErrors:
    """Tests for field entries the model cannot represent."""

    def test_bad_attribute_type(self):
        """Test unusable field attributes are reported with their location."""
        data = {"formTitle": "Bad", "fields": [{"id": "a", "required": [1]}]}
        result = parse_schema(json.dumps(data))
        assert result.error.kind == "field"
        assert "fields.0.required" in result.error.message

    def test_non_object_entry(self):
        """Test a non-object field entry is rejected."""
        result = parse_schema('{"formTitle": "Bad", "fields": ["email"]}')
        assert result.error.kind == "field"
        assert result.form_schema is None

    def test_required_must_be_boolean(self):
        """Test a quoted boolean is not read as true or false."""
        data = {"formTitle": "Bad", "fields": [{"id": "a", "required": "false"}]}
        result = parse_schema(json.dumps(data))
        assert result.error.kind == "field"
        assert "fields.0.required" in result.error.message
        assert result.form_schema is None
