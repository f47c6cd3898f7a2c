"""
Schema Form: Interactive forms from a JSON schema.

Paste a JSON description of a form, get back a typed model, rendered
controls and per-field validation.

Simple Usage:
    from schema_form import parse_schema

    result = parse_schema(schema_text)
    if result.is_valid:
        print(result.form_schema.title)
    elif result.error:
        print(result.error.message)

Form Engine:
    from schema_form import FormEngine

    engine = FormEngine()
    engine.load_schema(schema_text)

    # Every edit is validated immediately
    error = engine.set_value("email", "a@b.com")

    # Validate everything and complete the simulated submission
    outcome = await engine.submit()
    print(outcome.status, engine.active_errors)

Web UI:
    from schema_form.ui import build_app

    build_app().launch()
"""

from schema_form.engine import (
    FormEngine,
    FormState,
)
from schema_form.parser import parse_schema
from schema_form.validation import (
    check_field,
    collect_required_errors,
)
from schema_form.rendering import (
    ControlKind,
    ControlSpec,
    describe_control,
    describe_form,
)
from schema_form.models.schema import (
    FieldOption,
    FieldType,
    FieldValidationRule,
    FormFieldSpec,
    FormSchemaModel,
)
from schema_form.models.results import (
    SchemaParseError,
    SchemaParseResult,
    SubmitOutcome,
    SubmitStatus,
)
from schema_form.exporting import (
    SchemaExport,
    build_export,
    read_schema_file,
    write_export,
)
from schema_form.errors import (
    ExportError,
    SchemaFormError,
)

__all__ = [
    # Main interface
    "FormEngine",
    "FormState",
    "parse_schema",
    # Validation
    "check_field",
    "collect_required_errors",
    # Rendering
    "ControlKind",
    "ControlSpec",
    "describe_control",
    "describe_form",
    # Schema models
    "FieldOption",
    "FieldType",
    "FieldValidationRule",
    "FormFieldSpec",
    "FormSchemaModel",
    # Results
    "SchemaParseError",
    "SchemaParseResult",
    "SubmitOutcome",
    "SubmitStatus",
    # Export
    "SchemaExport",
    "build_export",
    "read_schema_file",
    "write_export",
    # Errors
    "ExportError",
    "SchemaFormError",
]

__version__ = "0.1.0"
