"""
Event handlers for the Schema Form web UI.

Each handler takes the per-session ``FormEngine`` (None until the first
event creates it) plus the widget values, and returns updates for its
outputs. Chrome failures (export, import, clipboard) are logged and shown
as notifications; they never touch form state.
"""

import logging

import gradio as gr

from schema_form.engine import FormEngine
from schema_form.errors import SchemaFormError
from schema_form.exporting import read_schema_file, write_export
from schema_form.models.results import SchemaParseResult, SubmitStatus
from schema_form.ui.constants import (
    COPY_OK,
    COPY_SUCCESS_MESSAGE,
    DARK_MODE_LABEL,
    LIGHT_MODE_LABEL,
    SUBMITTING_LABEL,
)

logger = logging.getLogger("schema-form")


def ensure_engine(engine: FormEngine | None) -> FormEngine:
    return engine if engine is not None else FormEngine()


def theme_label(is_dark_mode: bool) -> str:
    """Label for the button that switches to the other theme."""
    return LIGHT_MODE_LABEL if is_dark_mode else DARK_MODE_LABEL


def parse_error_text(result: SchemaParseResult) -> str:
    if result.error is None:
        return ""
    return f"⚠️ {result.error.message}"


def field_error_text(error: str | None) -> str:
    if not error:
        return ""
    return f"❗ {error}"


def handle_schema_change(text: str, engine: FormEngine | None, revision: int):
    """Reparse the editor text and replace the form."""
    engine = ensure_engine(engine)
    result = engine.load_schema(text)
    message = parse_error_text(result)
    return engine, gr.update(value=message, visible=bool(message)), revision + 1


def handle_field_input(field_id: str, value, engine: FormEngine | None):
    """Store an edited value and refresh that field's error line."""
    if engine is None:
        return gr.update(value="", visible=False)
    error = engine.set_value(field_id, "" if value is None else str(value))
    message = field_error_text(error)
    return gr.update(value=message, visible=bool(message))


def begin_submit():
    return gr.update(value=SUBMITTING_LABEL, interactive=False)


async def handle_submit(engine: FormEngine | None, revision: int) -> int:
    """Run the submit and bump the revision so the form re-renders."""
    if engine is None:
        return revision
    outcome = await engine.submit()
    if outcome.status == SubmitStatus.BUSY:
        gr.Warning("A submission is already in progress.")
    return revision + 1


def handle_download(text: str | None) -> str | None:
    """Write the editor text to form-schema.json and return its path."""
    try:
        path = write_export(text or "")
    except SchemaFormError as e:
        gr.Warning(str(e))
        return None
    return str(path)


def handle_upload(file_obj, current_text: str) -> str:
    """Load an uploaded file's text into the editor."""
    try:
        return read_schema_file(file_obj)
    except SchemaFormError as e:
        gr.Warning(str(e))
        return current_text


def handle_copy_result(status: str | None) -> None:
    """Report the outcome of the browser-side clipboard copy."""
    if status == COPY_OK:
        gr.Info(COPY_SUCCESS_MESSAGE)
        return
    logger.error(f"Failed to copy JSON: {status}")
    gr.Warning(f"Failed to copy JSON: {status}")


def handle_toggle_theme(engine: FormEngine | None):
    engine = ensure_engine(engine)
    is_dark_mode = engine.toggle_dark_mode()
    return engine, gr.update(value=theme_label(is_dark_mode))
