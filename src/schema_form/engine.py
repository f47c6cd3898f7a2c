"""
Form Engine.

Owns the state of one form session: the schema text and its parsed model,
field values, field errors and the submit flags. All mutation goes through
the transition methods on ``FormEngine``.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from schema_form.config import get_config
from schema_form.models.results import (
    SchemaParseError,
    SchemaParseResult,
    SubmitOutcome,
    SubmitStatus,
)
from schema_form.models.schema import FormSchemaModel
from schema_form.parser import parse_schema
from schema_form.rendering import ControlSpec, describe_form
from schema_form.validation import check_field, collect_required_errors

logger = logging.getLogger("schema-form")


@dataclass
class FormState:
    """Snapshot of everything the form shows."""

    schema_text: str = ""
    form_schema: FormSchemaModel | None = None
    parse_error: SchemaParseError | None = None
    values: dict[str, str] = field(default_factory=dict)
    # "" or a missing entry means the field has no error
    errors: dict[str, str] = field(default_factory=dict)
    is_submitting: bool = False
    is_submitted: bool = False
    is_dark_mode: bool = False


class FormEngine:
    """
    Schema-driven form state machine.

    Usage:
        engine = FormEngine(submit_delay=0)
        engine.load_schema(schema_text)

        engine.set_value("email", "a@b.com")
        outcome = await engine.submit()

        if outcome.accepted:
            ...

    Submission: Idle -> Submitting -> Submitted | Idle with errors.
    A submit started while another is in flight is refused with BUSY.
    Values are snapshotted when a submit starts; edits made during the
    simulated delay are stored and validated but do not change the
    outcome of the submit already in flight.
    """

    def __init__(
        self,
        submit_delay: float | None = None,
        dark_mode: bool | None = None,
    ):
        """
        Initialize the engine.

        Args:
            submit_delay: Seconds the simulated submission takes. If None,
                          uses config.submit_delay_seconds.
            dark_mode: Initial theme. If None, uses config.default_dark_mode.
        """
        config = get_config()
        self.submit_delay = config.submit_delay_seconds if submit_delay is None else submit_delay
        self._state = FormState(
            is_dark_mode=config.default_dark_mode if dark_mode is None else dark_mode,
        )

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def form_schema(self) -> FormSchemaModel | None:
        return self._state.form_schema

    @property
    def active_errors(self) -> dict[str, str]:
        """Errors that are actually set, keyed by field id."""
        return {field_id: error for field_id, error in self._state.errors.items() if error}

    def value_of(self, field_id: str) -> str:
        return self._state.values.get(field_id, "")

    def load_schema(self, text: str | None) -> SchemaParseResult:
        """
        Parse new schema text and replace the whole form state.

        Values, errors and submit flags are reset together with the model,
        so they can never refer to fields of a previous schema. The theme
        is carried over.
        """
        result = parse_schema(text)
        self._state = FormState(
            schema_text=text or "",
            form_schema=result.form_schema,
            parse_error=result.error,
            is_dark_mode=self._state.is_dark_mode,
        )

        if result.is_valid:
            logger.info(f"Loaded schema '{result.form_schema.title}' ({len(result.form_schema.fields)} fields)")
        elif result.error:
            logger.info(f"Schema rejected ({result.error.kind}): {result.error.message}")
        return result

    def set_value(self, field_id: str, value: str) -> str | None:
        """Store a field value and validate it immediately."""
        self._state.values[field_id] = value
        return self.validate_field(field_id, value)

    def validate_field(self, field_id: str, value: str) -> str | None:
        """
        Validate one value and record the result in the error map.

        Returns:
            The error message ("" when valid), or None when the id does not
            belong to the current schema.
        """
        form_schema = self._state.form_schema
        if form_schema is None:
            return None
        spec = form_schema.get_field(field_id)
        if spec is None:
            return None

        error = check_field(spec, value)
        self._state.errors[field_id] = error
        return error

    async def submit(self) -> SubmitOutcome:
        """
        Validate every field and, if no required field is empty, complete
        the simulated submission.

        All fields are re-validated, touched or not. Only empty required
        fields block the submit; when they do, the error map is replaced
        by exactly those violations.
        """
        state = self._state
        if state.is_submitting:
            logger.info("Submit ignored: a submission is already in flight")
            return SubmitOutcome(status=SubmitStatus.BUSY)
        if state.form_schema is None:
            logger.info("Submit ignored: no schema loaded")
            return SubmitOutcome(status=SubmitStatus.NO_SCHEMA)

        state.is_submitting = True
        try:
            snapshot = dict(state.values)
            for spec in state.form_schema.fields:
                self.validate_field(spec.id, snapshot.get(spec.id, ""))

            required_errors = collect_required_errors(state.form_schema, snapshot)
            if required_errors:
                state.errors = dict(required_errors)
                logger.info(f"Submit rejected: {len(required_errors)} required field(s) empty")
                return SubmitOutcome(status=SubmitStatus.REJECTED, errors=required_errors)

            await asyncio.sleep(self.submit_delay)

            if self._state is not state:
                logger.info("Submit discarded: schema was replaced while submitting")
                return SubmitOutcome(status=SubmitStatus.DISCARDED)

            state.is_submitted = True
            logger.info("Form submitted successfully!")
            return SubmitOutcome(status=SubmitStatus.SUBMITTED)
        finally:
            state.is_submitting = False

    def toggle_dark_mode(self) -> bool:
        """Flip the theme. Presentation only."""
        self._state.is_dark_mode = not self._state.is_dark_mode
        return self._state.is_dark_mode

    def controls(self) -> list[ControlSpec]:
        """Controls for the current schema, empty when none is loaded."""
        if self._state.form_schema is None:
            return []
        return describe_form(self._state.form_schema, self._state.values, self._state.errors)
