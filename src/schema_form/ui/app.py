"""
Schema Form web UI.

A Gradio app with a JSON schema editor on the left and the form rendered
from it on the right. Editing the schema rebuilds the form; editing a
field validates it; Submit validates everything and completes a simulated
submission.
"""

from functools import partial

import gradio as gr

from schema_form.config import get_config
from schema_form.rendering import ControlKind, ControlSpec
from schema_form.ui.constants import (
    APP_TITLE,
    COPY_TO_CLIPBOARD_JS,
    ENABLE_DARK_THEME_JS,
    NO_SCHEMA_PROMPT,
    SCHEMA_PLACEHOLDER,
    SUBMIT_LABEL,
    SUCCESS_MESSAGE,
    TOGGLE_THEME_JS,
)
from schema_form.ui.handlers import (
    begin_submit,
    field_error_text,
    handle_copy_result,
    handle_download,
    handle_field_input,
    handle_schema_change,
    handle_submit,
    handle_toggle_theme,
    handle_upload,
    theme_label,
)

# gr.Textbox only knows these input types
_TEXTBOX_TYPES = {"email": "email", "password": "password"}


def build_component(control: ControlSpec):
    """Create the Gradio component for one control."""
    if control.kind == ControlKind.SELECT:
        return gr.Dropdown(
            choices=list(control.choices),
            value=control.value,
            label=control.display_label,
            interactive=True,
        )
    if control.kind == ControlKind.RADIO:
        return gr.Radio(
            choices=list(control.choices),
            value=control.value or None,
            label=control.display_label,
            interactive=True,
        )
    if control.kind == ControlKind.TEXTAREA:
        return gr.Textbox(
            value=control.value,
            label=control.display_label,
            placeholder=control.placeholder,
            lines=4,
            interactive=True,
        )
    return gr.Textbox(
        value=control.value,
        label=control.display_label,
        placeholder=control.placeholder,
        type=_TEXTBOX_TYPES.get(control.input_type, "text"),
        lines=1,
        max_lines=1,
        interactive=True,
    )


def build_app(initial_schema: str = "") -> gr.Blocks:
    """
    Assemble the Blocks app.

    Args:
        initial_schema: Schema text to preload into the editor.
    """
    config = get_config()

    with gr.Blocks(title="Form Generator") as demo:
        engine_state = gr.State(None)
        revision = gr.State(0)

        with gr.Row():
            gr.Markdown(f"# {APP_TITLE}")
            theme_btn = gr.Button(theme_label(config.default_dark_mode), size="sm", scale=0)

        with gr.Row():
            # Left Panel: Schema editor
            with gr.Column(scale=1):
                gr.Markdown("### JSON Schema Editor")
                schema_input = gr.Textbox(
                    label="Schema",
                    value=initial_schema,
                    placeholder=SCHEMA_PLACEHOLDER,
                    lines=20,
                    max_lines=40,
                )
                with gr.Row():
                    download_btn = gr.Button("⬇️ Download JSON", variant="primary")
                    upload_btn = gr.UploadButton("⬆️ Upload JSON", file_types=[".json"])
                    copy_btn = gr.Button("📋 Copy Form JSON")
                download_output = gr.File(label="form-schema.json")
                parse_error = gr.Markdown(visible=False)

            # Right Panel: Rendered form
            with gr.Column(scale=1):

                @gr.render(inputs=[engine_state, revision])
                def render_form(engine, _revision):
                    form_schema = engine.form_schema if engine is not None else None
                    if form_schema is None:
                        gr.Markdown(NO_SCHEMA_PROMPT)
                        return

                    gr.Markdown(f"## {form_schema.title}")
                    if form_schema.description:
                        gr.Markdown(form_schema.description)

                    for control in engine.controls():
                        component = build_component(control)
                        message = field_error_text(control.error)
                        error_line = gr.Markdown(message, visible=bool(message))
                        component.input(
                            fn=partial(handle_field_input, control.field_id),
                            inputs=[component, engine_state],
                            outputs=[error_line],
                        )

                    submit_btn = gr.Button(SUBMIT_LABEL, variant="primary")
                    submit_btn.click(
                        fn=begin_submit,
                        outputs=[submit_btn],
                    ).then(
                        fn=handle_submit,
                        inputs=[engine_state, revision],
                        outputs=[revision],
                    )

                    if engine.state.is_submitted:
                        gr.Markdown(SUCCESS_MESSAGE)

        schema_input.change(
            fn=handle_schema_change,
            inputs=[schema_input, engine_state, revision],
            outputs=[engine_state, parse_error, revision],
        )

        download_btn.click(
            fn=handle_download,
            inputs=[schema_input],
            outputs=[download_output],
        )

        upload_btn.upload(
            fn=handle_upload,
            inputs=[upload_btn, schema_input],
            outputs=[schema_input],
        )

        copy_btn.click(
            fn=handle_copy_result,
            inputs=[schema_input],
            js=COPY_TO_CLIPBOARD_JS,
        )

        theme_btn.click(fn=None, js=TOGGLE_THEME_JS)
        theme_btn.click(
            fn=handle_toggle_theme,
            inputs=[engine_state],
            outputs=[engine_state, theme_btn],
        )

        if initial_schema:
            demo.load(
                fn=handle_schema_change,
                inputs=[schema_input, engine_state, revision],
                outputs=[engine_state, parse_error, revision],
            )

        if config.default_dark_mode:
            demo.load(fn=None, js=ENABLE_DARK_THEME_JS)

    return demo
