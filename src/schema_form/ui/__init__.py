"""
Web UI for Schema Form.

Provides the Gradio app that hosts the schema editor and the rendered form.
"""

from schema_form.ui.app import build_app, build_component

__all__ = [
    "build_app",
    "build_component",
]
