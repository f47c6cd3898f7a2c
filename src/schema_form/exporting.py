"""
Schema export and import.

Download writes the raw editor text verbatim to ``form-schema.json``;
upload reads a file's full text back into the editor.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from schema_form.config import get_config
from schema_form.errors import ExportError

logger = logging.getLogger("schema-form")

EXPORT_SUBDIR = "schema-form"


@dataclass(frozen=True)
class SchemaExport:
    """A downloadable schema artifact."""

    filename: str
    mime_type: str
    content: str


def build_export(text: str) -> SchemaExport:
    """Wrap the raw schema text as a download artifact."""
    config = get_config()
    return SchemaExport(
        filename=config.export_filename,
        mime_type=config.export_mime_type,
        content=text,
    )


def write_export(text: str, directory: str | os.PathLike | None = None) -> Path:
    """
    Write the schema text to disk for download.

    Args:
        text: Raw schema text, written unchanged.
        directory: Target directory. Defaults to a fixed ``schema-form``
                   directory under the system temp dir, reused across
                   exports so repeated downloads overwrite one file.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the file cannot be written.
    """
    export = build_export(text)
    try:
        target_dir = Path(directory) if directory is not None else Path(tempfile.gettempdir()) / EXPORT_SUBDIR
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / export.filename
        path.write_text(export.content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to export schema: {e}")
        raise ExportError(f"Could not write {export.filename}: {e}") from e

    logger.info(f"Exported schema to {path}")
    return path


def read_schema_file(file_obj) -> str:
    """
    Read the full text of an uploaded schema file.

    Accepts a path, an object with a ``name`` attribute pointing at a file
    (as upload widgets provide), or an open file-like object.

    Raises:
        ExportError: If nothing was given or the file cannot be read.
    """
    if file_obj is None:
        raise ExportError("No file uploaded.")

    try:
        if hasattr(file_obj, "read"):
            if hasattr(file_obj, "seek"):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode("utf-8")
            return content

        if isinstance(file_obj, (str, os.PathLike)):
            path = file_obj
        else:
            path = file_obj.name
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read schema file: {e}")
        raise ExportError(f"Could not read schema file: {e}") from e
