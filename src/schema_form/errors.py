"""Exceptions raised by the Schema Form collaborators."""


class SchemaFormError(Exception):
    """Base class for Schema Form errors."""


class ExportError(SchemaFormError):
    """Raised when a schema cannot be written to or read from disk."""
