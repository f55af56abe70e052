"""Decode error taxonomy for Location documents."""

from typing import Any


class DecodeError(Exception):
    """Base exception for decode failures.

    Attributes:
        record: Name of the record type that owns the offending field.
        field: Wire name of the offending field.
        path: Dotted wire path from the document root to the field.
        errors: Every problem reported for the document, not only the first.
    """

    def __init__(
        self,
        message: str,
        record: str | None = None,
        field: str | None = None,
        path: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.record = record
        self.field = field
        self.path = path or field
        self.errors = errors or []


class MissingFieldError(DecodeError):
    """A required field is absent."""

    pass


class TypeMismatchError(DecodeError):
    """A field is present but its value has the wrong shape."""

    pass


class UnrecognizedCodeError(DecodeError):
    """A closed code list received a code it does not define."""

    def __init__(
        self,
        message: str,
        code_system: str,
        value: str,
        record: str | None = None,
        field: str | None = None,
        path: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            message, record=record, field=field, path=path, errors=errors
        )
        self.code_system = code_system
        self.value = value


class MalformedDocumentError(DecodeError):
    """The document is not valid JSON or not a JSON object."""

    pass


class CyclicReferenceError(DecodeError):
    """A partOf chain refers back to itself."""

    pass


class ReferenceDepthError(DecodeError):
    """A partOf chain is nested deeper than allowed."""

    def __init__(self, message: str, max_depth: int, path: str | None = None):
        super().__init__(message, record="Location", field="partOf", path=path)
        self.max_depth = max_depth
