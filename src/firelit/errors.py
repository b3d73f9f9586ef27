"""Exception hierarchy for firelit."""

from __future__ import annotations


class FirelitError(Exception):
    """Base class for all firelit errors."""


class MalformedReferenceError(FirelitError, ValueError):
    """Raised when a document reference does not match the resource path grammar.

    The condition is tied to the reference's content, so retrying with the
    same string always fails again.
    """

    def __init__(self, reference_value: str, reason: str) -> None:
        self.reference_value = reference_value
        self.reason = reason
        super().__init__(
            f"Invalid document path {reference_value!r}: {reason}. Expected "
            "'projects/{project_id}/databases/{database_id}/documents/{document_path}'"
        )


class FieldValueDecodeError(FirelitError, ValueError):
    """Raised when a wire object cannot be decoded into a field value."""


__all__ = [
    "FieldValueDecodeError",
    "FirelitError",
    "MalformedReferenceError",
]
