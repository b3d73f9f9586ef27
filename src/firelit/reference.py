"""Literal references to documents, independent of any client.

A reference is the full resource name of a document, for example
``projects/my-proj/databases/(default)/documents/cities/LA``. Nothing is
validated at construction time; every accessor parses the stored string
again and raises :class:`~firelit.errors.MalformedReferenceError` when it
does not match the grammar.
"""

from __future__ import annotations

from typing import ClassVar, NamedTuple, NoReturn

from pydantic import BaseModel, ConfigDict, Field

from .errors import MalformedReferenceError
from .runtime.logging import get_logger

_LITERALS = ((0, "projects"), (2, "databases"), (4, "documents"))


class ReferenceParts(NamedTuple):
    project_id: str
    database_id: str
    document_path: str


def parse_reference(reference_value: str) -> ReferenceParts:
    """Split ``reference_value`` into its project, database and document path.

    The grammar is ``projects/:project_id/databases/:database_id/documents/:document_path*``
    anchored at both ends. Empty segments are never accepted. The number of
    document path segments is not checked for collection/id pairing.
    """

    segments = reference_value.split("/")
    if len(segments) < 6:
        _fail(reference_value, "path does not match pattern")
    for index, literal in _LITERALS:
        if segments[index] != literal:
            _fail(reference_value, f"expected {literal!r} at segment {index}")
    if not all(segments):
        _fail(reference_value, "path contains an empty segment")
    return ReferenceParts(
        project_id=segments[1],
        database_id=segments[3],
        document_path="/".join(segments[5:]),
    )


def _fail(reference_value: str, reason: str) -> NoReturn:
    get_logger().debug("reference: rejecting %r (%s)", reference_value, reason)
    raise MalformedReferenceError(reference_value, reason)


class DocumentReference(BaseModel):
    """A reference to a document, e.g. ``projects/{p}/databases/{d}/documents/{path}``.

    Also the ``referenceValue`` variant of a field value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    tag: ClassVar[str] = "referenceValue"

    reference_value: str = Field(alias="referenceValue")

    def __init__(self, reference_value: str | None = None, /, **data: object) -> None:
        if reference_value is not None:
            data["reference_value"] = reference_value
        super().__init__(**data)

    @classmethod
    def from_parts(
        cls, project_id: str, database_id: str, document_path: str
    ) -> DocumentReference:
        return cls(
            f"projects/{project_id}/databases/{database_id}/documents/{document_path}"
        )

    def parse(self) -> ReferenceParts:
        return parse_reference(self.reference_value)

    @property
    def project_id(self) -> str:
        return self.parse().project_id

    @property
    def database_id(self) -> str:
        """Database id, e.g. ``(default)``."""
        return self.parse().database_id

    @property
    def path(self) -> str:
        """Everything after ``documents/``."""
        return self.parse().document_path

    @property
    def id(self) -> str:
        return self.path.split("/")[-1]

    @property
    def collection_path(self) -> str:
        """Path of the parent collection, including any ancestor documents."""
        return "/".join(self.path.split("/")[:-1])

    @property
    def collectionPath(self) -> str:  # noqa: N802
        return self.collection_path

    def __str__(self) -> str:
        return self.reference_value


__all__ = [
    "DocumentReference",
    "ReferenceParts",
    "parse_reference",
]
