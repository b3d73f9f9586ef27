"""Document shapes as exchanged with the REST API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .paths import _FieldMissing, get_field
from .reference import DocumentReference
from .values import FieldValue


class _DocumentBase(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    create_time: str | None = Field(default=None, alias="createTime")
    update_time: str | None = Field(default=None, alias="updateTime")


class Document(_DocumentBase):
    """A document: a name, its fields and the server timestamps."""

    name: str | None = None
    fields: dict[str, FieldValue] = Field(default_factory=dict)

    @property
    def reference(self) -> DocumentReference | None:
        if self.name is None:
            return None
        return DocumentReference(self.name)

    def get(self, field_path: str) -> FieldValue | _FieldMissing:
        """Look up a dotted field path such as ``address.city``."""
        return get_field(self.fields, field_path)


class DocumentResponse(_DocumentBase):
    """A document as returned by a read. ``fields`` is omitted for empty documents."""

    name: str
    fields: dict[str, FieldValue] | None = None

    @property
    def reference(self) -> DocumentReference:
        return DocumentReference(self.name)

    def to_document(self) -> Document:
        return Document(
            name=self.name,
            fields=self.fields or {},
            create_time=self.create_time,
            update_time=self.update_time,
        )


__all__ = ["Document", "DocumentResponse"]
