"""Field value models mirroring the Firestore REST ``Value`` JSON encoding.

Every value is a single-key object whose key names its kind, for example
``{"stringValue": "LA"}`` or ``{"mapValue": {"fields": {...}}}``. Exactly
one tag key may be present; the union is closed over the ten kinds below.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any, ClassVar, TypeAlias

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from .reference import DocumentReference

_UNSET: Any = object()


class _FieldValueNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    tag: ClassVar[str]
    payload_field: ClassVar[str]

    def __init__(self, payload: Any = _UNSET, /, **data: Any) -> None:
        if payload is not _UNSET:
            data[self.payload_field] = payload
        super().__init__(**data)

    @property
    def payload(self) -> Any:
        return getattr(self, self.payload_field)


class StringValue(_FieldValueNode):
    tag: ClassVar[str] = "stringValue"
    payload_field: ClassVar[str] = "string_value"

    string_value: str = Field(alias="stringValue")


class IntegerValue(_FieldValueNode):
    """Whole number.

    The REST wire format sends integers as strings; those are accepted here
    and stored as ``int``.
    """

    tag: ClassVar[str] = "integerValue"
    payload_field: ClassVar[str] = "integer_value"

    integer_value: int = Field(alias="integerValue")


class DoubleValue(_FieldValueNode):
    tag: ClassVar[str] = "doubleValue"
    payload_field: ClassVar[str] = "double_value"

    double_value: float = Field(alias="doubleValue")


class BooleanValue(_FieldValueNode):
    tag: ClassVar[str] = "booleanValue"
    payload_field: ClassVar[str] = "boolean_value"

    boolean_value: bool = Field(alias="booleanValue")


class NullValue(_FieldValueNode):
    """Explicit null, distinct from an absent field."""

    tag: ClassVar[str] = "nullValue"
    payload_field: ClassVar[str] = "null_value"

    null_value: None = Field(default=None, alias="nullValue")


class TimestampValue(_FieldValueNode):
    """RFC3339 timestamp text. Not parsed into a ``datetime`` here."""

    tag: ClassVar[str] = "timestampValue"
    payload_field: ClassVar[str] = "timestamp_value"

    timestamp_value: str = Field(alias="timestampValue")


class GeoPoint(BaseModel):
    """A point on the surface of Earth.

    ``latitude`` should be within [-90.0, +90.0] and ``longitude`` within
    [-180.0, +180.0]. Neither range is enforced.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    latitude: float
    longitude: float


class GeoPointValue(_FieldValueNode):
    tag: ClassVar[str] = "geoPointValue"
    payload_field: ClassVar[str] = "geo_point_value"

    geo_point_value: GeoPoint = Field(alias="geoPointValue")


class MapPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    fields: dict[str, FieldValue] = Field(default_factory=dict)


class MapValue(_FieldValueNode):
    tag: ClassVar[str] = "mapValue"
    payload_field: ClassVar[str] = "map_value"

    map_value: MapPayload = Field(default_factory=MapPayload, alias="mapValue")

    @classmethod
    def of(cls, fields: Mapping[str, FieldValue]) -> MapValue:
        return cls(MapPayload(fields=dict(fields)))

    @property
    def fields(self) -> dict[str, FieldValue]:
        return self.map_value.fields


class ArrayPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    values: list[FieldValue] = Field(default_factory=list)


class ArrayValue(_FieldValueNode):
    tag: ClassVar[str] = "arrayValue"
    payload_field: ClassVar[str] = "array_value"

    array_value: ArrayPayload = Field(default_factory=ArrayPayload, alias="arrayValue")

    @classmethod
    def of(cls, values: Sequence[FieldValue]) -> ArrayValue:
        return cls(ArrayPayload(values=list(values)))

    @property
    def values(self) -> list[FieldValue]:
        return self.array_value.values


_VARIANTS: tuple[type[BaseModel], ...] = (
    StringValue,
    IntegerValue,
    DoubleValue,
    BooleanValue,
    NullValue,
    TimestampValue,
    GeoPointValue,
    DocumentReference,
    MapValue,
    ArrayValue,
)

TAG_KEYS: tuple[str, ...] = tuple(variant.tag for variant in _VARIANTS)  # type: ignore[attr-defined]

# Both the wire alias and the Python field name identify a tag.
_TAG_BY_KEY: dict[str, str] = {}
for _variant in _VARIANTS:
    for _name, _info in _variant.model_fields.items():
        _TAG_BY_KEY[_name] = _variant.tag  # type: ignore[attr-defined]
        if _info.alias is not None:
            _TAG_BY_KEY[_info.alias] = _variant.tag  # type: ignore[attr-defined]


def tags_present(obj: Mapping[str, Any]) -> set[str]:
    """Return the distinct tags named by the keys of a wire object."""

    return {_TAG_BY_KEY[key] for key in obj if key in _TAG_BY_KEY}


def tag_of(value: Any) -> str | None:
    """Return the variant tag of ``value``, or ``None`` if it has not exactly one."""

    if isinstance(value, BaseModel):
        return getattr(type(value), "tag", None)
    if isinstance(value, Mapping):
        tags = tags_present(value)
        if len(tags) == 1:
            return tags.pop()
    return None


FieldValue: TypeAlias = Annotated[
    Annotated[StringValue, Tag("stringValue")]
    | Annotated[IntegerValue, Tag("integerValue")]
    | Annotated[DoubleValue, Tag("doubleValue")]
    | Annotated[BooleanValue, Tag("booleanValue")]
    | Annotated[NullValue, Tag("nullValue")]
    | Annotated[TimestampValue, Tag("timestampValue")]
    | Annotated[GeoPointValue, Tag("geoPointValue")]
    | Annotated[DocumentReference, Tag("referenceValue")]
    | Annotated[MapValue, Tag("mapValue")]
    | Annotated[ArrayValue, Tag("arrayValue")],
    Discriminator(
        tag_of,
        custom_error_type="field_value_tag",
        custom_error_message="field value must carry exactly one recognized tag key",
    ),
]

MapPayload.model_rebuild()
ArrayPayload.model_rebuild()
MapValue.model_rebuild()
ArrayValue.model_rebuild()


__all__ = [
    "TAG_KEYS",
    "ArrayPayload",
    "ArrayValue",
    "BooleanValue",
    "DocumentReference",
    "DoubleValue",
    "FieldValue",
    "GeoPoint",
    "GeoPointValue",
    "IntegerValue",
    "MapPayload",
    "MapValue",
    "NullValue",
    "StringValue",
    "TimestampValue",
    "tag_of",
    "tags_present",
]
