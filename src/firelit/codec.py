"""Encode and decode field values to and from the REST wire JSON."""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import FieldValueDecodeError
from .reference import DocumentReference
from .runtime.logging import get_logger
from .values import (
    TAG_KEYS,
    ArrayValue,
    BooleanValue,
    DoubleValue,
    FieldValue,
    GeoPoint,
    GeoPointValue,
    IntegerValue,
    MapValue,
    NullValue,
    StringValue,
    TimestampValue,
)

_FIELD_VALUE_ADAPTER: TypeAdapter[FieldValue] = TypeAdapter(FieldValue)
_FIELDS_ADAPTER: TypeAdapter[dict[str, FieldValue]] = TypeAdapter(
    dict[str, FieldValue]
)
_WIRE_TAGS = frozenset(TAG_KEYS)


def _check_wire(obj: Any, location: str = "") -> None:
    """Require exactly one wire tag key per node, descending into maps and arrays.

    Only the wire aliases in ``TAG_KEYS`` count; Python field names such as
    ``string_value`` are rejected like any other unknown key.
    """

    at = f" at {location!r}" if location else ""
    if not isinstance(obj, Mapping):
        raise FieldValueDecodeError(
            f"field value{at} must be a JSON object, got {type(obj).__name__}"
        )
    if len(obj) != 1 or next(iter(obj)) not in _WIRE_TAGS:
        found = ", ".join(sorted(map(str, obj))) or "none"
        raise FieldValueDecodeError(
            f"field value{at} must carry exactly one of {', '.join(TAG_KEYS)}; "
            f"found {found}"
        )

    tag, payload = next(iter(obj.items()))
    prefix = f"{location}." if location else ""
    if tag == "mapValue" and isinstance(payload, Mapping):
        fields = payload.get("fields") or {}
        if isinstance(fields, Mapping):
            for name, child in fields.items():
                _check_wire(child, f"{prefix}{name}")
    elif tag == "arrayValue" and isinstance(payload, Mapping):
        values = payload.get("values") or []
        if isinstance(values, list):
            for index, child in enumerate(values):
                _check_wire(child, f"{prefix}{index}")


def decode_value(obj: Any) -> FieldValue:
    """Decode one wire object such as ``{"stringValue": "x"}``.

    Raises ``FieldValueDecodeError`` if the object, or any nested map entry
    or array element, does not carry exactly one recognized tag key.
    """

    _check_wire(obj)
    try:
        return _FIELD_VALUE_ADAPTER.validate_python(obj)
    except ValidationError as exc:
        get_logger().debug("codec: rejected field value %r", obj)
        raise FieldValueDecodeError(f"invalid field value: {exc}") from exc


def decode_fields(fields: Mapping[str, Any] | None) -> dict[str, FieldValue]:
    """Decode a document ``fields`` object. ``None`` decodes to an empty dict."""

    if fields is None:
        return {}
    if not isinstance(fields, Mapping):
        raise FieldValueDecodeError(
            f"document fields must be a JSON object, got {type(fields).__name__}"
        )
    for name, obj in fields.items():
        try:
            _check_wire(obj)
        except FieldValueDecodeError as exc:
            raise FieldValueDecodeError(f"field {name!r}: {exc}") from exc
    try:
        return _FIELDS_ADAPTER.validate_python(dict(fields))
    except ValidationError as exc:
        get_logger().debug("codec: rejected document fields %r", fields)
        raise FieldValueDecodeError(f"invalid document fields: {exc}") from exc


def encode_value(
    value: FieldValue, *, integers_as_strings: bool = False
) -> dict[str, Any]:
    """Encode ``value`` to its single-key wire object.

    Integers are emitted as JSON numbers unless ``integers_as_strings`` is set,
    which produces the string form the REST API itself sends.
    """

    data = _FIELD_VALUE_ADAPTER.dump_python(value, by_alias=True)
    if integers_as_strings:
        return _stringify_integers(data)
    return data


def encode_fields(
    fields: Mapping[str, FieldValue], *, integers_as_strings: bool = False
) -> dict[str, Any]:
    return {
        name: encode_value(value, integers_as_strings=integers_as_strings)
        for name, value in fields.items()
    }


def _stringify_integers(data: Any) -> Any:
    match data:
        case {"integerValue": int() as number}:
            return {"integerValue": str(number)}
        case {"mapValue": {"fields": dict() as fields}}:
            return {
                "mapValue": {
                    "fields": {k: _stringify_integers(v) for k, v in fields.items()}
                }
            }
        case {"arrayValue": {"values": list() as values}}:
            return {"arrayValue": {"values": [_stringify_integers(v) for v in values]}}
        case _:
            return data


def format_timestamp(value: datetime.datetime) -> str:
    """Format ``value`` as RFC3339 text in UTC; naive datetimes are taken as UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def parse_timestamp(text: str) -> datetime.datetime:
    return datetime.datetime.fromisoformat(text.replace("Z", "+00:00"))


def from_python(obj: Any) -> FieldValue:
    """Build a field value tree from plain Python data."""

    match obj:
        case None:
            return NullValue()
        case bool():
            return BooleanValue(obj)
        case int():
            return IntegerValue(obj)
        case float():
            return DoubleValue(obj)
        case str():
            return StringValue(obj)
        case datetime.datetime():
            return TimestampValue(format_timestamp(obj))
        case DocumentReference():
            return obj
        case GeoPoint():
            return GeoPointValue(obj)
        case Mapping():
            fields: dict[str, FieldValue] = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise TypeError(f"map keys must be strings, got {type(key)}")
                fields[key] = from_python(item)
            return MapValue.of(fields)
        case list() | tuple():
            return ArrayValue.of([from_python(item) for item in obj])
        case _:
            raise TypeError(f"Unsupported field value type: {type(obj)}")


def to_python(value: FieldValue, *, parse_timestamps: bool = False) -> Any:
    """Convert a field value tree back to plain Python data.

    References and geo points come back as their models. Timestamps stay as
    text unless ``parse_timestamps`` is set.
    """

    match value:
        case NullValue():
            return None
        case TimestampValue():
            if parse_timestamps:
                return parse_timestamp(value.timestamp_value)
            return value.timestamp_value
        case GeoPointValue():
            return value.geo_point_value
        case DocumentReference():
            return value
        case MapValue():
            return {
                k: to_python(v, parse_timestamps=parse_timestamps)
                for k, v in value.fields.items()
            }
        case ArrayValue():
            return [to_python(v, parse_timestamps=parse_timestamps) for v in value.values]
        case StringValue() | IntegerValue() | DoubleValue() | BooleanValue():
            return value.payload
        case _:
            raise TypeError(f"Not a field value: {type(value)}")


__all__ = [
    "decode_fields",
    "decode_value",
    "encode_fields",
    "encode_value",
    "format_timestamp",
    "from_python",
    "parse_timestamp",
    "to_python",
]
