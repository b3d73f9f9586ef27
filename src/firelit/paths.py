"""Dotted field path traversal over field value trees."""

from __future__ import annotations

from collections.abc import Mapping

from .values import ArrayValue, FieldValue, MapValue


class _FieldMissing:
    """Sentinel for missing field paths."""

    def __repr__(self) -> str:
        return "FIELD_MISSING"


FIELD_MISSING: _FieldMissing = _FieldMissing()


def get_field(
    fields: Mapping[str, FieldValue], path: str
) -> FieldValue | _FieldMissing:
    """Resolve a dot-separated path through nested map and array values.

    The first segment names a top-level field. Later segments descend into
    ``MapValue`` entries by key or ``ArrayValue`` elements by numeric index.
    Returns ``FIELD_MISSING`` if any path segment is unavailable.
    """

    if not path:
        return FIELD_MISSING

    head, *rest = path.split(".")
    if head not in fields:
        return FIELD_MISSING
    current: FieldValue = fields[head]

    for segment in rest:
        if isinstance(current, MapValue):
            if segment not in current.fields:
                return FIELD_MISSING
            current = current.fields[segment]
            continue

        if isinstance(current, ArrayValue):
            if not segment.isdigit():
                return FIELD_MISSING
            index = int(segment)
            if index >= len(current.values):
                return FIELD_MISSING
            current = current.values[index]
            continue

        return FIELD_MISSING

    return current


__all__ = ["FIELD_MISSING", "get_field"]
