"""
Firelit: literal Firestore document references and field values.

This package uses a src-layout. Import the package as `firelit`.
"""

from importlib.metadata import version

__version__ = version("firelit")

from .codec import (
    decode_fields,
    decode_value,
    encode_fields,
    encode_value,
    from_python,
    to_python,
)
from .config import FirestoreConfig
from .document import Document, DocumentResponse
from .errors import FieldValueDecodeError, FirelitError, MalformedReferenceError
from .paths import FIELD_MISSING, get_field
from .query import QueryOptions, WhereFilter
from .reference import DocumentReference, ReferenceParts, parse_reference
from .runtime import configure_logging, get_logger
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

__all__ = [
    "__version__",
    "FIELD_MISSING",
    "TAG_KEYS",
    "ArrayValue",
    "BooleanValue",
    "Document",
    "DocumentReference",
    "DocumentResponse",
    "DoubleValue",
    "FieldValue",
    "FieldValueDecodeError",
    "FirelitError",
    "FirestoreConfig",
    "GeoPoint",
    "GeoPointValue",
    "IntegerValue",
    "MalformedReferenceError",
    "MapValue",
    "NullValue",
    "QueryOptions",
    "ReferenceParts",
    "StringValue",
    "TimestampValue",
    "WhereFilter",
    "configure_logging",
    "decode_fields",
    "decode_value",
    "encode_fields",
    "encode_value",
    "from_python",
    "get_field",
    "get_logger",
    "parse_reference",
    "to_python",
]
