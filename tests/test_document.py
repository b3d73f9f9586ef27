"""Tests for document shapes."""

from firelit import (
    FIELD_MISSING,
    Document,
    DocumentReference,
    DocumentResponse,
    IntegerValue,
    MapValue,
    StringValue,
)


def test_document_parses_wire_payload() -> None:
    doc = Document.model_validate(
        {
            "name": "projects/p/databases/(default)/documents/cities/LA",
            "fields": {
                "name": {"stringValue": "Los Angeles"},
                "stats": {"mapValue": {"fields": {"pop": {"integerValue": "3"}}}},
            },
            "createTime": "2024-01-01T00:00:00Z",
            "updateTime": "2024-01-02T00:00:00Z",
        }
    )

    assert doc.fields["name"] == StringValue("Los Angeles")
    assert doc.get("stats.pop") == IntegerValue(3)
    assert doc.get("stats.area") is FIELD_MISSING
    assert doc.create_time == "2024-01-01T00:00:00Z"
    assert doc.reference == DocumentReference(
        "projects/p/databases/(default)/documents/cities/LA"
    )
    assert doc.reference is not None and doc.reference.id == "LA"


def test_document_without_name_has_no_reference() -> None:
    doc = Document(fields={"a": StringValue("b")})

    assert doc.reference is None
    assert doc.model_dump(by_alias=True, exclude_none=True) == {
        "fields": {"a": {"stringValue": "b"}}
    }


def test_response_without_fields() -> None:
    response = DocumentResponse.model_validate(
        {"name": "projects/p/databases/d/documents/users/u1/posts/p2"}
    )

    assert response.fields is None
    assert response.reference.collection_path == "users/u1/posts"
    document = response.to_document()
    assert document.fields == {}
    assert document.name == response.name


def test_response_to_document_keeps_fields() -> None:
    response = DocumentResponse(
        name="projects/p/databases/d/documents/c/i",
        fields={"m": MapValue()},
        updateTime="2024-01-02T00:00:00Z",
    )

    document = response.to_document()
    assert document.fields == {"m": MapValue()}
    assert document.update_time == "2024-01-02T00:00:00Z"
