"""Tests for field path traversal helpers."""

from firelit import FIELD_MISSING, ArrayValue, IntegerValue, MapValue, StringValue, get_field


def _fields() -> dict:
    return {
        "address": MapValue.of(
            {"city": StringValue("LA"), "zip": IntegerValue(90001)}
        ),
        "scores": ArrayValue.of([IntegerValue(10), MapValue.of({"n": IntegerValue(2)})]),
        "name": StringValue("x"),
    }


def test_get_field_walks_map_path() -> None:
    """Resolver should follow dot-separated keys through nested maps."""

    assert get_field(_fields(), "address.city") == StringValue("LA")
    assert get_field(_fields(), "name") == StringValue("x")


def test_get_field_walks_array_path() -> None:
    """Resolver should index arrays with numeric segments."""

    assert get_field(_fields(), "scores.0") == IntegerValue(10)
    assert get_field(_fields(), "scores.1.n") == IntegerValue(2)


def test_get_field_returns_missing_for_absent_segments() -> None:
    assert get_field(_fields(), "address.country") is FIELD_MISSING
    assert get_field(_fields(), "name.first") is FIELD_MISSING
    assert get_field(_fields(), "nope") is FIELD_MISSING
    assert get_field(_fields(), "") is FIELD_MISSING


def test_get_field_returns_missing_for_invalid_index() -> None:
    assert get_field(_fields(), "scores.two") is FIELD_MISSING
    assert get_field(_fields(), "scores.10") is FIELD_MISSING
