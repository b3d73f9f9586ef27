import pytest
from pydantic import ValidationError

from firelit import QueryOptions, WhereFilter


def test_query_options_accept_wire_names() -> None:
    options = QueryOptions.model_validate(
        {
            "where": [{"field": "state", "op": "==", "value": "CA"}],
            "orderBy": "population",
            "orderDirection": "desc",
            "limit": 10,
        }
    )

    assert options.where == [WhereFilter(field="state", op="==", value="CA")]
    assert options.order_by == "population"
    assert options.order_direction == "desc"
    assert options.offset is None
    assert options.model_dump(by_alias=True, exclude_none=True)["orderBy"] == (
        "population"
    )


def test_query_options_reject_negative_limit() -> None:
    with pytest.raises(ValidationError):
        QueryOptions(limit=-1)


def test_query_options_reject_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        QueryOptions.model_validate({"startAt": 3})
