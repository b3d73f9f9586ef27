"""Query option shapes. Nothing here executes a query."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WhereFilter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    op: str
    value: Any


class QueryOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    where: list[WhereFilter] | None = None
    order_by: str | None = Field(default=None, alias="orderBy")
    order_direction: str | None = Field(default=None, alias="orderDirection")
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)


__all__ = ["QueryOptions", "WhereFilter"]
