"""Pydantic models describing GraphQL response envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ErrorLocation(GraphQLBaseModel):
    line: int
    column: int


class GraphQLErrorPayload(GraphQLBaseModel):
    message: str
    path: list[str | int] | None = None
    locations: list[ErrorLocation] | None = None


class GraphQLResponse(GraphQLBaseModel):
    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorPayload] = Field(default_factory=list)


class PageInfo(GraphQLBaseModel):
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    end_cursor: str | None = Field(default=None, alias="endCursor")


class NodeConnection(GraphQLBaseModel):
    """A relay-style list field: ``{ nodes: [...], pageInfo: {...} }``."""

    nodes: list[dict[str, Any] | None] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")

    @property
    def next_cursor(self) -> str | None:
        if not self.page_info.has_next_page:
            return None
        return self.page_info.end_cursor
