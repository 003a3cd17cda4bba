"""Ports for fetching content from the remote GraphQL source."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gqlsource.domain.model import QueryInfo, RawRecord, TypeInfo


@dataclass(slots=True)
class NodePage:
    """One page of records. ``next_cursor`` is ``None`` on the last page."""

    records: list[RawRecord] = field(default_factory=list)
    next_cursor: str | None = None


@runtime_checkable
class PaginatedNodeFetcher(Protocol):
    """Remote access used by the orchestrator and the expansion pass.

    Retries and rate limiting live behind this port.
    """

    async def fetch_page(
        self,
        *,
        type_info: TypeInfo,
        query: str,
        after: str | None,
        first: int,
    ) -> NodePage: ...

    async def fetch_node(self, *, query_info: QueryInfo, node_id: str) -> RawRecord | None: ...


class GraphQLExecutor(Protocol):
    """Run an arbitrary query against the remote source and return its ``data``."""

    async def __call__(
        self, query: str, variables: Mapping[str, object] | None = None
    ) -> dict[str, Any]: ...


__all__ = ["GraphQLExecutor", "NodePage", "PaginatedNodeFetcher"]
