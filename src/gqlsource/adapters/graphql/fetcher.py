"""Paginated node fetching on top of ``GraphQLClient``."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from gqlsource.domain.ports.fetching import NodePage

from .client import GraphQLAPIError, GraphQLClient
from .schema import NodeConnection

if TYPE_CHECKING:
    from gqlsource.domain.model import QueryInfo, RawRecord, TypeInfo

log = getLogger(__name__)


def normalize_record(raw: dict[str, Any]) -> RawRecord:
    """Expose ``__typename`` as the ``type`` discriminator."""

    record = dict(raw)
    typename = record.pop("__typename", None)
    if "type" not in record and typename is not None:
        record["type"] = typename
    return record


class GraphQLNodeFetcher:
    """Fetch list pages and single nodes.

    List queries take ``$first`` and ``$after`` and select
    ``<pluralName> { nodes { ... } pageInfo { hasNextPage endCursor } }``.
    Single-node queries take ``$id`` and select ``<singularName>``.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self._client = client

    async def fetch_page(
        self,
        *,
        type_info: TypeInfo,
        query: str,
        after: str | None,
        first: int,
    ) -> NodePage:
        data = await self._client.execute(query, {"first": first, "after": after})
        payload = data.get(type_info.plural_name)
        if payload is None:
            raise GraphQLAPIError(f"Response is missing the {type_info.plural_name} field")

        try:
            connection = NodeConnection.model_validate(payload)
        except ValidationError as exc:
            raise GraphQLAPIError(
                f"Unexpected {type_info.plural_name} connection payload"
            ) from exc

        # nodes the viewer may not read come back as null
        records = [normalize_record(node) for node in connection.nodes if node is not None]
        log.debug(
            "Fetched page of %s %s (after=%s)", len(records), type_info.plural_name, after
        )
        return NodePage(records=records, next_cursor=connection.next_cursor)

    async def fetch_node(self, *, query_info: QueryInfo, node_id: str) -> RawRecord | None:
        if query_info.node_query is None:
            raise GraphQLAPIError(
                f"No single-node query configured for {query_info.type_info.nodes_type_name}"
            )
        data = await self._client.execute(query_info.node_query, {"id": node_id})
        node = data.get(query_info.type_info.singular_name)
        if node is None:
            return None
        if not isinstance(node, dict):
            raise GraphQLAPIError(
                f"Unexpected {query_info.type_info.singular_name} payload for {node_id}"
            )
        return normalize_record(node)
