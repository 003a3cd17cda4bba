"""Public interface for the GraphQL source adapter."""

from __future__ import annotations

from .client import GraphQLAPIError, GraphQLClient
from .fetcher import GraphQLNodeFetcher, normalize_record
from .schema import GraphQLResponse, NodeConnection, PageInfo

__all__ = [
    "GraphQLAPIError",
    "GraphQLClient",
    "GraphQLNodeFetcher",
    "GraphQLResponse",
    "NodeConnection",
    "PageInfo",
    "normalize_record",
]
