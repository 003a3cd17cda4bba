"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import GraphQLExecutor, NodePage, PaginatedNodeFetcher
from .hooks import ActionType, BeforeChangeNode, HookResult, NodeChangeEvent
from .persistence import KeyValueCache, NodeStore
from .reporting import Activity, ActivityReporter

__all__ = [
    "ActionType",
    "Activity",
    "ActivityReporter",
    "BeforeChangeNode",
    "GraphQLExecutor",
    "HookResult",
    "KeyValueCache",
    "NodeChangeEvent",
    "NodePage",
    "NodeStore",
    "PaginatedNodeFetcher",
]
