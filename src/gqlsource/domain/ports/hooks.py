"""Per-type side-effect hook invoked before a node is committed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from gqlsource.domain.model import MaterializedNode, TypeSettings

    from .fetching import GraphQLExecutor
    from .persistence import NodeStore


class ActionType(StrEnum):
    CREATE_ALL = "CREATE_ALL"


@dataclass(slots=True, frozen=True)
class NodeChangeEvent:
    """What a hook gets to work with.

    ``actions`` lets a hook commit related nodes itself, and ``fetch_graphql``
    lets it query the remote source directly.
    """

    action_type: ActionType
    remote_node: MaterializedNode
    type_name: str
    type_settings: TypeSettings
    actions: NodeStore
    fetch_graphql: GraphQLExecutor
    build_type_name: Callable[[str], str]


@dataclass(slots=True, frozen=True)
class HookResult:
    additional_node_ids: tuple[str, ...] = ()


@runtime_checkable
class BeforeChangeNode(Protocol):
    """Hook capability. Awaited once per record, and never assumed idempotent."""

    async def __call__(self, event: NodeChangeEvent) -> HookResult | None: ...


__all__ = ["ActionType", "BeforeChangeNode", "HookResult", "NodeChangeEvent"]
