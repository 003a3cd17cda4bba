"""Content-type descriptions produced by schema introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gqlsource.domain.ports.hooks import BeforeChangeNode

MEDIA_ITEM_TYPE = "MediaItem"


@dataclass(slots=True, frozen=True)
class TypeInfo:
    """Names of one remote content type and its local node type."""

    singular_name: str
    plural_name: str
    nodes_type_name: str


@dataclass(slots=True, frozen=True)
class TypeSettings:
    exclude: bool = False
    lazy_nodes: bool = False
    before_change_node: BeforeChangeNode | None = None
    # replaces the introspected list queries when set
    node_list_queries: tuple[str, ...] | None = None


@dataclass(slots=True, frozen=True)
class QueryInfo:
    """Everything needed to pull one content type from the remote source."""

    type_info: TypeInfo
    node_list_queries: tuple[str, ...] = field(default_factory=tuple)
    settings: TypeSettings = field(default_factory=TypeSettings)
    node_query: str | None = None

    @property
    def list_queries(self) -> tuple[str, ...]:
        if self.settings.node_list_queries is not None:
            return self.settings.node_list_queries
        return self.node_list_queries
