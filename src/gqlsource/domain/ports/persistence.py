"""Persistence ports: node commits and run-to-run bookkeeping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gqlsource.domain.model import MaterializedNode


@runtime_checkable
class NodeStore(Protocol):
    """Commit target for materialized nodes. Failures are fatal to the run."""

    async def create_node(self, node: MaterializedNode) -> None: ...


@runtime_checkable
class KeyValueCache(Protocol):
    """Durable key/value entries that survive between runs."""

    def get(self, key: str) -> object | None: ...

    def set(self, key: str, value: object) -> None: ...


__all__ = ["KeyValueCache", "NodeStore"]
