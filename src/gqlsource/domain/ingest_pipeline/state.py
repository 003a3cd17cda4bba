"""Run-scoped accumulators shared by concurrently running work units.

Units only ever append or add, and nothing reads these containers until the
owning pass has drained, so plain containers suffice under asyncio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(slots=True)
class CreatedNodeLedger:
    """Every node id committed in this run, in commit order. Duplicates are kept."""

    _ids: list[str] = field(default_factory=list[str])

    def append(self, node_id: str) -> None:
        self._ids.append(node_id)

    def extend(self, node_ids: Iterable[str]) -> None:
        self._ids.extend(node_ids)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)


@dataclass(slots=True)
class ReferencedEntityIds:
    """Foreign entity ids found inside other records."""

    _ids: set[str] = field(default_factory=set[str])

    def add_all(self, node_ids: Iterable[str]) -> None:
        self._ids.update(node_ids)

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)


@dataclass(slots=True)
class IngestState:
    """Mutable state for one ingestion run, owned by the driver."""

    created: CreatedNodeLedger = field(default_factory=CreatedNodeLedger)
    referenced: ReferencedEntityIds = field(default_factory=ReferencedEntityIds)
    side_effect_node_ids: list[str] = field(default_factory=list[str])
    fetched_count: int = 0

    def record_fetched(self, count: int) -> int:
        self.fetched_count += count
        return self.fetched_count

    def note_side_effects(self, node_ids: Iterable[str]) -> int:
        self.side_effect_node_ids.extend(node_ids)
        return len(self.side_effect_node_ids)
