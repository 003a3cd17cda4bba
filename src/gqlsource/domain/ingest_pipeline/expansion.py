"""Second pass: fetch and materialize media that other nodes reference."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from gqlsource.config.sync import DEFAULT_CREATE_NODES_CONCURRENCY

from .concurrency import run_bounded
from .state import CreatedNodeLedger

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from gqlsource.domain.catalog import QueryCatalog
    from gqlsource.domain.model import QueryInfo
    from gqlsource.domain.ports import Activity, PaginatedNodeFetcher

    from .materialization import NodeMaterializer
    from .state import IngestState

log = getLogger(__name__)


@dataclass(slots=True)
class ReferenceExpander:
    """Pull referenced media one id at a time instead of listing all of it.

    Most media on a site is unused, so one fetch per reference is cheaper than a
    full listing. Media records are leaves: they are not scanned for references.
    """

    catalog: QueryCatalog
    fetcher: PaginatedNodeFetcher
    materializer: NodeMaterializer
    concurrency: int = DEFAULT_CREATE_NODES_CONCURRENCY

    async def expand_references(
        self,
        referenced_ids: Iterable[str],
        *,
        state: IngestState,
        already_committed: Collection[str] = (),
        activity: Activity | None = None,
    ) -> tuple[str, ...]:
        """Return the ids committed by this pass, in commit order."""

        pending = sorted(set(referenced_ids) - set(already_committed))
        if not self.catalog.resolves_referenced_media() or not pending:
            return ()

        media = self.catalog.media_query_info()
        if media is None or media.node_query is None:
            raise ValueError(
                f"Cannot fetch referenced {self.catalog.media_type_name} nodes: "
                "no single-node query in the catalog"
            )

        log.info("Fetching %s referenced %s nodes", len(pending), media.type_info.plural_name)
        ledger = CreatedNodeLedger()
        jobs = [
            partial(
                self._expand_one,
                media,
                node_id,
                ledger=ledger,
                state=state,
                activity=activity,
            )
            for node_id in pending
        ]
        await run_bounded(jobs, limit=self.concurrency)
        return ledger.ids

    async def _expand_one(
        self,
        media: QueryInfo,
        node_id: str,
        *,
        ledger: CreatedNodeLedger,
        state: IngestState,
        activity: Activity | None,
    ) -> None:
        record = await self.fetcher.fetch_node(query_info=media, node_id=node_id)
        if record is None:
            log.warning(
                "Referenced %s %s no longer exists on the remote source",
                media.type_info.singular_name,
                node_id,
            )
            return
        await self.materializer.materialize_record(
            record,
            ledger=ledger,
            state=state,
            activity=activity,
            scan_references=False,
        )
