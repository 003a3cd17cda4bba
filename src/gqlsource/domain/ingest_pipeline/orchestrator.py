"""Fetch every eligible content type from the remote source, batch by batch."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from itertools import batched
from logging import getLogger
from typing import TYPE_CHECKING

from gqlsource.config.sync import DEFAULT_BATCH_SIZE, DEFAULT_PAGE_SIZE
from gqlsource.domain.model import ContentNodeGroup

from .concurrency import run_bounded

if TYPE_CHECKING:
    from gqlsource.domain.catalog import QueryCatalog
    from gqlsource.domain.model import QueryInfo, RawRecord
    from gqlsource.domain.ports import Activity, ActivityReporter, PaginatedNodeFetcher

    from .state import IngestState

log = getLogger(__name__)


@dataclass(slots=True)
class ContentTypeOrchestrator:
    """Decide which content types to pull and pull them.

    Types are fetched in batches of ``batch_size``; a batch fully joins before
    the next one starts, so at most ``batch_size`` types are in flight. Pages of
    a single type are always fetched one after the other.
    """

    catalog: QueryCatalog
    fetcher: PaginatedNodeFetcher
    reporter: ActivityReporter
    batch_size: int = DEFAULT_BATCH_SIZE
    page_size: int = DEFAULT_PAGE_SIZE
    verbose: bool = False

    def eligible_query_infos(self) -> list[QueryInfo]:
        eligible: list[QueryInfo] = []
        for query_info in self.catalog.content_type_query_infos():
            if query_info.settings.lazy_nodes:
                # resolved on demand elsewhere
                continue
            if self.catalog.is_media(query_info):
                # only referenced media is fetched, once every other node is scanned
                continue
            eligible.append(query_info)
        return eligible

    async def fetch_all_content_types(
        self,
        *,
        state: IngestState,
        progress: Activity | None = None,
    ) -> list[ContentNodeGroup]:
        """Return one group per content type that yielded at least one record."""

        query_infos = self.eligible_query_infos()
        log.info(
            "Fetching %s content types in batches of %s", len(query_infos), self.batch_size
        )

        groups: list[ContentNodeGroup] = []
        for batch in batched(query_infos, self.batch_size):
            jobs = [
                partial(self._collect, info, groups=groups, state=state, progress=progress)
                for info in batch
            ]
            await run_bounded(jobs, limit=len(jobs))
        return groups

    async def fetch_content_type(
        self,
        query_info: QueryInfo,
        *,
        state: IngestState,
        progress: Activity | None = None,
    ) -> ContentNodeGroup | None:
        type_info = query_info.type_info
        activity = self.reporter.activity(type_info.nodes_type_name) if self.verbose else None
        if activity is not None:
            activity.start()

        records: list[RawRecord] = []
        # normally one query, more when the type settings supply their own
        for query in query_info.list_queries:
            records.extend(await self._paginate(query_info, query, state=state, progress=progress))

        if activity is not None:
            activity.end()

        if not records:
            log.debug("No %s found on the remote source", type_info.plural_name)
            return None

        log.debug("Fetched %s %s", len(records), type_info.plural_name)
        return ContentNodeGroup(
            singular=type_info.singular_name,
            plural=type_info.plural_name,
            all_nodes_of_content_type=records,
        )

    async def _collect(
        self,
        query_info: QueryInfo,
        *,
        groups: list[ContentNodeGroup],
        state: IngestState,
        progress: Activity | None,
    ) -> None:
        group = await self.fetch_content_type(query_info, state=state, progress=progress)
        if group is not None:
            groups.append(group)

    async def _paginate(
        self,
        query_info: QueryInfo,
        query: str,
        *,
        state: IngestState,
        progress: Activity | None,
    ) -> list[RawRecord]:
        records: list[RawRecord] = []
        cursor: str | None = None
        while True:
            page = await self.fetcher.fetch_page(
                type_info=query_info.type_info,
                query=query,
                after=cursor,
                first=self.page_size,
            )
            records.extend(page.records)
            total = state.record_fetched(len(page.records))
            if progress is not None:
                progress.set_status(f"{total} total")

            if page.next_cursor is None:
                return records
            cursor = page.next_cursor
