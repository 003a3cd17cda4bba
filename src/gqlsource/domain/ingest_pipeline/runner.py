"""Top-level ingestion run: orchestrate, materialize, expand, persist."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from gqlsource.config.source import DEFAULT_TYPE_PREFIX
from gqlsource.config.sync import IngestSettings

from .expansion import ReferenceExpander
from .materialization import NodeMaterializer
from .orchestrator import ContentTypeOrchestrator
from .references import EmbeddedMediaReferenceExtractor
from .state import IngestState

if TYPE_CHECKING:
    from gqlsource.domain.catalog import QueryCatalog
    from gqlsource.domain.ports import (
        ActivityReporter,
        GraphQLExecutor,
        KeyValueCache,
        NodeStore,
        PaginatedNodeFetcher,
    )

    from .references import ReferenceExtractor

log = getLogger(__name__)

CREATED_NODE_IDS: Final[str] = "CREATED_NODE_IDS"


@dataclass(slots=True, frozen=True)
class IngestionResult:
    """Outcome of one ingestion run."""

    created_node_ids: tuple[str, ...]
    fetched: int
    content_types: int
    expanded_node_ids: tuple[str, ...]
    side_effect_nodes: int


def load_created_node_ids(cache: KeyValueCache) -> list[str]:
    """Return the node ids persisted by the previous successful run."""

    value = cache.get(CREATED_NODE_IDS)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"Unexpected {CREATED_NODE_IDS} cache entry: {type(value).__name__}")
    return [str(node_id) for node_id in value]


async def run_ingestion(
    *,
    catalog: QueryCatalog,
    fetcher: PaginatedNodeFetcher,
    store: NodeStore,
    cache: KeyValueCache,
    reporter: ActivityReporter,
    fetch_graphql: GraphQLExecutor,
    settings: IngestSettings | None = None,
    type_prefix: str | None = None,
    reference_extractor: ReferenceExtractor | None = None,
) -> IngestionResult:
    """Run one ingestion and persist the created node ids for the next run.

    The three stages run strictly one after the other: reference discovery is
    only complete once every non-media node has been materialized.
    """

    active_settings = settings or IngestSettings()
    state = IngestState()
    previous = load_created_node_ids(cache)
    log.info("Previous run created %s nodes", len(previous))

    orchestrator = ContentTypeOrchestrator(
        catalog=catalog,
        fetcher=fetcher,
        reporter=reporter,
        batch_size=active_settings.batch_size,
        page_size=active_settings.page_size,
        verbose=active_settings.verbose,
    )
    materializer = NodeMaterializer(
        catalog=catalog,
        store=store,
        fetch_graphql=fetch_graphql,
        concurrency=active_settings.create_nodes_concurrency,
        type_prefix=type_prefix or DEFAULT_TYPE_PREFIX,
        reference_extractor=reference_extractor or EmbeddedMediaReferenceExtractor(),
    )
    expander = ReferenceExpander(
        catalog=catalog,
        fetcher=fetcher,
        materializer=materializer,
        concurrency=active_settings.create_nodes_concurrency,
    )

    fetching = reporter.activity("fetching nodes")
    fetching.start()
    try:
        groups = await orchestrator.fetch_all_content_types(state=state, progress=fetching)

        creating = reporter.activity("creating nodes")
        creating.start()
        try:
            result = await materializer.materialize(groups, state=state, activity=creating)
            expanded = await expander.expand_references(
                result.referenced_entity_ids,
                state=state,
                already_committed=set(result.committed_node_ids),
                activity=creating,
            )
        finally:
            creating.end()
    finally:
        fetching.end()
    state.created.extend(expanded)

    created = state.created.ids
    cache.set(CREATED_NODE_IDS, list(created))
    log.info(
        "Ingestion finished: fetched=%s, created=%s, referenced=%s, side_effects=%s",
        state.fetched_count,
        len(created),
        len(expanded),
        len(state.side_effect_node_ids),
    )

    return IngestionResult(
        created_node_ids=created,
        fetched=state.fetched_count,
        content_types=len(groups),
        expanded_node_ids=expanded,
        side_effect_nodes=len(state.side_effect_node_ids),
    )
