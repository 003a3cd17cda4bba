"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from gqlsource.adapters.graphql import GraphQLClient, GraphQLNodeFetcher
from gqlsource.adapters.reporting import LoggingActivityReporter
from gqlsource.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from gqlsource.config import get_ingest_settings, get_source_config
from gqlsource.domain.ingest_pipeline import load_created_node_ids, run_ingestion

if TYPE_CHECKING:
    from gqlsource.adapters.http_resilience import ResilientClient
    from gqlsource.config import IngestSettings, ResilienceConfig, SourceConfig
    from gqlsource.domain.catalog import QueryCatalog
    from gqlsource.domain.ingest_pipeline import IngestionResult
    from gqlsource.domain.ports import ActivityReporter

UnitOfWorkFactory = Callable[[], SqlAlchemyUnitOfWork]
ClientFactory = Callable[["ResilienceConfig"], "ResilientClient"]

log = getLogger(__name__)


def ingest_content(
    *,
    catalog: QueryCatalog,
    source_config: SourceConfig | None = None,
    settings: IngestSettings | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    client_factory: ClientFactory | None = None,
    reporter: ActivityReporter | None = None,
) -> IngestionResult:
    """Run one ingestion against the configured source and commit it atomically."""

    if not is_started():
        startup()
    effective_source = source_config or get_source_config()
    effective_settings = settings or get_ingest_settings()
    effective_uow = unit_of_work_factory or SqlAlchemyUnitOfWork
    effective_reporter = reporter or LoggingActivityReporter()
    log.info(
        "Starting ingestion from %s: batch_size=%s, create_nodes_concurrency=%s",
        effective_source.url,
        effective_settings.batch_size,
        effective_settings.create_nodes_concurrency,
    )

    with effective_uow() as uow:
        result = asyncio.run(
            _ingest_async(
                catalog=catalog,
                source_config=effective_source,
                settings=effective_settings,
                uow=uow,
                client_factory=client_factory,
                reporter=effective_reporter,
            )
        )
        uow.commit()
        written, unchanged = uow.nodes.written, uow.nodes.unchanged

    log.info(
        "Finished ingestion: created=%s, written=%s, unchanged=%s, referenced=%s",
        len(result.created_node_ids),
        written,
        unchanged,
        len(result.expanded_node_ids),
    )
    return result


async def _ingest_async(
    *,
    catalog: QueryCatalog,
    source_config: SourceConfig,
    settings: IngestSettings,
    uow: SqlAlchemyUnitOfWork,
    client_factory: ClientFactory | None,
    reporter: ActivityReporter,
) -> IngestionResult:
    async with GraphQLClient(config=source_config, client_factory=client_factory) as client:
        return await run_ingestion(
            catalog=catalog,
            fetcher=GraphQLNodeFetcher(client),
            store=uow.nodes,
            cache=uow.cache,
            reporter=reporter,
            fetch_graphql=client.execute,
            settings=settings,
            type_prefix=source_config.type_prefix,
        )


def created_node_ids_from_last_run(
    *, unit_of_work_factory: UnitOfWorkFactory | None = None
) -> list[str]:
    if not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyUnitOfWork
    with effective_uow() as uow:
        return load_created_node_ids(uow.cache)
