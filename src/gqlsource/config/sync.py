"""Ingestion defaults and their environment overrides."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, env_int

DEFAULT_BATCH_SIZE = 50
DEFAULT_PAGE_SIZE = 100
DEFAULT_CREATE_NODES_CONCURRENCY = 2


@dataclass(frozen=True, slots=True)
class IngestSettings:
    """Knobs for one ingestion run.

    ``batch_size`` bounds how many content types are fetched at once.
    ``create_nodes_concurrency`` bounds node materialization; each unit may fire
    its own remote calls through hooks, so keep it low.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    page_size: int = DEFAULT_PAGE_SIZE
    create_nodes_concurrency: int = DEFAULT_CREATE_NODES_CONCURRENCY
    verbose: bool = False


def get_ingest_settings() -> IngestSettings:
    return IngestSettings(
        batch_size=env_int("GQLSOURCE_CONCURRENT_DOWNLOAD", DEFAULT_BATCH_SIZE),
        create_nodes_concurrency=env_int(
            "GQLSOURCE_CREATE_NODES_CONCURRENCY", DEFAULT_CREATE_NODES_CONCURRENCY
        ),
        verbose=env_flag("GQLSOURCE_VERBOSE"),
    )
