"""Turn fetched remote records into committed nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from gqlsource.config.source import DEFAULT_TYPE_PREFIX
from gqlsource.config.sync import DEFAULT_CREATE_NODES_CONCURRENCY
from gqlsource.domain.model import MaterializedNode, NodeInternal, record_id, record_type
from gqlsource.domain.ports.hooks import ActionType, NodeChangeEvent

from .concurrency import run_bounded
from .digest import build_type_name, create_content_digest, url_to_path
from .errors import NodeCommitError, SideEffectHookError
from .references import EmbeddedMediaReferenceExtractor, ReferenceExtractor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gqlsource.domain.catalog import QueryCatalog
    from gqlsource.domain.model import ContentNodeGroup, RawRecord
    from gqlsource.domain.ports import Activity, GraphQLExecutor, NodeStore

    from .state import CreatedNodeLedger, IngestState

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MaterializationResult:
    committed_node_ids: tuple[str, ...]
    referenced_entity_ids: frozenset[str]


@dataclass(slots=True)
class NodeMaterializer:
    """Build, hook and commit nodes under one shared bounded work queue.

    The queue spans every group so the concurrency cap holds for the whole pass.
    Any failing unit aborts the pass; a half-built graph would poison the next
    incremental run.
    """

    catalog: QueryCatalog
    store: NodeStore
    fetch_graphql: GraphQLExecutor
    reference_extractor: ReferenceExtractor = field(
        default_factory=EmbeddedMediaReferenceExtractor
    )
    concurrency: int = DEFAULT_CREATE_NODES_CONCURRENCY
    type_prefix: str = DEFAULT_TYPE_PREFIX

    def __post_init__(self) -> None:
        if self.concurrency > DEFAULT_CREATE_NODES_CONCURRENCY:
            log.warning(
                "Node creation concurrency raised to %s (default %s); hooks may "
                "overwhelm the remote source",
                self.concurrency,
                DEFAULT_CREATE_NODES_CONCURRENCY,
            )

    async def materialize(
        self,
        groups: Iterable[ContentNodeGroup],
        *,
        state: IngestState,
        activity: Activity | None = None,
    ) -> MaterializationResult:
        resolve_media = self.catalog.resolves_referenced_media()
        jobs = [
            partial(
                self.materialize_record,
                record,
                ledger=state.created,
                state=state,
                activity=activity,
                scan_references=resolve_media and not self.catalog.is_media_plural(group.plural),
            )
            for group in groups
            for record in group.all_nodes_of_content_type
        ]
        log.info("Creating %s nodes", len(jobs))
        await run_bounded(jobs, limit=self.concurrency)

        return MaterializationResult(
            committed_node_ids=state.created.ids,
            referenced_entity_ids=state.referenced.snapshot(),
        )

    async def materialize_record(
        self,
        record: RawRecord,
        *,
        ledger: CreatedNodeLedger,
        state: IngestState,
        activity: Activity | None = None,
        scan_references: bool = False,
    ) -> MaterializedNode:
        """Build one node, run its type hook and commit it."""

        node = self.build_node(record)

        if scan_references:
            state.referenced.add_all(self.reference_extractor.extract(record))

        type_name = record_type(record)
        settings = self.catalog.settings_for_type(type_name)
        hook = settings.before_change_node
        if hook is not None:
            event = NodeChangeEvent(
                action_type=ActionType.CREATE_ALL,
                remote_node=node,
                type_name=type_name,
                type_settings=settings,
                actions=self.store,
                fetch_graphql=self.fetch_graphql,
                build_type_name=self.build_type_name,
            )
            try:
                result = await hook(event)
            except Exception as exc:
                raise SideEffectHookError(
                    f"before_change_node hook for {type_name} failed on node {node.id}: {exc}",
                    node_id=node.id,
                    type_name=type_name,
                ) from exc

            additional = result.additional_node_ids if result is not None else ()
            if additional:
                ledger.extend(additional)
            total = state.note_side_effects(additional)
            if activity is not None:
                activity.set_status(
                    f"awaiting async side effects - {total} additional nodes fetched"
                )

        try:
            await self.store.create_node(node)
        except Exception as exc:
            raise NodeCommitError(
                f"Failed to create node {node.id}: {exc}", node_id=node.id
            ) from exc

        ledger.append(node.id)
        return node

    def build_node(self, record: RawRecord) -> MaterializedNode:
        node_id = record_id(record)
        link = record.get("link")
        return MaterializedNode(
            id=node_id,
            fields=dict(record),
            path=url_to_path(link) if isinstance(link, str) and link else None,
            internal=NodeInternal(
                content_digest=create_content_digest(record),
                type=self.build_type_name(record_type(record)),
            ),
        )

    def build_type_name(self, name: str) -> str:
        return build_type_name(name, self.type_prefix)
