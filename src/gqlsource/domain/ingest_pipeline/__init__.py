"""Ingestion pipeline for remote GraphQL content.

The run is split into three strictly ordered stages that share an explicit,
run-scoped ``IngestState``:

1. ``ContentTypeOrchestrator`` pages every eligible content type.
2. ``NodeMaterializer`` builds, hooks and commits nodes, collecting media
   references on the way.
3. ``ReferenceExpander`` fetches only the media that was referenced.

``run_ingestion`` wires the stages together and persists the created node ids.
"""

from __future__ import annotations

from .concurrency import run_bounded
from .digest import build_type_name, create_content_digest, stable_stringify, url_to_path
from .errors import IngestionError, NodeCommitError, SideEffectHookError
from .expansion import ReferenceExpander
from .materialization import MaterializationResult, NodeMaterializer
from .orchestrator import ContentTypeOrchestrator
from .references import EMBEDDED_MEDIA_PATTERN, EmbeddedMediaReferenceExtractor, ReferenceExtractor
from .runner import CREATED_NODE_IDS, IngestionResult, load_created_node_ids, run_ingestion
from .state import CreatedNodeLedger, IngestState, ReferencedEntityIds

__all__ = [
    "CREATED_NODE_IDS",
    "EMBEDDED_MEDIA_PATTERN",
    "ContentTypeOrchestrator",
    "CreatedNodeLedger",
    "EmbeddedMediaReferenceExtractor",
    "IngestState",
    "IngestionError",
    "IngestionResult",
    "MaterializationResult",
    "NodeCommitError",
    "NodeMaterializer",
    "ReferenceExpander",
    "ReferenceExtractor",
    "ReferencedEntityIds",
    "SideEffectHookError",
    "build_type_name",
    "create_content_digest",
    "load_created_node_ids",
    "run_bounded",
    "run_ingestion",
    "stable_stringify",
    "url_to_path",
]
