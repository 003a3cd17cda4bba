"""Domain model for remote content types and materialized nodes."""

from __future__ import annotations

from .catalog import MEDIA_ITEM_TYPE, QueryInfo, TypeInfo, TypeSettings
from .node import (
    ContentNodeGroup,
    MaterializedNode,
    NodeInternal,
    RawRecord,
    record_id,
    record_type,
)

__all__ = [
    "MEDIA_ITEM_TYPE",
    "ContentNodeGroup",
    "MaterializedNode",
    "NodeInternal",
    "QueryInfo",
    "RawRecord",
    "TypeInfo",
    "TypeSettings",
    "record_id",
    "record_type",
]
