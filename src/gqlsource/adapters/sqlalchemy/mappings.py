"""SQLAlchemy table metadata for materialized nodes and run bookkeeping."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Column, DateTime, Index, MetaData, String, Table, func

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData()

node_table = Table(
    "nodes",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("type", String(255), nullable=False),
    Column("content_digest", String(64), nullable=False),
    Column("path", String(2048), nullable=True),
    Column("parent", String(255), nullable=True),
    Column("data", JSON, nullable=False),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.current_timestamp(),
    ),
    Index("ix_nodes_type", "type"),
)

cache_table = Table(
    "cache_entries",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", JSON, nullable=True),
)


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the node store."""

    log.info("Creating all tables")
    metadata.create_all(engine)
