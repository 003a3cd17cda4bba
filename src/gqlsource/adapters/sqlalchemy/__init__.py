"""SQLAlchemy adapter package for gqlsource."""

from __future__ import annotations

from .mappings import cache_table, create_all_tables, metadata, node_table
from .repositories import SqlAlchemyKeyValueCache, SqlAlchemyNodeRepository
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, is_started, shutdown, startup

__all__ = [
    "SqlAlchemyKeyValueCache",
    "SqlAlchemyNodeRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "cache_table",
    "create_all_tables",
    "is_started",
    "metadata",
    "node_table",
    "shutdown",
    "startup",
]
