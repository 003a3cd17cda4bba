"""Errors raised by the ingestion pipeline."""

from __future__ import annotations


class IngestionError(RuntimeError):
    """Base class for fatal pipeline errors."""


class SideEffectHookError(IngestionError):
    """A ``before_change_node`` hook raised while handling a record."""

    def __init__(self, message: str, *, node_id: str, type_name: str) -> None:
        super().__init__(message)
        self.node_id = node_id
        self.type_name = type_name


class NodeCommitError(IngestionError):
    """The node store rejected a node."""

    def __init__(self, message: str, *, node_id: str) -> None:
        super().__init__(message)
        self.node_id = node_id
