"""Tests for SQLAlchemy repositories."""

from __future__ import annotations

import asyncio

from sqlalchemy.orm import Session  # noqa: TC002

from gqlsource.adapters.sqlalchemy.repositories import (
    SqlAlchemyKeyValueCache,
    SqlAlchemyNodeRepository,
)
from gqlsource.domain.ingest_pipeline import create_content_digest
from gqlsource.domain.model import MaterializedNode, NodeInternal


def _node(node_id: str, **fields: object) -> MaterializedNode:
    record = {"id": node_id, "type": "Post", **fields}
    return MaterializedNode(
        id=node_id,
        fields=record,
        path=f"/{node_id}/",
        internal=NodeInternal(content_digest=create_content_digest(record), type="WpPost"),
    )


def test_node_repository_inserts_new_nodes(sqlite_session: Session) -> None:
    repository = SqlAlchemyNodeRepository(sqlite_session)

    asyncio.run(repository.create_node(_node("p1", title="Hello")))
    sqlite_session.commit()

    data = repository.get("p1")
    assert data is not None
    assert data["title"] == "Hello"
    assert data["path"] == "/p1/"
    assert data["internal"]["type"] == "WpPost"
    assert repository.count() == 1
    assert repository.count(type_name="WpPost") == 1
    assert repository.written == 1


def test_node_repository_skips_unchanged_digest(sqlite_session: Session) -> None:
    repository = SqlAlchemyNodeRepository(sqlite_session)

    assert repository.upsert(_node("p1", title="Hello")) is True
    assert repository.upsert(_node("p1", title="Hello")) is False

    assert repository.written == 1
    assert repository.unchanged == 1


def test_node_repository_rewrites_changed_content(sqlite_session: Session) -> None:
    repository = SqlAlchemyNodeRepository(sqlite_session)
    original = _node("p1", title="Hello")
    edited = _node("p1", title="Hello, again")

    repository.upsert(original)
    assert repository.upsert(edited) is True
    sqlite_session.commit()

    assert repository.digest_of("p1") == edited.content_digest
    data = repository.get("p1")
    assert data is not None
    assert data["title"] == "Hello, again"
    assert repository.count() == 1


def test_node_repository_get_missing(sqlite_session: Session) -> None:
    repository = SqlAlchemyNodeRepository(sqlite_session)

    assert repository.get("missing") is None
    assert repository.digest_of("missing") is None


def test_key_value_cache_overwrites_entries(sqlite_session: Session) -> None:
    cache = SqlAlchemyKeyValueCache(sqlite_session)

    assert cache.get("CREATED_NODE_IDS") is None

    cache.set("CREATED_NODE_IDS", ["p1", "p2"])
    cache.set("CREATED_NODE_IDS", ["p1", "p2", "m1"])
    sqlite_session.commit()

    assert cache.get("CREATED_NODE_IDS") == ["p1", "p2", "m1"]


def test_node_repository_handles_interleaved_commits(sqlite_session: Session) -> None:
    repository = SqlAlchemyNodeRepository(sqlite_session)

    async def commit_all() -> None:
        await asyncio.gather(*(repository.create_node(_node(f"p{i}")) for i in range(5)))

    asyncio.run(commit_all())
    sqlite_session.commit()

    assert repository.count() == 5
    assert repository.written == 5
