"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, update

from .mappings import cache_table, node_table

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from gqlsource.domain.model import MaterializedNode

log = getLogger(__name__)


class SqlAlchemyNodeRepository:
    """Node store that only rewrites rows whose content digest changed."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.written = 0
        self.unchanged = 0

    async def create_node(self, node: MaterializedNode) -> None:
        """Write ``node`` on the calling thread.

        The session is not thread-safe, so the write blocks the event loop for
        one local SQLite statement pair. Hooks and page fetches resume after it.
        """

        self.upsert(node)

    def upsert(self, node: MaterializedNode) -> bool:
        """Insert or update ``node``; return ``False`` when it was already current."""

        stmt = select(node_table.c.content_digest).where(node_table.c.id == node.id)
        stored_digest = self.session.execute(stmt).scalar_one_or_none()
        if stored_digest == node.content_digest:
            self.unchanged += 1
            return False

        values = {
            "type": node.type,
            "content_digest": node.content_digest,
            "path": node.path,
            "parent": node.parent,
            "data": node.to_dict(),
            "updated_at": func.current_timestamp(),
        }
        if stored_digest is None:
            self.session.execute(insert(node_table).values(id=node.id, **values))
        else:
            self.session.execute(
                update(node_table).where(node_table.c.id == node.id).values(**values)
            )
        self.written += 1
        return True

    def get(self, node_id: str) -> dict[str, Any] | None:
        stmt = select(node_table.c.data).where(node_table.c.id == node_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def digest_of(self, node_id: str) -> str | None:
        stmt = select(node_table.c.content_digest).where(node_table.c.id == node_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def count(self, *, type_name: str | None = None) -> int:
        stmt = select(func.count()).select_from(node_table)
        if type_name is not None:
            stmt = stmt.where(node_table.c.type == type_name)
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyKeyValueCache:
    """JSON values keyed by name, kept between runs."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> object | None:
        stmt = select(cache_table.c.value).where(cache_table.c.key == key)
        return self.session.execute(stmt).scalar_one_or_none()

    def set(self, key: str, value: object) -> None:
        self.session.execute(delete(cache_table).where(cache_table.c.key == key))
        self.session.execute(insert(cache_table).values(key=key, value=value))
        log.debug("Stored cache entry %s", key)
