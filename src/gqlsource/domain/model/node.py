"""Raw remote records and the local nodes built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

type RawRecord = dict[str, Any]


def record_id(record: RawRecord) -> str:
    value = record.get("id")
    if not isinstance(value, str) or not value:
        raise ValueError(f"Remote record is missing a string id: {record!r:.200}")
    return value


def record_type(record: RawRecord) -> str:
    """Return the type discriminator, accepting GraphQL's ``__typename``."""

    value = record.get("type") or record.get("__typename")
    if not isinstance(value, str) or not value:
        raise ValueError(f"Remote record {record.get('id')!r} has no type discriminator")
    return value


@dataclass(slots=True)
class ContentNodeGroup:
    """All records of one content type, fully paginated."""

    singular: str
    plural: str
    all_nodes_of_content_type: list[RawRecord] = field(default_factory=list[RawRecord])

    def __len__(self) -> int:
        return len(self.all_nodes_of_content_type)


@dataclass(slots=True, frozen=True)
class NodeInternal:
    content_digest: str
    type: str


@dataclass(slots=True)
class MaterializedNode:
    """A local, addressable node.

    ``fields`` holds every field of the remote record. Hooks receive this object
    before it is committed and may adjust ``fields`` or ``path``.
    """

    id: str
    fields: dict[str, Any]
    internal: NodeInternal
    path: str | None = None
    parent: None = None

    @property
    def type(self) -> str:
        return self.internal.type

    @property
    def content_digest(self) -> str:
        return self.internal.content_digest

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {**self.fields, "id": self.id, "parent": self.parent}
        if self.path is not None:
            data["path"] = self.path
        data["internal"] = {
            "contentDigest": self.internal.content_digest,
            "type": self.internal.type,
        }
        return data
