"""Content fingerprints, node type names and local paths."""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from gqlsource.config.source import DEFAULT_TYPE_PREFIX

if TYPE_CHECKING:
    from gqlsource.domain.model import RawRecord


def stable_stringify(record: RawRecord) -> str:
    """Serialize ``record`` with sorted keys and no insignificant whitespace."""

    return json.dumps(
        record,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def create_content_digest(record: RawRecord) -> str:
    """Return a fingerprint that is independent of key order."""

    payload = stable_stringify(record).encode("utf-8")
    return hashlib.md5(payload, usedforsecurity=False).hexdigest()


def build_type_name(name: str, prefix: str = DEFAULT_TYPE_PREFIX) -> str:
    if not name:
        raise ValueError("Cannot build a node type name from an empty type")
    if prefix and name.startswith(prefix):
        return name
    return f"{prefix}{name}"


def url_to_path(url: str) -> str:
    """Strip scheme and host from a permalink, keeping path and query."""

    parts = urlsplit(url)
    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"
    return path
