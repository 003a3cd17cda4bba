from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

import pytest

from gqlsource.adapters.catalog_file import load_query_catalog
from gqlsource.config import ConfigurationError
from gqlsource.domain.ports.hooks import HookResult, NodeChangeEvent  # noqa: TC001

CATALOG = {
    "mediaTypeName": "MediaItem",
    "nodeQueries": {
        "Post": {
            "typeInfo": {"singularName": "post", "pluralName": "posts", "nodesTypeName": "Post"},
            "nodeListQueries": ["query Posts { posts { nodes { id } } }"],
            "nodeQuery": "query Post($id: ID!) { post(id: $id) { id } }",
        },
        "Comment": {
            "typeInfo": {
                "singularName": "comment",
                "pluralName": "comments",
                "nodesTypeName": "Comment",
            },
            "nodeListQueries": ["query Comments { comments { nodes { id } } }"],
            "settings": {"lazyNodes": True},
        },
        "MediaItem": {
            "typeInfo": {
                "singularName": "mediaItem",
                "pluralName": "mediaItems",
                "nodesTypeName": "MediaItem",
            },
            "nodeListQueries": ["query Media { mediaItems { nodes { id } } }"],
            "nodeQuery": "query MediaItem($id: ID!) { mediaItem(id: $id) { id } }",
            "settings": {"exclude": False},
        },
    },
}


async def _noop_hook(event: NodeChangeEvent) -> HookResult | None:
    _ = event
    return None


def _write_catalog(tmp_path: Path, document: object) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_load_query_catalog_builds_query_infos(tmp_path: Path) -> None:
    catalog = load_query_catalog(_write_catalog(tmp_path, CATALOG))

    assert set(catalog.query_infos) == {"Post", "Comment", "MediaItem"}
    post = catalog.query_infos["Post"]
    assert post.type_info.plural_name == "posts"
    assert post.list_queries == ("query Posts { posts { nodes { id } } }",)
    assert post.node_query is not None
    assert catalog.query_infos["Comment"].settings.lazy_nodes is True
    assert catalog.resolves_referenced_media() is True


def test_load_query_catalog_attaches_hooks(tmp_path: Path) -> None:
    catalog = load_query_catalog(_write_catalog(tmp_path, CATALOG), hooks={"Post": _noop_hook})

    assert catalog.settings_for_type("Post").before_change_node is _noop_hook
    assert catalog.settings_for_type("Comment").before_change_node is None


def test_load_query_catalog_rejects_hooks_for_unknown_types(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Page"):
        load_query_catalog(_write_catalog(tmp_path, CATALOG), hooks={"Page": _noop_hook})


def test_load_query_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_query_catalog(tmp_path / "missing.json")


def test_load_query_catalog_invalid_document(tmp_path: Path) -> None:
    path = _write_catalog(tmp_path, {"nodeQueries": {"Post": {"typeInfo": {}}}})

    with pytest.raises(ConfigurationError, match="Invalid"):
        load_query_catalog(path)
