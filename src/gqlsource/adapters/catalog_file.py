"""Load the query catalog from the JSON document written by schema introspection."""

from __future__ import annotations

import json
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gqlsource.config.env import ConfigurationError
from gqlsource.domain.catalog import QueryCatalog
from gqlsource.domain.model import MEDIA_ITEM_TYPE, QueryInfo, TypeInfo, TypeSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gqlsource.domain.ports.hooks import BeforeChangeNode

log = getLogger(__name__)


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class TypeInfoPayload(CatalogBaseModel):
    singular_name: str = Field(alias="singularName")
    plural_name: str = Field(alias="pluralName")
    nodes_type_name: str = Field(alias="nodesTypeName")


class TypeSettingsPayload(CatalogBaseModel):
    exclude: bool = False
    lazy_nodes: bool = Field(default=False, alias="lazyNodes")
    node_list_queries: tuple[str, ...] | None = Field(default=None, alias="nodeListQueries")


class QueryInfoPayload(CatalogBaseModel):
    type_info: TypeInfoPayload = Field(alias="typeInfo")
    node_list_queries: tuple[str, ...] = Field(default=(), alias="nodeListQueries")
    node_query: str | None = Field(default=None, alias="nodeQuery")
    settings: TypeSettingsPayload = Field(default_factory=TypeSettingsPayload)


class CatalogPayload(CatalogBaseModel):
    media_type_name: str = Field(default=MEDIA_ITEM_TYPE, alias="mediaTypeName")
    node_queries: dict[str, QueryInfoPayload] = Field(alias="nodeQueries")


def build_query_catalog(
    payload: CatalogPayload,
    *,
    hooks: Mapping[str, BeforeChangeNode] | None = None,
) -> QueryCatalog:
    """Turn a validated payload into a catalog, attaching hooks by node type name."""

    active_hooks = dict(hooks or {})
    query_infos: list[QueryInfo] = []
    for entry in payload.node_queries.values():
        type_info = TypeInfo(
            singular_name=entry.type_info.singular_name,
            plural_name=entry.type_info.plural_name,
            nodes_type_name=entry.type_info.nodes_type_name,
        )
        settings = TypeSettings(
            exclude=entry.settings.exclude,
            lazy_nodes=entry.settings.lazy_nodes,
            node_list_queries=entry.settings.node_list_queries,
            before_change_node=active_hooks.pop(type_info.nodes_type_name, None),
        )
        query_infos.append(
            QueryInfo(
                type_info=type_info,
                node_list_queries=entry.node_list_queries,
                settings=settings,
                node_query=entry.node_query,
            )
        )

    if active_hooks:
        unknown = ", ".join(sorted(active_hooks))
        raise ConfigurationError(f"Hooks registered for unknown content types: {unknown}")

    return QueryCatalog.from_query_infos(query_infos, media_type_name=payload.media_type_name)


def load_query_catalog(
    path: Path | str,
    *,
    hooks: Mapping[str, BeforeChangeNode] | None = None,
) -> QueryCatalog:
    catalog_path = Path(path)
    try:
        document = json.loads(catalog_path.read_text(encoding="utf-8"))
        payload = CatalogPayload.model_validate(document)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Query catalog not found: {catalog_path}") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid query catalog {catalog_path}: {exc}") from exc

    catalog = build_query_catalog(payload, hooks=hooks)
    log.info("Loaded %s content types from %s", len(catalog.query_infos), catalog_path)
    return catalog
