"""Read access to the query catalog built during schema setup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gqlsource.domain.model import MEDIA_ITEM_TYPE, QueryInfo, TypeSettings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_DEFAULT_SETTINGS = TypeSettings()


@dataclass(slots=True, frozen=True)
class QueryCatalog:
    """Query infos keyed by local node type name (``Post``, ``MediaItem`` ...)."""

    query_infos: Mapping[str, QueryInfo] = field(default_factory=dict[str, QueryInfo])
    media_type_name: str = MEDIA_ITEM_TYPE

    @classmethod
    def from_query_infos(
        cls, query_infos: Iterable[QueryInfo], *, media_type_name: str = MEDIA_ITEM_TYPE
    ) -> QueryCatalog:
        by_name: dict[str, QueryInfo] = {}
        for query_info in query_infos:
            name = query_info.type_info.nodes_type_name
            if name in by_name:
                raise ValueError(f"Duplicate content type in query catalog: {name}")
            by_name[name] = query_info
        return cls(query_infos=by_name, media_type_name=media_type_name)

    def content_type_query_infos(self) -> list[QueryInfo]:
        """Return query infos for every content type that is not excluded."""

        return [info for info in self.query_infos.values() if not info.settings.exclude]

    def node_type_names(self) -> list[str]:
        return [info.type_info.nodes_type_name for info in self.content_type_query_infos()]

    def settings_for_type(self, name: str) -> TypeSettings:
        query_info = self.query_infos.get(name)
        if query_info is None:
            return _DEFAULT_SETTINGS
        return query_info.settings

    def is_media(self, query_info: QueryInfo) -> bool:
        return query_info.type_info.nodes_type_name == self.media_type_name

    def is_media_plural(self, plural_name: str) -> bool:
        media = self.media_query_info()
        return media is not None and media.type_info.plural_name == plural_name

    def media_query_info(self) -> QueryInfo | None:
        return self.query_infos.get(self.media_type_name)

    def resolves_referenced_media(self) -> bool:
        """Whether media referenced by other content is fetched during ingestion.

        Non-lazy media is never listed upfront; instead its ids are scanned out
        of other records and fetched one by one afterwards. Lazy or excluded
        media is left to on-demand resolution elsewhere.
        """

        media = self.media_query_info()
        if media is None:
            return False
        return not media.settings.exclude and not media.settings.lazy_nodes
