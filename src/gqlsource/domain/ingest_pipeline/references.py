"""Discovery of foreign entities embedded in other records."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

from .digest import stable_stringify

if TYPE_CHECKING:
    from gqlsource.domain.model import RawRecord

# sorted keys put ``sourceUrl`` directly after ``id`` in an embedded media object
EMBEDDED_MEDIA_PATTERN = re.compile(r'"id":"([^"]*)","sourceUrl"')


class ReferenceExtractor(Protocol):
    def extract(self, record: RawRecord) -> set[str]: ...


class EmbeddedMediaReferenceExtractor:
    """Find media ids by pattern-matching the record's canonical serialization.

    The rule is textual: it matches objects serialized as
    ``{"id":"<id>","sourceUrl":...}``, whatever field they are nested under.
    The record's own id is never reported.
    """

    def __init__(self, pattern: re.Pattern[str] = EMBEDDED_MEDIA_PATTERN) -> None:
        self._pattern = pattern

    def extract(self, record: RawRecord) -> set[str]:
        serialized = stable_stringify(record)
        own_id = record.get("id")
        return {
            match.group(1)
            for match in self._pattern.finditer(serialized)
            if match.group(1) != own_id
        }
