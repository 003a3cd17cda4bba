from __future__ import annotations

from gqlsource.domain.ingest_pipeline import EmbeddedMediaReferenceExtractor


def test_extracts_foreign_media_ids() -> None:
    record = {
        "id": "p1",
        "type": "Post",
        "featuredImage": {"node": {"id": "m1", "sourceUrl": "https://cdn.test/m1.jpg"}},
        "gallery": [
            {"id": "m2", "sourceUrl": "https://cdn.test/m2.jpg"},
            {"id": "m1", "sourceUrl": "https://cdn.test/m1.jpg"},
        ],
    }

    assert EmbeddedMediaReferenceExtractor().extract(record) == {"m1", "m2"}


def test_own_id_is_never_reported() -> None:
    record = {"id": "m1", "type": "MediaItem", "sourceUrl": "https://cdn.test/m1.jpg"}

    assert EmbeddedMediaReferenceExtractor().extract(record) == set()


def test_objects_without_source_url_are_ignored() -> None:
    record = {
        "id": "p1",
        "type": "Post",
        "author": {"node": {"id": "u1", "name": "Ada"}},
        "featuredImage": {"node": {"id": "m3", "sourceUrl": None}},
    }

    assert EmbeddedMediaReferenceExtractor().extract(record) == {"m3"}


def test_match_is_textual_and_ignores_field_names() -> None:
    record = {"id": "p1", "anything": {"deep": [{"id": "x9", "sourceUrl": "s"}]}}

    assert EmbeddedMediaReferenceExtractor().extract(record) == {"x9"}
