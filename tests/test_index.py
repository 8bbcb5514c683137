"""Tests for index parsing and the index store."""

import asyncio
import inspect
import json

import pytest
from pydantic import ValidationError

from docsearch.engine.core import (
    Index,
    IndexFetchError,
    IndexNotLoadedError,
    IndexStore,
    MalformedIndexError,
    load_index,
)
from docsearch.engine.core.sources import DEFAULT_FETCH_TIMEOUT
from docsearch.models import EntityType, IndexState


class TestLoadIndex:
    def test_parses_records_in_order(self, raw_payload):
        index = load_index(raw_payload)
        assert isinstance(index, Index)
        assert len(index) == len(raw_payload)
        assert [e.name for e in index.all()] == [r["name"] for r in raw_payload]

    def test_reads_enclosing_entity_and_href(self, sample_index):
        add = sample_index.all()[3]
        assert add.href == "dart-core/List/add.html"
        assert add.enclosed_by.name == "List"
        assert add.enclosed_by.type == "class"

    @pytest.mark.parametrize(
        "record",
        [
            {"name": "Foo"},
            {"name": "Foo", "type": None},
            {"name": "Foo", "href": None},
            {"name": "Foo", "qualifiedName": None, "enclosedBy": None},
        ],
    )
    def test_optional_fields_default(self, record):
        index = load_index([record])
        for entity in index:
            assert entity.type == EntityType.UNKNOWN
            assert entity.href == ""
            assert entity.enclosed_by is None

    def test_unrecognized_type_is_kept(self):
        entity = load_index([{"name": "Color", "type": "enum"}]).all()[0]
        assert entity.type == "enum"

    def test_extra_fields_ignored(self):
        entity = load_index([
            {"name": "add", "qualifiedName": "dart:core.List.add", "overriddenDepth": 0}
        ]).all()[0]
        assert entity.qualified_name == "dart:core.List.add"

    def test_duplicate_names_allowed(self):
        index = load_index([{"name": "add", "type": "method"}] * 3)
        assert len(index) == 3

    def test_empty_payload(self):
        assert len(load_index([])) == 0

    @pytest.mark.parametrize(
        "payload",
        [None, 42, "[]", b"[]", {"name": "List"}],
    )
    def test_rejects_non_list_payload(self, payload):
        with pytest.raises(MalformedIndexError):
            load_index(payload)

    @pytest.mark.parametrize(
        "record",
        [
            {"type": "class"},
            {"name": ""},
            {"name": 7},
            "List",
            {"name": "add", "enclosedBy": {"type": "class"}},
            {"name": "add", "href": ["a"]},
        ],
    )
    def test_rejects_malformed_records(self, record):
        with pytest.raises(MalformedIndexError):
            load_index([{"name": "ok"}, record])

    def test_entities_are_immutable(self, sample_index):
        entity = sample_index.all()[0]
        with pytest.raises(ValidationError):
            entity.name = "Map"
        assert isinstance(sample_index.all(), tuple)


class TestIndexStore:
    def test_starts_unloaded(self):
        store = IndexStore()
        assert store.state is IndexState.UNLOADED
        assert not store.is_loaded
        with pytest.raises(IndexNotLoadedError):
            store.all()

    def test_load_installs_index(self, raw_payload):
        store = IndexStore()
        index = store.load(raw_payload)
        assert store.state is IndexState.LOADED
        assert store.index is index
        assert len(store.all()) == len(raw_payload)

    def test_failed_first_load_stays_unloaded(self):
        store = IndexStore()
        with pytest.raises(MalformedIndexError):
            store.load([{"type": "class"}])
        assert store.state is IndexState.UNLOADED

    def test_failed_reload_keeps_previous_index(self, raw_payload):
        store = IndexStore()
        previous = store.load(raw_payload)
        with pytest.raises(MalformedIndexError):
            store.load({"not": "a list"})
        assert store.index is previous

    def test_reload_replaces_index(self, raw_payload):
        store = IndexStore()
        store.load(raw_payload)
        replacement = store.load([{"name": "Stream", "type": "class"}])
        assert store.index is replacement
        assert [e.name for e in store.all()] == ["Stream"]

    def test_load_from_file(self, index_file, raw_payload):
        store = IndexStore()
        asyncio.run(store.load_from(str(index_file)))
        assert store.is_loaded
        assert store.source == str(index_file)
        assert len(store.index) == len(raw_payload)

    def test_load_from_missing_file(self, tmp_path):
        store = IndexStore()
        with pytest.raises(IndexFetchError):
            asyncio.run(store.load_from(str(tmp_path / "missing.json")))
        assert store.state is IndexState.UNLOADED

    def test_load_from_invalid_json(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text("[{", encoding="utf-8")
        store = IndexStore()
        with pytest.raises(MalformedIndexError):
            asyncio.run(store.load_from(str(path)))
        assert store.source is None

    def test_load_from_json_object(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps({"entities": []}), encoding="utf-8")
        with pytest.raises(MalformedIndexError):
            asyncio.run(IndexStore().load_from(str(path)))

    def test_load_from_non_utf8_file(self, tmp_path, raw_payload):
        path = tmp_path / "index.json"
        path.write_bytes(b'[{"name": "\xff\xfe"}]')
        store = IndexStore()
        store.load(raw_payload)
        previous = store.index
        with pytest.raises(MalformedIndexError):
            asyncio.run(store.load_from(str(path)))
        assert store.index is previous

    def test_load_from_uses_source_timeout_default(self):
        default = inspect.signature(IndexStore.load_from).parameters["timeout"].default
        assert default == DEFAULT_FETCH_TIMEOUT
