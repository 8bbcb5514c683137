"""Shared fixtures for docsearch tests."""

import json

import pytest

from docsearch.engine.core import load_index


@pytest.fixture
def raw_payload():
    """A small dartdoc-style index payload."""
    return [
        {"name": "List", "type": "class", "href": "dart-core/List-class.html",
         "enclosedBy": {"name": "dart:core", "type": "library"}},
        {"name": "ListMixin", "type": "class", "href": "dart-collection/ListMixin-class.html",
         "enclosedBy": {"name": "dart:collection", "type": "library"}},
        {"name": "dart:collection", "type": "library", "href": "dart-collection/dart-collection-library.html"},
        {"name": "add", "type": "method", "href": "dart-core/List/add.html",
         "enclosedBy": {"name": "List", "type": "class"}},
        {"name": "abstract", "type": "property", "href": "misc/abstract.html"},
    ]


@pytest.fixture
def sample_index(raw_payload):
    return load_index(raw_payload)


@pytest.fixture
def index_file(tmp_path, raw_payload):
    """The sample payload written to disk."""
    path = tmp_path / "index.json"
    path.write_text(json.dumps(raw_payload), encoding="utf-8")
    return path
