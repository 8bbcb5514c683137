"""Engine core module.

This module contains the index data structures and their lifecycle:
- Index parsing and the immutable Index
- The IndexStore (unloaded -> loaded)
- Index payload sources (HTTP or file)
- Error types
"""

from .errors import (
    DocSearchError,
    IndexFetchError,
    IndexNotLoadedError,
    MalformedIndexError,
)
from .index import Index, IndexStore, load_index
from .sources import fetch_index_payload, is_remote_source

__all__ = [
    # Index structures
    "Index",
    "IndexStore",
    "load_index",
    # Sources
    "fetch_index_payload",
    "is_remote_source",
    # Errors
    "DocSearchError",
    "IndexFetchError",
    "IndexNotLoadedError",
    "MalformedIndexError",
]
