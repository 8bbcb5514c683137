"""Index store for the docsearch engine.

This module parses raw index payloads into an immutable ``Index`` and holds
the current index behind a two-state lifecycle (unloaded -> loaded).
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ...models import Entity, IndexState
from .errors import IndexNotLoadedError, MalformedIndexError
from .sources import DEFAULT_FETCH_TIMEOUT, fetch_index_payload

logger = logging.getLogger(__name__)

_ENTITY_LIST = TypeAdapter(list[Entity])


@dataclass(frozen=True)
class Index:
    """Ordered, immutable collection of searchable entities.

    Attributes:
        entities: Entities in payload order
    """

    entities: tuple[Entity, ...] = field(default_factory=tuple)

    def all(self) -> tuple[Entity, ...]:
        """Return every entity, in payload order."""
        return self.entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def __len__(self) -> int:
        return len(self.entities)


def load_index(raw_payload: Any) -> Index:
    """Parse a raw payload into an Index.

    Args:
        raw_payload: Already-decoded JSON: a list of entity records, each
            with at least a non-empty ``name``.

    Returns:
        The parsed Index.

    Raises:
        MalformedIndexError: If the payload is not a list of entity-shaped
            records.
    """
    if isinstance(raw_payload, (str, bytes, Mapping)) or not isinstance(raw_payload, Sequence):
        raise MalformedIndexError(
            f"Index payload must be a list of records, got {type(raw_payload).__name__}"
        )

    try:
        entities = _ENTITY_LIST.validate_python(list(raw_payload))
    except ValidationError as e:
        raise MalformedIndexError(
            f"Index payload has {e.error_count()} invalid field(s): {e.errors()[0]['msg']}"
        ) from e

    return Index(entities=tuple(entities))


class IndexStore:
    """Holds the current Index.

    The store starts ``UNLOADED``. A successful ``load`` installs an index and
    moves it to ``LOADED``; later loads replace the index with a single
    reference swap, so readers see either the old or the new index.
    """

    def __init__(self) -> None:
        self._index: Index | None = None
        self._source: str | None = None

    @property
    def state(self) -> IndexState:
        return IndexState.LOADED if self._index is not None else IndexState.UNLOADED

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def source(self) -> str | None:
        """Where the installed index came from, if loaded via ``load_from``."""
        return self._source

    @property
    def index(self) -> Index:
        """The installed index.

        Raises:
            IndexNotLoadedError: If no load has succeeded yet.
        """
        if self._index is None:
            raise IndexNotLoadedError("No documentation index loaded")
        return self._index

    def all(self) -> tuple[Entity, ...]:
        return self.index.all()

    def load(self, raw_payload: Any) -> Index:
        """Parse ``raw_payload`` and install it as the current index.

        On ``MalformedIndexError`` the previously installed index, if any,
        stays in place.
        """
        index = load_index(raw_payload)
        self._index = index
        logger.info(f"Index loaded: {len(index)} entities")
        return index

    async def load_from(self, source: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> Index:
        """Fetch a payload from ``source`` (URL or path) and install it."""
        payload = await fetch_index_payload(source, timeout=timeout)
        index = self.load(payload)
        self._source = source
        return index
