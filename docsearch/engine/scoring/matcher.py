"""Matching and ranking for the docsearch typeahead.

Each entity is scored independently against the query in two phases:

1. Exact family: case-sensitive and case-insensitive equality, with or
   without the ``dart:`` library prefix.
2. Substring family: prefix and containment, case-sensitive first. Skipped
   when the exact family matched or the query is too short.

The raw tier score is divided by the entity's type weight; candidates are
sorted by score, then by shorter name.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ...models import Entity
from .constants import (
    DEFAULT_WEIGHT,
    LIBRARY_PREFIX,
    MAX_EXACT_ONLY_QUERY_LENGTH,
    SCORE_CONTAINS,
    SCORE_CONTAINS_IGNORE_CASE,
    SCORE_EXACT,
    SCORE_EXACT_IGNORE_CASE,
    SCORE_EXACT_LIBRARY,
    SCORE_LIBRARY_IGNORE_CASE,
    SCORE_PREFIX,
    SCORE_PREFIX_IGNORE_CASE,
    TYPE_WEIGHTS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """A scored candidate for a single query."""

    entity: Entity
    score: int


def type_weight(entity: Entity, weights: Mapping[str, int] = TYPE_WEIGHTS) -> int:
    """Look up the score divisor for an entity's type."""
    return weights.get(entity.type, DEFAULT_WEIGHT)


def exact_tier_score(name: str, query: str) -> int | None:
    """Raw score of the first satisfied exact-family tier, or None."""
    lower_name = name.lower()
    lower_query = query.lower()

    if name == query:
        return SCORE_EXACT
    if name == LIBRARY_PREFIX + query:
        return SCORE_EXACT_LIBRARY
    if lower_name == LIBRARY_PREFIX + lower_query:
        return SCORE_LIBRARY_IGNORE_CASE
    if lower_name == lower_query:
        return SCORE_EXACT_IGNORE_CASE
    return None


def substring_tier_score(name: str, query: str) -> int | None:
    """Raw score of the first satisfied substring-family tier, or None."""
    lower_name = name.lower()
    lower_query = query.lower()

    if name.startswith(query):
        return SCORE_PREFIX
    if lower_name.startswith(lower_query):
        return SCORE_PREFIX_IGNORE_CASE
    if query in name:
        return SCORE_CONTAINS
    if lower_query in lower_name:
        return SCORE_CONTAINS_IGNORE_CASE
    return None


def score_entity(
    entity: Entity,
    query: str,
    weights: Mapping[str, int] = TYPE_WEIGHTS,
) -> Match | None:
    """Score one entity against a query.

    Args:
        entity: The entity to score.
        query: The raw query as typed.
        weights: Type -> divisor table.

    Returns:
        The Match, or None if no tier is satisfied.
    """
    if not query:
        return None

    raw = exact_tier_score(entity.name, query)
    # Short queries, and entities that already matched exactly, skip the
    # substring family
    if raw is None and len(query) > MAX_EXACT_ONLY_QUERY_LENGTH:
        raw = substring_tier_score(entity.name, query)
    if raw is None:
        return None

    return Match(entity=entity, score=raw // type_weight(entity, weights))


def rank_matches(
    query: str,
    entities: Iterable[Entity],
    weights: Mapping[str, int] = TYPE_WEIGHTS,
) -> list[Match]:
    """Score every entity and sort the matches, best first.

    Ties on score go to the shorter name. Remaining ties keep index order.
    """
    if not query:
        return []

    matches = []
    for entity in entities:
        match = score_entity(entity, query, weights)
        if match is not None:
            matches.append(match)

    matches.sort(key=lambda m: (-m.score, len(m.entity.name)))
    logger.debug(f"Query '{query}': {len(matches)} matches")
    return matches


def find_matches(
    query: str,
    entities: Iterable[Entity],
    weights: Mapping[str, int] = TYPE_WEIGHTS,
) -> list[Entity]:
    """Find the entities matching a typeahead query, best first.

    Args:
        query: The query as typed. Empty queries match nothing.
        entities: The loaded Index (or any iterable of entities).
        weights: Type -> divisor table; defaults to ``TYPE_WEIGHTS``.

    Returns:
        Matching entities, ranked. Each entity appears at most once.
    """
    return [m.entity for m in rank_matches(query, entities, weights)]
