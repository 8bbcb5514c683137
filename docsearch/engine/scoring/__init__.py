"""Scoring engine for docsearch typeahead queries.

This package provides the matcher/ranker:
- Exact-family tiers (equality, with and without the ``dart:`` prefix)
- Substring-family tiers (prefix and containment)
- Per-type weight divisors

Usage:
    from docsearch.engine.scoring import find_matches, TYPE_WEIGHTS
"""

from .constants import (
    DEFAULT_WEIGHT,
    LIBRARY_PREFIX,
    MAX_EXACT_ONLY_QUERY_LENGTH,
    TYPE_WEIGHTS,
)
from .matcher import (
    Match,
    exact_tier_score,
    find_matches,
    rank_matches,
    score_entity,
    substring_tier_score,
    type_weight,
)

__all__ = [
    # Constants
    "DEFAULT_WEIGHT",
    "LIBRARY_PREFIX",
    "MAX_EXACT_ONLY_QUERY_LENGTH",
    "TYPE_WEIGHTS",
    # Matcher
    "Match",
    "exact_tier_score",
    "find_matches",
    "rank_matches",
    "score_entity",
    "substring_tier_score",
    "type_weight",
]
