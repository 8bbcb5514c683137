"""Scoring constants for the docsearch matcher.

This module contains all constants used by the matcher/ranker:
- Per-type weight divisors
- Raw tier scores for the exact and substring families
- The query length guard for substring matching
"""

from types import MappingProxyType

from ...models.enums import EntityType

# ---------------------------------------------------------------------------
# Type weights: raw tier scores are divided by these, so lower weights rank
# higher. Libraries and classes are what people usually look for by name.
# ---------------------------------------------------------------------------
TYPE_WEIGHTS = MappingProxyType(
    {
        EntityType.LIBRARY.value: 2,
        EntityType.CLASS.value: 2,
        EntityType.TYPEDEF.value: 3,
        EntityType.METHOD.value: 4,
        EntityType.ACCESSOR.value: 4,
        EntityType.OPERATOR.value: 4,
        EntityType.PROPERTY.value: 4,
        EntityType.CONSTRUCTOR.value: 4,
    }
)

# Weight for any type missing from the table (including "unknown")
DEFAULT_WEIGHT = 4

# Dart SDK libraries are indexed as "dart:<name>" but typed without the scheme
LIBRARY_PREFIX = "dart:"

# ---------------------------------------------------------------------------
# Exact family (group A). First satisfied tier wins.
# ---------------------------------------------------------------------------
SCORE_EXACT = 2000
SCORE_EXACT_LIBRARY = 2000
SCORE_LIBRARY_IGNORE_CASE = 1800
SCORE_EXACT_IGNORE_CASE = 1700

# ---------------------------------------------------------------------------
# Substring family (group B). Only tried when no exact tier matched and the
# query is longer than MAX_EXACT_ONLY_QUERY_LENGTH.
# ---------------------------------------------------------------------------
SCORE_PREFIX = 750
SCORE_PREFIX_IGNORE_CASE = 650
SCORE_CONTAINS = 500
SCORE_CONTAINS_IGNORE_CASE = 400

# Queries this short only get exact-family matches
MAX_EXACT_ONLY_QUERY_LENGTH = 2
