"""Pydantic models for docsearch.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from docsearch.models.enums import EntityType
    from docsearch.models.entities import Entity
"""

# ============ ENUMS ============
from .enums import EntityType, IndexState

# ============ ENTITY MODELS ============
from .entities import EnclosingRef, Entity

# ============ RESPONSE MODELS ============
from .responses import (
    HealthResponse,
    ReadyResponse,
    ReloadResponse,
    SearchResponse,
    Suggestion,
)

__all__ = [
    # Enums
    "EntityType",
    "IndexState",
    # Entities
    "EnclosingRef",
    "Entity",
    # Responses
    "HealthResponse",
    "ReadyResponse",
    "ReloadResponse",
    "SearchResponse",
    "Suggestion",
]
