"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Index store access
- Error sanitization
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi import Request as FastAPIRequest

from ..engine.core import IndexStore

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Returns a generic message for unexpected errors while preserving
    useful information for known error types.
    """
    error_str = str(error)

    # Known safe error patterns that can be returned to client
    safe_patterns = [
        "No documentation index loaded",
        "Index payload",
        "Index fetch",
        "is not valid JSON",
        "Cannot read index file",
    ]

    for pattern in safe_patterns:
        if pattern.lower() in error_str.lower():
            return error_str

    logger.error(f"Index operation error: {error}", exc_info=True)
    return "An error occurred processing your request. Please try again."


# ============ INDEX STORE ============


def get_index_store(request: FastAPIRequest) -> IndexStore:
    """Return the app's index store."""
    return request.app.state.index_store


def get_loaded_store(
    store: Annotated[IndexStore, Depends(get_index_store)],
) -> IndexStore:
    """Return the index store, or 503 until the index has been loaded."""
    if not store.is_loaded:
        raise HTTPException(status_code=503, detail="No documentation index loaded")
    return store
