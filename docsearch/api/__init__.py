"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    get_index_store,
    get_loaded_store,
    sanitize_error_message,
)

__all__ = [
    "get_index_store",
    "get_loaded_store",
    "sanitize_error_message",
]
