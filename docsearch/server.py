"""FastAPI typeahead server for docsearch."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import get_index_store, get_loaded_store, sanitize_error_message
from .config import configure_logging, settings
from .engine.core import IndexFetchError, IndexStore, MalformedIndexError
from .engine.scoring import rank_matches
from .models import (
    HealthResponse,
    ReadyResponse,
    ReloadResponse,
    SearchResponse,
    Suggestion,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTION_LIMIT = 100
MAX_QUERY_LENGTH = 200


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler: load the index once at startup."""
    configure_logging()
    logger.info(f"Starting docsearch v{__version__}")

    store = IndexStore()
    app.state.index_store = store

    # Searches are refused (503) until the index is loaded
    try:
        await store.load_from(settings.index_source, timeout=settings.index_fetch_timeout)
    except (IndexFetchError, MalformedIndexError) as e:
        logger.error(f"Index load from {settings.index_source} failed: {e}")

    yield
    logger.info("Shutting down docsearch")


app = FastAPI(
    title="docsearch",
    description="Type-ahead search over a generated documentation index",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred. Please try again.",
        },
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/ready", tags=["Health"])
async def readiness_check(store: Annotated[IndexStore, Depends(get_index_store)]):
    """Readiness check - the index must be loaded before searches are served."""
    checks = {"index": store.is_loaded}
    all_ok = all(checks.values())

    response = ReadyResponse(
        status="ready" if all_ok else "not_ready",
        version=__version__,
        checks=checks,
    )
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200 if all_ok else 503,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "docsearch",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "search": "/search?q=",
    }


# ============ SEARCH ENDPOINTS ============


@app.get("/search", response_model=SearchResponse, tags=["Search"])
async def search(
    store: Annotated[IndexStore, Depends(get_loaded_store)],
    q: Annotated[str, Query(max_length=MAX_QUERY_LENGTH)] = "",
    limit: Annotated[int | None, Query(ge=1, le=MAX_SUGGESTION_LIMIT)] = None,
) -> SearchResponse:
    """
    Rank index entities against a typeahead query.

    Queries shorter than the configured minimum return no suggestions.
    Each suggestion carries the ``href`` to navigate to when selected.
    """
    if len(q) < settings.min_query_length:
        return SearchResponse(query=q)

    matches = rank_matches(q, store.index, settings.type_weights)
    shown = matches[: limit or settings.suggestion_limit]

    return SearchResponse(
        query=q,
        total=len(matches),
        suggestions=[Suggestion.from_match(m.entity, m.score) for m in shown],
    )


@app.post("/reload", response_model=ReloadResponse, tags=["Search"])
async def reload_index(
    store: Annotated[IndexStore, Depends(get_index_store)],
) -> ReloadResponse:
    """
    Re-fetch the index from the configured source.

    On failure the previously installed index keeps serving searches.
    """
    source = settings.index_source
    try:
        index = await store.load_from(source, timeout=settings.index_fetch_timeout)
    except IndexFetchError as e:
        logger.warning(f"Index reload from {source} failed: {e}")
        raise HTTPException(status_code=502, detail=sanitize_error_message(e)) from e
    except MalformedIndexError as e:
        logger.warning(f"Index reload from {source} rejected: {e}")
        raise HTTPException(status_code=422, detail=sanitize_error_message(e)) from e

    return ReloadResponse(
        entities=len(index),
        source=source,
        message=f"Loaded {len(index)} entities from {source}",
    )


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "docsearch.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
