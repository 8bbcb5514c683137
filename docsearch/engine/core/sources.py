"""Index payload sources.

The index is published as a JSON file next to the generated documentation.
It is fetched over HTTP(S) or read from disk, decoded, and handed to the
index store unvalidated.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import httpx

from .errors import IndexFetchError, MalformedIndexError

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 10.0


def is_remote_source(source: str) -> bool:
    """Check if a source names an HTTP(S) URL rather than a file path."""
    return source.lower().startswith(("http://", "https://"))


async def fetch_index_payload(
    source: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Fetch and decode the raw index payload.

    Args:
        source: URL or filesystem path of the index JSON
        timeout: HTTP timeout in seconds (ignored for files)
        client: Optional client to use instead of a fresh one

    Returns:
        The decoded JSON document

    Raises:
        IndexFetchError: If the source cannot be read
        MalformedIndexError: If the body is not valid JSON
    """
    if is_remote_source(source):
        body = await _fetch_remote(source, timeout, client)
    else:
        body = await _read_file(source)

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedIndexError(f"Index at {source} is not valid JSON: {e}") from e

    logger.debug(f"Fetched index payload from {source} ({len(body)} bytes)")
    return payload


async def _fetch_remote(
    url: str, timeout: float, client: httpx.AsyncClient | None
) -> bytes:
    try:
        if client is not None:
            response = await client.get(url, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as fresh_client:
                response = await fresh_client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise IndexFetchError(
            f"Index fetch from {url} failed with HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise IndexFetchError(f"Index fetch from {url} failed: {e}") from e
    return response.content


async def _read_file(path: str) -> bytes:
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise IndexFetchError(f"Cannot read index file {path}: {e}") from e
