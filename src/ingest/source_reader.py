"""Source payload readers for case visualization.

This module loads the raw JSON case payload from local paths or
http(s) URLs. The HTTP fetch is the only suspension point of a run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from core.config import TripvizConfig
from core.constants import HTTP_URI_PREFIXES
from core.errors import TripvizFetchError, TripvizFormatError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


async def fetch_source_payload(
    source_uri: str,
    config: TripvizConfig,
    http_client: httpx.AsyncClient | None = None,
) -> Any:
    """Retrieve and parse the JSON payload at ``source_uri``.

    Args:
        source_uri: Local file path or ``http(s)://`` URL.
        config: Runtime configuration for the fetch timeout.
        http_client: Optional client to reuse instead of a per-call one.

    Returns:
        Decoded JSON value of any top-level shape.

    Raises:
        TripvizFetchError: If the source cannot be retrieved.
        TripvizFormatError: If the body is not valid JSON.
    """
    if source_uri.startswith(HTTP_URI_PREFIXES):
        body = await _fetch_http_body(source_uri, config, http_client)
    else:
        body = _read_local_body(Path(source_uri).expanduser())
    _LOGGER.info("source_fetched", source_uri=source_uri, byte_count=len(body))
    return _parse_json_body(source_uri, body)


async def _fetch_http_body(
    source_uri: str,
    config: TripvizConfig,
    http_client: httpx.AsyncClient | None,
) -> bytes:
    """Fetch a response body over HTTP without retries.

    Args:
        source_uri: Absolute http(s) URL.
        config: Runtime configuration.
        http_client: Optional shared client.

    Returns:
        Raw response body.

    Raises:
        TripvizFetchError: On transport errors or non-success status.
    """
    if http_client is not None:
        return await _get_body(http_client, source_uri)
    async with httpx.AsyncClient(timeout=config.fetch_timeout_seconds) as client:
        return await _get_body(client, source_uri)


async def _get_body(client: httpx.AsyncClient, source_uri: str) -> bytes:
    try:
        response = await client.get(source_uri)
    except httpx.HTTPError as error:
        raise TripvizFetchError(
            f"Failed to fetch {source_uri}: {error}. "
            "Check the URL and network connectivity."
        ) from error
    if not response.is_success:
        raise TripvizFetchError(f"HTTP error! status: {response.status_code} for {source_uri}")
    return response.content


def _read_local_body(source_path: Path) -> bytes:
    """Read a local source file.

    Args:
        source_path: JSON file path.

    Returns:
        Raw file bytes.

    Raises:
        TripvizFetchError: If the path is missing or unreadable.
    """
    if not source_path.is_file():
        raise TripvizFetchError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing JSON file or an http(s) URL."
        )
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise TripvizFetchError(f"Failed to read source at {source_path}: {error}.") from error


def _parse_json_body(source_uri: str, body: bytes) -> Any:
    """Decode a JSON body.

    Args:
        source_uri: Source identifier for error context.
        body: Raw payload bytes.

    Returns:
        Decoded JSON value.

    Raises:
        TripvizFormatError: If the payload is not valid UTF-8 JSON or holds
            an integer literal past the interpreter digit limit.
    """
    try:
        return json.loads(body)
    except ValueError as error:
        raise TripvizFormatError(
            f"Failed to parse JSON from {source_uri}: {error}. "
            "Fix the JSON syntax and retry."
        ) from error
