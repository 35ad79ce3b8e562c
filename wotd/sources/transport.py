"""Narrow I/O capabilities injected into the word sources and dictionary client.

``fetch_json`` and ``read_optional_file`` are the only places wotd touches the
network or the filesystem for reading, so the core can be exercised with
plain functions in their place.
"""

import json
from pathlib import Path
from typing import Any, Callable
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx
from loguru import logger

from wotd.core.errors import FetchError

JsonFetcher = Callable[[str], Any]
OptionalFileReader = Callable[[Path], "str | None"]


def _fetch_file_url(url: str) -> Any:
    path = Path(url2pathname(urlparse(url).path))
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FetchError(url, status_code=404) from None
    except (OSError, UnicodeDecodeError) as e:
        raise FetchError(url, reason=str(e)) from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise FetchError(url, reason=f"invalid JSON: {e}") from e


def get_response(url: str, client: httpx.Client | None = None) -> httpx.Response:
    """GET ``url``, using ``client`` when given or a short-lived one otherwise.

    Raises:
        FetchError: On transport errors (no status code available)
    """
    logger.debug(f"GET {url}")
    try:
        if client is not None:
            return client.get(url)
        with httpx.Client() as owned:
            return owned.get(url)
    except httpx.HTTPError as e:
        raise FetchError(url, reason=str(e) or type(e).__name__) from e


def fetch_json(url: str, client: httpx.Client | None = None) -> Any:
    """Fetch and decode a JSON document from a file:// or http(s):// URL.

    Args:
        url: Document location
        client: Optional httpx client (used for http(s) URLs only)

    Returns:
        The decoded JSON value

    Raises:
        FetchError: On a non-2xx status, transport error or undecodable body
    """
    if urlparse(url).scheme == "file":
        return _fetch_file_url(url)

    response = get_response(url, client)
    if not response.is_success:
        raise FetchError(url, status_code=response.status_code)
    try:
        return response.json()
    except ValueError as e:
        raise FetchError(url, reason=f"invalid JSON: {e}") from e


def read_optional_file(path: Path) -> str | None:
    """Read a text file, returning None when it does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
