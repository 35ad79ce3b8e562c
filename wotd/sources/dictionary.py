"""Free Dictionary API client.

API Documentation: https://dictionaryapi.dev
"""

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from wotd.core import Config, DictionaryEntry
from wotd.core.errors import ApiFailureError, FetchError, WordNotFoundError
from wotd.sources.transport import get_response


def build_lookup_url(word: str, config: Config) -> str:
    """Template the dictionary endpoint with the URL-quoted word."""
    return config.dictionary_url.format(word=quote(word, safe=""))


def parse_entries(payload: Any) -> DictionaryEntry:
    """Parse the first entry from an API response body.

    Raises:
        ApiFailureError: If the body is not a non-empty array of entry objects
    """
    if not isinstance(payload, list) or not payload:
        raise ApiFailureError(reason="response did not contain any entries")
    try:
        return DictionaryEntry.model_validate(payload[0])
    except ValidationError as e:
        raise ApiFailureError(reason=f"malformed entry: {e.error_count()} validation errors") from e


def fetch_entry(word: str, config: Config, client: httpx.Client | None = None) -> DictionaryEntry:
    """Look up ``word`` and return its first dictionary entry.

    Args:
        word: Word to look up
        config: Configuration holding the endpoint template
        client: Optional httpx client

    Raises:
        WordNotFoundError: On a 404 response
        ApiFailureError: On any other failure
    """
    url = build_lookup_url(word, config)
    try:
        response = get_response(url, client)
    except FetchError as e:
        raise ApiFailureError(reason=e.reason) from e

    if response.status_code == 404:
        raise WordNotFoundError(word)
    if not response.is_success:
        raise ApiFailureError(status_code=response.status_code)

    try:
        payload = response.json()
    except ValueError as e:
        raise ApiFailureError(reason=f"invalid JSON: {e}") from e

    entry = parse_entries(payload)
    logger.debug(f"Fetched {len(entry.meanings)} meanings for {word!r}")
    return entry
