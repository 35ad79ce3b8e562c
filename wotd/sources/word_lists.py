"""Loading the default and custom word lists."""

import json
from typing import Any

from loguru import logger

from wotd.core import Config, WordPool, merge
from wotd.core.errors import FetchError, MalformedCustomListError, SourceUnavailableError
from wotd.sources.transport import JsonFetcher, OptionalFileReader, fetch_json, read_optional_file


def _as_word_list(payload: Any, source: str) -> list[str]:
    """Validate that ``payload`` is a JSON array, keeping only its string items.

    Raises:
        ValueError: If payload is not a list
    """
    if not isinstance(payload, list):
        raise ValueError(f"{source} is not a valid JSON array")
    words = [item for item in payload if isinstance(item, str)]
    skipped = len(payload) - len(words)
    if skipped:
        logger.warning(f"Warning: Skipped {skipped} non-string entries in {source}.")
    return words


def fetch_default_words(config: Config, fetcher: JsonFetcher = fetch_json) -> list[str]:
    """Fetch the default word list.

    Raises:
        SourceUnavailableError: If the list cannot be fetched or is not an array
    """
    try:
        payload = fetcher(config.words_url)
    except FetchError as e:
        if e.status_code is not None:
            raise SourceUnavailableError("Could not fetch default word list.") from e
        raise SourceUnavailableError(f"Error fetching default word list: {e}") from e
    try:
        return _as_word_list(payload, "default word list")
    except ValueError as e:
        raise SourceUnavailableError(f"Error fetching default word list: {e}") from e


def load_default_words(config: Config, fetcher: JsonFetcher = fetch_json) -> list[str]:
    """Load the default word list, treating any failure as an empty list."""
    try:
        words = fetch_default_words(config, fetcher)
    except SourceUnavailableError as e:
        logger.warning(str(e))
        return []
    logger.info(f"Loaded {len(words)} default words")
    return words


def parse_custom_words(content: str) -> list[str]:
    """Parse the custom word file's content.

    Raises:
        MalformedCustomListError: If the content is not a JSON array
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedCustomListError(
            f"Warning: Could not read or parse custom_words.json. {e}"
        ) from e
    if not isinstance(payload, list):
        raise MalformedCustomListError(
            "Warning: Custom words file is not a valid JSON array. Ignoring."
        )
    return _as_word_list(payload, "custom_words.json")


def load_custom_words(
    config: Config, reader: OptionalFileReader = read_optional_file
) -> list[str]:
    """Load the user's custom words, creating the config directory if needed.

    A missing file yields an empty list silently; an unreadable or malformed
    one yields an empty list and a warning.
    """
    path = config.custom_words_path

    try:
        config.config_dir.mkdir(parents=True, exist_ok=True)
        content = reader(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Warning: Could not read or parse custom_words.json. {e}")
        return []
    if content is None:
        logger.debug(f"No custom word list at {path}")
        return []

    try:
        words = parse_custom_words(content)
    except MalformedCustomListError as e:
        logger.warning(str(e))
        return []
    logger.info(f"Loaded {len(words)} custom words from {path}")
    return words


def load_word_pool(
    config: Config,
    fetcher: JsonFetcher = fetch_json,
    reader: OptionalFileReader = read_optional_file,
) -> WordPool:
    """Build the merged word pool from both sources.

    Raises:
        EmptyPoolError: If neither source yielded any words
    """
    default_words = load_default_words(config, fetcher)
    custom_words = load_custom_words(config, reader)
    pool = merge(default_words, custom_words)
    logger.info(f"Word pool: {len(pool)} unique words")
    return pool
