"""Word list and dictionary sources."""

from wotd.sources.dictionary import build_lookup_url, fetch_entry, parse_entries
from wotd.sources.transport import fetch_json, get_response, read_optional_file
from wotd.sources.word_lists import (
    load_custom_words,
    load_default_words,
    load_word_pool,
    parse_custom_words,
)

__all__ = [
    "build_lookup_url",
    "fetch_entry",
    "fetch_json",
    "get_response",
    "load_custom_words",
    "load_default_words",
    "load_word_pool",
    "parse_custom_words",
    "parse_entries",
    "read_optional_file",
]
