"""Core domain logic for wotd."""

from .config import Config, load_config
from .errors import (
    ApiFailureError,
    EmptyPoolError,
    FetchError,
    MalformedCustomListError,
    SourceUnavailableError,
    WordNotFoundError,
    WotdError,
)
from .models import Definition, DictionaryEntry, Meaning, Phonetic
from .selection import day_of_year, select_index, select_word
from .word_pool import WordPool, merge

__all__ = [
    "ApiFailureError",
    "Config",
    "Definition",
    "DictionaryEntry",
    "EmptyPoolError",
    "FetchError",
    "MalformedCustomListError",
    "Meaning",
    "Phonetic",
    "SourceUnavailableError",
    "WordNotFoundError",
    "WordPool",
    "WotdError",
    "day_of_year",
    "load_config",
    "merge",
    "select_index",
    "select_word",
]
