"""Deterministic day-indexed word selection.

Day numbering is 1-based: January 1st is day 1 and December 31st is day 365,
or 366 in a leap year. Only the date's calendar fields are used, so the same
local day always yields the same word.
"""

from datetime import date

from wotd.core.errors import EmptyPoolError
from wotd.core.word_pool import WordPool


def day_of_year(day: date) -> int:
    """Return the 1-based ordinal of ``day`` within its year."""
    return day.timetuple().tm_yday


def select_index(day: date, pool_size: int) -> int:
    """Map a date onto an index into a pool of ``pool_size`` words.

    Raises:
        ValueError: If pool_size is not positive
    """
    if pool_size <= 0:
        raise ValueError(f"pool_size must be positive, got {pool_size}")
    return day_of_year(day) % pool_size


def select_word(pool: WordPool, day: date) -> str:
    """Pick the word of the day from ``pool``."""
    if not pool:
        raise EmptyPoolError()
    return pool[select_index(day, len(pool))]
