"""The word-of-the-day pipeline: load, select, fetch, render, print."""

import sys
from datetime import date
from typing import TextIO

import httpx
from loguru import logger

from wotd.core import Config, select_word
from wotd.core.selection import day_of_year
from wotd.rendering import RenderedBlock, render
from wotd.sources import fetch_entry, load_word_pool
from wotd.sources.transport import JsonFetcher, OptionalFileReader, fetch_json, read_optional_file
from wotd.utils.helpers import terminal_columns


def run_pipeline(
    config: Config,
    today: date | None = None,
    out: TextIO | None = None,
    fetcher: JsonFetcher = fetch_json,
    reader: OptionalFileReader = read_optional_file,
    client: httpx.Client | None = None,
) -> RenderedBlock:
    """Run every stage once, in order, and print the rendered entry.

    Args:
        config: Runtime configuration
        today: Date to select for (defaults to config.today, then the local date)
        out: Stream to print to (defaults to stdout)
        fetcher: Capability used to fetch the default word list
        reader: Capability used to read the custom word file
        client: Optional httpx client for the dictionary lookup

    Returns:
        The block that was printed

    Raises:
        EmptyPoolError: If no words are available
        WordNotFoundError: If the dictionary has no entry for the word
        ApiFailureError: If the dictionary request fails
    """
    out = out if out is not None else sys.stdout
    today = today or config.today or date.today()

    # Stage 1: word pool
    pool = load_word_pool(config, fetcher, reader)

    # Stage 2: selection
    word = select_word(pool, today)
    logger.info(f"Day {day_of_year(today)} of {today.year}: selected {word!r}")

    # Stage 3: dictionary lookup
    entry = fetch_entry(word, config, client)

    # Stage 4: render and print
    available_width = config.width if config.width is not None else terminal_columns()
    block = render(entry, available_width, config.max_content_width)
    isatty = hasattr(out, "isatty") and out.isatty()
    print(block.to_text(color=config.use_color(isatty)), file=out)
    return block
