"""Command-line interface."""

import argparse
from datetime import date


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="wotd",
        description="Show a word of the day with its definition, pronunciation, and synonyms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Today's word
  %(prog)s

  # The word for a given day
  %(prog)s --date 2024-12-31

Extending the word list:
  Put a JSON array of words in ~/.config/wotd/custom_words.json
  (or $XDG_CONFIG_HOME/wotd/custom_words.json), for example:
  ["epistemology", "ontology", "soliloquy"]

Example config.json (~/.config/wotd/config.json):
{
  "words_url": "https://example.com/words.json",
  "max_content_width": 72,
  "color": false
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Selection and layout
    parser.add_argument(
        "--date",
        dest="today",
        type=_iso_date,
        help="Pick the word for this date (YYYY-MM-DD) instead of today",
    )
    parser.add_argument("--width", type=int, help="Render for this many columns")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Debug logging and tracebacks on errors"
    )

    return parser
