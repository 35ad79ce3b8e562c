"""Constants used throughout the wotd codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Remote services
    DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"
    """Free Dictionary API endpoint, templated with the URL-quoted word."""

    # Config locations
    APP_DIR_NAME = "wotd"
    """Directory under the config root holding wotd's files."""

    CUSTOM_WORDS_FILENAME = "custom_words.json"
    """JSON array of user-supplied words, merged into the default list."""

    CONFIG_FILENAME = "config.json"
    """Optional flat JSON config file."""

    DEFAULT_WORDS_FILENAME = "words.json"
    """Default word list shipped alongside the package."""

    # Layout
    MAX_CONTENT_WIDTH = 80
    """Widest interior width of the rendered box."""

    MIN_CONTENT_WIDTH = 10
    """Interior width floor used when the terminal is very narrow."""

    BORDER_ALLOWANCE = 4
    """Columns reserved from the terminal width for borders and margin."""

    DEFINITION_INDENT = "  "
    EXAMPLE_INDENT = "    "
    THESAURUS_INDENT = "  "

    ELLIPSIS = "…"
    """Marks text clipped to keep the box width fixed."""

    # Exit codes
    EXIT_FAILURE = 1
    EXIT_INTERRUPTED = 130
