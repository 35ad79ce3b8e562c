"""Configuration model and loading."""

import json
import os
from argparse import ArgumentParser, Namespace
from datetime import date
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from wotd.utils.constants import Constants
from wotd.utils.helpers import default_config_root, expand_file_path

# CLI arguments copied onto Config fields of the same name when given
_CLI_OVERRIDES = (
    "today",
    "width",
    "verbose",
    "debug",
)


def default_words_url() -> str:
    """URL of the word list bundled next to the program."""
    data_file = Path(__file__).resolve().parent.parent / "data" / Constants.DEFAULT_WORDS_FILENAME
    return data_file.as_uri()


class Config(BaseModel):
    """Runtime configuration for a single wotd invocation."""

    words_url: str = Field(default_factory=default_words_url)
    dictionary_url: str = Constants.DICTIONARY_API_URL
    config_home: Path | None = None
    max_content_width: int = Constants.MAX_CONTENT_WIDTH
    width: int | None = None
    today: date | None = None
    color: bool | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("words_url", mode="before")
    @classmethod
    def normalize_words_url(cls, value: object) -> object:
        """Turn bare filesystem paths into file:// URLs."""
        if isinstance(value, str) and not urlparse(value).scheme:
            return Path(os.path.expanduser(value)).resolve().as_uri()
        return value

    @field_validator("config_home", mode="before")
    @classmethod
    def expand_config_home(cls, value: object) -> object:
        """Expand ~ in the config root."""
        if isinstance(value, str):
            return expand_file_path(value)
        return value

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check field combinations that single-field validation cannot."""
        if self.max_content_width < Constants.MIN_CONTENT_WIDTH:
            raise ValueError(
                f"max_content_width must be at least {Constants.MIN_CONTENT_WIDTH}"
            )
        if "{word}" not in self.dictionary_url:
            raise ValueError("dictionary_url must contain a {word} placeholder")
        if self.debug:
            self.verbose = True
        return self

    @property
    def config_root(self) -> Path:
        """Platform config root, or the injected one."""
        return self.config_home if self.config_home is not None else default_config_root()

    @property
    def config_dir(self) -> Path:
        """Directory holding wotd's own files."""
        return self.config_root / Constants.APP_DIR_NAME

    @property
    def custom_words_path(self) -> Path:
        """Location of the user's custom word list."""
        return self.config_dir / Constants.CUSTOM_WORDS_FILENAME

    def use_color(self, isatty: bool) -> bool:
        """Resolve the color setting; None means color on a TTY unless NO_COLOR is set."""
        if self.color is not None:
            return self.color
        return isatty and "NO_COLOR" not in os.environ


def _default_config_file() -> Path | None:
    candidate = default_config_root() / Constants.APP_DIR_NAME / Constants.CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _read_config_file(path: Path, parser: ArgumentParser) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"Could not read config file {path}: {e}")
    if not isinstance(data, dict):
        parser.error(f"Config file {path} must contain a JSON object")
    return data


def load_config(config_file: str | None, args: Namespace, parser: ArgumentParser) -> Config:
    """Load configuration from a flat JSON file with CLI arguments taking precedence.

    When no file is given, ``<config root>/wotd/config.json`` is used if it exists.

    Args:
        config_file: Path to the JSON config file, or None
        args: Parsed command-line arguments
        parser: Parser used to report configuration errors

    Returns:
        Validated Config
    """
    expanded = expand_file_path(config_file)
    path = Path(expanded) if expanded else _default_config_file()
    data = _read_config_file(path, parser) if path else {}

    for name in _CLI_OVERRIDES:
        value = getattr(args, name, None)
        if value is not None and value is not False:
            data[name] = value
    if getattr(args, "no_color", False):
        data["color"] = False

    try:
        return Config(**data)
    except ValidationError as e:
        parser.error(f"Invalid configuration: {e}")
        raise  # parser.error exits; keeps type checkers happy
