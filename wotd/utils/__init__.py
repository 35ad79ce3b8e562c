"""Utility functions for wotd."""

from wotd.utils.constants import Constants
from wotd.utils.helpers import default_config_root, expand_file_path, terminal_columns
from wotd.utils.logging import setup_logger

__all__ = [
    "Constants",
    "default_config_root",
    "expand_file_path",
    "setup_logger",
    "terminal_columns",
]
