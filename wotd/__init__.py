"""wotd - Word of the day in the terminal.

Picks a deterministic word for each calendar day, looks it up in the Free
Dictionary API, and prints it in a bordered box.
"""

from .core import Config, DictionaryEntry, WordPool, load_config, merge, select_index, select_word
from .processing import run_pipeline
from .rendering import render

__version__ = "0.1.0"
__all__ = [
    "Config",
    "DictionaryEntry",
    "WordPool",
    "load_config",
    "merge",
    "render",
    "run_pipeline",
    "select_index",
    "select_word",
]
