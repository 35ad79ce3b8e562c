"""Shared utility functions for wotd."""

import os
import shutil
from pathlib import Path


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def default_config_root() -> Path:
    """Return the platform config root ($XDG_CONFIG_HOME or ~/.config)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def terminal_columns() -> int:
    """Query the terminal width once; falls back to 80 columns when detached."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns
