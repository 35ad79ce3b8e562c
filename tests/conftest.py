"""Shared fixtures for wotd tests."""

import io
import json
import sys

import pytest
from loguru import logger

from wotd.core import Config


@pytest.fixture
def entry_payload() -> dict:
    """A Free Dictionary API entry with two meanings, examples and synonyms."""
    return {
        "word": "serendipity",
        "phonetic": "/ˌsɛɹ.ənˈdɪp.ɪ.ti/",
        "phonetics": [
            {"text": "", "audio": ""},
            {"text": "/ˌsɛɹənˈdɪpɪti/", "audio": "https://example.com/serendipity.mp3"},
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "An unsought, unintended, and/or unexpected, but fortunate, "
                        "discovery and/or learning experience that happens by accident.",
                        "example": "Finding the book was pure serendipity.",
                        "synonyms": ["chance", "luck"],
                        "antonyms": [],
                    },
                    {
                        "definition": "The faculty of making such discoveries.",
                        "synonyms": [],
                        "antonyms": [],
                    },
                ],
                "synonyms": ["fluke", "chance"],
                "antonyms": ["misfortune"],
            },
            {
                "partOfSpeech": "adjective",
                "definitions": [
                    {"definition": "Occurring by happy accident.", "synonyms": ["fortuitous"]},
                ],
                "synonyms": [],
                "antonyms": [],
            },
        ],
        "license": {"name": "CC BY-SA 3.0", "url": "https://creativecommons.org/licenses/by-sa/3.0"},
        "sourceUrls": ["https://en.wiktionary.org/wiki/serendipity"],
    }


@pytest.fixture
def config(tmp_path) -> Config:
    """Config rooted in a temporary directory with a local default word list."""
    words_file = tmp_path / "words.json"
    words_file.write_text(json.dumps(["alpha", "beta"]))
    return Config(
        words_url=words_file.as_uri(),
        config_home=tmp_path / "config",
        dictionary_url="https://dictionary.test/entries/{word}",
        color=False,
    )


@pytest.fixture
def log_capture():
    """Capture loguru output at DEBUG level into a StringIO."""
    buffer = io.StringIO()
    handler_id = logger.add(buffer, level="DEBUG", format="{level}: {message}")
    try:
        yield buffer
    finally:
        logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any sinks added during a test (e.g. by setup_logger) afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
