"""Dictionary entry models matching the Free Dictionary API payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    """Base for API payload models: accepts camelCase aliases, ignores extra keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Phonetic(_ApiModel):
    """One pronunciation variant."""

    text: str | None = None
    audio: str | None = None


class Definition(_ApiModel):
    """A single sense of a word within one part of speech."""

    definition: str
    example: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class Meaning(_ApiModel):
    """Definitions grouped under one part of speech."""

    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: list[Definition] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class DictionaryEntry(_ApiModel):
    """The lookup result for one word."""

    word: str
    phonetic: str | None = None
    phonetics: list[Phonetic] = Field(default_factory=list)
    meanings: list[Meaning] = Field(default_factory=list)
    source_urls: list[str] = Field(default_factory=list, alias="sourceUrls")

    @property
    def display_phonetic(self) -> str:
        """First non-empty phonetic transcription, else the top-level one, else ''."""
        for phonetic in self.phonetics:
            if phonetic.text:
                return phonetic.text
        return self.phonetic or ""

    def all_synonyms(self) -> list[str]:
        """Meaning-level then definition-level synonyms, deduplicated in first-seen order."""
        seen: dict[str, None] = {}
        for meaning in self.meanings:
            for synonym in meaning.synonyms:
                seen.setdefault(synonym, None)
        for meaning in self.meanings:
            for definition in meaning.definitions:
                for synonym in definition.synonyms:
                    seen.setdefault(synonym, None)
        return list(seen)
