"""Word pool construction: ordered, deduplicated merge of word sources."""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from wotd.core.errors import EmptyPoolError


class WordPool(Sequence[str]):
    """Insertion-order-preserving set of candidate words.

    Indexable so that day-based selection is repeatable for identical inputs.
    Duplicates are detected by exact (case-sensitive) string equality.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: list[str] = []
        self._seen: set[str] = set()
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        """Add a word if it is not already present."""
        if word not in self._seen:
            self._seen.add(word)
            self._words.append(word)

    def __contains__(self, word: object) -> bool:
        return word in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._words[index]

    def __repr__(self) -> str:
        return f"WordPool({self._words!r})"


def merge(default_words: Sequence[str], custom_words: Sequence[str]) -> WordPool:
    """Merge the default and custom word lists into one pool.

    Args:
        default_words: Words from the default source
        custom_words: Words from the user's custom file

    Returns:
        WordPool holding each distinct word once, defaults first

    Raises:
        EmptyPoolError: If both lists are empty
    """
    pool = WordPool([*default_words, *custom_words])
    if not pool:
        raise EmptyPoolError()
    return pool
