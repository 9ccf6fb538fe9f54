"""
Fixed-length dictionary.

A WordSet holds words that all share one length N. It is filled once by a
loader (see wordstar.datasets.loader) and then only queried, so a single
instance can back any number of game sessions.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Set

from .errors import InvalidLength, LengthMismatch


def normalize(word: str) -> str:
    """Canonical form for comparisons: trimmed, lowercase."""
    return word.strip().lower()


class WordSet:
    """Set of equal-length words with membership queries."""

    def __init__(self, word_length: int, words: Iterable[str] = ()):
        if isinstance(word_length, bool) or not isinstance(word_length, int) or word_length <= 0:
            raise InvalidLength("word length must be positive")
        self.word_length = word_length
        self._words: Set[str] = set()
        for w in words:
            self.add(w)

    def add(self, word: str) -> None:
        """
        Add a word (normalized). Raises LengthMismatch if its length is not N;
        the set is left unchanged in that case. Re-adding a word is a no-op.
        """
        w = normalize(word)
        if len(w) != self.word_length:
            raise LengthMismatch(w, self.word_length)
        self._words.add(w)

    def contains(self, word: str) -> bool:
        return normalize(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        # No ordering guarantee; sort if you need determinism.
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordSet(word_length={self.word_length}, size={len(self)})"
