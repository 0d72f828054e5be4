"""Sorted word list with exact-match lookup and per-letter buckets."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from wordgrid.constants import LETTER_SPACE_SIZE, clean_word, letter_to_index
from wordgrid.errors import ResourceError

log = logging.getLogger("wordgrid")


class WordDictionary:
    """Immutable set of lowercase words, each shorter than the board.

    Words are cleaned, deduplicated and kept in alphabetical order; that
    order is the order the move engine enumerates them in.
    """

    def __init__(self, words: Iterable[str], board_dimension: int):
        kept: set[str] = set()
        for raw in words:
            word = clean_word(raw)
            if 0 < len(word) < board_dimension:
                kept.add(word)
        self._words: tuple[str, ...] = tuple(sorted(kept))
        self._lookup: frozenset[str] = frozenset(kept)
        self.board_dimension = board_dimension

        # words_containing() must keep alphabetical order within a bucket
        buckets: list[list[str]] = [[] for _ in range(LETTER_SPACE_SIZE)]
        for word in self._words:
            for ch in set(word):
                buckets[letter_to_index(ch)].append(word)
        self._buckets: tuple[tuple[str, ...], ...] = tuple(tuple(b) for b in buckets)

    @classmethod
    def load(cls, path: str, board_dimension: int) -> WordDictionary:
        """Read whitespace-separated words from *path*."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                tokens = f.read().split()
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceError(f"Unable to open {path}.") from exc

        dictionary = cls(tokens, board_dimension)
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        if not dictionary:
            log.warning("No usable words in %s for a %dx%d board.",
                        path, board_dimension, board_dimension)
        return dictionary

    def words_containing(self, letter: str) -> tuple[str, ...]:
        """Words that contain *letter*, in alphabetical order."""
        return self._buckets[letter_to_index(letter)]

    def letter_counts(self) -> list[int]:
        """Occurrences of each letter a-z across every word."""
        counts = [0] * LETTER_SPACE_SIZE
        for word in self._words:
            for ch in word:
                counts[letter_to_index(ch)] += 1
        return counts

    def is_valid(self, word: str) -> bool:
        return word in self._lookup

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words, board={self.board_dimension})"
