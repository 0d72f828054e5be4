"""Per-letter score table.

Scores come either from a text file of 26 integers (a-z order) or are
derived from how often each letter appears in the dictionary: common
letters score low and rare letters score high.  The blank tile always
scores 0 and is not stored here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from wordgrid.constants import LETTER_SPACE_SIZE, WILD, index_to_letter
from wordgrid.errors import ResourceError

if TYPE_CHECKING:
    from wordgrid.dictionary import WordDictionary

log = logging.getLogger("wordgrid")


class ScoreTable:
    """Immutable scores for the letters a-z."""

    __slots__ = ("_scores",)

    def __init__(self, scores: Iterable[int]):
        values = tuple(int(s) for s in scores)
        if len(values) != LETTER_SPACE_SIZE:
            raise ValueError(f"expected {LETTER_SPACE_SIZE} letter scores, got {len(values)}")
        for i, s in enumerate(values):
            if s < 1:
                raise ValueError(f"score for '{index_to_letter(i)}' must be positive, got {s}")
        self._scores: tuple[int, ...] = values

    @classmethod
    def load(cls, path: str) -> ScoreTable:
        """Read the first 26 whitespace-separated integers from *path*."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                tokens = f.read().split()
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceError(f"Unable to open {path}.") from exc

        if len(tokens) < LETTER_SPACE_SIZE:
            raise ResourceError(
                f"{path} contains fewer than {LETTER_SPACE_SIZE} letter scores."
            )
        try:
            table = cls(int(tok) for tok in tokens[:LETTER_SPACE_SIZE])
        except ValueError as exc:
            raise ResourceError(f"{path}: {exc}") from exc
        log.info("Loaded letter scores from %s", path)
        return table

    @classmethod
    def derive(cls, dictionary: WordDictionary) -> ScoreTable:
        """Score each letter by the inverse of its frequency in *dictionary*.

        ``score = max(1, total_letters // occurrences)``; a letter that
        never occurs is treated as occurring once.
        """
        counts = dictionary.letter_counts()
        total = sum(counts)
        table = cls(max(1, total // max(1, n)) for n in counts)
        log.info("Derived letter scores from %s letters", f"{total:,}")
        log.debug("Letter scores: %s", table)
        return table

    def score(self, index: int) -> int:
        """Score of the letter in rack slot *index* (0 for the blank)."""
        if index == WILD:
            return 0
        return self._scores[index]

    def __getitem__(self, index: int) -> int:
        return self._scores[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._scores)

    def __len__(self) -> int:
        return LETTER_SPACE_SIZE

    def __str__(self) -> str:
        return " ".join(f"{index_to_letter(i)}={s}" for i, s in enumerate(self._scores))
