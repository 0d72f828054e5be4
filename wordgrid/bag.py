"""Racks and the weighted tile drawer.

There is no finite bag of tiles: every draw samples a letter with
probability proportional to the inverse of its score, so common
(low-scoring) letters turn up more often than rare ones.  The blank gets
the average weight of the 26 letters.
"""

from __future__ import annotations

import random
from bisect import bisect_right

from wordgrid.constants import LETTER_SPACE_SIZE, WILD, index_to_letter, letter_to_index
from wordgrid.scores import ScoreTable


class Rack:
    """A player's tiles as one count per letter plus the blank."""

    __slots__ = ("counts",)

    def __init__(self, counts: list[int] | None = None):
        self.counts: list[int] = list(counts) if counts else [0] * (LETTER_SPACE_SIZE + 1)
        if len(self.counts) != LETTER_SPACE_SIZE + 1:
            raise ValueError(f"rack needs {LETTER_SPACE_SIZE + 1} slots, got {len(self.counts)}")

    @classmethod
    def from_letters(cls, letters: str) -> Rack:
        """Build a rack from a string such as ``"cat*"`` (``*`` = blank)."""
        rack = cls()
        for ch in letters:
            rack.counts[letter_to_index(ch)] += 1
        return rack

    def count(self, index: int) -> int:
        return self.counts[index]

    def total(self) -> int:
        return sum(self.counts)

    def add(self, index: int, n: int = 1) -> None:
        self.counts[index] += n

    def remove(self, tiles_used: list[int]) -> None:
        """Take the tiles of an accepted play off the rack."""
        for i, n in enumerate(tiles_used):
            if n > self.counts[i]:
                raise ValueError(
                    f"rack has {self.counts[i]} '{index_to_letter(i)}', cannot remove {n}"
                )
        for i, n in enumerate(tiles_used):
            self.counts[i] -= n

    def as_dict(self) -> dict[str, int]:
        """Letter -> count for every tile held (blank as ``*``)."""
        return {index_to_letter(i): n for i, n in enumerate(self.counts) if n > 0}

    def letters(self) -> str:
        return "".join(index_to_letter(i) * n for i, n in enumerate(self.counts))

    def copy(self) -> Rack:
        return Rack(self.counts)

    def __repr__(self) -> str:
        return f"Rack({self.letters()!r})"


class LetterBag:
    """Draws letters at random, weighted by the inverse of their score."""

    def __init__(self, scores: ScoreTable, rng: random.Random):
        self.rng = rng
        self.weights: list[float] = [0.0] * (LETTER_SPACE_SIZE + 1)
        running = 0.0
        for i in range(LETTER_SPACE_SIZE):
            running += 1.0 / scores[i]
            self.weights[i] = running
        last = self.weights[LETTER_SPACE_SIZE - 1]
        self.weights[WILD] = last + last / LETTER_SPACE_SIZE

    @property
    def total_weight(self) -> float:
        return self.weights[WILD]

    def draw_index(self) -> int:
        """Rack slot of one randomly drawn tile."""
        sample = self.rng.random() * self.total_weight
        return min(bisect_right(self.weights, sample), WILD)

    def draw_letters(self, rack: Rack, n: int) -> None:
        """Add *n* randomly drawn tiles to *rack*."""
        for _ in range(n):
            rack.add(self.draw_index())

    def draw_seed_letter(self) -> str:
        """A random letter for the opening board cell; never the blank."""
        index = WILD
        while index == WILD:
            index = self.draw_index()
        return index_to_letter(index)
