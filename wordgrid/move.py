"""Candidate plays and the result of evaluating them."""

from __future__ import annotations

from enum import Enum

from wordgrid.constants import ACROSS, LETTER_SPACE_SIZE, index_to_letter


class Play:
    """A word proposed at a board position, not yet validated."""

    __slots__ = ("row", "col", "direction", "word")

    def __init__(self, row: int, col: int, direction: str, word: str):
        self.row = row
        self.col = col
        self.direction = direction  # ACROSS or DOWN
        self.word = word

    @property
    def across(self) -> bool:
        return self.direction == ACROSS

    def positions(self) -> list[tuple[int, int]]:
        """Cells the word would cover, in order."""
        dr = 0 if self.across else 1
        dc = 1 if self.across else 0
        return [(self.row + i * dr, self.col + i * dc) for i in range(len(self.word))]

    def location(self) -> str:
        """The play's position in ``11gd`` notation."""
        return f"{self.row + 1}{index_to_letter(self.col)}{self.direction}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Play):
            return NotImplemented
        return (self.row, self.col, self.direction, self.word) == (
            other.row, other.col, other.direction, other.word)

    def __hash__(self) -> int:
        return hash((self.row, self.col, self.direction, self.word))

    def __repr__(self) -> str:
        arrow = "→" if self.across else "↓"
        return f"{self.word} at ({self.row},{self.col}) {arrow}"


class Rejection(Enum):
    """Why the evaluator refused a play."""

    OUT_OF_BOUNDS = "out of bounds"
    ADJACENT_ON_AXIS = "adjacent on axis"
    INSUFFICIENT_TILES = "insufficient tiles"
    BOARD_CONFLICT = "board conflict"
    INVALID_CROSS_WORD = "invalid cross word"
    NO_NEW_LETTERS = "no new letters"
    DISCONNECTED = "disconnected"


class Evaluation:
    """Outcome of checking a :class:`Play` against a board and rack.

    ``score`` is -1 when the play is illegal, in which case ``rejection``
    and ``message`` say why.  ``tiles_used`` has one count per rack slot
    (26 letters then the blank).
    """

    __slots__ = (
        "play", "score", "tiles_used", "blank_positions", "cross_words",
        "rejection", "message",
    )

    def __init__(
        self,
        play: Play,
        score: int = 0,
        tiles_used: list[int] | None = None,
        blank_positions: set[tuple[int, int]] | None = None,
        cross_words: list[str] | None = None,
        rejection: Rejection | None = None,
        message: str = "",
    ):
        self.play = play
        self.score = score
        self.tiles_used = tiles_used or [0] * (LETTER_SPACE_SIZE + 1)
        self.blank_positions = blank_positions or set()
        self.cross_words = cross_words or []
        self.rejection = rejection
        self.message = message

    @classmethod
    def rejected(cls, play: Play, rejection: Rejection, message: str) -> Evaluation:
        return cls(play, score=-1, rejection=rejection, message=message)

    @property
    def accepted(self) -> bool:
        return self.score >= 0

    @property
    def tiles_consumed(self) -> int:
        return sum(self.tiles_used)

    def __repr__(self) -> str:
        if not self.accepted:
            return f"{self.play!r} rejected: {self.rejection.value}"
        cross = f"  cross={','.join(self.cross_words)}" if self.cross_words else ""
        return f"{self.play!r} = {self.score} pts{cross}"
