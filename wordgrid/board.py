"""Square letter grid."""

from __future__ import annotations

from collections.abc import Iterable

from wordgrid.constants import MAX_BOARD_DIMENSION, index_to_letter
from wordgrid.move import Play


class Board:
    """N×N game board. Cells are None (empty) or a lowercase letter.

    Cells filled with a blank tile hold the letter the blank stands for
    and are also listed in ``blanks`` so they never score.
    """

    def __init__(self, dimension: int):
        if not 1 <= dimension <= MAX_BOARD_DIMENSION:
            raise ValueError(f"board dimension must be 1-{MAX_BOARD_DIMENSION}, got {dimension}")
        self.dimension = dimension
        self.cells: list[list[str | None]] = [
            [None] * dimension for _ in range(dimension)
        ]
        self.blanks: set[tuple[int, int]] = set()

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.dimension and 0 <= col < self.dimension

    def get(self, row: int, col: int) -> str | None:
        """Letter at (row, col), or None."""
        if self.in_bounds(row, col):
            return self.cells[row][col]
        return None

    def set(self, row: int, col: int, letter: str | None, blank: bool = False) -> None:
        """Place a letter or clear the cell."""
        if not self.in_bounds(row, col):
            return
        self.cells[row][col] = letter
        if blank and letter is not None:
            self.blanks.add((row, col))
        else:
            self.blanks.discard((row, col))

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col)."""
        return self.get(row, col) is None

    def is_occupied(self, row: int, col: int) -> bool:
        """True if there's a tile at (row, col)."""
        return not self.is_empty(row, col)

    def is_blank(self, row: int, col: int) -> bool:
        """True if (row, col) was filled with a blank tile."""
        return (row, col) in self.blanks

    def occupied_count(self) -> int:
        """Number of tiles on the board."""
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def is_cramped(self) -> bool:
        """True once more than half the cells are filled."""
        return self.occupied_count() > self.dimension * self.dimension >> 1

    def line(self, index: int, across: bool) -> list[str | None]:
        """Copy of row *index* (across) or column *index* (down)."""
        if across:
            return self.cells[index][:]
        return [self.cells[r][index] for r in range(self.dimension)]

    def apply(self, play: Play, blank_positions: Iterable[tuple[int, int]] = ()) -> None:
        """Write an already validated play onto the board."""
        blanks = set(blank_positions)
        for (r, c), ch in zip(play.positions(), play.word):
            self.cells[r][c] = ch
            if (r, c) in blanks:
                self.blanks.add((r, c))

    def copy(self) -> Board:
        b = Board(self.dimension)
        for r in range(self.dimension):
            b.cells[r] = self.cells[r][:]
        b.blanks = set(self.blanks)
        return b

    def __str__(self) -> str:
        header = "  |" + "".join(f"{index_to_letter(c).upper()}|" for c in range(self.dimension))
        lines = [header]
        for r in range(self.dimension):
            cells = "".join(f"{(ch or '_').upper()}|" for ch in self.cells[r])
            lines.append(f"{r + 1:<2}|{cells}{r + 1:>2}")
        lines.append(header)
        return "\n".join(lines)
