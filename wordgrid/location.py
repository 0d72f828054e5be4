"""Parsing of move locations such as ``11gd``.

A location is the 1-indexed row number, the column letter (``a`` is the
first column) and ``a`` for across or ``d`` for down, with nothing in
between.
"""

from __future__ import annotations

import re

from wordgrid.constants import ACROSS, DOWN, letter_to_index
from wordgrid.errors import InputFormatError

LOCATION_PATTERN = re.compile(r"^(\d+)([A-Za-z])([ADad])$")

LOCATION_HELP = (
    "Input the row number (starting at 1), the column letter and the "
    "direction letter ('a' for across or 'd' for down) without any "
    "separating characters. For example: 11gd"
)


def parse_location(text: str, board_dimension: int) -> tuple[int, int, str]:
    """Return ``(row, col, direction)`` with 0-indexed row and column.

    Raises InputFormatError if *text* is malformed or points off the board.
    """
    match = LOCATION_PATTERN.match(text.strip())
    if match is None:
        raise InputFormatError(f"Invalid location {text!r}. {LOCATION_HELP}")

    row = int(match.group(1)) - 1
    col = letter_to_index(match.group(2).lower())
    direction = ACROSS if match.group(3).lower() == "a" else DOWN
    if not (0 <= row < board_dimension and 0 <= col < board_dimension):
        raise InputFormatError(
            f"Location {text!r} is off the {board_dimension}x{board_dimension} board. {LOCATION_HELP}"
        )
    return row, col, direction
