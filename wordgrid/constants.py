"""Letter space and game constants."""

from __future__ import annotations

LETTER_SPACE_SIZE = 26
WILD = LETTER_SPACE_SIZE  # rack slot of the blank tile
WILD_CHAR = "*"

RACK_SIZE = 8
MAX_BOARD_DIMENSION = 24
DEFAULT_BOARD_DIMENSION = 16

GIVE_UP = "_"

ACROSS = "a"
DOWN = "d"

_LOWERCASE_OFFSET = ord("a")


def letter_to_index(letter: str) -> int:
    """Rack slot for a lowercase letter, or WILD for the blank."""
    if letter == WILD_CHAR:
        return WILD
    return ord(letter) - _LOWERCASE_OFFSET


def index_to_letter(index: int) -> str:
    if index == WILD:
        return WILD_CHAR
    return chr(index + _LOWERCASE_OFFSET)


def clean_word(word: str) -> str:
    """Lowercase *word*, or return "" if it has anything outside a-z.

    Only ASCII is considered: characters such as the Kelvin sign, which
    lowercase to an ASCII letter, still make the word invalid.
    """
    if not word.isascii():
        return ""
    word = word.lower()
    for ch in word:
        if not "a" <= ch <= "z":
            return ""
    return word
