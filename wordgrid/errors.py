"""Exceptions raised by the game engine.

Everything a player can get wrong during a turn derives from
:class:`MoveRejected` and is recoverable by asking again.
:class:`ResourceError` is raised while setting up a game and is fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordgrid.move import Rejection


class WordGridError(Exception):
    """Base class for all game errors."""


class MoveRejected(WordGridError):
    """A proposed move was refused; the player should try again."""


class InputFormatError(MoveRejected):
    """The location string could not be parsed or lies off the board."""


class InvalidWord(MoveRejected):
    """The word is empty, uses characters outside a-z, or is unknown."""


class IllegalPlay(MoveRejected):
    """The evaluator refused the play. ``reason`` says which rule failed."""

    def __init__(self, reason: Rejection, message: str):
        super().__init__(message)
        self.reason = reason


class ResourceError(WordGridError):
    """A dictionary or score table could not be loaded."""
