"""wordgrid: a word-placement game against a computer opponent."""

from wordgrid.constants import (
    ACROSS, DOWN, GIVE_UP, LETTER_SPACE_SIZE, MAX_BOARD_DIMENSION, RACK_SIZE, WILD,
    clean_word,
)
from wordgrid.errors import (
    IllegalPlay, InputFormatError, InvalidWord, MoveRejected, ResourceError, WordGridError,
)
from wordgrid.dictionary import WordDictionary
from wordgrid.scores import ScoreTable
from wordgrid.board import Board
from wordgrid.bag import LetterBag, Rack
from wordgrid.move import Evaluation, Play, Rejection
from wordgrid.evaluator import evaluate_play
from wordgrid.engine import MoveEngine
from wordgrid.location import parse_location
from wordgrid.game import EndReason, Game, Outcome, Phase, Player, TurnReport

__all__ = [
    "ACROSS",
    "DOWN",
    "GIVE_UP",
    "LETTER_SPACE_SIZE",
    "MAX_BOARD_DIMENSION",
    "RACK_SIZE",
    "WILD",
    "Board",
    "EndReason",
    "Evaluation",
    "Game",
    "IllegalPlay",
    "InputFormatError",
    "InvalidWord",
    "LetterBag",
    "MoveEngine",
    "MoveRejected",
    "Outcome",
    "Phase",
    "Play",
    "Player",
    "Rack",
    "Rejection",
    "ResourceError",
    "ScoreTable",
    "TurnReport",
    "WordDictionary",
    "WordGridError",
    "clean_word",
    "evaluate_play",
    "parse_location",
]
