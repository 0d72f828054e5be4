"""Turn controller: one person against the computer.

A round is the person's play followed by the computer's reply; the board
is only checked for crowding once both have moved.  The person's moves
come from a :class:`Player`, which is also told about every rejection and
every completed round.
"""

from __future__ import annotations

import abc
import logging
import random
from enum import Enum

from wordgrid.bag import LetterBag, Rack
from wordgrid.board import Board
from wordgrid.constants import GIVE_UP, RACK_SIZE, clean_word
from wordgrid.dictionary import WordDictionary
from wordgrid.engine import MoveEngine
from wordgrid.errors import IllegalPlay, InvalidWord, MoveRejected
from wordgrid.evaluator import evaluate_play
from wordgrid.location import parse_location
from wordgrid.move import Evaluation, Play
from wordgrid.scores import ScoreTable

log = logging.getLogger("wordgrid.game")


class Phase(Enum):
    AWAITING_PERSON = "awaiting person"
    PERSON_EVALUATED = "person evaluated"
    COMPUTER_SEARCH = "computer search"
    COMPUTER_APPLIED = "computer applied"
    END_CHECK = "end check"
    ENDED = "ended"


class EndReason(Enum):
    GAVE_UP = "The player gave up."
    COMPUTER_STUCK = "The computer does not see any possible plays, so the game is over."
    BOARD_CRAMPED = "More than half the spaces on the board have been filled, so the game is over."


class Outcome(Enum):
    PERSON_WINS = "person wins"
    COMPUTER_WINS = "computer wins"
    TIE = "tie"


class TurnReport:
    """What happened in one round."""

    __slots__ = ("person", "computer", "end_reason")

    def __init__(
        self,
        person: Evaluation | None = None,
        computer: Evaluation | None = None,
        end_reason: EndReason | None = None,
    ):
        self.person = person
        self.computer = computer
        self.end_reason = end_reason

    @property
    def ended(self) -> bool:
        return self.end_reason is not None

    def __repr__(self) -> str:
        return f"TurnReport(person={self.person!r}, computer={self.computer!r}, end={self.end_reason})"


class Player(abc.ABC):
    """Source of the person's moves.

    Subclasses must provide ``ask_word`` and ``ask_location``; both may
    block for as long as they like, the game imposes no time limit.
    """

    @abc.abstractmethod
    def ask_word(self, game: Game) -> str:
        """The next word to play, or the give-up sentinel."""

    @abc.abstractmethod
    def ask_location(self, game: Game) -> str:
        """Where to play the word just given, e.g. ``11gd``."""

    def rejected(self, game: Game, error: MoveRejected) -> None:
        """Called when a proposed move is refused; the game asks again."""

    def turn_played(self, game: Game, report: TurnReport) -> None:
        """Called after every round, including the last one."""


class Game:
    """Board, racks and scores for one game, plus the rules for changing them."""

    def __init__(
        self,
        dictionary: WordDictionary,
        scores: ScoreTable,
        rng: random.Random | None = None,
        board: Board | None = None,
        person_rack: Rack | None = None,
        computer_rack: Rack | None = None,
    ):
        self.dictionary = dictionary
        self.scores = scores
        self.dimension = dictionary.board_dimension
        # seeded from OS entropy unless the caller injects a generator
        self.rng = rng if rng is not None else random.Random()
        self.bag = LetterBag(scores, self.rng)
        self.engine = MoveEngine(dictionary, scores)

        if board is None:
            board = Board(self.dimension)
            self._seed(board)
        elif board.dimension != self.dimension:
            raise ValueError(
                f"board is {board.dimension}x{board.dimension} but the dictionary "
                f"was built for {self.dimension}x{self.dimension}"
            )
        self._board = board

        self._person_rack = person_rack if person_rack is not None else self._fresh_rack()
        self._computer_rack = computer_rack if computer_rack is not None else self._fresh_rack()
        self.person_score = 0
        self.computer_score = 0
        self.phase = Phase.AWAITING_PERSON
        self.end_reason: EndReason | None = None
        self.last_computer_play: Evaluation | None = None

    # read-only views

    @property
    def board(self) -> Board:
        """Copy of the current board."""
        return self._board.copy()

    def cells(self) -> list[list[str | None]]:
        return [row[:] for row in self._board.cells]

    @property
    def person_rack(self) -> dict[str, int]:
        return self._person_rack.as_dict()

    @property
    def computer_rack(self) -> dict[str, int]:
        return self._computer_rack.as_dict()

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.ENDED

    # turns

    def check_word(self, word: str) -> str:
        """Clean *word* and make sure it is in the dictionary."""
        cleaned = clean_word(word)
        if not cleaned:
            raise InvalidWord(
                f'Invalid word "{word}". Be sure to use only English letters. If you are '
                f'unable to spell any more words, type "{GIVE_UP}" to end the game.'
            )
        if cleaned not in self.dictionary:
            raise InvalidWord(
                f'"{cleaned}" is not in the dictionary. If you are unable to spell any '
                f'more words, type "{GIVE_UP}" to end the game.'
            )
        return cleaned

    def check_person_play(self, word: str, location: str) -> Evaluation:
        """Evaluate the person's proposed play without applying it."""
        word = self.check_word(word)
        row, col, direction = parse_location(location, self.dimension)
        result = evaluate_play(
            Play(row, col, direction, word),
            self._person_rack, self._board, self.dictionary, self.scores,
        )
        if not result.accepted:
            raise IllegalPlay(result.rejection, f"That word cannot be played there. {result.message}")
        return result

    def give_up(self) -> TurnReport:
        """The person forfeits the rest of the game."""
        self._require_turn()
        self._end(EndReason.GAVE_UP)
        return TurnReport(end_reason=EndReason.GAVE_UP)

    def take_turn(self, word: str, location: str) -> TurnReport:
        """Play one round: the person's move, the computer's reply, the end check.

        Raises a MoveRejected subclass, leaving the game untouched, if the
        person's move is refused.
        """
        self._require_turn()
        if word == GIVE_UP:
            return self.give_up()

        person = self.check_person_play(word, location)
        self._set_phase(Phase.PERSON_EVALUATED)
        self.person_score += self._apply(person, self._person_rack)
        log.debug("Person played %r (total %d)", person, self.person_score)

        self._set_phase(Phase.COMPUTER_SEARCH)
        computer = self.engine.find_best_move(self._board, self._computer_rack)
        if computer is None:
            self._end(EndReason.COMPUTER_STUCK)
            return TurnReport(person=person, end_reason=EndReason.COMPUTER_STUCK)

        self._set_phase(Phase.COMPUTER_APPLIED)
        self.computer_score += self._apply(computer, self._computer_rack)
        self.last_computer_play = computer
        log.debug("Computer played %r (total %d)", computer, self.computer_score)

        self._set_phase(Phase.END_CHECK)
        if self._board.is_cramped():
            self._end(EndReason.BOARD_CRAMPED)
            return TurnReport(person=person, computer=computer, end_reason=EndReason.BOARD_CRAMPED)

        self._set_phase(Phase.AWAITING_PERSON)
        return TurnReport(person=person, computer=computer)

    def play(self, player: Player) -> Outcome:
        """Run rounds until the game ends and return the outcome."""
        while not self.is_over:
            word = player.ask_word(self)
            if word == GIVE_UP:
                report = self.give_up()
            else:
                try:
                    word = self.check_word(word)
                    location = player.ask_location(self)
                    report = self.take_turn(word, location)
                except MoveRejected as exc:
                    log.debug("Rejected %r: %s", word, exc)
                    player.rejected(self, exc)
                    continue
            player.turn_played(self, report)
        return self.outcome()

    def outcome(self) -> Outcome:
        if self.person_score > self.computer_score:
            return Outcome.PERSON_WINS
        if self.person_score < self.computer_score:
            return Outcome.COMPUTER_WINS
        return Outcome.TIE

    # internals

    def _seed(self, board: Board) -> None:
        """Put one random letter on the board for the first play to join."""
        letter = self.bag.draw_seed_letter()
        if self.dimension > 1:
            row = self.rng.randint(1, self.dimension - 1)
            col = self.rng.randint(1, self.dimension - 1)
        else:
            row = col = 0
        board.set(row, col, letter)
        log.debug("Seeded board with %s at (%d,%d)", letter, row, col)

    def _fresh_rack(self) -> Rack:
        rack = Rack()
        self.bag.draw_letters(rack, RACK_SIZE)
        return rack

    def _apply(self, result: Evaluation, rack: Rack) -> int:
        rack.remove(result.tiles_used)
        self._board.apply(result.play, result.blank_positions)
        self.bag.draw_letters(rack, result.tiles_consumed)
        return result.score

    def _require_turn(self) -> None:
        if self.phase is not Phase.AWAITING_PERSON:
            raise RuntimeError(f"cannot take a turn while the game is in phase {self.phase.value!r}")

    def _set_phase(self, phase: Phase) -> None:
        log.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _end(self, reason: EndReason) -> None:
        self._set_phase(Phase.ENDED)
        self.end_reason = reason
        log.debug("Game over: %s (person %d, computer %d)",
                  reason.name, self.person_score, self.computer_score)
