"""Terminal front end for wordgrid."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable

from colorama import Fore, Style, init

from wordgrid.board import Board
from wordgrid.constants import DEFAULT_BOARD_DIMENSION, GIVE_UP, MAX_BOARD_DIMENSION, index_to_letter
from wordgrid.dictionary import WordDictionary
from wordgrid.errors import MoveRejected, ResourceError
from wordgrid.game import Game, Outcome, Player, TurnReport
from wordgrid.scores import ScoreTable

log = logging.getLogger("wordgrid")

WORD_PROMPT = "What word do you want to play?"
LOCATION_PROMPT = "Where do you want to play the word?"


def render_board(board: Board, highlight: set[tuple[int, int]] | None = None) -> str:
    """Board as text with column letters on top and bottom, rows numbered from 1.

    Cells in *highlight* are drawn in yellow, blank tiles dimmed.
    """
    highlight = highlight or set()
    header = "  |" + "".join(f"{index_to_letter(c).upper()}|" for c in range(board.dimension))
    lines = [header]
    for r in range(board.dimension):
        parts = []
        for c in range(board.dimension):
            ch = board.cells[r][c]
            if ch is None:
                parts.append(Style.DIM + "_" + Style.RESET_ALL)
            elif (r, c) in highlight:
                parts.append(Fore.YELLOW + Style.BRIGHT + ch.upper() + Style.RESET_ALL)
            elif board.is_blank(r, c):
                parts.append(Fore.CYAN + Style.DIM + ch.upper() + Style.RESET_ALL)
            else:
                parts.append(Fore.GREEN + ch.upper() + Style.RESET_ALL)
        lines.append(f"{r + 1:<2}|" + "|".join(parts) + f"|{r + 1:>2}")
    lines.append(header)
    return "\n".join(lines)


def render_state(game: Game, show_computer_tiles: bool = False) -> str:
    """Scores, board and racks, the way they are shown between turns."""
    highlight: set[tuple[int, int]] = set()
    if game.last_computer_play is not None:
        highlight = set(game.last_computer_play.play.positions())
    lines = [
        f"Player: {game.person_score}   Computer: {game.computer_score}",
        render_board(game.board, highlight),
        "Your tiles: " + _tiles(game.person_rack),
    ]
    if show_computer_tiles:
        lines.append("Computer's tiles: " + _tiles(game.computer_rack))
    return "\n".join(lines) + "\n"


def _tiles(rack: dict[str, int]) -> str:
    return "".join(letter.upper() * n for letter, n in rack.items())


class TerminalPlayer(Player):
    """Reads the person's moves from the keyboard and prints the game."""

    def __init__(
        self,
        show_computer_tiles: bool = False,
        read: Callable[[str], str] | None = None,
    ):
        self.show_computer_tiles = show_computer_tiles
        self._read = read or input

    def _ask(self, prompt: str) -> str:
        try:
            return self._read(prompt + " ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return GIVE_UP

    def ask_word(self, game: Game) -> str:
        return self._ask(WORD_PROMPT)

    def ask_location(self, game: Game) -> str:
        return self._ask(LOCATION_PROMPT)

    def rejected(self, game: Game, error: MoveRejected) -> None:
        print(Fore.RED + str(error) + Style.RESET_ALL)

    def turn_played(self, game: Game, report: TurnReport) -> None:
        if report.person is not None:
            print(f"You scored {report.person.score} points.")
        if report.computer is not None:
            play = report.computer.play
            print(
                f'Computer played "{play.word}" at {play.location()} '
                f"for {report.computer.score} points."
            )
        if report.ended:
            print(report.end_reason.value)
        print(render_state(game, self.show_computer_tiles))


VERDICTS = {
    Outcome.PERSON_WINS: "Congratulations, you beat the computer!",
    Outcome.TIE: "It's a tie.",
    Outcome.COMPUTER_WINS: "You have been beaten by the computer.",
}


def _board_dimension(value: str) -> int:
    n = int(value)
    if not 1 <= n <= MAX_BOARD_DIMENSION:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_BOARD_DIMENSION}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgrid",
        description="Play a word-placement game against the computer.",
    )
    parser.add_argument("words", nargs="?", default=None,
                        help="Path of the text file containing the words considered valid")
    parser.add_argument("-w", "--valid_words_path", dest="words_option", default=None,
                        help="Same as the WORDS argument")
    parser.add_argument("-l", "--scores", "--letter_scores_path", dest="scores", default=None,
                        help="Path of a text file with the 26 letter scores (a-z). "
                             "If omitted, scores are derived from the word list.")
    parser.add_argument("-n", "--dimension", type=_board_dimension,
                        default=DEFAULT_BOARD_DIMENSION,
                        help=f"Side length of the square board "
                             f"(1-{MAX_BOARD_DIMENSION}, default {DEFAULT_BOARD_DIMENSION})")
    parser.add_argument("--show-computer-tiles", action="store_true",
                        help="Display the computer's tiles as well as your own each turn")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the tile drawer (random if omitted)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    words_path = args.words_option or args.words
    if words_path is None:
        parser.error("a word list is required (WORDS or -w)")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    init()

    try:
        dictionary = WordDictionary.load(words_path, args.dimension)
        if args.scores:
            scores = ScoreTable.load(args.scores)
        else:
            scores = ScoreTable.derive(dictionary)
    except ResourceError as exc:
        log.error("%s", exc)
        return 1

    game = Game(dictionary, scores, rng=random.Random(args.seed))
    player = TerminalPlayer(show_computer_tiles=args.show_computer_tiles)
    print(render_state(game, args.show_computer_tiles))

    outcome = game.play(player)
    print(VERDICTS[outcome])
    return 0


if __name__ == "__main__":
    sys.exit(main())
