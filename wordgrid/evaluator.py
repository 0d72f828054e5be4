"""Play validation and scoring.

:func:`evaluate_play` is pure: it reads the board, rack and dictionary and
returns an :class:`~wordgrid.move.Evaluation` without changing anything.
Rules are checked in order and the first one that fails decides the
rejection:

1. the play must fit on the board;
2. the cells just before and just after the word, along its own axis,
   must be empty;
3. every letter must either match the board or be placed from the rack
   (a blank stands in when the letter itself has run out);
4. every newly placed letter that touches tiles across the play's axis
   must form a dictionary word with them;
5. at least one tile must be placed;
6. the play must touch what is already on the board, by reusing one of
   its letters or by forming a cross word.

Rules 3 and 4 are checked together, letter by letter.
"""

from __future__ import annotations

from wordgrid.bag import Rack
from wordgrid.board import Board
from wordgrid.constants import LETTER_SPACE_SIZE, WILD, letter_to_index
from wordgrid.dictionary import WordDictionary
from wordgrid.move import Evaluation, Play, Rejection
from wordgrid.scores import ScoreTable


def evaluate_play(
    play: Play,
    rack: Rack,
    board: Board,
    dictionary: WordDictionary,
    scores: ScoreTable,
) -> Evaluation:
    """Validate *play* for a player holding *rack* and score it."""
    dr = 0 if play.across else 1
    dc = 1 if play.across else 0
    length = len(play.word)

    if not board.in_bounds(play.row, play.col):
        return _out_of_bounds(play)

    # Touching a tile along the same axis would really spell a longer word
    if (board.is_occupied(play.row - dr, play.col - dc)
            or board.is_occupied(play.row + length * dr, play.col + length * dc)):
        return Evaluation.rejected(
            play, Rejection.ADJACENT_ON_AXIS,
            "It would be right up against another word in the same direction, "
            "forming a longer word. If that longer word is valid and you want "
            "to play it, enter it instead.",
        )

    score = 0
    tiles_used = [0] * (LETTER_SPACE_SIZE + 1)
    blank_positions: set[tuple[int, int]] = set()
    cross_words: list[str] = []
    reused = 0

    for i, letter in enumerate(play.word):
        r = play.row + i * dr
        c = play.col + i * dc
        if not board.in_bounds(r, c):
            return _out_of_bounds(play)
        index = letter_to_index(letter)
        existing = board.get(r, c)

        if existing == letter:
            reused += 1
            if not board.is_blank(r, c):
                score += scores.score(index)
            continue
        if existing is not None:
            return Evaluation.rejected(
                play, Rejection.BOARD_CONFLICT,
                f"The board already has {existing.upper()} where you want to put {letter.upper()}.",
            )

        if rack.count(index) > tiles_used[index]:
            tiles_used[index] += 1
            is_blank = False
            score += scores.score(index)
        elif rack.count(WILD) > tiles_used[WILD]:
            tiles_used[WILD] += 1
            is_blank = True
            blank_positions.add((r, c))
        else:
            return Evaluation.rejected(
                play, Rejection.INSUFFICIENT_TILES,
                f"You do not have enough {letter.upper()}'s to play it there.",
            )

        cross = _cross_word(board, r, c, letter, is_blank, dc, dr, scores)
        if cross is not None:
            cross_word, cross_score = cross
            if cross_word not in dictionary:
                return Evaluation.rejected(
                    play, Rejection.INVALID_CROSS_WORD,
                    f'Doing so would also spell the invalid word "{cross_word}".',
                )
            cross_words.append(cross_word)
            score += cross_score

    if not any(tiles_used):
        return Evaluation.rejected(
            play, Rejection.NO_NEW_LETTERS,
            "The word is already on the board in that position. "
            "You wouldn't be adding anything to it.",
        )
    if not reused and not cross_words and board.occupied_count() > 0:
        return Evaluation.rejected(
            play, Rejection.DISCONNECTED,
            "It would not be touching any of the letters already on the board.",
        )

    return Evaluation(
        play,
        score=score,
        tiles_used=tiles_used,
        blank_positions=blank_positions,
        cross_words=cross_words,
    )


def _out_of_bounds(play: Play) -> Evaluation:
    return Evaluation.rejected(
        play, Rejection.OUT_OF_BOUNDS,
        "Some part of the word would be beyond the edges of the board.",
    )


def _cross_word(
    board: Board,
    r: int,
    c: int,
    placed_letter: str,
    is_blank: bool,
    cross_dr: int,
    cross_dc: int,
    scores: ScoreTable,
) -> tuple[str, int] | None:
    """The perpendicular word through a newly placed letter and its score.

    Returns None when the letter has no neighbours across the play.
    """
    before: list[tuple[int, int]] = []
    nr, nc = r - cross_dr, c - cross_dc
    while board.is_occupied(nr, nc):
        before.append((nr, nc))
        nr -= cross_dr
        nc -= cross_dc
    before.reverse()

    after: list[tuple[int, int]] = []
    nr, nc = r + cross_dr, c + cross_dc
    while board.is_occupied(nr, nc):
        after.append((nr, nc))
        nr += cross_dr
        nc += cross_dc

    if not before and not after:
        return None

    cross_word = (
        "".join(board.cells[br][bc] for br, bc in before)
        + placed_letter
        + "".join(board.cells[ar][ac] for ar, ac in after)
    )
    score = 0 if is_blank else scores.score(letter_to_index(placed_letter))
    for pr, pc in before + after:
        if not board.is_blank(pr, pc):
            score += scores.score(letter_to_index(board.cells[pr][pc]))
    return cross_word, score
