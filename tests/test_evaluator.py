import pytest

from wordgrid.bag import Rack
from wordgrid.board import Board
from wordgrid.constants import ACROSS, DOWN, WILD, letter_to_index
from wordgrid.dictionary import WordDictionary
from wordgrid.evaluator import evaluate_play
from wordgrid.move import Play, Rejection
from wordgrid.scores import ScoreTable

WORDS = WordDictionary(["cat", "car", "art", "at"], board_dimension=16)
FLAT = ScoreTable([1] * 26)


def seeded_board():
    board = Board(16)
    board.set(8, 8, "a")
    return board


def scores_with(**letters):
    values = [1] * 26
    for letter, score in letters.items():
        values[letter_to_index(letter)] = score
    return ScoreTable(values)


def evaluate(play, rack, board=None, scores=FLAT):
    return evaluate_play(play, Rack.from_letters(rack), board or seeded_board(), WORDS, scores)


def test_cat_through_seed_letter():
    result = evaluate(Play(8, 7, ACROSS, "cat"), "cat")
    assert result.accepted
    assert result.score == 3
    assert result.rejection is None
    assert result.tiles_consumed == 2
    assert result.tiles_used[letter_to_index("c")] == 1
    assert result.tiles_used[letter_to_index("t")] == 1
    assert result.tiles_used[letter_to_index("a")] == 0
    assert result.cross_words == []


def test_missing_letter_without_blank_is_insufficient():
    result = evaluate(Play(8, 7, ACROSS, "cat"), "ca")
    assert result.score == -1
    assert result.rejection is Rejection.INSUFFICIENT_TILES


def test_blank_fills_in_and_scores_nothing():
    result = evaluate(Play(8, 7, ACROSS, "cat"), "ca*", scores=scores_with(t=5))
    assert result.accepted
    assert result.score == 2
    assert result.tiles_used[WILD] == 1
    assert result.tiles_used[letter_to_index("t")] == 0
    assert result.blank_positions == {(8, 9)}


def test_real_tile_used_before_blank():
    result = evaluate(Play(8, 7, ACROSS, "tat"), "t*")
    assert result.accepted
    assert result.score == 2
    assert result.tiles_used[letter_to_index("t")] == 1
    assert result.tiles_used[WILD] == 1
    assert result.blank_positions == {(8, 9)}


def test_resubmitting_word_on_board_adds_nothing():
    board = seeded_board()
    board.apply(Play(8, 7, ACROSS, "cat"))
    result = evaluate(Play(8, 7, ACROSS, "cat"), "cat", board)
    assert result.rejection is Rejection.NO_NEW_LETTERS


def test_adjacent_on_axis_even_if_longer_word_is_valid():
    board = seeded_board()
    board.apply(Play(8, 6, ACROSS, "car"))
    # "car" + "t" would spell "cart", which is still refused
    words = WordDictionary(["car", "cart", "t"], board_dimension=16)
    result = evaluate_play(Play(8, 9, ACROSS, "t"), Rack.from_letters("t"), board, words, FLAT)
    assert result.rejection is Rejection.ADJACENT_ON_AXIS


def test_adjacent_before_start():
    board = seeded_board()
    result = evaluate(Play(8, 9, ACROSS, "at"), "at", board)
    assert result.rejection is Rejection.ADJACENT_ON_AXIS


def test_adjacent_down():
    result = evaluate(Play(9, 8, DOWN, "at"), "at")
    assert result.rejection is Rejection.ADJACENT_ON_AXIS


def test_disconnected_play_with_only_seed():
    result = evaluate(Play(2, 2, ACROSS, "cat"), "cat")
    assert result.rejection is Rejection.DISCONNECTED


def test_first_play_on_empty_board_needs_no_connection():
    result = evaluate(Play(2, 2, ACROSS, "cat"), "cat", Board(16))
    assert result.accepted
    assert result.score == 3


def test_board_conflict():
    result = evaluate(Play(8, 6, ACROSS, "cat"), "cat")
    assert result.rejection is Rejection.BOARD_CONFLICT
    assert "A" in result.message and "T" in result.message


def test_invalid_cross_word():
    # a at (8, 9) sits next to the seed a, spelling "aa"
    result = evaluate(Play(7, 9, DOWN, "cat"), "cat")
    assert result.rejection is Rejection.INVALID_CROSS_WORD
    assert '"aa"' in result.message


def test_valid_cross_word_is_scored():
    # t at (8, 9) forms "at" with the seed a
    result = evaluate(Play(6, 9, DOWN, "cat"), "cat", scores=scores_with(c=3, t=2))
    assert result.accepted
    assert result.cross_words == ["at"]
    # cat = 3 + 1 + 2, at = 1 + 2
    assert result.score == 9


def test_cross_word_counts_as_connection():
    board = Board(16)
    board.set(8, 8, "a")
    board.set(0, 0, "z")
    result = evaluate(Play(6, 9, DOWN, "cat"), "cat", board)
    assert result.accepted
    assert result.cross_words == ["at"]


def test_blank_in_cross_word_scores_nothing():
    result = evaluate(Play(6, 9, DOWN, "cat"), "ca*", scores=scores_with(t=7))
    assert result.accepted
    # c + a + blank, then "at" = a + blank
    assert result.score == 3


def test_blank_already_on_board_scores_nothing():
    board = Board(16)
    board.set(8, 8, "a", blank=True)
    result = evaluate(Play(8, 7, ACROSS, "cat"), "ct", board, scores=scores_with(a=9))
    assert result.accepted
    assert result.score == 2


@pytest.mark.parametrize("play", [
    Play(8, 14, ACROSS, "cat"),
    Play(14, 8, DOWN, "cat"),
    Play(16, 0, ACROSS, "cat"),
    Play(-1, 3, DOWN, "cat"),
])
def test_out_of_bounds(play):
    result = evaluate(play, "cat")
    assert result.rejection is Rejection.OUT_OF_BOUNDS


def test_first_failure_wins():
    # letters are checked in order; the first one that fails decides
    result = evaluate(Play(8, 6, ACROSS, "cat"), "c")
    assert result.rejection is Rejection.INSUFFICIENT_TILES
    result = evaluate(Play(8, 6, ACROSS, "cat"), "ca")
    assert result.rejection is Rejection.BOARD_CONFLICT


def test_evaluation_changes_nothing():
    board = seeded_board()
    rack = Rack.from_letters("cat")
    before = [row[:] for row in board.cells]
    evaluate_play(Play(8, 7, ACROSS, "cat"), rack, board, WORDS, FLAT)
    evaluate_play(Play(7, 9, DOWN, "cat"), rack, board, WORDS, FLAT)
    assert board.cells == before
    assert rack.letters() == "act"
