import re

import pytest

from wordgrid import cli
from wordgrid.board import Board
from wordgrid.constants import GIVE_UP

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


@pytest.fixture(autouse=True)
def no_colorama_init(monkeypatch):
    monkeypatch.setattr(cli, "init", lambda: None)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncar\nart\nat\n")
    return path


def test_render_board_layout():
    board = Board(3)
    board.set(1, 2, "q")
    lines = plain(cli.render_board(board)).splitlines()
    assert lines[0] == "  |A|B|C|"
    assert lines[1] == "1 |_|_|_| 1"
    assert lines[2] == "2 |_|_|Q| 2"
    assert lines[-1] == lines[0]


def test_render_board_highlights_cells():
    board = Board(3)
    board.set(0, 0, "a")
    board.set(0, 1, "t")
    text = cli.render_board(board, highlight={(0, 1)})
    assert cli.Fore.YELLOW + cli.Style.BRIGHT + "T" in text
    assert cli.Fore.GREEN + "A" in text


def test_terminal_player_gives_up_on_eof():
    def read(prompt):
        raise EOFError

    player = cli.TerminalPlayer(read=read)
    assert player.ask_word(None) == GIVE_UP


def test_terminal_player_strips_answers():
    player = cli.TerminalPlayer(read=lambda prompt: "  cat \n")
    assert player.ask_word(None) == "cat"


def test_missing_word_file(tmp_path, caplog):
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert "Unable to open" in caplog.text


def test_short_score_file(tmp_path, words_file):
    scores = tmp_path / "scores.txt"
    scores.write_text("1 2 3\n")
    assert cli.main([str(words_file), "-l", str(scores)]) == 1


def test_dimension_out_of_range(words_file):
    with pytest.raises(SystemExit):
        cli.main([str(words_file), "-n", "30"])


def test_quit_at_first_prompt_is_a_tie(monkeypatch, capsys, words_file):
    def eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert cli.main([str(words_file), "--seed", "3", "--show-computer-tiles"]) == 0
    out = plain(capsys.readouterr().out)
    assert "Player: 0   Computer: 0" in out
    assert "Computer's tiles: " in out
    assert "The player gave up." in out
    assert out.rstrip().endswith("It's a tie.")


def test_give_up_word(monkeypatch, capsys, words_file):
    monkeypatch.setattr("builtins.input", lambda prompt: GIVE_UP)
    assert cli.main([str(words_file), "-n", "8"]) == 0
    out = plain(capsys.readouterr().out)
    assert "Computer's tiles" not in out
    assert "It's a tie." in out


def test_word_list_given_with_option(monkeypatch, capsys, words_file):
    monkeypatch.setattr("builtins.input", lambda prompt: GIVE_UP)
    assert cli.main(["-w", str(words_file), "--seed", "1"]) == 0
    assert "It's a tie." in plain(capsys.readouterr().out)


def test_long_option_names(words_file):
    args = cli.build_parser().parse_args(
        ["--valid_words_path", str(words_file), "--letter_scores_path", "scores.txt"])
    assert args.words_option == str(words_file)
    assert args.scores == "scores.txt"


def test_word_list_is_required():
    with pytest.raises(SystemExit):
        cli.main([])
