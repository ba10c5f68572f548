import io

from drillbox.board import Board
from drillbox.tictactoe import play, read_position, render_board, render_numbered, main


def _reader(*tokens):
    source = iter(tokens)

    def read():
        try:
            return next(source)
        except StopIteration:
            raise EOFError from None

    return read


# x x o o / x o x o ... filled without four in a line
TIE_MOVES = ["0", "1", "2", "3", "4", "5", "6", "7", "9", "8", "11", "10", "13", "12", "15", "14"]


def test_render_numbered_layout():
    text = render_numbered()
    assert text.startswith("|0: |1: |2: |3: |\n")
    assert "|12:|13:|14:|15:|\n" in text
    assert text.endswith("\n\n\n")
    assert text.count("|\n") == 4


def test_render_board_shows_marks():
    board = Board()
    board.set_position(0, "x")
    text = render_board(board)
    assert text.startswith(render_numbered())
    assert "|x|_|_|_|\n" in text
    assert text.count("|_|_|_|_|\n") == 3


def test_read_position_retries_until_valid():
    out = io.StringIO()
    assert read_position(_reader("abc", "16", "-1", "7"), out) == 7
    assert out.getvalue().count("That is not a valid position") == 3


def test_x_wins_top_row():
    out = io.StringIO()
    moves = ["Alice", "Bob", "0", "4", "1", "5", "2", "6", "3"]
    assert play(_reader(*moves), out) == "x"
    assert "Congrats Alice you won!" in out.getvalue()
    assert "Tie game." not in out.getvalue()


def test_o_wins_column():
    out = io.StringIO()
    moves = ["Alice", "Bob", "0", "1", "2", "5", "4", "9", "6", "13"]
    assert play(_reader(*moves), out) == "o"
    assert "Congrats Bob you won!" in out.getvalue()


def test_taken_position_is_asked_again():
    out = io.StringIO()
    moves = ["Alice", "Bob", "0", "0", "4", "1", "5", "2", "6", "3"]
    assert play(_reader(*moves), out) == "x"
    assert out.getvalue().count("That position is taken.") == 1


def test_full_board_without_line_is_a_tie():
    out = io.StringIO()
    assert play(_reader("Alice", "Bob", *TIE_MOVES), out) is None
    text = out.getvalue()
    assert text.endswith("Tie game.\n\n")
    assert "Congrats" not in text


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice Bob\n0 4 1 5 2 6 3\n"))
    assert main([]) == 0
    assert "Congrats Alice you won!" in capsys.readouterr().out


def test_main_fails_on_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Alice Bob 0\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err