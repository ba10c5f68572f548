"""Two players take turns on a 4x4 board; four in a line wins."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import Optional, TextIO

from drillbox.board import SIZE, Board, PositionTakenError

MAX_TURNS = 8
POSITION_PROMPT = "Enter an integer between 0 and 15: "


def render_numbered() -> str:
    """The board with every cell showing its number."""
    cells = SIZE * SIZE
    body = "".join(
        f"|{index}:" + (" " if index <= 9 else "") + ("|\n" if index % SIZE == SIZE - 1 else "")
        for index in range(cells)
    )
    return body + "\n\n\n"


def _rows(board: Board) -> str:
    cells = board.positions()
    return "".join(
        "".join(f"|{cell}" for cell in cells[start:start + SIZE]) + "|\n"
        for start in range(0, SIZE * SIZE, SIZE)
    )


def render_board(board: Board) -> str:
    """The numbered board followed by the current marks."""
    return render_numbered() + _rows(board) + "\n\n\n"


def _render_marks(board: Board) -> str:
    return "\n\n" + _rows(board) + "\n\n\n"


def _stdin_reader(stream: TextIO) -> Callable[[], str]:
    def tokens() -> Iterator[str]:
        for line in stream:
            yield from line.split()

    source = tokens()

    def read() -> str:
        try:
            return next(source)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    return read


def read_position(input_fn: Callable[[], str], output: TextIO) -> int:
    """Prompt until the player enters a whole number from 0 to 15."""
    output.write(POSITION_PROMPT)
    while True:
        try:
            position = int(input_fn())
        except ValueError:
            position = -1
        if 0 <= position < SIZE * SIZE:
            return position
        output.write("That is not a valid position\n")
        output.write(POSITION_PROMPT)


def _place(board: Board, mark: str, input_fn: Callable[[], str], output: TextIO) -> None:
    while True:
        try:
            board.set_position(read_position(input_fn, output), mark)
        except PositionTakenError:
            output.write("That position is taken.")
        else:
            return


def play(
    input_fn: Optional[Callable[[], str]] = None,
    output: Optional[TextIO] = None,
) -> Optional[str]:
    """Play one game; return the winning mark, or None for a tie."""
    if output is None:
        output = sys.stdout
    if input_fn is None:
        input_fn = _stdin_reader(sys.stdin)

    board = Board()
    output.write("Name of user to be 'x' :")
    name_x = input_fn()
    output.write("Name of user to be 'o' :")
    name_o = input_fn()
    names = {"x": name_x, "o": name_o}

    for _ in range(MAX_TURNS):
        for mark in ("x", "o"):
            output.write(render_board(board))
            if mark == "o":
                output.write(_render_marks(board))
            output.write(f"{names[mark]} where would you like to place an {mark}?: ")
            output.write("\n\n")
            output.write(f" where would you like to place an {mark}?: ")
            _place(board, mark, input_fn, output)
            if mark == "o":
                output.write(render_board(board))
                output.write(_render_marks(board))
            winner = board.determine_winner()
            if winner is not None:
                output.write(render_board(board))
                output.write(_render_marks(board))
                output.write(f"Congrats {names[winner]} you won!\n\n")
                return winner

    output.write("Tie game.\n\n")
    return None


def main(argv: list[str] | None = None) -> int:
    """Play a game reading names and moves from standard input."""
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Two-player 4x4 tic-tac-toe; names and moves come from standard input.",
    )
    parser.parse_args(argv)
    try:
        play(_stdin_reader(sys.stdin), sys.stdout)
    except EOFError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0