"""A 4x4 tic-tac-toe board that needs four in a line to win."""

from __future__ import annotations

from typing import Optional

SIZE = 4
EMPTY = "_"
MARKS = ("x", "o")

_ROWS = tuple(tuple(range(start, start + SIZE)) for start in range(0, SIZE * SIZE, SIZE))
_COLUMNS = tuple(tuple(range(col, SIZE * SIZE, SIZE)) for col in range(SIZE))
_DIAGONALS = (
    tuple(range(0, SIZE * SIZE, SIZE + 1)),
    tuple(range(SIZE - 1, SIZE * SIZE - 1, SIZE - 1)),
)


class PositionTakenError(ValueError):
    """Raised when a mark is placed on an occupied cell."""


class Board:
    """Sixteen cells numbered 0-15 row by row, each empty, 'x' or 'o'."""

    def __init__(self) -> None:
        self._cells = [EMPTY] * (SIZE * SIZE)

    def positions(self) -> str:
        """The sixteen cells as a string, '_' for an empty one."""
        return "".join(self._cells)

    def set_position(self, index: int, mark: str) -> None:
        """Place ``mark`` on cell ``index``; PositionTakenError if it is occupied."""
        if not 0 <= index < SIZE * SIZE:
            raise IndexError(f"position {index} is outside 0-{SIZE * SIZE - 1}")
        if mark not in MARKS:
            raise ValueError(f"mark must be one of {MARKS}, got {mark!r}")
        if self._cells[index] != EMPTY:
            raise PositionTakenError(f"position {index} is taken")
        self._cells[index] = mark

    def _line_winner(self, line: tuple[int, ...]) -> Optional[str]:
        marks = {self._cells[index] for index in line}
        if len(marks) == 1:
            (mark,) = marks
            if mark in MARKS:
                return mark
        return None

    def _first_winner(self, lines: tuple[tuple[int, ...], ...]) -> Optional[str]:
        return next((w for w in map(self._line_winner, lines) if w is not None), None)

    def check_rows(self) -> Optional[str]:
        """The mark filling a whole row, or None."""
        return self._first_winner(_ROWS)

    def check_columns(self) -> Optional[str]:
        """The mark filling a whole column, or None."""
        return self._first_winner(_COLUMNS)

    def check_diagonals(self) -> Optional[str]:
        """The mark filling a whole diagonal, or None."""
        return self._first_winner(_DIAGONALS)

    def determine_winner(self) -> Optional[str]:
        """The winning mark, checking rows, then columns, then diagonals."""
        return self.check_rows() or self.check_columns() or self.check_diagonals()

    def __repr__(self) -> str:
        return f"Board({self.positions()!r})"