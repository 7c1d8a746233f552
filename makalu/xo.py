"""A two-player noughts and crosses game for the console."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import partial
from typing import TextIO

SIZE = 3
EMPTY = ""
PROMPT = "please enter number 0, 1 or 2"
INVALID = "invalid input, please enter 0, 1 or 2"


class InvalidMoveError(ValueError):
    """Raised for a move outside the board or onto a taken cell."""


def _empty_cells() -> list[list[str]]:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


@dataclass
class Board:
    cells: list[list[str]] = field(default_factory=_empty_cells)

    def place(self, row: int, column: int, player: str) -> None:
        """Put ``player``'s mark on an empty cell."""
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise InvalidMoveError(f"cell {row}, {column} is outside the board")
        current = self.cells[row][column]
        if current != EMPTY:
            raise InvalidMoveError(f"cell {row}, {column} already holds {current}")
        self.cells[row][column] = player

    def _win_kind(self, player: str) -> str | None:
        for i in range(SIZE):
            row = self.cells[i]
            column = [line[i] for line in self.cells]
            if all(cell == player for cell in row) or all(cell == player for cell in column):
                return "line"
        diagonal = [self.cells[i][i] for i in range(SIZE)]
        anti_diagonal = [self.cells[i][SIZE - 1 - i] for i in range(SIZE)]
        if all(cell == player for cell in diagonal) or all(
            cell == player for cell in anti_diagonal
        ):
            return "diagonal"
        return None

    def has_won(self, player: str) -> bool:
        """Whether ``player`` holds a full row, column or diagonal."""
        return self._win_kind(player) is not None

    def __str__(self) -> str:
        return "\n".join("[" + " ".join(row) + "]" for row in self.cells)


class _EndOfInput(Exception):
    pass


def _read_int(lines: Iterator[str]) -> int:
    line = next(lines, None)
    if line is None:
        raise _EndOfInput
    parts = line.split()
    try:
        return int(parts[0]) if parts else 0
    except ValueError:
        return 0


def play(input_lines: Iterable[str], output: TextIO) -> str | None:
    """Run a game from ``input_lines``; return the winner, or None if input runs out."""
    lines = iter(input_lines)
    say = partial(print, file=output)
    board = Board()
    player = "x"
    try:
        while True:
            say("player", player)

            say(PROMPT)
            row = _read_int(lines)
            if not 0 <= row < SIZE:
                say(INVALID)
                continue

            say(PROMPT)
            column = _read_int(lines)
            if not 0 <= column < SIZE:
                say(INVALID)
                continue

            try:
                board.place(row, column, player)
            except InvalidMoveError:
                say("invalid entry: ", row, column, "value", board.cells[row][column])
                continue

            say(board)

            kind = board._win_kind(player)
            if kind == "line":
                say("game ended, winner is player: ", player)
                return player
            if kind == "diagonal":
                say("game ended, the winner is player: ", player)
                return player

            player = "o" if player == "x" else "x"
    except _EndOfInput:
        return None


def main(argv: list[str] | None = None) -> int:
    """Play noughts and crosses on the terminal."""
    play(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())