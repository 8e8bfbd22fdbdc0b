"""Giant squid: play bingo against a set of boards."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, field
from typing import Callable, IO, Iterable, Optional

from ..solver import Solver

BOARD_SIZE = 5

_NUMBER_RE = re.compile(r"\d+", re.ASCII)


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


@dataclass
class Number:
    """A number on a board and whether it has been called."""

    value: int = 0
    marked: bool = False


def _zero_counts() -> list[int]:
    return [0] * BOARD_SIZE


@dataclass
class BoardState:
    """Count of marked numbers per column and per row."""

    verticals: list[int] = field(default_factory=_zero_counts)
    horizontals: list[int] = field(default_factory=_zero_counts)

    def update(self, row: int, column: int) -> None:
        """Record a marked number at the given cell."""
        self.verticals[column] += 1
        self.horizontals[row] += 1

    def is_won(self) -> bool:
        """Tell whether a whole row or column is marked."""
        return BOARD_SIZE in self.verticals or BOARD_SIZE in self.horizontals


def _empty_grid() -> list[list[Number]]:
    return [[Number() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


@dataclass
class Board:
    """A bingo board of five rows of five numbers."""

    id: int
    numbers: list[list[Number]] = field(default_factory=_empty_grid)
    state: BoardState = field(default_factory=BoardState)

    def find(self, value: int) -> Optional[tuple[int, int]]:
        """Return the (row, column) of the first cell holding value, if any."""
        return next(
            (
                (row, column)
                for row, cells in enumerate(self.numbers)
                for column, cell in enumerate(cells)
                if cell.value == value
            ),
            None,
        )

    def sum_unmarked(self) -> int:
        """Sum of all numbers not yet marked."""
        return sum(cell.value for cells in self.numbers for cell in cells if not cell.marked)

    def _mark(self, value: int) -> None:
        found = self.find(value)
        if found is None:
            return
        row, column = found
        self.state.update(row, column)
        self.numbers[row][column].marked = True


WinRule = Callable[[Board, int], bool]


def win_after(count: int) -> WinRule:
    """Rule that accepts the count-th board to win."""
    seen = itertools.count(1)
    return lambda _board, _value: next(seen) == count


@dataclass
class Bingo:
    """Numbers to draw and the boards playing."""

    numbers: list[int] = field(default_factory=list)
    boards: list[Board] = field(default_factory=list)

    def play(self, rule: WinRule) -> tuple[Board, int]:
        """Draw numbers until a winning board satisfies the rule.

        Returns that board and the number that made it win.
        """
        playing = list(self.boards)
        for value in self.numbers:
            still_playing = []
            for board in playing:
                board._mark(value)
                if not board.state.is_won():
                    still_playing.append(board)
                elif rule(board, value):
                    return board, value
            playing = still_playing
        raise ValueError("no board satisfied the winning rule")


def parse_bingo(stream: IO[str]) -> Bingo:
    """Read the drawn numbers and the boards."""
    game = Bingo()
    row = 0
    for index, line in enumerate(_lines(stream)):
        values = [int(match) for match in _NUMBER_RE.findall(line)]
        if line == "":
            game.boards.append(Board(id=len(game.boards) + 1))
            row = 0
        elif index == 0:
            game.numbers = values
        else:
            if not game.boards:
                raise ValueError(f"board line {line!r} before any board")
            if row >= BOARD_SIZE or len(values) > BOARD_SIZE:
                raise ValueError(f"board line {line!r} does not fit a {BOARD_SIZE}x{BOARD_SIZE} board")
            board = game.boards[-1]
            for column, value in enumerate(values):
                board.numbers[row][column] = Number(value)
            row += 1
    return game


class Solution(Solver):
    """Solution for 2021 day 4."""

    year = "2021"
    day = "4"

    def part1(self, stream: IO[str]) -> str:
        game = parse_bingo(stream)
        board, value = game.play(win_after(1))
        return str(board.sum_unmarked() * value)

    def part2(self, stream: IO[str]) -> str:
        game = parse_bingo(stream)
        board, value = game.play(win_after(len(game.boards)))
        return str(board.sum_unmarked() * value)