"""Hydrothermal venture: count points where vent lines overlap."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, IO, Iterable

from ..solver import Solver

_PAIR_RE = re.compile(r"\d+,\d+", re.DOTALL | re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


@dataclass(frozen=True)
class Position:
    """A point on the diagram."""

    x: int
    y: int


@dataclass(frozen=True)
class Line:
    """A vent line between two points."""

    start: Position
    end: Position

    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    def is_diagonal(self) -> bool:
        return abs(self.start.x - self.end.x) == abs(self.start.y - self.end.y)


@dataclass
class Diagram:
    """Grid counting how many lines cover each point."""

    data: list[list[int]]

    @classmethod
    def blank(cls, max_x: int, max_y: int) -> Diagram:
        """A zeroed diagram covering 0..max_x by 0..max_y."""
        return cls(data=[[0] * (max_x + 1) for _ in range(max_y + 1)])

    def draw(self, lines: Iterable[Line]) -> None:
        """Draw each line by every kind it matches."""
        for line in lines:
            if line.is_vertical():
                self.draw_vertical(line)
            if line.is_horizontal():
                self.draw_horizontal(line)
            if line.is_diagonal():
                self.draw_diagonal(line)

    def draw_horizontal(self, line: Line) -> None:
        row = self.data[line.start.y]
        low, high = sorted((line.start.x, line.end.x))
        for x in range(low, high + 1):
            row[x] += 1

    def draw_vertical(self, line: Line) -> None:
        x = line.start.x
        low, high = sorted((line.start.y, line.end.y))
        for row in self.data[low:high + 1]:
            row[x] += 1

    def draw_diagonal(self, line: Line) -> None:
        if not line.is_diagonal():
            raise ValueError(f"line {line} is not diagonal")
        step_x = 1 if line.start.x < line.end.x else -1
        step_y = 1 if line.start.y < line.end.y else -1
        for k in range(abs(line.end.x - line.start.x) + 1):
            self.data[line.start.y + k * step_y][line.start.x + k * step_x] += 1

    def danger_zones(self, predicate: Callable[[int], bool]) -> int:
        """Count points whose cover count satisfies the predicate."""
        return sum(1 for row in self.data for count in row if predicate(count))

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(count) if count else "." for count in row) for row in self.data
        )


def parse_coordinates(text: str) -> Position:
    """Parse a point such as '0,9'."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"wrong coordinates pair {text!r}")
    return Position(x=_atoi(parts[0]), y=_atoi(parts[1]))


def parse_line(text: str) -> list[Position]:
    """Parse both ends of a line such as '0,9 -> 5,9'."""
    matches = _PAIR_RE.findall(text)
    if len(matches) != 2:
        raise ValueError(f"wrong coordinates line {text!r}")
    return [parse_coordinates(match) for match in matches]


def get_lines(stream: IO[str]) -> list[Line]:
    """Read one vent line per input line."""
    lines = []
    for text in _lines(stream):
        start, end = parse_line(text)
        lines.append(Line(start=start, end=end))
    return lines


def straight_only(line: Line) -> bool:
    return line.is_horizontal() or line.is_vertical()


def straight_or_diagonal(line: Line) -> bool:
    return straight_only(line) or line.is_diagonal()


def filter_lines(lines: Iterable[Line], predicate: Callable[[Line], bool]) -> list[Line]:
    """Keep the lines that satisfy the predicate, in order."""
    return [line for line in lines if predicate(line)]


def is_danger_zone(count: int) -> bool:
    return count > 1


def get_bounds(lines: Iterable[Line]) -> Position:
    """Largest x and y over all line ends, at least zero."""
    max_x = max_y = 0
    for line in lines:
        max_x = max(max_x, line.start.x, line.end.x)
        max_y = max(max_y, line.start.y, line.end.y)
    return Position(x=max_x, y=max_y)


def draw_diagram(lines: list[Line]) -> Diagram:
    """Draw the lines on a diagram just large enough to hold them."""
    bounds = get_bounds(lines)
    diagram = Diagram.blank(bounds.x, bounds.y)
    diagram.draw(lines)
    return diagram


def _count_dangers(stream: IO[str], predicate: Callable[[Line], bool]) -> str:
    lines = filter_lines(get_lines(stream), predicate)
    return str(draw_diagram(lines).danger_zones(is_danger_zone))


class Solution(Solver):
    """Solution for 2021 day 5."""

    year = "2021"
    day = "5"

    def part1(self, stream: IO[str]) -> str:
        return _count_dangers(stream, straight_only)

    def part2(self, stream: IO[str]) -> str:
        return _count_dangers(stream, straight_or_diagonal)