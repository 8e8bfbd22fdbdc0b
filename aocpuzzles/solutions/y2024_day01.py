"""Historian hysteria: compare two lists of location ids."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import IO, Iterable

from ..solver import Solver

_SEPARATOR = "   "
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"failed to parse int {text!r}")
    return int(text)


@dataclass
class Lists:
    """The left and right columns of the input."""

    items_a: list[int] = field(default_factory=list)
    items_b: list[int] = field(default_factory=list)


def parse_input(stream: IO[str]) -> Lists:
    """Read pairs of numbers separated by three spaces."""
    lists = Lists()
    for line in _lines(stream):
        parts = line.split(_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"invalid input line: {line}")
        lists.items_a.append(_atoi(parts[0]))
        lists.items_b.append(_atoi(parts[1]))
    return lists


class Solution(Solver):
    """Solution for 2024 day 1."""

    year = "2024"
    day = "1"

    def part1(self, stream: IO[str]) -> str:
        lists = parse_input(stream)
        distance = sum(
            abs(a - b) for a, b in zip(sorted(lists.items_a), sorted(lists.items_b))
        )
        return str(distance)

    def part2(self, stream: IO[str]) -> str:
        lists = parse_input(stream)
        seen = Counter(lists.items_b)
        return str(sum(a * seen[a] for a in lists.items_a))