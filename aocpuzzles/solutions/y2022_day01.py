"""Calorie counting: find the elves carrying the most food."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import IO, Iterable

from ..solver import Solver

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

TOP_ELVES = 3


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid calories {text!r}")
    return int(text)


@dataclass
class Elf:
    """Food items carried by one elf."""

    food: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Calories of all the food carried."""
        return sum(self.food)

    def __str__(self) -> str:
        return str(self.total)


def make_elves_list(stream: IO[str]) -> list[Elf]:
    """Read groups of calories separated by blank lines.

    The last group is kept only when the line before the final one is blank.
    """
    elves: list[Elf] = []
    elf = Elf()
    previous = line = ""
    for current in _lines(stream):
        previous, line = line, current
        if line == "":
            elves.append(elf)
            elf = Elf()
            continue
        elf.food.append(_atoi(line))

    if previous == "":
        elves.append(elf)
    return elves


def max_total_calories(elves: Iterable[Elf]) -> int:
    """Calories carried by the best stocked elf."""
    best = 0
    for elf in elves:
        if best == 0 or elf.total > best:
            best = elf.total
    return best


def backup_snack_calories(elves: Iterable[Elf]) -> int:
    """Calories carried by the three best stocked elves together."""
    ranked = sorted((elf.total for elf in elves), reverse=True)
    if len(ranked) < TOP_ELVES:
        raise ValueError(f"need at least {TOP_ELVES} elves, got {len(ranked)}")
    return sum(ranked[:TOP_ELVES])


class Solution(Solver):
    """Solution for 2022 day 1."""

    year = "2022"
    day = "1"

    def part1(self, stream: IO[str]) -> str:
        return str(max_total_calories(make_elves_list(stream)))

    def part2(self, stream: IO[str]) -> str:
        return str(backup_snack_calories(make_elves_list(stream)))