"""Lanternfish: count a school of fish that keeps reproducing."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import IO, Iterable

from ..solver import Solver

NEW_FISH_TIMER = 8
RESET_TIMER = 6


def _fish_state(text: str) -> int:
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid fish state {text!r}")
    return int(text)


def parse_states(stream: IO[str]) -> list[int]:
    """Read comma separated timers of every fish."""
    states: list[int] = []
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        states.extend(_fish_state(part) for part in line.removesuffix("\r").split(","))
    return states


@dataclass
class School:
    """Fish counted by the number of days left until they reproduce."""

    days: int
    fishes: Counter = field(default_factory=Counter)

    def add_fishes(self, states: Iterable[int]) -> None:
        """Add one fish for every timer given."""
        self.fishes.update(states)

    def populate(self) -> None:
        """Let the school live for its number of days."""
        for _ in range(self.days):
            for state in range(NEW_FISH_TIMER + 1):
                self.fishes[state - 1] += self.fishes[state]
                self.fishes[state] = 0
            spawning = self.fishes.pop(-1, 0)
            self.fishes[NEW_FISH_TIMER] += spawning
            self.fishes[RESET_TIMER] += spawning

    def total(self) -> int:
        """Number of fish in the school."""
        return sum(self.fishes.values())


def observe_school(stream: IO[str], days: int) -> str:
    """Count the fish after the given number of days."""
    school = School(days=days)
    school.add_fishes(parse_states(stream))
    school.populate()
    return str(school.total())


class Solution(Solver):
    """Solution for 2021 day 6: 80 days, then 256 days."""

    year = "2021"
    day = "6"

    def part1(self, stream: IO[str]) -> str:
        return observe_school(stream, days=80)

    def part2(self, stream: IO[str]) -> str:
        return observe_school(stream, days=256)