"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, IO, Mapping

from ..solver import Solver

BitCriteria = Callable[[Mapping[str, int]], str]


def _read_rows(stream: IO[str]) -> list[str]:
    return [raw.rstrip("\n").removesuffix("\r") for raw in stream]


@dataclass(frozen=True)
class BitRates:
    """A pair of binary ratings whose product is the answer."""

    first: str
    second: str

    def consumption(self) -> str:
        """Return the product of both ratings read as binary numbers."""
        return str(int(self.first, 2) * int(self.second, 2))


def find_power_consumption_rates(diagnostic: list[str]) -> BitRates:
    """Build gamma and epsilon rates from the most common bit per position."""
    width = max((len(row) for row in diagnostic), default=0)
    columns = [Counter() for _ in range(width)]
    for row in diagnostic:
        for column, ch in zip(columns, row):
            column[ch] += 1

    first = "".join("1" if c["1"] > c["0"] else "0" for c in columns)
    second = "".join("0" if c["1"] > c["0"] else "1" for c in columns)
    return BitRates(first=first, second=second)


def o2_criteria(bitstat: Mapping[str, int]) -> str:
    """Most common bit, preferring 1 on a tie."""
    zeros = bitstat.get("0", 0)
    ones = bitstat.get("1", 0)
    if zeros > ones:
        return "0"
    return "1"


def co2_criteria(bitstat: Mapping[str, int]) -> str:
    """Least common bit, preferring 0 on a tie."""
    zeros = bitstat.get("0", 0)
    ones = bitstat.get("1", 0)
    if ones < zeros:
        return "1"
    return "0"


def life_rate(diagnostic: list[str], criteria: BitCriteria) -> str:
    """Filter rows bit by bit until one row remains."""
    rows = list(diagnostic)
    index = 0
    while len(rows) != 1:
        if not rows:
            raise ValueError("no diagnostic rows left")
        bitstat = Counter(row[index] for row in rows)
        wanted = criteria(bitstat)
        rows = [row for row in rows if row[index] == wanted]
        index += 1
    return rows[0]


def life_support_rate(diagnostic: list[str]) -> BitRates:
    """Return the oxygen generator and CO2 scrubber ratings."""
    return BitRates(
        first=life_rate(diagnostic, o2_criteria),
        second=life_rate(diagnostic, co2_criteria),
    )


class Solution(Solver):
    """Solution for 2021 day 3."""

    year = "2021"
    day = "3"

    def part1(self, stream: IO[str]) -> str:
        return find_power_consumption_rates(_read_rows(stream)).consumption()

    def part2(self, stream: IO[str]) -> str:
        return life_support_rate(_read_rows(stream)).consumption()