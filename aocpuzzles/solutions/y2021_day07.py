"""The treachery of whales: align crabs at the cheapest position."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, IO

from ..solver import Solver

UNDEF = -99999

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

FuelCost = Callable[[int], int]


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def read_crabs(stream: IO[str]) -> list[int]:
    """Read comma separated crab positions."""
    return [_atoi(part) for part in stream.read().strip().split(",")]


def make_matrix(crabs: list[int]) -> list[list[int]]:
    """Build a cost matrix.

    The first row holds every position from 0 to the largest crab, the first
    column holds the sorted crab positions, and every cost starts at zero.
    """
    if not crabs:
        raise ValueError("no crabs")
    ordered = sorted(crabs)
    width = ordered[-1] + 1
    header = [UNDEF, *range(width)]
    return [header, *([crab] + [0] * width for crab in ordered)]


@dataclass
class Swarm:
    """Crabs and the fuel cost of moving each to each position."""

    crabs_num: int
    distances_num: int
    crabs_matrix: list[list[int]]

    def calc_distances(self, cost: FuelCost) -> None:
        """Fill in the fuel each crab spends to reach each position."""
        header = self.crabs_matrix[0]
        targets = header[1:self.distances_num + 1]
        for row in self.crabs_matrix[1:self.crabs_num + 1]:
            row[1:self.distances_num + 1] = [cost(abs(row[0] - target)) for target in targets]

    def min_distance_cost(self) -> int:
        return min_distance_cost(self.crabs_matrix)


def make_swarm(crabs: list[int]) -> Swarm:
    matrix = make_matrix(crabs)
    return Swarm(
        crabs_num=len(matrix) - 1,
        distances_num=len(matrix[0]) - 1,
        crabs_matrix=matrix,
    )


def part1_cost(distance: int) -> int:
    """Each step costs one unit of fuel, whichever way the crab moves."""
    return abs(distance)


def part2_cost(distance: int) -> int:
    """Each step costs one more than the previous one."""
    return (1 + distance) * distance // 2


def min_distance_cost(matrix: list[list[int]]) -> int:
    """Smallest total cost over all target positions."""
    columns = list(zip(*matrix[1:]))[1:]
    return min((sum(column) for column in columns), default=0)


def _align(stream: IO[str], cost: FuelCost) -> str:
    swarm = make_swarm(read_crabs(stream))
    swarm.calc_distances(cost)
    return str(swarm.min_distance_cost())


class Solution(Solver):
    """Solution for 2021 day 7."""

    year = "2021"
    day = "7"

    def part1(self, stream: IO[str]) -> str:
        return _align(stream, part1_cost)

    def part2(self, stream: IO[str]) -> str:
        return _align(stream, part2_cost)