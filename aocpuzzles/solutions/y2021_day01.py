"""Sonar sweep: count increases of depth measurements."""

from __future__ import annotations

from typing import IO

from ..solver import Solver


def read_measurements(stream: IO[str]) -> list[int]:
    """Read one integer measurement per line."""
    return [int(raw.removesuffix("\n").removesuffix("\r")) for raw in stream]


def find_increased(values: list[int], shift: int, window: int) -> int:
    """Count windows whose sum is larger than the window shifted back."""
    return sum(
        1
        for start in range(shift, len(values) - window + 1, shift)
        if sum(values[start:start + window])
        > sum(values[start - shift:start - shift + window])
    )


class Solution(Solver):
    """Solution for 2021 day 1."""

    year = "2021"
    day = "1"

    @staticmethod
    def _increases(stream: IO[str], window: int) -> str:
        return str(find_increased(read_measurements(stream), shift=1, window=window))

    def part1(self, stream: IO[str]) -> str:
        return self._increases(stream, window=1)

    def part2(self, stream: IO[str]) -> str:
        return self._increases(stream, window=3)