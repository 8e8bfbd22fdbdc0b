"""Parsing of puzzle page addresses into a year and a day."""

from __future__ import annotations

import re
from dataclasses import dataclass

_URL_RE = re.compile(r"https://adventofcode\.com/([+-]?\d+)/day/([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class PuzzleDate:
    """Year and day of a puzzle."""

    year: int
    day: int


def parse_puzzle_url(url: str) -> PuzzleDate:
    """Extract the year and day from a puzzle page address."""
    match = _URL_RE.match(url)
    if match is None:
        raise ValueError(f"invalid puzzle url: {url!r}")
    return PuzzleDate(year=int(match.group(1)), day=int(match.group(2)))