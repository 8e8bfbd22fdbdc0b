"""Trebuchet: recover calibration values from lines of text."""

from __future__ import annotations

from typing import IO, Iterable, Mapping, Optional

from ..solver import Solver

DIGIT_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


def _digit_from_word(word: str, dictionary: Optional[Mapping[str, int]]) -> Optional[int]:
    if not word or not dictionary:
        return None
    return next((value for name, value in dictionary.items() if name in word), None)


def extract_number(line: str, dictionary: Optional[Mapping[str, int]]) -> int:
    """Join the first and last digit of a line into a two digit number.

    Digits spelled out as words count too when a dictionary is given.
    """
    first: Optional[int] = None
    last: Optional[int] = None
    word = ""

    for ch in line:
        if ch.isdecimal():
            if not "0" <= ch <= "9":
                raise ValueError(f"failed to convert {ch!r} to int")
            word = " "
            digit: Optional[int] = int(ch)
        elif ch.isalpha():
            word += ch
            digit = _digit_from_word(word, dictionary)
        else:
            word = ""
            digit = None

        if digit is None:
            continue

        # keep the last letter so overlapping words like "oneight" both count
        word = word[-1:]
        if first is None:
            first = digit
        else:
            last = digit

    if first is None:
        raise ValueError(f"no digits in line {line!r}")
    if last is None:
        last = first
    return int(f"{first}{last}")


def calibrate(stream: IO[str], dictionary: Optional[Mapping[str, int]]) -> int:
    """Sum the calibration values of every line."""
    return sum(extract_number(line, dictionary) for line in _lines(stream))


class Solution(Solver):
    """Solution for 2023 day 1."""

    year = "2023"
    day = "1"

    def part1(self, stream: IO[str]) -> str:
        return str(calibrate(stream, None))

    def part2(self, stream: IO[str]) -> str:
        return str(calibrate(stream, DIGIT_WORDS))