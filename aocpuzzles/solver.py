"""Common solver interface, a registry of solvers and running them on input."""

from __future__ import annotations

import io
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, IO

UNSOLVED = "not solved"


class PuzzleError(Exception):
    """Base error for puzzle lookup and solving."""


class YearMissedError(PuzzleError):
    """Raised when the puzzle year is empty."""


class DayMissedError(PuzzleError):
    """Raised when the puzzle day is empty."""


class UnknownYearError(PuzzleError):
    """Raised when no puzzle is registered for the year."""


class UnknownDayError(PuzzleError):
    """Raised when no puzzle is registered for the day."""


class NotSolvedError(PuzzleError):
    """Raised by a solver part that has no solution yet."""


class Solver(ABC):
    """A solution for one puzzle: a year, a day and two parts."""

    year: str = ""
    day: str = ""

    @abstractmethod
    def part1(self, stream: IO[str]) -> str:
        """Solve the first part of the puzzle."""

    @abstractmethod
    def part2(self, stream: IO[str]) -> str:
        """Solve the second part of the puzzle."""


@dataclass
class Result:
    """Answers of a solved puzzle."""

    year: str
    name: str
    part1: str = UNSOLVED
    part2: str = UNSOLVED


_lock = threading.Lock()
_solvers: dict[str, dict[str, Solver]] = {}


def register(solver: Solver) -> None:
    """Make a solver available by its year and day."""
    if solver is None:
        raise TypeError("puzzle: register solver is None")

    with _lock:
        by_day = _solvers.setdefault(solver.year, {})
        if solver.day in by_day:
            raise ValueError(
                f"puzzle: register called twice for solver [{solver.year}:{solver.day}]"
            )
        by_day[solver.day] = solver


def unregister_all() -> None:
    """Remove every registered solver."""
    with _lock:
        _solvers.clear()


def days_by_year(year: str) -> list[str]:
    """Return the sorted days registered for a year."""
    with _lock:
        return sorted(_solvers.get(year, {}))


def get_years() -> list[str]:
    """Return the sorted years that have solvers."""
    with _lock:
        return sorted(_solvers)


def get_solver(year: str, day: str) -> Solver:
    """Return the solver registered for a year and day."""
    if not year:
        raise YearMissedError("empty puzzle year")
    if not day:
        raise DayMissedError("empty puzzle day")

    with _lock:
        by_day = _solvers.get(year)
        if by_day is None:
            raise UnknownYearError(f"{year}: unknown puzzle year")
        solver = by_day.get(day)
        if solver is None:
            raise UnknownDayError(f"{day}: unknown puzzle day")
        return solver


def _answer(part: Callable[[IO[str]], str], data: str, label: str) -> str:
    try:
        return part(io.StringIO(data))
    except NotSolvedError:
        return UNSOLVED
    except Exception as err:
        raise PuzzleError(f"failed to solve {label}: {err}") from err


def solve(solver: Solver, stream: IO) -> Result:
    """Read the whole input and solve both parts of the puzzle."""
    try:
        data = stream.read()
    except OSError as err:
        raise PuzzleError(f"failed to read: {err}") from err

    if isinstance(data, (bytes, bytearray)):
        data = data.decode()

    return Result(
        year=solver.year,
        name=solver.day,
        part1=_answer(solver.part1, data, "Part1"),
        part2=_answer(solver.part2, data, "Part2"),
    )