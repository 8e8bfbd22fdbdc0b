"""Catalog of every puzzle solution in the package.

Each solution lives in its own module under ``aocpuzzles.solutions`` as a
``Solution`` class implementing the ``Solver`` interface. Listing it here
makes it part of the catalog, and ``register_all`` puts the whole catalog
into the solver registry.
"""

from __future__ import annotations

from .solver import Solver, register
from .solutions import (
    y2021_day01,
    y2021_day02,
    y2021_day03,
    y2021_day04,
    y2021_day05,
    y2021_day06,
    y2021_day07,
    y2022_day01,
    y2023_day01,
    y2024_day01,
)

_MODULES = (
    y2021_day01,
    y2021_day02,
    y2021_day03,
    y2021_day04,
    y2021_day05,
    y2021_day06,
    y2021_day07,
    y2022_day01,
    y2023_day01,
    y2024_day01,
)


def all_solvers() -> list[Solver]:
    """Return a fresh instance of every known solution."""
    return [module.Solution() for module in _MODULES]


def register_all() -> None:
    """Register every known solution with the solver registry."""
    for solver in all_solvers():
        register(solver)