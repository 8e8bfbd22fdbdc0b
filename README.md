# aocpuzzles

Solutions for a selection of Advent of Code puzzles (2021 days 1–7,
2022 day 1, 2023 day 1, 2024 day 1), together with a small registry
that finds a solver by year and day and runs both parts on an input.

## Installation

```
pip install .
```

## Usage

Register the bundled solutions, then look one up and solve it:

```python
from aocpuzzles.catalog import register_all
from aocpuzzles.solver import get_solver, get_years, days_by_year, solve

register_all()

print(get_years())            # ['2021', '2022', '2023', '2024']
print(days_by_year("2021"))   # ['1', '2', '3', '4', '5', '6', '7']

solver = get_solver("2021", "1")
with open("input.txt") as stream:
    result = solve(solver, stream)

print(result.year, result.name, result.part1, result.part2)
```

`solve` reads the whole input once (text or bytes; bytes are decoded)
and feeds it to both parts. The returned `Result` dataclass holds
`year`, `name` (the day), `part1` and `part2`. A part whose solver raises
`NotSolvedError` is reported as `"not solved"`; any other failure in a
part is raised again as `PuzzleError`, as is an `OSError` while reading.

`catalog.all_solvers()` returns a fresh instance of every bundled
solution without touching the registry; `solver.unregister_all()`
empties the registry.

Each solution can also be used directly:

```python
import io
from aocpuzzles.solutions.y2021_day01 import Solution

answer = Solution().part1(io.StringIO("199\n200\n208\n210\n"))  # "3"
```

To add a solution of your own, subclass `aocpuzzles.solver.Solver`, set
the `year` and `day` class attributes, implement `part1` and `part2`
(each takes a text stream and returns the answer as a string) and pass
an instance to `register`.

## Errors

Lookup failures raise subclasses of `PuzzleError`:

- `YearMissedError` / `DayMissedError` when the year or day is empty,
- `UnknownYearError` / `UnknownDayError` when nothing is registered for it.

Registering the same year and day twice raises `ValueError`; registering
`None` raises `TypeError`.

Puzzle URLs of the form `https://adventofcode.com/<year>/day/<day>` can be
parsed with `aocpuzzles.puzzle_url.parse_puzzle_url`, which returns a
`PuzzleDate` with `year` and `day` and raises `ValueError` otherwise.

## What it does not do

There is no command-line program: solvers are run from Python code only.
The package does not download puzzle inputs, does not measure elapsed
time or run benchmarks, does not format results for display, and does
not create boilerplate files for new puzzles — it only parses puzzle URLs.

## Running the tests

```
pip install .[test]
pytest
```