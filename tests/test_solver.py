import io

import pytest

from aocpuzzles.solver import (
    DayMissedError,
    NotSolvedError,
    PuzzleError,
    Result,
    Solver,
    UnknownDayError,
    UnknownYearError,
    YearMissedError,
    days_by_year,
    get_solver,
    get_years,
    register,
    solve,
    unregister_all,
)


class MockSolver(Solver):
    label = "mockSolver"

    def __init__(self, year, day):
        self.year = year
        self.day = day

    def part1(self, stream):
        return f"part 1 of {self.label}"

    def part2(self, stream):
        return f"part 2 of {self.label}"


class AnotherMockSolver(MockSolver):
    label = "anotherMockSolver"


class EchoSolver(Solver):
    year = "2020"
    day = "echo"

    def part1(self, stream):
        return stream.read().upper()

    def part2(self, stream):
        raise NotSolvedError("later")


class BrokenSolver(Solver):
    year = "2020"
    day = "broken"

    def part1(self, stream):
        raise ValueError("bad input")

    def part2(self, stream):
        return "ok"


class UnreadableStream(io.TextIOBase):
    def read(self, size=-1):
        raise OSError("custom error")

    def readline(self, size=-1):
        raise OSError("custom error")


@pytest.fixture(autouse=True)
def clean_registry():
    unregister_all()
    yield
    unregister_all()


@pytest.fixture
def registered():
    catalogue = [
        (MockSolver, "2019", "mock"),
        (AnotherMockSolver, "2019", "anotherMock"),
        (MockSolver, "2017", "mock1"),
    ]
    solvers = {(year, day): kind(year, day) for kind, year, day in catalogue}
    for solver in solvers.values():
        register(solver)
    return solvers


def test_register_none_raises():
    with pytest.raises(TypeError):
        register(None)


@pytest.mark.parametrize(
    "year, day, answer",
    [
        ("2019", "mock", "part 1 of mockSolver"),
        ("2017", "mock1", "part 1 of mockSolver"),
        ("2019", "anotherMock", "part 1 of anotherMockSolver"),
    ],
)
def test_get_existing_solvers(registered, year, day, answer):
    found = get_solver(year, day)
    assert found is registered[(year, day)]
    assert (found.year, found.day) == (year, day)
    assert found.part1(io.StringIO("")) == answer


@pytest.mark.parametrize(
    "year, day, error",
    [
        ("2018", "not-existed", UnknownYearError),
        ("2019", "not-existed", UnknownDayError),
        ("", "anotherMock", YearMissedError),
        ("2019", "", DayMissedError),
    ],
)
def test_get_solver_errors(registered, year, day, error):
    with pytest.raises(error):
        get_solver(year, day)


def test_register_twice_raises():
    register(MockSolver("2019", "mockSolver"))
    with pytest.raises(ValueError):
        register(MockSolver("2019", "mockSolver"))


def test_solve():
    register(MockSolver("2019", "mockSolver"))

    got = solve(get_solver("2019", "mockSolver"), io.StringIO("testdata"))

    assert got == Result(
        year="2019",
        name="mockSolver",
        part1="part 1 of mockSolver",
        part2="part 2 of mockSolver",
    )


def test_solve_read_error():
    with pytest.raises(PuzzleError):
        solve(MockSolver("2019", "mockSolver"), UnreadableStream())


def test_solve_bytes_and_not_solved():
    got = solve(EchoSolver(), io.BytesIO(b"abc"))
    assert (got.part1, got.part2) == ("ABC", "not solved")


def test_solve_wraps_part_error():
    with pytest.raises(PuzzleError, match="Part1") as info:
        solve(BrokenSolver(), io.StringIO("x"))
    assert isinstance(info.value.__cause__, ValueError)


def test_years(registered):
    assert get_years() == ["2017", "2019"]


@pytest.mark.parametrize(
    "year, days",
    [("2019", ["anotherMock", "mock"]), ("2017", ["mock1"]), ("1999", [])],
)
def test_days_by_year(registered, year, days):
    assert days_by_year(year) == days


def test_unregister_all(registered):
    unregister_all()
    assert get_years() == []