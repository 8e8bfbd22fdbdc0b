import io
from unittest import mock

import pytest

from aocpuzzles.solutions.y2021_day04 import (
    Bingo,
    Board,
    BoardState,
    Number,
    Solution,
    parse_bingo,
    win_after,
)
from aocpuzzles.solver import solve

DRAWS = [7, 4, 9, 5, 11, 17, 23, 2, 0, 14, 21, 24, 10, 16, 13, 6, 15, 25, 12, 22, 18, 20, 8, 19, 3, 26, 1]

BOARDS = [
    [[22, 13, 17, 11, 0], [8, 2, 23, 4, 24], [21, 9, 14, 16, 7], [6, 10, 3, 18, 5], [1, 12, 20, 15, 19]],
    [[3, 15, 0, 2, 22], [9, 18, 13, 17, 5], [19, 8, 7, 25, 23], [20, 11, 10, 24, 4], [14, 21, 16, 12, 6]],
    [[14, 21, 17, 24, 4], [10, 16, 15, 9, 19], [18, 8, 23, 26, 20], [22, 11, 13, 6, 5], [2, 0, 12, 3, 7]],
]

WINNER_MARKED = {
    (0, 0), (0, 1), (0, 2), (0, 3), (0, 4),
    (1, 3), (2, 2), (3, 1), (3, 4), (4, 0), (4, 1), (4, 4),
}

GAME = (
    ",".join(map(str, DRAWS))
    + "\n"
    + "".join(
        "\n" + "".join(" ".join(f"{value:2d}" for value in row) + "\n" for row in board)
        for board in BOARDS
    )
)


def _grid(values, marked=()):
    return [
        [Number(value, (r, c) in marked) for c, value in enumerate(row)]
        for r, row in enumerate(values)
    ]


@pytest.fixture
def unreadable():
    error = OSError("custom error")
    stream = mock.MagicMock(spec=io.StringIO)
    stream.read.side_effect = error
    stream.readline.side_effect = error
    stream.readlines.side_effect = error
    stream.__iter__.side_effect = error
    return stream


def test_year_and_day():
    result = solve(Solution(), io.StringIO(GAME))
    assert (result.year, result.name) == ("2021", "4")


@pytest.mark.parametrize("part, answer", [("part1", "4512"), ("part2", "1924")])
def test_example(part, answer):
    assert getattr(Solution(), part)(io.StringIO(GAME)) == answer


@pytest.mark.parametrize("part", ["part1", "part2"])
def test_parts_read_error(part, unreadable):
    with pytest.raises(OSError):
        getattr(Solution(), part)(unreadable)


def test_parse_bingo():
    game = parse_bingo(io.StringIO(GAME))
    assert game.numbers == DRAWS
    assert [board.id for board in game.boards] == [1, 2, 3]
    assert game.boards == [Board(id=i + 1, numbers=_grid(values)) for i, values in enumerate(BOARDS)]


def test_parse_bingo_read_error(unreadable):
    with pytest.raises(OSError):
        parse_bingo(unreadable)


@pytest.mark.parametrize(
    "text",
    ["1,2,3\n1 2 3 4 5\n", "1,2,3\n\n1 2 3 4 5 6\n"],
    ids=["board-line-without-board", "too-many-columns"],
)
def test_parse_bingo_malformed(text):
    with pytest.raises(ValueError):
        parse_bingo(io.StringIO(text))


def test_play_first_winner():
    board, value = parse_bingo(io.StringIO(GAME)).play(win_after(1))

    assert (board.id, value) == (3, 24)
    assert board.numbers == _grid(BOARDS[2], WINNER_MARKED)
    assert board.state.verticals == [2, 3, 2, 2, 3]
    assert board.state.horizontals == [5, 1, 1, 2, 3]


def test_play_without_winner_raises():
    with pytest.raises(ValueError):
        Bingo().play(win_after(1))


def test_sum_unmarked():
    board = Board(
        id=0,
        numbers=_grid(BOARDS[2], WINNER_MARKED),
        state=BoardState(verticals=[2, 3, 2, 2, 3], horizontals=[5, 1, 1, 2, 3]),
    )
    assert board.sum_unmarked() == 188


def test_board_find():
    board = Board(id=1, numbers=_grid([[1, 2, 3, 4, 5]] * 5))
    assert board.find(3) == (0, 2)
    assert board.find(42) is None


def test_board_state_is_won():
    state = BoardState()
    for row in range(5):
        state.update(row, 2)
    assert state.is_won() is True
    assert BoardState().is_won() is False


def test_win_after_counts_calls():
    rule = win_after(3)
    board = Board(id=1)
    assert [rule(board, 0) for _ in range(4)] == [False, False, True, False]