"""Dive: steer a submarine by a list of commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterable, Union

from ..solver import Solver

_ACTION_RE = re.compile(r"(\w+)\s(\d+)", re.DOTALL | re.ASCII)


def _lines(stream: IO[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.removesuffix("\n").removesuffix("\r")


class Move(str, Enum):
    """Direction of a submarine command."""

    UP = "up"
    DOWN = "down"
    FORWARD = "forward"


@dataclass(frozen=True)
class Action:
    """A command: a direction and a number of steps."""

    move: Move
    steps: int


def parse_action(text: str) -> Action:
    """Parse a command such as 'forward 5'."""
    match = _ACTION_RE.search(text)
    if match is None:
        raise ValueError(f"[{text}]: invalid action format")
    word, steps = match.groups()
    try:
        move = Move(word)
    except ValueError:
        raise ValueError(f"[{word}]: invalid move") from None
    return Action(move=move, steps=int(steps))


@dataclass
class Submarine:
    """Submarine where up and down change depth directly."""

    x: int = 0
    y: int = 0

    def move(self, action: Action) -> None:
        if action.move is Move.UP:
            self.y -= action.steps
        elif action.move is Move.DOWN:
            self.y += action.steps
        elif action.move is Move.FORWARD:
            self.x += action.steps
        else:
            raise ValueError("invalid move")


@dataclass
class AimedSubmarine(Submarine):
    """Submarine where up and down change the aim."""

    aim: int = 0

    def move(self, action: Action) -> None:
        if action.move is Move.UP:
            self.aim -= action.steps
        elif action.move is Move.DOWN:
            self.aim += action.steps
        elif action.move is Move.FORWARD:
            self.x += action.steps
            self.y += self.aim * action.steps
        else:
            raise ValueError("invalid move")


def dive(stream: IO[str], submarine: Union[Submarine, AimedSubmarine]) -> str:
    """Apply every command and return horizontal position times depth."""
    for line in _lines(stream):
        submarine.move(parse_action(line))
    return str(submarine.x * submarine.y)


class Solution(Solver):
    """Solution for 2021 day 2."""

    year = "2021"
    day = "2"

    def part1(self, stream: IO[str]) -> str:
        return dive(stream, Submarine())

    def part2(self, stream: IO[str]) -> str:
        return dive(stream, AimedSubmarine())