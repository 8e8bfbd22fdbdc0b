"""Advent of Code puzzle solutions, a registry to look them up and a runner for both parts."""

__version__ = "0.1.0"