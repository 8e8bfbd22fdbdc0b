[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solutions for Advent of Code puzzles with a registry to look them up and run them"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
