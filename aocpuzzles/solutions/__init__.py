"""Solutions of individual Advent of Code puzzles, one module per year and day."""