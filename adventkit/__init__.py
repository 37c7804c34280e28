"""Position, direction, grid and weighted-graph helpers, with solvers for daily programming puzzles."""

__version__ = "0.1.0"