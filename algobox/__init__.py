"""Classic algorithms and small data structures: trees, search trees,
backtracking, sudoku, containers, arrays, strings, numeric routines and graphs."""

__version__ = "0.1.0"