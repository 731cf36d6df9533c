"""Backtracking searches: combinations, queens, word search, partitions."""

from __future__ import annotations

from itertools import product
from typing import Iterator, Sequence

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone digits can spell."""
    if not digits:
        return []
    groups = []
    for digit in digits:
        if digit not in "0123456789":
            raise ValueError(f"not a phone digit: {digit!r}")
        groups.append(_KEYPAD[int(digit)])
    return ["".join(letters) for letters in product(*groups)]


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of n pairs of parentheses."""

    def extend(prefix: str, open_left: int, close_left: int) -> Iterator[str]:
        if open_left == 0 and close_left == 0:
            yield prefix
            return
        if open_left > 0:
            yield from extend(prefix + "(", open_left - 1, close_left)
        if close_left > open_left:
            yield from extend(prefix + ")", open_left, close_left - 1)

    return list(extend("", n, n))


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    """Yield, for each solution, the row of the queen in every column."""
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> Iterator[tuple[int, ...]]:
        if col == n:
            yield tuple(rows)
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(col + 1)
            rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    yield from place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every n-queens board, each row a string of 'Q' and '.'."""
    return [
        ["".join("Q" if rows[col] == row else "." for col in range(n)) for row in range(n)]
        for rows in _placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Count the solutions of the n-queens puzzle."""
    return sum(1 for _ in _placements(n))


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether word can be traced through adjacent, unreused cells."""
    if not board or not board[0] or not word:
        return False
    height, width = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        visited.add((row, col))
        try:
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                r, c = row + dr, col + dc
                if (
                    0 <= r < height
                    and 0 <= c < width
                    and (r, c) not in visited
                    and board[r][c] == word[index]
                    and trace(r, c, index + 1)
                ):
                    return True
            return False
        finally:
            visited.discard((row, col))

    return any(
        board[row][col] == word[0] and trace(row, col, 1)
        for row in range(height)
        for col in range(width)
    )


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut s into palindromic pieces."""

    def split(start: int) -> Iterator[list[str]]:
        if start >= len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                for rest in split(end):
                    yield [piece, *rest]

    return list(split(0))