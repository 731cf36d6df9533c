"""Checking and solving 9x9 sudoku boards.

A board is a list of nine rows, each a list of nine one-character strings:
a digit from "1" to "9", or "." for an empty cell.
"""

from __future__ import annotations

from typing import MutableSequence, Sequence

DIGITS = "123456789"
EMPTY = "."
SIZE = 9


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def _units() -> list[list[tuple[int, int]]]:
    rows = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    cols = [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    boxes = [
        [(3 * (b // 3) + k // 3, 3 * (b % 3) + k % 3) for k in range(SIZE)]
        for b in range(SIZE)
    ]
    return rows + cols + boxes


_UNITS = _units()


def _check_shape(board: Sequence[Sequence[str]]) -> None:
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no row, column or 3x3 box repeats a filled digit."""
    _check_shape(board)
    for unit in _UNITS:
        filled = [board[r][c] for r, c in unit if board[r][c] != EMPTY]
        if len(filled) != len(set(filled)):
            return False
    return True


def solve_sudoku(board: Sequence[MutableSequence[str]]) -> None:
    """Fill the empty cells of board in place.

    Cells are filled in row-major order, trying digits in ascending order.
    Raises ValueError if the puzzle has no solution; the board is then
    left as it was.
    """
    _check_shape(board)
    rows: list[set[str]] = [set() for _ in range(SIZE)]
    cols: list[set[str]] = [set() for _ in range(SIZE)]
    boxes: list[set[str]] = [set() for _ in range(SIZE)]
    empties: list[tuple[int, int]] = []

    for r in range(SIZE):
        for c in range(SIZE):
            value = board[r][c]
            if value == EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(value)
                cols[c].add(value)
                boxes[_box(r, c)].add(value)

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        r, c = empties[index]
        b = _box(r, c)
        for digit in DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if fill(index + 1):
                return True
            board[r][c] = EMPTY
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
        return False

    if not fill(0):
        raise ValueError("the puzzle has no solution")