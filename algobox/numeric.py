"""Numeric routines: powers, spiral matrices, integer splitting, counting."""

from __future__ import annotations

_MOD = 10**9 + 7


def my_pow(x: float, n: int) -> float:
    """Return x raised to the integer power n, by repeated squaring."""
    base = float(x)
    exponent = abs(n)
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return 1.0 / result if n < 0 else result


def spiral_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix filled with 1..n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError("n must not be negative")
    matrix = [[0] * n for _ in range(n)]
    row, col, d_row, d_col = 0, 0, 0, 1
    for value in range(1, n * n + 1):
        matrix[row][col] = value
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < n and 0 <= next_col < n) or matrix[next_row][next_col]:
            d_row, d_col = d_col, -d_row
            next_row, next_col = row + d_row, col + d_col
        row, col = next_row, next_col
    return matrix


def integer_break(n: int) -> int:
    """Return the largest product of at least two positive integers summing to n."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n <= 3:
        return n - 1
    threes, rest = divmod(n, 3)
    if rest == 0:
        return 3**threes
    if rest == 1:
        return 3 ** (threes - 1) * 4
    return 3**threes * 2


def num_of_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of length n over 1..m whose running maximum changes k times.

    The count is taken modulo 1_000_000_007.
    """
    if n < 0 or m < 0 or k < 0:
        raise ValueError("n, m and k must not be negative")
    if n == 0 or k == 0:
        return 0

    def prefix_sums(ways: list[list[int]]) -> list[list[int]]:
        sums = [[0] * (k + 1) for _ in range(m + 1)]
        for top in range(1, m + 1):
            for cost in range(k + 1):
                sums[top][cost] = (sums[top - 1][cost] + ways[top][cost]) % _MOD
        return sums

    ways = [[0] * (k + 1) for _ in range(m + 1)]
    for top in range(1, m + 1):
        ways[top][1] = 1
    sums = prefix_sums(ways)

    for _ in range(2, n + 1):
        new_ways = [[0] * (k + 1) for _ in range(m + 1)]
        for top in range(1, m + 1):
            for cost in range(1, k + 1):
                new_ways[top][cost] = (
                    top * ways[top][cost] + sums[top - 1][cost - 1]
                ) % _MOD
        ways = new_ways
        sums = prefix_sums(ways)

    return sums[m][k]


def is_reachable_at_time(sx: int, sy: int, fx: int, fy: int, t: int) -> bool:
    """Tell whether (fx, fy) can be reached from (sx, sy) in exactly t king moves."""
    dx = abs(fx - sx)
    dy = abs(fy - sy)
    if dx == 0 and dy == 0 and t == 1:
        return False
    return max(dx, dy) <= t