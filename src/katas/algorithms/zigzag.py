"""Zig-zag square matrix, as used to order JPEG coefficients."""

from __future__ import annotations

from katas.errors import KataError


def zigzag_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix numbered 0..n*n-1 along the zig-zag path.

    >>> zigzag_matrix(3)
    [[0, 1, 5], [2, 4, 6], [3, 7, 8]]
    """
    if n < 0:
        raise KataError(f"Matrix dimension must be non-negative, got {n}")
    matrix = [[0] * n for _ in range(n)]
    row = col = 0
    for value in range(n * n):
        matrix[row][col] = value
        if (row + col) % 2 == 0:
            # Moving up-right; bounce off the right edge or the top.
            if col + 1 < n:
                col += 1
            else:
                row += 2
            if row > 0:
                row -= 1
        else:
            # Moving down-left; bounce off the bottom edge or the left.
            if row + 1 < n:
                row += 1
            else:
                col += 2
            if col > 0:
                col -= 1
    return matrix
