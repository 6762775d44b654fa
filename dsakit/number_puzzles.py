"""Short numeric puzzles."""

from __future__ import annotations

from collections.abc import Sequence

_SIZE = 5
_CENTRE = _SIZE // 2

#: Factors tried when splitting a number: the powers of two from 2 to 2**19.
FACTORS = tuple(1 << power for power in range(1, 20))


def beautiful_matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Return the adjacent row/column swaps that bring the single 1 to the centre.

    ``matrix`` is 5x5; if several cells hold 1, the last in row order counts.
    """
    if len(matrix) != _SIZE or any(len(row) != _SIZE for row in matrix):
        raise ValueError("the matrix must be 5x5")
    ones = [
        (row, col)
        for row, values in enumerate(matrix)
        for col, value in enumerate(values)
        if value == 1
    ]
    if not ones:
        raise ValueError("the matrix holds no 1")
    row, col = ones[-1]
    return abs(row - _CENTRE) + abs(col - _CENTRE)


def is_product_of_binary_decimals(n: int) -> bool:
    """Return True if ``n`` is 1 or splits entirely into factors from ``FACTORS``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if n == 1:
        return True
    return any(
        n % factor == 0 and is_product_of_binary_decimals(n // factor)
        for factor in FACTORS
    )