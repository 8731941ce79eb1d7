"""Small recursion exercises: digit sums and triangular block counts."""

from __future__ import annotations


def sum_digits(n: int) -> int:
    """Return the sum of the decimal digits of n.

    A negative number gives the negated digit sum of its absolute value,
    as truncating division and remainder would.
    """
    if -10 < n < 10:
        return n
    sign = -1 if n < 0 else 1
    quotient, digit = divmod(abs(n), 10)
    return sign * digit + sum_digits(sign * quotient)


def triangle(rows: int) -> int:
    """Return the number of blocks in a triangle with the given number of rows.

    The top row holds one block and each row below holds one more.
    """
    if rows < 0:
        raise ValueError(f"rows must be non-negative, got {rows}")
    return sum(range(rows + 1))