"""Number exercises: palindromes, square roots, stair counting, recursion."""

from __future__ import annotations

from collections.abc import Iterable

_STAIRS: dict[int, int] = {1: 1, 2: 2}


def is_palindrome_number(n: int) -> bool:
    """Tell whether the decimal digits of ``n`` read the same both ways."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def my_sqrt(x: int) -> int:
    """Return the integer square root by binary search.

    Zero and negative inputs give -1.
    """
    if x == 1:
        return 1
    low, high = 0, x
    while low < high:
        pivot = (low + high) // 2
        square = pivot * pivot
        if square == x:
            return pivot
        if square > x:
            high = pivot
        else:
            low = pivot + 1
    return low - 1


def sqrt_linear(x: int) -> int:
    """Return the integer square root by counting upwards."""
    if x in (0, 1):
        return x
    n = 1
    while n * n <= x:
        if n * n == x:
            return n
        n += 1
    return n - 1


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two at a time."""
    one, two = 1, 1
    for _ in range(n - 1):
        one, two = one + two, one
    return one


def climb_stairs_memo(n: int) -> int:
    """Count the stair climbs as :func:`climb_stairs`, keeping results for reuse."""
    if n <= 2:
        return n
    top = max(_STAIRS)
    for steps in range(top + 1, n + 1):
        _STAIRS[steps] = _STAIRS[steps - 1] + _STAIRS[steps - 2]
    return _STAIRS[n]


def triple_step(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one, two or three at a time."""
    if n <= 2:
        return n
    a, b, c = 1, 2, 4
    for _ in range(n - 3):
        a, b, c = b, c, a + b + c
    return c


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1.

    Zero gives an empty list; a negative ``n`` gives ``[n]``.
    """
    if n < 1:
        return [n] if n else []
    return list(range(n, 0, -1))


def sum_array(values: Iterable[int]) -> int:
    """Return the sum of ``values``."""
    return sum(values)