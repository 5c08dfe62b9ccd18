"""Counting searches: spiral diagonals, coin sums, right triangles and small-digit multiples."""

from __future__ import annotations

import math
from collections import Counter, deque
from typing import Sequence

BRITISH_COINS = (1, 2, 5, 10, 20, 50, 100, 200)

_UINT32_LIMIT = 1 << 32


def spiral_diagonal_sum(size: int) -> int:
    """Return the sum of both diagonals of a *size* x *size* number spiral.

    The spiral starts with 1 in the centre and winds outwards clockwise;
    *size* must be a positive odd number.
    """
    if size < 1 or size % 2 == 0:
        raise ValueError("spiral size must be a positive odd number")
    total = 1
    number = 1
    for step in range(2, size, 2):
        for _ in range(4):
            number += step
            total += number
    return total


def coin_combinations(target: int = 200, coins: Sequence[int] = BRITISH_COINS) -> int:
    """Count the ways of making *target* from any number of the given *coins*.

    The order of coins within a combination does not matter.
    """
    if target < 0:
        raise ValueError("target must be non-negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def int_sqrt32(x: int) -> int:
    """Return the integer square root of an unsigned 32-bit value."""
    if not 0 <= x < _UINT32_LIMIT:
        raise ValueError("int_sqrt32 needs a value in the unsigned 32-bit range")
    return math.isqrt(x)


def perimeter_with_most_right_triangles(limit: int = 1000) -> int:
    """Return the perimeter p <= *limit* with the most integer right triangles.

    Ties keep the smallest perimeter; if no triangle fits, 0 is returned.
    """
    counts: Counter[int] = Counter()
    for a in range(1, limit):
        for b in range(a + 1, limit):
            if a + 2 * b >= limit:
                break
            square = a * a + b * b
            c = math.isqrt(square)
            if c * c == square and a + b + c <= limit:
                counts[a + b + c] += 1
    if not counts:
        return 0
    return max(counts, key=lambda perimeter: (counts[perimeter], -perimeter))


def has_only_small_digits(n: int) -> bool:
    """Return True if every decimal digit of *n* is 0, 1 or 2."""
    if n < 0:
        raise ValueError("has_only_small_digits needs a non-negative number")
    return set(str(n)) <= set("012")


def smallest_small_digit_multiple(n: int) -> int:
    """Return the smallest positive multiple of *n* written only with digits 0, 1 and 2.

    Zero gives zero.
    """
    if n < 0:
        raise ValueError("smallest_small_digit_multiple needs a non-negative number")
    if n == 0:
        return 0
    parents: dict[int, tuple[int | None, int]] = {}
    queue: deque[int] = deque()
    for digit in (1, 2):
        remainder = digit % n
        if remainder == 0:
            return digit
        if remainder not in parents:
            parents[remainder] = (None, digit)
            queue.append(remainder)
    while queue:
        remainder = queue.popleft()
        for digit in (0, 1, 2):
            following = (remainder * 10 + digit) % n
            if following in parents:
                continue
            parents[following] = (remainder, digit)
            if following == 0:
                return _rebuild(parents)
            queue.append(following)
    raise ArithmeticError(f"no small-digit multiple found for {n}")


def _rebuild(parents: dict[int, tuple[int | None, int]]) -> int:
    digits: list[str] = []
    current: int | None = 0
    while current is not None:
        current, digit = parents[current]
        digits.append(str(digit))
    return int("".join(reversed(digits)))


def small_digit_multiple_sum(limit: int = 10000) -> int:
    """Return the sum of f(n) / n for 1 <= n <= *limit*.

    Here f(n) is the smallest positive multiple of n using only digits 0, 1 and 2.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return sum(smallest_small_digit_multiple(n) // n for n in range(1, limit + 1))