"""Digit-based searches: palindromes, digit sums and digit-function fixed points."""

from __future__ import annotations

import math
from collections import Counter
from itertools import combinations_with_replacement
from typing import Iterator, NamedTuple, Sequence


class PalindromeProduct(NamedTuple):
    """A palindromic product and the two factors that give it."""

    smaller: int
    larger: int
    product: int


def is_palindrome(text: str) -> bool:
    """Return True if *text* reads the same forwards and backwards."""
    return text == text[::-1]


def binary_string(n: int) -> str:
    """Return *n* in binary without leading zeros; zero gives the empty string."""
    if n < 0:
        raise ValueError("binary_string needs a non-negative number")
    return format(n, "b") if n else ""


def largest_palindrome_product() -> PalindromeProduct:
    """Return the largest palindrome that is a product of two numbers below 1000.

    Factors are scanned from 999 downwards with the second factor never
    below the first; the first pair reaching a new maximum is kept.
    """
    best = PalindromeProduct(0, 0, 0)
    for smaller in range(999, 0, -1):
        if smaller * 999 <= best.product:
            break
        for larger in range(999, smaller - 1, -1):
            product = smaller * larger
            if product <= best.product:
                break
            if is_palindrome(str(product)):
                best = PalindromeProduct(smaller, larger, product)
    return best


def _digit_weight_fixed_points(weights: Sequence[int]) -> Iterator[int]:
    """Yield every n whose digits' weights add up to n itself.

    Digits are weighted without leading zeros. The search covers every
    length that can still reach its own lower bound.
    """
    heaviest = max(weights)
    max_length = 1
    while (max_length + 1) * heaviest >= 10**max_length:
        max_length += 1
    for length in range(1, max_length + 1):
        for combo in combinations_with_replacement(range(10), length):
            total = sum(weights[digit] for digit in combo)
            if "".join(sorted(str(total))) == "".join(map(str, combo)):
                yield total


def digit_power_sum(power: int) -> int:
    """Return the sum of all numbers above 1 equal to the sum of their digits to *power*."""
    if power < 1:
        raise ValueError("power must be at least 1")
    weights = [digit**power for digit in range(10)]
    return sum(n for n in set(_digit_weight_fixed_points(weights)) if n > 1)


def digit_factorial_sum() -> int:
    """Return the sum of all numbers above 2 equal to the sum of their digits' factorials."""
    weights = [math.factorial(digit) for digit in range(10)]
    return sum(n for n in set(_digit_weight_fixed_points(weights)) if n > 2)


def _decimal_palindromes(limit: int) -> Iterator[int]:
    """Yield every decimal palindrome in [0, limit)."""
    if limit <= 0:
        return
    for length in range(1, len(str(limit - 1)) + 1):
        half = (length + 1) // 2
        start = 0 if length == 1 else 10 ** (half - 1)
        for prefix in range(start, 10**half):
            text = str(prefix)
            mirrored = text[-2::-1] if length % 2 else text[::-1]
            number = int(text + mirrored)
            if number >= limit:
                return
            yield number


def double_base_palindrome_sum(limit: int) -> int:
    """Sum the numbers below *limit* that are palindromes in base 10 and base 2."""
    return sum(
        number
        for number in _decimal_palindromes(limit)
        if is_palindrome(binary_string(number))
    )


def _champernowne_digit(position: int) -> int:
    """Digit at *position* of 0123456789101112..., where position 0 is the leading 0."""
    if position == 0:
        return 0
    remaining = position
    length, count, start = 1, 9, 1
    while remaining > length * count:
        remaining -= length * count
        length += 1
        count *= 10
        start *= 10
    number = start + (remaining - 1) // length
    return int(str(number)[(remaining - 1) % length])


def champernowne_product(limit: int) -> int:
    """Multiply the digits at positions 1, 10, 100, ... up to *limit* of 0123456789101112..."""
    product = 1
    position = 1
    while position <= limit:
        product *= _champernowne_digit(position)
        position *= 10
    return product


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative *n*."""
    if n < 0:
        raise ValueError("digit_sum needs a non-negative number")
    return sum(int(char) for char in str(n))


def count_equal_digit_sums(digits: int, factor: int = 137) -> int:
    """Count n in [0, 10**digits) whose digit sum equals that of factor * n.

    Digits of n are chosen from the lowest upwards, tracking the carry of
    factor * n and the running difference between the two digit sums.
    """
    if digits < 1:
        raise ValueError("digits must be at least 1")
    if factor < 0:
        raise ValueError("factor must be non-negative")
    states: Counter[tuple[int, int]] = Counter({(0, 0): 1})
    for _ in range(digits - 1):
        following: Counter[tuple[int, int]] = Counter()
        for (carry, difference), ways in states.items():
            for digit in range(10):
                value = factor * digit + carry
                following[(value // 10, difference + value % 10 - digit)] += ways
        states = following
    return sum(
        ways
        for (carry, difference), ways in states.items()
        for digit in range(10)
        if digit_sum(factor * digit + carry) + difference == digit
    )