"""Digit-length searches over Fibonacci numbers and decimal expansions."""

from __future__ import annotations

import re
from typing import NamedTuple

from eulerkit.bigint import BigInt

_REPEATING_TAIL = re.compile(r"([0-9]+?)\1+$")


class FibonacciTerm(NamedTuple):
    """A Fibonacci number together with its position in the sequence."""

    index: int
    value: BigInt


class CycleResult(NamedTuple):
    """The denominator with the longest repeating tail and that tail's length."""

    denominator: int
    length: int


def first_fibonacci_with_digits(digits: int) -> FibonacciTerm:
    """Return the first Fibonacci term whose decimal form has *digits* digits.

    The sequence starts with F1 = F2 = 1; the search starts from a
    placeholder of 0 at index 2, so a request for one digit returns it.
    """
    second_last, last, term = BigInt(1), BigInt(1), BigInt(0)
    index = 2
    while len(str(term)) < digits:
        term = last + second_last
        index += 1
        second_last, last = last, term
    return FibonacciTerm(index, term)


def longest_recurring_cycle(limit: int) -> CycleResult:
    """Find the denominator d below *limit* whose 1/d has the longest repeating tail.

    For each d, a power of ten that grows by two digits per step is divided
    by d, and the shortest block that repeats up to the end of the quotient
    is measured. Ties keep the smallest denominator.
    """
    scaled_one = BigInt(10000)
    hundred = BigInt(100)
    best = CycleResult(0, 0)
    for divisor in range(2, limit):
        quotient = scaled_one // divisor
        scaled_one = scaled_one * hundred
        for match in _REPEATING_TAIL.finditer(str(quotient)):
            length = len(match.group(1))
            if length > best.length:
                best = CycleResult(divisor, length)
    return best