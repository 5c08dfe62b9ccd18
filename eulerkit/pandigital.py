"""Searches for 1-to-9 pandigital products and concatenated multiples."""

from __future__ import annotations

_ALL_DIGITS = "123456789"

# For each count of multiples (1*x, 2*x, ...), the range of x that can
# give nine digits in total.
_MULTIPLE_RANGES = {
    2: range(1234, 9877),
    3: range(123, 988),
    4: range(12, 99),
    5: range(1, 10),
    6: range(1, 10),
}

# Multiplicand and multiplier ranges whose digit counts can add up to nine
# together with the product's digits.
_PRODUCT_RANGES = (
    (range(1, 10), range(1234, 9877)),
    (range(1, 99), range(123, 988)),
)


def is_pandigital(*args: int) -> bool:
    """Return True if the digits of *args* together use each of 1..9 exactly once.

    The digit 0 is never allowed; an argument equal to zero adds no digits.
    """
    if any(number < 0 for number in args):
        raise ValueError("pandigital checks need non-negative numbers")
    digits = "".join(str(number) for number in args if number > 0)
    return "".join(sorted(digits)) == _ALL_DIGITS


def pandigital_products() -> set[int]:
    """Return every product whose identity a * b = product is 1..9 pandigital."""
    return {
        multiplicand * multiplier
        for multiplicands, multipliers in _PRODUCT_RANGES
        for multiplicand in multiplicands
        for multiplier in multipliers
        if is_pandigital(multiplicand, multiplier, multiplicand * multiplier)
    }


def pandigital_product_sum() -> int:
    """Return the sum of all distinct pandigital products."""
    return sum(pandigital_products())


def largest_pandigital_multiple() -> int:
    """Return the largest 1..9 pandigital concatenation of x*1, x*2, ..., x*n for n > 1."""
    best = 0
    for count, bases in _MULTIPLE_RANGES.items():
        for base in bases:
            multiples = [base * factor for factor in range(1, count + 1)]
            if is_pandigital(*multiples):
                best = max(best, int("".join(str(m) for m in multiples)))
    return best