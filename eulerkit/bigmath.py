"""Number-theoretic helpers operating on :class:`BigInt` values."""

from __future__ import annotations

import math
from typing import Union

from eulerkit.bigint import BigInt, to_bigint

BigLike = Union[BigInt, int, str]


def _value(a: BigLike) -> int:
    return int(to_bigint(a))


def big_abs(a: BigLike) -> BigInt:
    """Return the absolute value of *a*."""
    return BigInt(abs(_value(a)))


def big_max(a: BigLike, b: BigLike) -> BigInt:
    """Return the numerically larger of *a* and *b*."""
    return BigInt(max(_value(a), _value(b)))


def big_min(a: BigLike, b: BigLike) -> BigInt:
    """Return the numerically smaller of *a* and *b*."""
    return BigInt(min(_value(a), _value(b)))


def big_pow(a: BigLike, b: BigLike) -> BigInt:
    """Return *a* raised to *b*, truncated toward zero for negative exponents.

    Raising zero to a negative power raises ZeroDivisionError.
    """
    base, exponent = _value(a), _value(b)
    if exponent == 0:
        return BigInt(1)
    if exponent < 0:
        if base == 0:
            raise ZeroDivisionError("zero cannot be raised to a negative power")
        if base == 1:
            return BigInt(1)
        if base == -1:
            return BigInt(-1 if exponent % 2 else 1)
        return BigInt(0)
    return BigInt(base**exponent)


def big_sqrt(a: BigLike) -> BigInt:
    """Return the integer square root of *a*; a negative value is returned unchanged."""
    value = _value(a)
    if value < 0:
        return BigInt(value)
    return BigInt(math.isqrt(value))


def _checked_log_argument(a: BigLike) -> int:
    value = _value(a)
    if value == 0:
        raise ValueError("log(0) is undefined")
    if value < 0:
        raise ValueError("log(negative) is not allowed")
    return value


def big_log2(a: BigLike) -> BigInt:
    """Return the floor of the base-2 logarithm of a positive *a*."""
    return BigInt(_checked_log_argument(a).bit_length() - 1)


def big_log10(a: BigLike) -> BigInt:
    """Return the floor of the base-10 logarithm of a positive *a*."""
    return BigInt(len(str(_checked_log_argument(a))) - 1)


def big_logwithbase(a: BigLike, base: BigLike) -> BigInt:
    """Return floor(log2(a)) divided by floor(log2(base)); a zero divisor gives zero."""
    return big_log2(a) // big_log2(base)


def big_antilog2(a: BigLike) -> BigInt:
    """Return two raised to *a*."""
    return big_pow(2, a)


def big_antilog10(a: BigLike) -> BigInt:
    """Return ten raised to *a*."""
    return big_pow(10, a)


def big_reverse(a: BigLike) -> BigInt:
    """Reverse the decimal digits of *a*, keeping its sign."""
    value = _value(a)
    reversed_digits = str(abs(value))[::-1]
    return BigInt(("-" if value < 0 else "") + reversed_digits)


def big_gcd(a: BigLike, b: BigLike) -> BigInt:
    """Return the greatest common divisor by Euclid's method.

    The larger argument is taken as the dividend; the loop runs while the
    divisor is positive.
    """
    first, second = to_bigint(a), to_bigint(b)
    if second > first:
        first, second = second, first
    while second > 0:
        first, second = second, first % second
    return first


def big_lcm(a: BigLike, b: BigLike) -> BigInt:
    """Return the least common multiple of *a* and *b*."""
    return (to_bigint(a) * to_bigint(b)) // big_gcd(a, b)


def big_fact(a: BigLike) -> BigInt:
    """Return the factorial of a non-negative *a*."""
    value = _value(a)
    if value < 0:
        raise ValueError("Factorial of Negative Integer is not defined.")
    return BigInt(math.factorial(value))


def big_is_palindrome(a: BigLike) -> bool:
    """Return True if the digits of *a*, ignoring sign, read the same both ways."""
    digits = str(abs(_value(a)))
    return digits == digits[::-1]


def big_is_prime(a: BigLike) -> bool:
    """Return True if *a* is a prime number, by trial division."""
    value = _value(a)
    if value < 2:
        return False
    return all(value % divisor for divisor in range(2, math.isqrt(value) + 1))