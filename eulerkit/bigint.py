"""Arbitrary-precision signed integers in decimal notation."""

from __future__ import annotations

import re
from typing import Union

_PATTERN = re.compile(r"-?[0-9]+")

IntLike = Union["BigInt", int]


def is_bigint(text: str) -> bool:
    """Return True if *text* is a decimal integer with an optional leading minus."""
    return bool(_PATTERN.fullmatch(text))


def _as_int(value: object) -> int | None:
    if isinstance(value, BigInt):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _trunc_div(a: int, b: int) -> int:
    """Quotient rounded toward zero; a zero divisor yields zero."""
    if b == 0:
        return 0
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder matching the truncating quotient: a - (a / b) * b."""
    return a - _trunc_div(a, b) * b


class BigInt:
    """An immutable signed integer of unbounded size.

    Division truncates toward zero and the remainder takes the sign of the
    dividend. Dividing by zero gives zero, and the remainder of a division
    by zero is the dividend itself.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, int, "BigInt"] = 0) -> None:
        if isinstance(value, str):
            if not is_bigint(value):
                raise ValueError("Invalid Big Integer has been fed.")
            self._value = int(value)
        else:
            number = _as_int(value)
            if number is None:
                raise TypeError(
                    f"cannot build BigInt from {type(value).__name__}"
                )
            self._value = number

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    def __int__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value + number)

    def __radd__(self, other: object) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value - number)

    def __rsub__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(number - self._value)

    def __mul__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value * number)

    def __rmul__(self, other: object) -> BigInt:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(_trunc_div(self._value, number))

    def __rfloordiv__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(_trunc_div(number, self._value))

    def __mod__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(_trunc_mod(self._value, number))

    def __rmod__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(_trunc_mod(number, self._value))

    def __eq__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value == number

    def __lt__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value < number

    def __le__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value <= number

    def __gt__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value > number

    def __ge__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value >= number


def to_bigint(value: Union[str, int, BigInt]) -> BigInt:
    """Convert a decimal string, an int or a BigInt to a BigInt."""
    return value if isinstance(value, BigInt) else BigInt(value)