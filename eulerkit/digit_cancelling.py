"""Two-digit fractions that survive a naive cancellation of a shared digit."""

from __future__ import annotations

from fractions import Fraction
from typing import NamedTuple


class CuriousFraction(NamedTuple):
    """A fraction and the fraction left after striking out a shared digit."""

    numerator: int
    denominator: int
    reduced_numerator: int
    reduced_denominator: int


def curious_fractions() -> list[CuriousFraction]:
    """Return every non-trivial digit-cancelling fraction below one.

    Numerators run over 10..99 and denominators from numerator + 1 up to 98;
    fractions with a zero units digit are skipped. A fraction appears once
    for each way of cancelling that keeps its value.
    """
    found: list[CuriousFraction] = []
    for numerator in range(10, 100):
        for denominator in range(numerator + 1, 99):
            num_tens, num_units = divmod(numerator, 10)
            den_tens, den_units = divmod(denominator, 10)
            if num_units == 0 or den_units == 0:
                continue
            value = Fraction(numerator, denominator)
            candidates = (
                (num_units == den_units, num_tens, den_tens),
                (num_units == den_tens, num_tens, den_units),
                (num_tens == den_units, num_units, den_tens),
                (num_tens == den_tens, num_units, den_units),
            )
            for shares_digit, top, bottom in candidates:
                if shares_digit and Fraction(top, bottom) == value:
                    found.append(
                        CuriousFraction(numerator, denominator, top, bottom)
                    )
    return found


def curious_fraction_product_denominator() -> int:
    """Return the denominator of the product of all curious fractions in lowest terms."""
    product = Fraction(1)
    for fraction in curious_fractions():
        product *= Fraction(fraction.numerator, fraction.denominator)
    return product.denominator