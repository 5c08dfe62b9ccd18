"""Prime tests, factorisation and prime-based searches."""

from __future__ import annotations

import math
from itertools import permutations


def is_prime(n: int) -> bool:
    """Return True if *n* is prime, by trial division up to its square root."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def _prime_strings(limit: int) -> set[str]:
    """Decimal forms of all primes below *limit*."""
    if limit < 3:
        return set()
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for candidate in range(2, math.isqrt(limit - 1) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, limit, candidate))
            )
    return {str(number) for number, flag in enumerate(sieve) if flag}


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of *n* in ascending order, with repetition.

    The part left after trial division is always appended, so 1 yields [1].
    """
    if n < 0:
        raise ValueError("cannot factorise a negative number")
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    factors.append(n)
    return factors


def quadratic_primes_product(a_limit: int = 1000, b_limit: int = 1000) -> int:
    """Return a*b for the quadratic n^2 + a*n + b giving the most consecutive primes.

    *a* ranges over |a| < a_limit and *b* over |b| <= b_limit, starting at n = 0.
    The first pair reaching a new maximum is kept.
    """
    best_count = 0
    best_pair: tuple[int, int] | None = None
    for a in range(-a_limit + 1, a_limit):
        for b in range(-b_limit, b_limit + 1):
            n = 0
            while True:
                if n > best_count:
                    best_count = n
                    best_pair = (a, b)
                value = n * n + a * n + b
                n += 1
                if value < 2 or not is_prime(value):
                    break
    if best_pair is None:
        raise ValueError("no coefficients in range produce a prime")
    return best_pair[0] * best_pair[1]


def left_rotate(text: str) -> str:
    """Move the first character of *text* to its end."""
    return text[1:] + text[:1]


def count_circular_primes(limit: int) -> int:
    """Count primes below *limit* all of whose digit rotations are primes below *limit*."""
    primes = _prime_strings(limit)

    def rotations(text: str):
        current = text
        for _ in range(len(text) - 1):
            current = left_rotate(current)
            yield current

    return sum(
        all(rotation in primes for rotation in rotations(prime)) for prime in primes
    )


def truncatable_primes_sum(limit: int) -> int:
    """Sum the primes below *limit* that stay prime when truncated from either side.

    Single-digit primes are not counted.
    """
    primes = _prime_strings(limit)
    total = 0
    for prime in primes:
        if len(prime) < 2:
            continue
        if all(
            prime[cut:] in primes and prime[: len(prime) - cut] in primes
            for cut in range(1, len(prime))
        ):
            total += int(prime)
    return total


def is_one_to_n_pandigital(number: int, n: int) -> bool:
    """Return True if the last *n* digits of *number* are exactly the digits 1..n."""
    if not 1 <= n <= 9:
        raise ValueError("n must lie between 1 and 9")
    digits = {(number // 10**position) % 10 for position in range(n)}
    return digits == set(range(1, n + 1))


def largest_pandigital_prime() -> int:
    """Return the largest prime using each digit 1..n exactly once, for n from 9 to 2."""
    for n in range(9, 1, -1):
        descending = "".join(str(digit) for digit in range(n, 0, -1))
        for arrangement in permutations(descending):
            number = int("".join(arrangement))
            if is_prime(number):
                return number
    raise LookupError("no pandigital prime found")