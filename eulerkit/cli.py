"""Command line entry point for the puzzle solvers."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from eulerkit.counting import (
    coin_combinations,
    perimeter_with_most_right_triangles,
    small_digit_multiple_sum,
    spiral_diagonal_sum,
)
from eulerkit.digit_cancelling import curious_fraction_product_denominator
from eulerkit.digits import (
    champernowne_product,
    count_equal_digit_sums,
    digit_factorial_sum,
    digit_power_sum,
    double_base_palindrome_sum,
    largest_palindrome_product,
)
from eulerkit.pandigital import largest_pandigital_multiple, pandigital_product_sum
from eulerkit.primes import (
    count_circular_primes,
    largest_pandigital_prime,
    prime_factors,
    quadratic_primes_product,
    truncatable_primes_sum,
)
from eulerkit.sequences import first_fibonacci_with_digits, longest_recurring_cycle
from eulerkit.words import count_triangle_words_in_file

DEFAULT_NUMBER = 600851475143

SOLVERS: dict[int, Callable[[], int]] = {
    3: lambda: max(prime_factors(DEFAULT_NUMBER)),
    4: lambda: largest_palindrome_product().product,
    25: lambda: first_fibonacci_with_digits(1000).index,
    26: lambda: longest_recurring_cycle(1000).denominator,
    27: quadratic_primes_product,
    28: lambda: spiral_diagonal_sum(1001),
    30: lambda: digit_power_sum(5),
    31: coin_combinations,
    32: pandigital_product_sum,
    33: curious_fraction_product_denominator,
    34: digit_factorial_sum,
    35: lambda: count_circular_primes(1_000_000),
    36: lambda: double_base_palindrome_sum(1_000_000),
    37: lambda: truncatable_primes_sum(10_000_000),
    38: largest_pandigital_multiple,
    39: perimeter_with_most_right_triangles,
    40: lambda: champernowne_product(1_000_000),
    41: largest_pandigital_prime,
    290: lambda: count_equal_digit_sums(18),
    303: small_digit_multiple_sum,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eulerkit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    factor = commands.add_parser("factor", help="print the prime factorisation of a number")
    factor.add_argument("number", nargs="?", type=int, default=DEFAULT_NUMBER)

    solve = commands.add_parser("solve", help="print the answer to a numbered puzzle")
    solve.add_argument("problem", type=int)

    words = commands.add_parser("words", help="count triangle words in a word list file")
    words.add_argument("path")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "factor":
            print(" * ".join(str(factor) for factor in prime_factors(args.number)))
        elif args.command == "solve":
            solver = SOLVERS.get(args.problem)
            if solver is None:
                known = ", ".join(str(number) for number in sorted(SOLVERS))
                print(
                    f"eulerkit: no solver for problem {args.problem} (known: {known})",
                    file=sys.stderr,
                )
                return 1
            print(solver())
        else:
            print(count_triangle_words_in_file(args.path))
    except (ValueError, OSError) as error:
        print(f"eulerkit: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())