"""Big integers, number-theory helpers, a progress bar and solvers for digit and prime puzzles."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "bigmath",
    "cli",
    "counting",
    "digit_cancelling",
    "digits",
    "pandigital",
    "primes",
    "progress",
    "sequences",
    "words",
]