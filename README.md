# eulerkit

A small toolkit for recreational number theory: a signed integer type of
unbounded size, big-integer math helpers, a text progress bar, and solvers
for a collection of classic digit, prime and counting puzzles.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Big integers

`eulerkit.bigint.BigInt` is an immutable signed integer of unbounded size.
It mixes freely with Python `int` values on either side of an operator and
supports `+`, `-`, `*`, `//`, `%` and all comparisons; it is hashable and
converts with `int()` and `str()`.

```python
from eulerkit.bigint import BigInt, is_bigint, to_bigint

a = BigInt("123456789012345678901234567890")
b = to_bigint(42)

print(a + b)
print(a * 1000)
print(a // b, a % b)
print(a > b, int(b))

is_bigint("-12345")   # True
is_bigint("12a45")    # False
```

Arithmetic rules:

- `//` truncates toward zero, and `%` takes the sign of the dividend
  (`BigInt(-7) // 2 == -3`, `BigInt(-7) % 2 == -1`).
- Dividing by zero gives zero, and the remainder of a division by zero is
  the dividend itself.
- Building a `BigInt` from a string that is not a decimal integer raises
  `ValueError`; from anything other than a string, an `int` or a `BigInt`
  it raises `TypeError`.

## Big-integer math

`eulerkit.bigmath` accepts `BigInt`, `int` or decimal strings and returns
`BigInt` values (or `bool` for the predicates):

```python
from eulerkit.bigint import BigInt
from eulerkit.bigmath import (
    big_abs, big_max, big_min, big_pow, big_sqrt,
    big_log2, big_log10, big_logwithbase,
    big_antilog2, big_antilog10,
    big_reverse, big_gcd, big_lcm, big_fact,
    big_is_palindrome, big_is_prime,
)

print(big_fact(BigInt(25)))
print(big_pow(BigInt(2), BigInt(100)))
print(big_gcd(BigInt(84), BigInt(36)), big_lcm(BigInt(4), BigInt(6)))
print(big_is_prime(BigInt(97)), big_is_palindrome(BigInt(12321)))
```

Notes:

- `big_pow` with a negative exponent truncates toward zero (`1` and `-1`
  keep their values); zero to a negative power raises `ZeroDivisionError`.
- `big_sqrt` returns the integer square root; a negative value is
  returned unchanged.
- `big_log2` and `big_log10` return the floor of the logarithm and raise
  `ValueError` for zero or negative values. `big_logwithbase(a, base)` is
  `big_log2(a) // big_log2(base)`.
- `big_reverse` reverses the decimal digits and keeps the sign.
- `big_fact` of a negative number raises `ValueError`.

## Puzzle solvers

| Module | What it covers |
| --- | --- |
| `eulerkit.primes` | `is_prime`, `prime_factors`, `quadratic_primes_product`, `left_rotate`, `count_circular_primes`, `truncatable_primes_sum`, `is_one_to_n_pandigital`, `largest_pandigital_prime` |
| `eulerkit.sequences` | `first_fibonacci_with_digits`, `longest_recurring_cycle` |
| `eulerkit.pandigital` | `is_pandigital`, `pandigital_products`, `pandigital_product_sum`, `largest_pandigital_multiple` |
| `eulerkit.digit_cancelling` | `curious_fractions`, `curious_fraction_product_denominator` |
| `eulerkit.digits` | `is_palindrome`, `binary_string`, `largest_palindrome_product`, `digit_power_sum`, `digit_factorial_sum`, `double_base_palindrome_sum`, `champernowne_product`, `digit_sum`, `count_equal_digit_sums` |
| `eulerkit.counting` | `spiral_diagonal_sum`, `coin_combinations`, `int_sqrt32`, `perimeter_with_most_right_triangles`, `has_only_small_digits`, `smallest_small_digit_multiple`, `small_digit_multiple_sum` |
| `eulerkit.words` | `parse_words`, `word_value`, `count_triangle_words`, `count_triangle_words_in_file` |

```python
from eulerkit.primes import is_prime, prime_factors
from eulerkit.digits import is_palindrome, digit_sum
from eulerkit.sequences import first_fibonacci_with_digits

print(is_prime(97))
print(prime_factors(600851475143))
print(is_palindrome("9009"), digit_sum(12345))

term = first_fibonacci_with_digits(3)
print(term.index, term.value)
```

`first_fibonacci_with_digits` returns a `FibonacciTerm(index, value)`,
`longest_recurring_cycle` a `CycleResult(denominator, length)`,
`largest_palindrome_product` a `PalindromeProduct(smaller, larger, product)`
and `curious_fractions` a list of `CuriousFraction` tuples.

Some solvers search large ranges and take a while in pure Python.

### Word files

`count_triangle_words_in_file` reads a file of quoted, comma-separated
upper-case words and counts those whose letter value (A=1, B=2, ...) is a
triangle number:

```python
from eulerkit.words import count_triangle_words_in_file

print(count_triangle_words_in_file("words.txt"))
```

## Progress bar

`eulerkit.progress.ProgressBar` draws a fifty-cell text bar with a
percentage for a loop of known length, redrawing it in place with
backspaces:

```python
import sys
from eulerkit.progress import ProgressBar

bar = ProgressBar(1000, True, sys.stderr)
for _ in range(1000):
    bar.update()
```

Pass `False` as the second argument to show only the percentage. The
characters used are the attributes `done_char`, `todo_char`,
`opening_bracket_char` and `closing_bracket_char`. `set_niter` changes the
number of iterations and raises `ValueError` for zero or negative values;
`reset` starts the bar over; `update` raises `RuntimeError` if the number of
cycles was never set.

## Command line

Installing the package provides an `eulerkit` command with three
subcommands.

Print the prime factorisation of a number (600851475143 by default):

```
eulerkit factor
eulerkit factor 13195
```

Print the answer to a numbered puzzle:

```
eulerkit solve 25
```

Known puzzle numbers are 3, 4, 25, 26, 27, 28, 30, 31, 32, 33, 34, 35, 36,
37, 38, 39, 40, 41, 290 and 303; any other number prints the list of known
ones and exits with status 1.

Count the triangle words in a word list file:

```
eulerkit words words.txt
```

The word list is not bundled; supply your own file.