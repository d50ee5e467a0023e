# practicebook

A collection of small, self-contained programming exercises as a plain
Python package: number-theory puzzles, interview-style array and string
puzzles, a case-insensitive line search tool, and a handful of small
modelling examples (a calculator, HTTP client errors, a book library,
number series and more).

It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### minigrep

Prints the lines of a file that contain a search term, ignoring case.
Exactly two arguments are required: the term and the file name.

```
minigrep west books.txt
```

The matching lines are printed on one line as a bracketed, comma-separated
list of double-quoted strings, for example `["Wild west", "Mild west"]`.
Too few or too many arguments print `Not enough arguments` or
`Too many arguments` and exit with status 1. The file is read whole as
UTF-8; a file that cannot be read ends the command with the error raised
while reading it.

### pyramid

Reads a number of columns from standard input and prints a number pyramid.

```
echo 4 | pyramid
```

Input that is not a whole number prints an error to standard error and
exits with status 1.

## Library use

```python
from practicebook.euler import (
    sum_multiples_of_3_or_5,
    largest_prime_factor,
    find_nth_prime,
)
from practicebook.neetcode import has_duplicate, is_anagram, two_integer_sum
from practicebook.calculator import Calculator
from practicebook.http_errors import HttpClientError
from practicebook.series import geometric_series, sum_through, FibonacciSeries

sum_multiples_of_3_or_5(1000)
largest_prime_factor(13195)
find_nth_prime(6)

is_anagram("anagram", "nagaram")
has_duplicate([1, 2, 3, 1])
two_integer_sum([3, 4, 5, 6], 8)

Calculator("5+3*4-2/5+4/2").calculate()

HttpClientError.NOT_FOUND.status_code()
HttpClientError.NOT_FOUND.reason_phrase()

sum_through(geometric_series(1, 2), 4)
FibonacciSeries().sum(10)
```

## Modules

- `practicebook.minigrep` – `UserArgument`, `parse_arguments` (raises
  `ValueError` on the wrong number of arguments), `read_file`, and `main`
  behind the `minigrep` command.
- `practicebook.euler` – `sum_multiples_of_3_or_5`, `even_fibonacci_sum`,
  `find_prime_factors`, `largest_prime_factor`, `is_palindrome`,
  `largest_palindrome_product`, `gcd`, `lcm`, `smallest_multiple`,
  `sum_square_difference`, `sieve_of_eratosthenes`, `find_nth_prime` and
  `factors`.
- `practicebook.neetcode` – `has_duplicate`, `is_anagram`,
  `two_integer_sum` (a pair of indices, or `None`) and the `LetterPosition`
  enumeration of alphabet positions.
- `practicebook.calculator` – `Operation` and `Calculator`. Multiplication
  and division are folded in a first pass and addition and subtraction
  applied left to right afterwards; an operator directly after a folded `*`
  or `/` is not folded in that pass, and any `*` or `/` still left at the
  end yields 0. A malformed number raises `ValueError`.
- `practicebook.http_errors` – `HttpClientError`, the 4xx statuses, with
  `status_code()` and `reason_phrase()`.
- `practicebook.geometry` – `Point` with `check_quadrant()`, `Quadrant`,
  and `Matrix`, which iterates over its cells row by row.
- `practicebook.gun` – `Gun`, `GunType` and `Extra`; `update_extra` adjusts
  recoil time and magazine size, `display_info` prints the stats and
  returns the printed text.
- `practicebook.library` – `Book`, `Status` and `Library`; issuing a book by
  accession number removes it from the library.
- `practicebook.series` – `geometric_series`, `fibonacci`,
  `fibonacci_with_totals`, `sum_through`, and the re-iterable
  `GeometricSeries` and `FibonacciSeries` with `sum(count)`.
- `practicebook.basics` – `get_min`, `get_greater`, `multiply`,
  `MaturityStage` with `maturity_stage`, `Student`, `CharSet` (difference
  with `-`), `pyramid_pattern`, `pyramid_main` behind the `pyramid` command,
  and the thread-safe `SharedValue`.

## What it does not do

`minigrep` matches plain substrings only: it has no regular expressions, no
options, and reads a single named file rather than standard input. The
library catalogue and the other examples keep everything in memory; nothing
is saved between runs.